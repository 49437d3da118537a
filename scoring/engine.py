"""
Detector de Idiomas — Scoring Engine
Turns the four raw feature counts into a language label.

    Spanish Score = chars × 3 + stop words × 2 + bigrams × 1 + endings × 0.5
    English Score =             stop words × 2 + bigrams × 1 + endings × 0.5
    Label         = Spanish if spanish% > 70, English if english% > 70, else Mixed
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum

from nlp.features import FeatureCounts

logger = logging.getLogger(__name__)

# Fixed decision constants, not read from Settings
LANGUAGE_THRESHOLD = 70.0   # Strict ">" — exactly 70% is mixed


class Language(str, Enum):
    SPANISH = "spanish"
    ENGLISH = "english"
    MIXED = "mixed"
    UNDETERMINED = "undetermined"


@dataclass(frozen=True)
class ScoreWeights:
    # character > stop word > bigram > ending
    spanish_chars: float = 3.0
    stop_words: float = 2.0
    bigrams: float = 1.0
    endings: float = 0.5


DEFAULT_WEIGHTS = ScoreWeights()


@dataclass(frozen=True)
class Classification:
    language: Language
    confidence: int
    spanish_pct: float     # Unrounded; spanish_pct + english_pct == 100
    english_pct: float


def round_half_up(value: float) -> int:
    """Round .5 upwards (Python's round() would use banker's rounding)."""
    return int(math.floor(value + 0.5))


def combine_scores(
    features: FeatureCounts,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> tuple[float, float]:
    """Apply the linear weights and return (spanish_score, english_score)."""
    w = weights

    # Accented characters only ever count for Spanish
    spanish_score = features.spanish_chars * w.spanish_chars
    english_score = 0.0

    spanish_score += features.stop_words.spanish_count * w.stop_words
    english_score += features.stop_words.english_count * w.stop_words

    spanish_score += features.bigrams.spanish_score * w.bigrams
    english_score += features.bigrams.english_score * w.bigrams

    spanish_score += features.endings.spanish_ending_count * w.endings
    english_score += features.endings.english_ending_count * w.endings

    return spanish_score, english_score


def classify(
    spanish_score: float,
    english_score: float,
    threshold: float = LANGUAGE_THRESHOLD,
) -> Classification:
    """
    Decision rule over two non-negative scores with a non-zero total.

    For MIXED the confidence is |spanish% - english%|, i.e. how unbalanced
    the mix is. A perfect 50/50 split gives 0, which is the most clearly
    mixed case. This inversion is intended.
    """
    total = spanish_score + english_score
    if total <= 0:
        raise ValueError("classify() needs a positive total score")

    spanish_pct = 100 * spanish_score / total
    english_pct = 100 * english_score / total

    if spanish_pct > threshold:
        language, confidence = Language.SPANISH, spanish_pct
    elif english_pct > threshold:
        language, confidence = Language.ENGLISH, english_pct
    else:
        language, confidence = Language.MIXED, abs(spanish_pct - english_pct)

    logger.debug(
        "classify | es=%.2f en=%.2f → %s (%.2f%%)",
        spanish_pct, english_pct, language.value, confidence,
    )
    return Classification(
        language=language,
        confidence=round_half_up(confidence),
        spanish_pct=spanish_pct,
        english_pct=english_pct,
    )
