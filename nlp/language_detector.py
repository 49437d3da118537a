"""
Detector de Idiomas — Language Detector
Detects Spanish / English / Spanglish from four lexical signals
(accented characters, stop words, bigrams, word endings).
No model needed — fixed lexicons and linear weights, runs instantly.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from nlp.features import FeatureCounts, extract_features
from scoring.engine import (
    DEFAULT_WEIGHTS, LANGUAGE_THRESHOLD, Language, ScoreWeights,
    classify, combine_scores, round_half_up,
)

logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 10   # Trimmed chars below this → undetermined

REASON_TOO_SHORT = "text too short for analysis"
REASON_NO_PATTERNS = "no recognizable patterns found"


@dataclass(frozen=True)
class LanguageResult:
    language: Language
    confidence: int                      # 0 – 100
    spanish: int                         # 0 – 100, rounded independently
    english: int                         # 0 – 100, rounded independently
    reason: Optional[str] = None         # Only for UNDETERMINED
    details: Optional[FeatureCounts] = None

    @classmethod
    def undetermined(cls, reason: str, details: Optional[FeatureCounts] = None) -> "LanguageResult":
        return cls(Language.UNDETERMINED, 0, 0, 0, reason=reason, details=details)

    def to_dict(self) -> dict:
        data = {
            "language": self.language.value,
            "confidence": self.confidence,
            "spanish": self.spanish,
            "english": self.english,
        }
        if self.reason is not None:
            data["reason"] = self.reason
        if self.details is not None:
            data["details"] = self.details.to_dict()
        return data


class LanguageDetector:
    """
    Stateless detector. Safe to share across threads and requests: the only
    state is the read-only weights and threshold captured at construction.

    Pipeline:
        1. guard        — trimmed text shorter than MIN_TEXT_LENGTH → undetermined
        2. features     — four analyzers over the untrimmed text
        3. combine      — weighted Spanish / English scores
        4. zero guard   — no evidence at all → undetermined
        5. classify     — threshold rule (strict > 70%)
    """

    def __init__(
        self,
        weights: ScoreWeights = DEFAULT_WEIGHTS,
        threshold: float = LANGUAGE_THRESHOLD,
    ) -> None:
        self.weights = weights
        self.threshold = threshold

    def detect(self, text: str | None) -> LanguageResult:
        if not text or len(text.strip()) < MIN_TEXT_LENGTH:
            return LanguageResult.undetermined(REASON_TOO_SHORT)

        features = extract_features(text)
        spanish_score, english_score = combine_scores(features, self.weights)
        logger.debug(
            "detect | chars=%d es_score=%.1f en_score=%.1f",
            len(text), spanish_score, english_score,
        )

        if spanish_score + english_score == 0:
            return LanguageResult.undetermined(REASON_NO_PATTERNS, details=features)

        outcome = classify(spanish_score, english_score, self.threshold)
        return LanguageResult(
            language=outcome.language,
            confidence=outcome.confidence,
            spanish=round_half_up(outcome.spanish_pct),
            english=round_half_up(outcome.english_pct),
            details=features,
        )


# ── Module-level default instance ─────────────────────────────────────────────
_default_detector: LanguageDetector | None = None


def get_detector() -> LanguageDetector:
    """Return the process-wide detector, creating it on first call."""
    global _default_detector
    if _default_detector is None:
        _default_detector = LanguageDetector()
    return _default_detector


def detect_language(text: str | None) -> LanguageResult:
    """Classify text with the default detector."""
    return get_detector().detect(text)
