"""
Detector de Idiomas — Feature Analyzers
Four independent lexical analyzers. Each one is a pure function of the input
text and returns raw, unweighted counts; weighting happens in scoring.engine.
"""
import re
from dataclasses import dataclass, asdict

from nlp.lexicons import (
    SPANISH_STOPWORDS, ENGLISH_STOPWORDS,
    SPANISH_BIGRAMS, ENGLISH_BIGRAMS,
    SPANISH_ENDINGS, ENGLISH_ENDINGS,
    SPANISH_CHARACTERS,
)

# ── Patterns ──────────────────────────────────────────────────────────────────
_WORD_PATTERN = re.compile(r"\b\w+\b")
_SPANISH_CHAR_PATTERN = re.compile(f"[{SPANISH_CHARACTERS}]", re.IGNORECASE)
_NON_LETTER_PATTERN = re.compile(f"[^a-z{SPANISH_CHARACTERS}]")

_MIN_ENDING_WORD_LENGTH = 3  # Words must be strictly longer than this


@dataclass(frozen=True)
class StopWordCounts:
    spanish_count: int = 0
    english_count: int = 0


@dataclass(frozen=True)
class BigramScores:
    spanish_score: int = 0
    english_score: int = 0


@dataclass(frozen=True)
class EndingCounts:
    spanish_ending_count: int = 0
    english_ending_count: int = 0


@dataclass(frozen=True)
class FeatureCounts:
    """Raw output of all four analyzers for one input. Diagnostic only."""
    spanish_chars: int
    stop_words: StopWordCounts
    bigrams: BigramScores
    endings: EndingCounts

    def to_dict(self) -> dict:
        return asdict(self)


def tokenize(text: str) -> list[str]:
    """Lower-cased Unicode word runs."""
    return _WORD_PATTERN.findall(text.lower())


def analyze_spanish_characters(text: str) -> int:
    """Count ñ / accented vowels / ü, case-insensitive."""
    return len(_SPANISH_CHAR_PATTERN.findall(text))


def analyze_stop_words(text: str) -> StopWordCounts:
    """
    Count stop-word hits per language. Every occurrence counts, and a token
    present in both tables (e.g. "a") counts for both.
    """
    tokens = tokenize(text)
    return StopWordCounts(
        spanish_count=sum(1 for t in tokens if t in SPANISH_STOPWORDS),
        english_count=sum(1 for t in tokens if t in ENGLISH_STOPWORDS),
    )


def analyze_bigrams(text: str) -> BigramScores:
    """
    Count bigram hits over the letters-only form of the text.
    Spaces are dropped before windowing, so bigrams can cross word boundaries.
    """
    letters = _NON_LETTER_PATTERN.sub("", text.lower())
    spanish_score = 0
    english_score = 0
    for i in range(len(letters) - 1):
        bigram = letters[i:i + 2]
        if bigram in SPANISH_BIGRAMS:
            spanish_score += 1
        if bigram in ENGLISH_BIGRAMS:
            english_score += 1
    return BigramScores(spanish_score=spanish_score, english_score=english_score)


def analyze_word_endings(text: str) -> EndingCounts:
    """
    Count suffix matches for words longer than three characters.
    Every matching suffix in a table counts, not just the first one.
    """
    spanish_count = 0
    english_count = 0
    for word in tokenize(text):
        if len(word) <= _MIN_ENDING_WORD_LENGTH:
            continue
        spanish_count += sum(1 for ending in SPANISH_ENDINGS if word.endswith(ending))
        english_count += sum(1 for ending in ENGLISH_ENDINGS if word.endswith(ending))
    return EndingCounts(spanish_ending_count=spanish_count, english_ending_count=english_count)


def extract_features(text: str) -> FeatureCounts:
    """Run all four analyzers over the same (untrimmed) text."""
    return FeatureCounts(
        spanish_chars=analyze_spanish_characters(text),
        stop_words=analyze_stop_words(text),
        bigrams=analyze_bigrams(text),
        endings=analyze_word_endings(text),
    )
