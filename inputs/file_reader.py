"""
Detector de Idiomas — File Input
Reads a UTF-8 text file and hands its full content to the detector.
Read failures are raised, never turned into an "undetermined" result.
"""
import logging
from pathlib import Path

from nlp.language_detector import LanguageDetector, LanguageResult, get_detector

logger = logging.getLogger(__name__)


class FileInputError(Exception):
    """A file could not be read. The underlying error is chained as __cause__."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"Error reading file {self.path}: {message}")


def read_text_file(path: str | Path) -> str:
    """Return the whole file as text. Raises FileInputError on any read/decode failure."""
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FileInputError(file_path, "not valid UTF-8") from exc
    except OSError as exc:
        raise FileInputError(file_path, exc.strerror or str(exc)) from exc
    logger.info("Read %d chars from %s", len(text), file_path)
    return text


def detect_file(path: str | Path, detector: LanguageDetector | None = None) -> LanguageResult:
    """Read a file and classify its content verbatim."""
    text = read_text_file(path)
    return (detector or get_detector()).detect(text)
