"""
Detector de Idiomas — Command Line Interface
Run:
    python cli.py                     interactive mode ("salir" to quit)
    python cli.py "texto aquí"        classify the given words
    python cli.py -f archivo.txt      classify a file
"""
import logging
import sys
from typing import Callable, Optional

from config import get_settings
from inputs.file_reader import FileInputError, detect_file
from nlp.language_detector import LanguageDetector, LanguageResult, get_detector
from scoring.engine import Language

logger = logging.getLogger("detector_idiomas")

EXIT_COMMAND = "salir"

_LANGUAGE_NAMES = {
    Language.SPANISH: "🇪🇸 Spanish",
    Language.ENGLISH: "🇺🇸 English",
    Language.MIXED: "🔀 Mixed/Spanglish",
    Language.UNDETERMINED: "❔ Undetermined",
}

_USAGE = """\
🌍 Language Detector

usage:
  detector-idiomas                      interactive mode ("salir" to quit)
  detector-idiomas "text here"          classify the given words
  detector-idiomas -f file.txt          classify a UTF-8 file
  detector-idiomas --details ...        also print the raw feature counts
  detector-idiomas -h | --help          show this message

Only the first argument is read as an option; everything else is text.

examples:
  detector-idiomas "Hello world"
  detector-idiomas "Hola mundo"
  detector-idiomas "Hi, ¿cómo estás?"
"""


def get_language_name(language: Language | str) -> str:
    try:
        return _LANGUAGE_NAMES[Language(language)]
    except ValueError:
        return str(language)


def display_result(result: Optional[LanguageResult], show_details: bool = False) -> None:
    if result is None:
        return

    print("📊 Result:")
    print(f"   Language: {get_language_name(result.language)}")
    print(f"   Confidence: {result.confidence}%")
    if result.language is Language.MIXED:
        print(f"   Spanish: {result.spanish}%")
        print(f"   English: {result.english}%")
        print("   💡 Looks like a mix (Spanglish?)")
    if result.reason:
        print(f"   Reason: {result.reason}")
    if show_details and result.details is not None:
        d = result.details
        print("   Details:")
        print(f"     spanish chars: {d.spanish_chars}")
        print(f"     stop words:    es={d.stop_words.spanish_count} en={d.stop_words.english_count}")
        print(f"     bigrams:       es={d.bigrams.spanish_score} en={d.bigrams.english_score}")
        print(f"     endings:       es={d.endings.spanish_ending_count} en={d.endings.english_ending_count}")


def interactive_mode(
    detector: LanguageDetector | None = None,
    input_fn: Callable[[str], str] | None = None,
    show_details: bool = False,
) -> None:
    """Read lines until "salir" (any case), EOF or Ctrl-C."""
    detector = detector or get_detector()
    read_line = input_fn or input

    print("🌍 Language Detector — Interactive Mode")
    print("Type text to detect whether it is Spanish, English or mixed")
    print(f'Type "{EXIT_COMMAND}" to quit\n')

    while True:
        try:
            text = read_line("Text > ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if text.strip().lower() == EXIT_COMMAND:
            break
        display_result(detector.detect(text), show_details=show_details)
        print()


def show_help() -> None:
    print(_USAGE)


def main(argv: list[str] | None = None) -> int:
    """
    Route on the first argument only: -h/--help, -f/--file PATH, or nothing.
    Every other argument list is text, dashes included.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    show_details = bool(args) and args[0] == "--details"
    if show_details:
        args = args[1:]

    logging.basicConfig(
        level=getattr(logging, get_settings().log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    if not args:
        interactive_mode(show_details=show_details)
    elif args[0] in ("-h", "--help"):
        show_help()
    elif args[0] in ("-f", "--file") and len(args) > 1:
        try:
            result = detect_file(args[1])
        except FileInputError as exc:
            logger.error("❌ %s", exc)
            return 1
        display_result(result, show_details=show_details)
    else:
        display_result(get_detector().detect(" ".join(args)), show_details=show_details)
    return 0


if __name__ == "__main__":
    sys.exit(main())
