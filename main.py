#!/usr/bin/env python3
"""
Verbalizer — Entry Point
========================

Prints one number in words across the supported languages.

Usage:
    python main.py                          # Sample value, every language
    python main.py 1000000                  # Your value, every language
    python main.py 42.05 fr de ja           # Your value, selected languages
    VERBALIZER_LOG_LEVEL=DEBUG python main.py 7

Exit codes: 0 on success, 2 when a language code is not supported.
"""

from __future__ import annotations

import sys

from verbalizer import config
from verbalizer.dispatcher import convert_many, get_strategy
from verbalizer.exceptions import UnsupportedLanguageError
from verbalizer.normalizer import classify

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


SAMPLE_VALUE = "1234567.89"


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_report(value: str, results: dict[str, str]) -> None:
    """Pretty-print one value in every requested language."""
    special = classify(value)

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMBER IN WORDS{_RESET}")
    print(f"{'=' * _WIDTH}")
    print(f"  Value:       {_BOLD}{value}{_RESET}")
    if special is not None:
        print(f"  Special:     {_YELLOW}{special.value}{_RESET}")
    print(f"{'─' * _WIDTH}")

    for code, words in results.items():
        name = get_strategy(code).name
        print(f"  {_GREEN}{code:<6}{_RESET} {_DIM}{name:<22}{_RESET} {words}")

    print(f"{'=' * _WIDTH}\n")


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Parse ``[VALUE] [LANG ...]``, print the conversions, return the exit code."""
    args = sys.argv[1:] if argv is None else argv
    config.configure_logging()

    value = args[0] if args else SAMPLE_VALUE
    languages = args[1:] or None

    try:
        results = convert_many(value, languages)
    except UnsupportedLanguageError as exc:
        print(f"\n  {_RED}{_BOLD}[{exc.code}]{_RESET} {exc}")
        print(f"  {_DIM}supported: {', '.join(exc.details['supported'])}{_RESET}\n")
        return 2

    print_report(value, results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
