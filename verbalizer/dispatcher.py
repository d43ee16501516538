"""
Dispatcher — picks the language strategy and runs the conversion.

Flow:
  ┌────────────────┐
  │ value, language│
  └───────┬────────┘
          │
   ┌──────▼──────┐
   │  Strategy   │   ← unknown code: UnsupportedLanguageError, nothing computed
   │   lookup    │
   └──────┬──────┘
          │
   ┌──────▼──────┐
   │  Classify   │   ← zero / ±infinity / invalid: fixed phrase, stop
   └──────┬──────┘
          │
   ┌──────▼──────┐
   │  Normalize  │   ← CanonicalDecimal (digit strings, never a float)
   └──────┬──────┘
          │
   ┌──────▼──────┐
   │  Verbalize  │   ← segment → group words → scale words → assemble
   └──────┬──────┘     + fraction digits; overflow: fixed phrase
          │
       words

Design principles:
  - Pure and stateless: the same (value, language) always gives the same string.
  - Only an unsupported language code reaches the caller as an exception.
    Every other condition ends in a defined string.
"""

from __future__ import annotations

import logging

from .exceptions import MagnitudeOverflowError, UnsupportedLanguageError
from .languages import ALL_STRATEGIES, LanguageStrategy
from .models import LanguageInfo, SpecialValue
from .normalizer import NumberInput, classify, normalize

logger = logging.getLogger(__name__)

_STRATEGIES: dict[str, LanguageStrategy] = {s.code: s for s in ALL_STRATEGIES}


# ─── Registry ────────────────────────────────────────────────────────


def get_strategy(language_code: str) -> LanguageStrategy:
    """Look up the strategy for a language code.

    Raises:
        UnsupportedLanguageError: the code is not registered.
    """
    try:
        return _STRATEGIES[language_code]
    except (KeyError, TypeError):
        raise UnsupportedLanguageError(
            f"Unsupported language code: {language_code!r}",
            details={"language": language_code, "supported": sorted(_STRATEGIES)},
        ) from None


def is_supported(language_code: str) -> bool:
    return isinstance(language_code, str) and language_code in _STRATEGIES


def supported_languages() -> list[LanguageInfo]:
    """All supported languages, sorted by display name."""
    return sorted((s.info() for s in ALL_STRATEGIES), key=lambda info: info.name)


# ─── Conversion ──────────────────────────────────────────────────────


def convert(value: NumberInput, language_code: str) -> str:
    """Convert a number (or numeric text) to words in one language.

    Args:
        value: int, float, Decimal, or the exact decimal text a user typed.
            Text is preferred for large values: it never passes through a float.
        language_code: one of the codes from supported_languages().

    Returns:
        The words, or the language's fixed phrase for zero, infinity,
        invalid input and numbers beyond its largest scale word.

    Raises:
        UnsupportedLanguageError: unknown language_code (checked first).
    """
    strategy = get_strategy(language_code)

    special = classify(value)
    if special is not None:
        if special is SpecialValue.INVALID:
            logger.info("Input %r is not a number, returning the %s invalid phrase", value, language_code)
        else:
            logger.debug("Special value %s for %r (%s)", special.value, value, language_code)
        return strategy.special_phrase(special)

    try:
        number = normalize(value, max_integer_digits=strategy.max_integer_digits)
        words = strategy.verbalize(number)
    except MagnitudeOverflowError as exc:
        logger.warning("%s (%s)", exc, exc.details)
        return strategy.too_large_phrase

    logger.debug("Converted %s (%s): %s", number, language_code, words)
    return words


def convert_many(value: NumberInput, language_codes: list[str] | None = None) -> dict[str, str]:
    """Convert one value into several languages (all of them by default).

    Every code is validated before any conversion runs.
    """
    codes = [s.code for s in ALL_STRATEGIES] if language_codes is None else list(language_codes)
    for code in codes:
        get_strategy(code)
    return {code: convert(value, code) for code in codes}


# ─── Per-Language Entry Points ───────────────────────────────────────


def number_to_words_english(value: NumberInput) -> str:
    return convert(value, "en")


def number_to_words_malay(value: NumberInput) -> str:
    return convert(value, "ms")


def number_to_words_chinese(value: NumberInput) -> str:
    return convert(value, "zh-CN")


def number_to_words_chinese_traditional(value: NumberInput) -> str:
    return convert(value, "zh-TW")


def number_to_words_spanish(value: NumberInput) -> str:
    return convert(value, "es")


def number_to_words_french(value: NumberInput) -> str:
    return convert(value, "fr")


def number_to_words_german(value: NumberInput) -> str:
    return convert(value, "de")


def number_to_words_arabic(value: NumberInput) -> str:
    return convert(value, "ar")


def number_to_words_hindi(value: NumberInput) -> str:
    return convert(value, "hi")


def number_to_words_vietnamese(value: NumberInput) -> str:
    return convert(value, "vi")


def number_to_words_korean(value: NumberInput) -> str:
    return convert(value, "ko")


def number_to_words_portuguese(value: NumberInput) -> str:
    return convert(value, "pt")


def number_to_words_thai(value: NumberInput) -> str:
    return convert(value, "th")


def number_to_words_italian(value: NumberInput) -> str:
    return convert(value, "it")


def number_to_words_japanese(value: NumberInput) -> str:
    return convert(value, "ja")
