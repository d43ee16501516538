"""
English (short scale, title case).

    999        → "Nine Hundred Ninety-Nine"
    1000       → "One Thousand"
    1_250_000  → "One Million Two Hundred Fifty Thousand"
    1.23       → "One point Two Three"
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES: tuple[str, ...] = (
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
)

_TEENS: tuple[str, ...] = (
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
)

_TENS: tuple[str, ...] = (
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
)

_SCALES: tuple[str, ...] = (
    "", "Thousand", "Million", "Billion", "Trillion", "Quadrillion",
    "Quintillion", "Sextillion", "Septillion", "Octillion", "Nonillion",
    "Decillion", "Undecillion", "Duodecillion", "Tredecillion",
    "Quattuordecillion", "Quindecillion", "Sexdecillion", "Septendecillion",
    "Octodecillion", "Novemdecillion", "Vigintillion",
)


class EnglishStrategy(LanguageStrategy):
    code = "en"
    name = "English"

    scales = _SCALES
    digit_words = ("Zero",) + _ONES[1:]
    zero_word = "Zero"
    negative_prefix = "Negative "
    decimal_marker = "point"

    invalid_phrase = "Invalid Number"
    infinity_phrase = "Infinity"
    negative_infinity_phrase = "Negative Infinity"
    too_large_phrase = "Number too large for words"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        n = chunk.value
        parts: list[str] = []

        if n >= 100:
            parts.append(f"{_ONES[n // 100]} Hundred")
            n %= 100

        if n >= 20:
            tens = _TENS[n // 10]
            parts.append(f"{tens}-{_ONES[n % 10]}" if n % 10 else tens)
        elif n >= 10:
            parts.append(_TEENS[n - 10])
        elif n > 0:
            parts.append(_ONES[n])

        return " ".join(parts)
