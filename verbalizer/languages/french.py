"""
French (long scale: million, milliard, billion, billiard, ...).

    71   → soixante et onze            (60 + 11)
    80   → quatre-vingts               (4 × 20, plural s when final)
    81   → quatre-vingt-un             (no "et" after quatre-vingt)
    200  → deux cents                  (plural s when final)
    201  → deux cent un
    80000  → quatre-vingt mille        (mille is not a noun: the s drops)
    200000000 → deux cents millions    (million is a noun: the s stays)
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES: tuple[str, ...] = (
    "", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf",
)

_TEENS: tuple[str, ...] = (
    "dix", "onze", "douze", "treize", "quatorze",
    "quinze", "seize", "dix-sept", "dix-huit", "dix-neuf",
)

_TENS: tuple[str, ...] = (
    "", "dix", "vingt", "trente", "quarante", "cinquante", "soixante",
)

_SCALES: tuple[str, ...] = (
    "", "mille", "million", "milliard", "billion", "billiard",
    "trillion", "trilliard", "quadrillion",
)


def _below_hundred(n: int) -> str:
    if n < 10:
        return _ONES[n]
    if n < 20:
        return _TEENS[n - 10]
    if n < 70:
        tens, units = _TENS[n // 10], n % 10
        if units == 0:
            return tens
        return f"{tens} et un" if units == 1 else f"{tens}-{_ONES[units]}"
    if n < 80:
        return "soixante et onze" if n == 71 else f"soixante-{_TEENS[n - 70]}"
    if n == 80:
        return "quatre-vingts"
    return f"quatre-vingt-{_below_hundred(n - 80)}"


class FrenchStrategy(LanguageStrategy):
    code = "fr"
    name = "French"

    scales = _SCALES
    digit_words = ("zéro",) + _ONES[1:]
    zero_word = "Zéro"
    integer_zero_word = "zéro"
    negative_prefix = "Moins "
    decimal_marker = "virgule"

    invalid_phrase = "Nombre Invalide"
    infinity_phrase = "Infini"
    negative_infinity_phrase = "Infini Négatif"
    too_large_phrase = "Nombre trop grand"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        hundreds, rest = divmod(chunk.value, 100)
        parts: list[str] = []

        if hundreds == 1:
            parts.append("cent")
        elif hundreds > 1:
            parts.append(f"{_ONES[hundreds]} cents" if rest == 0 else f"{_ONES[hundreds]} cent")

        if rest:
            parts.append(_below_hundred(rest))

        return " ".join(parts)

    def scale_phrase(self, words: str, chunk: Chunk) -> str:
        position, value = chunk.position, chunk.value
        if position == 0:
            return words
        if position == 1:
            if value == 1:
                return "mille"
            if words.endswith(("cents", "vingts")):
                words = words[:-1]
            return f"{words} mille"
        plural = "s" if value > 1 else ""
        return f"{words} {_SCALES[position]}{plural}"
