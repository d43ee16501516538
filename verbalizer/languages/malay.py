"""
Bahasa Malaysia.

The prefix "se-" replaces "satu" before ratus, puluh, belas and ribu:
100 is "seratus", 1000 is "seribu", but one million is "satu juta".
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy

_UNITS: tuple[str, ...] = (
    "", "satu", "dua", "tiga", "empat", "lima", "enam", "tujuh", "lapan", "sembilan",
)

_BELAS: tuple[str, ...] = (
    "sepuluh", "sebelas", "dua belas", "tiga belas", "empat belas",
    "lima belas", "enam belas", "tujuh belas", "lapan belas", "sembilan belas",
)

_SCALES: tuple[str, ...] = (
    "", "ribu", "juta", "bilion", "trilion", "kuadrilion", "kuintilion",
    "sekstilion", "septilion", "oktilion", "nonilion", "desilion",
)


class MalayStrategy(LanguageStrategy):
    code = "ms"
    name = "Bahasa Malaysia"

    scales = _SCALES
    digit_words = ("sifar",) + _UNITS[1:]
    zero_word = "Sifar"
    negative_prefix = "Negatif "
    decimal_marker = "perpuluhan"

    invalid_phrase = "Nombor Tidak Sah"
    infinity_phrase = "Infiniti"
    negative_infinity_phrase = "Negatif Infiniti"
    too_large_phrase = "Nombor terlalu besar"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        n = chunk.value
        parts: list[str] = []

        if n >= 100:
            hundreds = n // 100
            parts.append("seratus" if hundreds == 1 else f"{_UNITS[hundreds]} ratus")
            n %= 100

        if n >= 20:
            parts.append(f"{_UNITS[n // 10]} puluh")
            if n % 10:
                parts.append(_UNITS[n % 10])
        elif n >= 10:
            parts.append(_BELAS[n - 10])
        elif n > 0:
            parts.append(_UNITS[n])

        return " ".join(parts)

    def scale_phrase(self, words: str, chunk: Chunk) -> str:
        if chunk.position == 1 and chunk.value == 1:
            return "seribu"
        return super().scale_phrase(words, chunk)
