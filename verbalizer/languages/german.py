"""
German (long scale).

Numbers below one million are written as a single compound, units before
tens: 2345 → zweitausenddreihundertfünfundvierzig. Million and above are
separate nouns with "eine"/plural agreement: eine Million, zwei Millionen.
A final 1 reads "eins" (101 → einhunderteins).
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES: tuple[str, ...] = (
    "", "ein", "zwei", "drei", "vier", "fünf", "sechs", "sieben", "acht", "neun",
)

_TEENS: tuple[str, ...] = (
    "zehn", "elf", "zwölf", "dreizehn", "vierzehn",
    "fünfzehn", "sechzehn", "siebzehn", "achtzehn", "neunzehn",
)

_TENS: tuple[str, ...] = (
    "", "zehn", "zwanzig", "dreißig", "vierzig", "fünfzig", "sechzig", "siebzig", "achtzig", "neunzig",
)

_SCALES: tuple[str, ...] = (
    "", "tausend", "Million", "Milliarde", "Billion", "Billiarde",
    "Trillion", "Trilliarde", "Quadrillion",
)
_PLURALS: tuple[str, ...] = (
    "", "tausend", "Millionen", "Milliarden", "Billionen", "Billiarden",
    "Trillionen", "Trilliarden", "Quadrillionen",
)


class GermanStrategy(LanguageStrategy):
    code = "de"
    name = "German"

    scales = _SCALES
    digit_words = ("null", "eins") + _ONES[2:]
    zero_word = "Null"
    negative_prefix = "Minus "
    decimal_marker = "Komma"
    fuse_thousands = True

    invalid_phrase = "Ungültige Zahl"
    infinity_phrase = "Unendlich"
    negative_infinity_phrase = "Negativ Unendlich"
    too_large_phrase = "Zahl zu groß"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        hundreds, rest = divmod(chunk.value, 100)
        words = f"{_ONES[hundreds]}hundert" if hundreds else ""

        if rest >= 20:
            tens, units = divmod(rest, 10)
            words += f"{_ONES[units]}und{_TENS[tens]}" if units else _TENS[tens]
        elif rest >= 10:
            words += _TEENS[rest - 10]
        else:
            words += _ONES[rest]

        return words

    def scale_phrase(self, words: str, chunk: Chunk) -> str:
        position, value = chunk.position, chunk.value
        if position == 0:
            return words + "s" if value % 100 == 1 else words
        if position == 1:
            return words + "tausend"
        if value == 1:
            return f"eine {_SCALES[position]}"
        # Million and above are feminine: einhunderteine Millionen
        if value % 100 == 1:
            words += "e"
        return f"{words} {_PLURALS[position]}"
