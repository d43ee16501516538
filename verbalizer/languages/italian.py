"""
Italian (long scale: milione, miliardo, bilione, biliardo, ...).

Tens drop their final vowel before uno and otto (ventuno, trentotto), a
final tre in a compound is accented (ventitré, centotré), and numbers
below one million are one word (duemilatrecento). 1000 is "mille", any
other count of thousands takes "-mila" (tremila).

cento loses its o before otto and ottanta (centotto, centottanta), and a
count ending in uno drops the o before mila or a scale noun (ventunmila).
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES: tuple[str, ...] = (
    "", "uno", "due", "tre", "quattro", "cinque", "sei", "sette", "otto", "nove",
)

_TEENS: tuple[str, ...] = (
    "dieci", "undici", "dodici", "tredici", "quattordici",
    "quindici", "sedici", "diciassette", "diciotto", "diciannove",
)

_TENS: tuple[str, ...] = (
    "", "dieci", "venti", "trenta", "quaranta", "cinquanta", "sessanta", "settanta", "ottanta", "novanta",
)

# (singular, plural)
_SCALES: tuple[tuple[str, str], ...] = (
    ("", ""),
    ("mille", "mila"),
    ("milione", "milioni"),
    ("miliardo", "miliardi"),
    ("bilione", "bilioni"),
    ("biliardo", "biliardi"),
    ("trilione", "trilioni"),
    ("triliardo", "triliardi"),
)


class ItalianStrategy(LanguageStrategy):
    code = "it"
    name = "Italian"

    scales = tuple(singular for singular, _ in _SCALES)
    digit_words = ("zero",) + _ONES[1:]
    zero_word = "Zero"
    integer_zero_word = "zero"
    negative_prefix = "Meno "
    decimal_marker = "virgola"
    fuse_thousands = True

    invalid_phrase = "Numero non valido"
    infinity_phrase = "Infinito"
    negative_infinity_phrase = "Infinito negativo"
    too_large_phrase = "Numero troppo grande"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        hundreds, rest = divmod(chunk.value, 100)
        words = ""
        if hundreds:
            words = "cento" if hundreds == 1 else f"{_ONES[hundreds]}cento"

        tail = ""
        if rest >= 20:
            tens, units = divmod(rest, 10)
            tens_word = _TENS[tens]
            if units in (1, 8):
                tens_word = tens_word[:-1]
            tail = tens_word + self._final_unit(units)
        elif rest >= 10:
            tail = _TEENS[rest - 10]
        elif rest:
            tail = self._final_unit(rest) if hundreds else _ONES[rest]

        # cento + otto/ottanta elides: centotto, duecentottanta
        if words and tail.startswith("o"):
            words = words[:-1]
        return words + tail

    @staticmethod
    def _final_unit(units: int) -> str:
        return "tré" if units == 3 else _ONES[units]

    def scale_phrase(self, words: str, chunk: Chunk) -> str:
        position, value = chunk.position, chunk.value
        if position == 0:
            return words
        singular, plural = _SCALES[position]
        if value == 1:
            return singular if position == 1 else f"un {singular}"
        # a final uno shortens before a counted noun: ventunmila, ventun milioni
        if words.endswith("uno"):
            words = words[:-1]
        if position == 1:
            return words + plural
        return f"{words} {plural}"
