"""
Arabic.

Agreement of a counted scale word with its count:
    1      → bare singular          ألف
    2      → dual                   ألفان
    3-10   → count + plural         ثلاثة آلاف
    11+    → count + singular       أحد عشر ألف

Units precede tens and every part is joined with the conjunction و
(123 → مئة وثلاثة وعشرون). 200 before a scale word takes the construct
form مئتا (200000 → مئتا ألف).
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy, Phrase

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES: tuple[str, ...] = (
    "", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة", "ثمانية", "تسعة",
)

_TEENS: tuple[str, ...] = (
    "عشرة", "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر",
    "خمسة عشر", "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر",
)

_TENS: tuple[str, ...] = (
    "", "عشرة", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون",
)

_HUNDREDS: tuple[str, ...] = (
    "", "مئة", "مئتان", "ثلاثمئة", "أربعمئة", "خمسمئة", "ستمئة", "سبعمئة", "ثمانمئة", "تسعمئة",
)

_SCALES: tuple[str, ...] = (
    "", "ألف", "مليون", "مليار", "تريليون", "كوادريليون", "كوينتليون",
)
_DUALS: tuple[str, ...] = (
    "", "ألفان", "مليونان", "ملياران", "تريليونان", "كوادريليونان", "كوينتليونان",
)
_PLURALS: tuple[str, ...] = (
    "", "آلاف", "ملايين", "مليارات", "تريليونات", "كوادريليونات", "كوينتليونات",
)

_AND = " و"


class ArabicStrategy(LanguageStrategy):
    code = "ar"
    name = "Arabic"

    scales = _SCALES
    digit_words = ("صفر",) + _ONES[1:]
    zero_word = "صفر"
    negative_prefix = "سالب "
    decimal_marker = "فاصلة"

    invalid_phrase = "رقم غير صالح"
    infinity_phrase = "لانهاية"
    negative_infinity_phrase = "لانهاية سالبة"
    too_large_phrase = "رقم كبير جدًا"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        hundreds, rest = divmod(chunk.value, 100)
        parts: list[str] = []

        if hundreds == 2 and rest == 0 and chunk.position > 0:
            parts.append("مئتا")
        elif hundreds:
            parts.append(_HUNDREDS[hundreds])

        if 0 < rest < 10:
            parts.append(_ONES[rest])
        elif 10 <= rest < 20:
            parts.append(_TEENS[rest - 10])
        elif rest >= 20:
            tens, units = divmod(rest, 10)
            parts.append(f"{_ONES[units]}{_AND}{_TENS[tens]}" if units else _TENS[tens])

        return _AND.join(parts)

    def scale_phrase(self, words: str, chunk: Chunk) -> str:
        position, value = chunk.position, chunk.value
        if position == 0:
            return words
        if value == 1:
            return _SCALES[position]
        if value == 2:
            return _DUALS[position]
        if value <= 10:
            return f"{words} {_PLURALS[position]}"
        return f"{words} {_SCALES[position]}"

    def assemble(self, phrases: list[Phrase]) -> str:
        return _AND.join(phrase.text for phrase in phrases)
