"""
Thai.

Place values up to แสน (100,000) are positional; every further six digits
add one ล้าน (ล้าน, ล้านล้าน, ...), so the grouping width is 6.

Irregular forms:
  - 2 in the tens place reads ยี่        (20 → ยี่สิบ)
  - 1 in the tens place is silent        (10 → สิบ, not หนึ่งสิบ)
  - 1 in the units place after anything else reads เอ็ด
    (11 → สิบเอ็ด, 101 → หนึ่งร้อยเอ็ด, 1000001 → หนึ่งล้านเอ็ด)
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy

_DIGITS: tuple[str, ...] = (
    "ศูนย์", "หนึ่ง", "สอง", "สาม", "สี่", "ห้า", "หก", "เจ็ด", "แปด", "เก้า",
)
_UNITS: tuple[str, ...] = ("", "สิบ", "ร้อย", "พัน", "หมื่น", "แสน")
_MILLION = "ล้าน"


class ThaiStrategy(LanguageStrategy):
    code = "th"
    name = "Thai"

    grouping_width = 6
    scales = tuple(_MILLION * k for k in range(9))
    digit_words = _DIGITS
    zero_word = _DIGITS[0]
    negative_prefix = "ลบ"
    decimal_marker = "จุด"
    marker_separator = ""
    digit_separator = ""
    joiner = ""

    invalid_phrase = "เลขไม่ถูกต้อง"
    infinity_phrase = "อนันต์"
    negative_infinity_phrase = "ลบอนันต์"
    too_large_phrase = "ตัวเลขใหญ่เกินไป"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        digits = str(chunk.value)
        result: list[str] = []
        for i, char in enumerate(digits):
            digit = int(char)
            if digit == 0:
                continue
            place = len(digits) - 1 - i
            if place == 1 and digit == 2:
                result.append("ยี่")
            elif place == 1 and digit == 1:
                pass
            elif place == 0 and digit == 1 and (len(digits) > 1 or not leading):
                result.append("เอ็ด")
            else:
                result.append(_DIGITS[digit])
            result.append(_UNITS[place])
        return "".join(result)

    def scale_phrase(self, words: str, chunk: Chunk) -> str:
        return words + self.scales[chunk.position]
