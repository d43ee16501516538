"""
Japanese (myriad grouping, kanji numerals).

一 is dropped before 十, 百 and 千 (十一, 百, 千五百) but kept before the
myriad words (一万, 一億). All-zero groups are silent: 1億1 is 一億一.
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy

_DIGITS: tuple[str, ...] = ("〇", "一", "二", "三", "四", "五", "六", "七", "八", "九")
_UNITS: tuple[str, ...] = ("", "十", "百", "千")


class JapaneseStrategy(LanguageStrategy):
    code = "ja"
    name = "Japanese"

    grouping_width = 4
    scales = ("", "万", "億", "兆", "京", "垓", "𥝱", "穣", "溝", "澗", "正", "載", "極")
    digit_words = _DIGITS
    zero_word = "ゼロ"
    integer_zero_word = "〇"
    negative_prefix = "マイナス"
    decimal_marker = "点"
    marker_separator = ""
    digit_separator = ""
    joiner = ""

    invalid_phrase = "無効な数字"
    infinity_phrase = "無限大"
    negative_infinity_phrase = "負の無限大"
    too_large_phrase = "数が大きすぎます"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        digits = str(chunk.value)
        result: list[str] = []
        for i, char in enumerate(digits):
            digit = int(char)
            if digit == 0:
                continue
            unit = _UNITS[len(digits) - 1 - i]
            result.append(("" if digit == 1 and unit else _DIGITS[digit]) + unit)
        return "".join(result)

    def scale_phrase(self, words: str, chunk: Chunk) -> str:
        return words + self.scales[chunk.position]
