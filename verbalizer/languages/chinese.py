"""
Chinese, Simplified and Traditional (myriad grouping).

Zero rules:
  - a run of zeros inside a group is read as a single 零   (1005 → 一千零五)
  - a group with leading zeros after a higher group gets 零 (100500 → 十万零五百)
  - one or more all-zero groups between non-zero groups give one 零
    (100000001 → 一亿零一)
  - trailing zeros are silent                          (100000 → 十万)

The leading group drops 一 before 十 (12 → 十二, 120000 → 十二万); inner
groups keep it (10012 → 一万零一十二).
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy, Phrase

_DIGITS: tuple[str, ...] = ("零", "一", "二", "三", "四", "五", "六", "七", "八", "九")
_UNITS: tuple[str, ...] = ("", "十", "百", "千")
_ZERO = _DIGITS[0]


class ChineseStrategy(LanguageStrategy):
    code = "zh-CN"
    name = "Chinese (Simplified)"

    grouping_width = 4
    scales = ("", "万", "亿", "兆", "京", "垓", "秭", "穰", "沟", "涧", "正", "载")
    digit_words = _DIGITS
    zero_word = _ZERO
    negative_prefix = "负"
    decimal_marker = "点"
    marker_separator = ""
    digit_separator = ""
    joiner = ""

    invalid_phrase = "无效数字"
    infinity_phrase = "正无穷"
    negative_infinity_phrase = "负无穷"
    too_large_phrase = "数字太大"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        digits = str(chunk.value)
        result: list[str] = []
        pending_zero = False

        for i, char in enumerate(digits):
            digit = int(char)
            unit = _UNITS[len(digits) - 1 - i]
            if digit == 0:
                pending_zero = True
                continue
            if pending_zero:
                result.append(_ZERO)
                pending_zero = False
            if leading and i == 0 and digit == 1 and unit == "十":
                result.append(unit)
            else:
                result.append(_DIGITS[digit] + unit)

        return "".join(result)

    def scale_phrase(self, words: str, chunk: Chunk) -> str:
        return words + self.scales[chunk.position]

    def assemble(self, phrases: list[Phrase]) -> str:
        parts: list[str] = []
        previous: Phrase | None = None
        for phrase in phrases:
            if previous is not None:
                skipped_group = previous.chunk.position - phrase.chunk.position > 1
                if skipped_group or phrase.chunk.digits.startswith("0"):
                    parts.append(_ZERO)
            parts.append(phrase.text)
            previous = phrase
        return "".join(parts)


class ChineseTraditionalStrategy(ChineseStrategy):
    code = "zh-TW"
    name = "Chinese (Traditional)"

    scales = ("", "萬", "億", "兆", "京", "垓", "秭", "穰", "溝", "澗", "正", "載")
    negative_prefix = "負"
    decimal_marker = "點"

    invalid_phrase = "無效數字"
    infinity_phrase = "正無窮"
    negative_infinity_phrase = "負無窮"
    too_large_phrase = "數字太大"
