"""
Korean (Sino-Korean numerals, myriad grouping).

일 is dropped before 십, 백 and 천, and before a bare 만 (10000 → 만), but
kept before 억 and higher (일억). Groups are separated by a space, as
Korean spacing rules write numbers by 만 units: 십이만 삼천사백오십육.
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy

_DIGITS: tuple[str, ...] = ("영", "일", "이", "삼", "사", "오", "육", "칠", "팔", "구")
_UNITS: tuple[str, ...] = ("", "십", "백", "천")


class KoreanStrategy(LanguageStrategy):
    code = "ko"
    name = "Korean"

    grouping_width = 4
    scales = ("", "만", "억", "조", "경", "해", "자", "양", "구", "간", "정", "재", "극")
    digit_words = _DIGITS
    zero_word = "영"
    negative_prefix = "마이너스 "
    decimal_marker = "점"
    digit_separator = ""

    invalid_phrase = "유효하지 않은 숫자"
    infinity_phrase = "무한대"
    negative_infinity_phrase = "음의 무한대"
    too_large_phrase = "숫자가 너무 큽니다"

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
        if chunk.position == 1 and chunk.value == 1:
            return self.scales[1]
        return words + self.scales[chunk.position]
