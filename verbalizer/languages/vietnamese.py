"""
Vietnamese.

Unit substitutions depend on the tens digit:
  - mốt for 1 after a tens digit of 2-9   (21 → hai mươi mốt)
  - tư  for 4 after a tens digit of 2-9   (24 → hai mươi tư)
  - lăm for 5 after any tens digit        (15 → mười lăm, 25 → hai mươi lăm)
A zero tens digit between hundreds and units reads "linh" (105 → một trăm
linh năm). Every group after the first reads its hundreds even when they
are zero (1005 → một nghìn không trăm linh năm).
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy

_DIGITS: tuple[str, ...] = (
    "không", "một", "hai", "ba", "bốn", "năm", "sáu", "bảy", "tám", "chín",
)


class VietnameseStrategy(LanguageStrategy):
    code = "vi"
    name = "Vietnamese"

    scales = ("", "nghìn", "triệu", "tỷ", "nghìn tỷ", "triệu tỷ", "tỷ tỷ")
    digit_words = _DIGITS
    zero_word = "không"
    negative_prefix = "âm "
    decimal_marker = "phẩy"

    invalid_phrase = "số không hợp lệ"
    infinity_phrase = "vô hạn"
    negative_infinity_phrase = "âm vô hạn"
    too_large_phrase = "số quá lớn"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        hundreds, tens, units = chunk.value // 100, chunk.value // 10 % 10, chunk.value % 10
        words: list[str] = []

        with_hundreds = hundreds > 0 or not leading
        if with_hundreds:
            words += [_DIGITS[hundreds], "trăm"]

        if tens == 1:
            words.append("mười")
        elif tens > 1:
            words += [_DIGITS[tens], "mươi"]
        elif with_hundreds and units:
            words.append("linh")

        if units:
            words.append(self._unit_word(tens, units))

        return " ".join(words)

    @staticmethod
    def _unit_word(tens: int, units: int) -> str:
        if tens > 1 and units == 1:
            return "mốt"
        if tens > 1 and units == 4:
            return "tư"
        if tens > 0 and units == 5:
            return "lăm"
        return _DIGITS[units]
