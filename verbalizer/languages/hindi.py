"""
Hindi (Indian numbering: hazaar, lakh, crore, ...).

The units group has three digits, every higher group two:
12,34,56,789 → बारह करोड़ चौंतीस लाख छप्पन हज़ार सात सौ नवासी.

Hindi has a separate, irregular word for every number 1-99, so the
table below is looked up, never composed.
"""

from __future__ import annotations

from ..models import Chunk
from .base import LanguageStrategy

# ─── Word Lookup Tables ──────────────────────────────────────────────

_NUMBERS_1_99: tuple[str, ...] = (
    "", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
    "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस",
    "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस",
    "तीस", "इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
    "चालीस", "इकतालीस", "बयालीस", "तैंतालीस", "चौवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास",
    "पचास", "इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ",
    "साठ", "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ", "उनहत्तर",
    "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उनासी",
    "अस्सी", "इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सतासी", "अठासी", "नवासी",
    "नब्बे", "इक्यानबे", "बानबे", "तिरानबे", "चौरानबे", "पंचानबे", "छियानबे", "सतानबे", "अट्ठानबे", "निन्यानबे",
)

_SCALES: tuple[str, ...] = (
    "", "हज़ार", "लाख", "करोड़", "अरब", "खरब", "नील", "पद्म", "शंख",
)


class HindiStrategy(LanguageStrategy):
    code = "hi"
    name = "Hindi"

    grouping_width = 2
    first_group_width = 3
    scales = _SCALES
    digit_words = ("शून्य",) + _NUMBERS_1_99[1:10]
    zero_word = "शून्य"
    negative_prefix = "ऋण "
    decimal_marker = "दशमलव"

    invalid_phrase = "अमान्य संख्या"
    infinity_phrase = "अनंत"
    negative_infinity_phrase = "ऋण अनंत"
    too_large_phrase = "बहुत बड़ी संख्या"

    def chunk_to_words(self, chunk: Chunk, leading: bool) -> str:
        hundreds, rest = divmod(chunk.value, 100)
        if not hundreds:
            return _NUMBERS_1_99[rest]
        words = f"{_NUMBERS_1_99[hundreds]} सौ"
        return f"{words} {_NUMBERS_1_99[rest]}" if rest else words
