"""
Verbalizer — lossless number-to-words conversion in fifteen languages.

Architecture: Classify → Normalize (digit strings) → Segment → Group words → Scale words → Assemble
Philosophy:  Never let a float touch a digit the user typed.
"""

from .dispatcher import (
    convert,
    convert_many,
    get_strategy,
    is_supported,
    number_to_words_arabic,
    number_to_words_chinese,
    number_to_words_chinese_traditional,
    number_to_words_english,
    number_to_words_french,
    number_to_words_german,
    number_to_words_hindi,
    number_to_words_italian,
    number_to_words_japanese,
    number_to_words_korean,
    number_to_words_malay,
    number_to_words_portuguese,
    number_to_words_spanish,
    number_to_words_thai,
    number_to_words_vietnamese,
    supported_languages,
)
from .exceptions import (
    MagnitudeOverflowError,
    UnparsableInputError,
    UnsupportedLanguageError,
    VerbalizerError,
)

__version__ = "1.0.0"

__all__ = [
    "MagnitudeOverflowError",
    "UnparsableInputError",
    "UnsupportedLanguageError",
    "VerbalizerError",
    "convert",
    "convert_many",
    "get_strategy",
    "is_supported",
    "number_to_words_arabic",
    "number_to_words_chinese",
    "number_to_words_chinese_traditional",
    "number_to_words_english",
    "number_to_words_french",
    "number_to_words_german",
    "number_to_words_hindi",
    "number_to_words_italian",
    "number_to_words_japanese",
    "number_to_words_korean",
    "number_to_words_malay",
    "number_to_words_portuguese",
    "number_to_words_spanish",
    "number_to_words_thai",
    "number_to_words_vietnamese",
    "supported_languages",
]
