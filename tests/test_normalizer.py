"""
Tests for the language-independent front of the engine: special-value
classification, decimal normalization, digit-group segmentation and the
environment configuration.

Run: pytest tests/ -v
"""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError

from verbalizer import config
from verbalizer.chunking import segment
from verbalizer.exceptions import MagnitudeOverflowError, UnparsableInputError
from verbalizer.models import CanonicalDecimal, Chunk, SpecialValue
from verbalizer.normalizer import MAX_INTEGER_DIGITS, classify, normalize


# ═══════════════════════════════════════════════════════════════════════
# SPECIAL-VALUE CLASSIFIER
# ═══════════════════════════════════════════════════════════════════════


class TestClassify:
    def test_regular_number_is_not_special(self):
        assert classify(5) is None
        assert classify("-12.5") is None

    def test_zero_forms(self):
        assert classify(0) is SpecialValue.ZERO
        assert classify(0.0) is SpecialValue.ZERO
        assert classify(-0.0) is SpecialValue.ZERO
        assert classify("0.000") is SpecialValue.ZERO
        assert classify("-0") is SpecialValue.ZERO

    def test_infinities(self):
        assert classify(float("inf")) is SpecialValue.POSITIVE_INFINITY
        assert classify(float("-inf")) is SpecialValue.NEGATIVE_INFINITY
        assert classify("Infinity") is SpecialValue.POSITIVE_INFINITY
        assert classify("-inf") is SpecialValue.NEGATIVE_INFINITY

    def test_nan_is_invalid(self):
        assert classify(float("nan")) is SpecialValue.INVALID
        assert classify(Decimal("NaN")) is SpecialValue.INVALID

    def test_unparsable_text_is_invalid(self):
        assert classify("abc") is SpecialValue.INVALID
        assert classify("") is SpecialValue.INVALID
        assert classify("   ") is SpecialValue.INVALID
        assert classify("1.2.3") is SpecialValue.INVALID

    def test_unsupported_types_are_invalid(self):
        assert classify(None) is SpecialValue.INVALID
        assert classify([1, 2]) is SpecialValue.INVALID
        assert classify(True) is SpecialValue.INVALID

    def test_float_below_fraction_cap_is_zero(self):
        assert classify(1e-25) is SpecialValue.ZERO
        assert classify(-1e-25) is SpecialValue.ZERO
        assert classify(1e-20) is None

    def test_tiny_text_is_not_zero(self):
        assert classify("0.0000000000000000000000001") is None


# ═══════════════════════════════════════════════════════════════════════
# DECIMAL NORMALIZER
# ═══════════════════════════════════════════════════════════════════════


class TestNormalize:
    def test_integer(self):
        number = normalize(1234)
        assert (number.is_negative, number.integer_digits, number.fraction_digits) == (False, "1234", "")

    def test_negative_fraction(self):
        number = normalize(-0.5)
        assert number.is_negative is True
        assert number.integer_digits == "0"
        assert number.fraction_digits == "5"

    def test_text_keeps_every_digit(self):
        number = normalize("123456789012345678901")
        assert number.integer_digits == "123456789012345678901"
        assert number.fraction_digits == ""

    def test_text_keeps_typed_trailing_zeros(self):
        assert normalize("1,234.500").fraction_digits == "500"

    def test_grouping_separators_removed(self):
        assert normalize("1 234 567").integer_digits == "1234567"
        assert normalize("1_000").integer_digits == "1000"
        assert normalize("1'000'000").integer_digits == "1000000"
        assert normalize("1\u00a0000").integer_digits == "1000"

    def test_leading_zeros_and_sign(self):
        assert str(normalize("+007")) == "7"
        assert str(normalize(".5")) == "0.5"

    def test_exponent_is_expanded(self):
        assert normalize("1e3").integer_digits == "1000"
        assert normalize(1e21).integer_digits == "1" + "0" * 21

    def test_float_uses_shortest_repr(self):
        assert str(normalize(0.1)) == "0.1"
        assert str(normalize(1.23)) == "1.23"

    def test_float_fraction_is_capped(self):
        assert len(normalize(1e-25).fraction_digits) <= 20

    def test_decimal_keeps_exponent_digits(self):
        assert str(normalize(Decimal("12.50"))) == "12.50"

    def test_negative_zero_is_unsigned(self):
        assert normalize("-0").is_negative is False
        assert normalize("-0.00").is_negative is False

    def test_unparsable_raises(self):
        with pytest.raises(UnparsableInputError) as exc_info:
            normalize("banana")
        assert exc_info.value.code == "UNPARSABLE_INPUT"

    def test_infinity_raises(self):
        with pytest.raises(UnparsableInputError):
            normalize(float("inf"))

    def test_bool_raises(self):
        with pytest.raises(UnparsableInputError):
            normalize(True)


class TestNormalizeLargeValues:
    """Digits beyond the 28-digit Decimal context must survive expansion."""

    def test_int_beyond_context_precision(self):
        assert normalize(10**30 + 7).integer_digits == str(10**30 + 7)

    def test_negative_int_beyond_context_precision(self):
        number = normalize(-(10**40) - 3)
        assert number.is_negative is True
        assert number.integer_digits == str(10**40 + 3)

    def test_decimal_beyond_context_precision(self):
        digits = "123456789012345678901234567890123"
        assert normalize(Decimal(digits)).integer_digits == digits

    def test_decimal_fraction_beyond_context_precision(self):
        number = normalize(Decimal("1234567890123456789012345678901.23"))
        assert str(number) == "1234567890123456789012345678901.23"

    def test_exponent_text_beyond_context_precision(self):
        assert normalize("1234567890123456789012345678901234e3").integer_digits == (
            "1234567890123456789012345678901234000"
        )

    def test_huge_exponent_raises_before_expanding(self):
        with pytest.raises(MagnitudeOverflowError) as exc_info:
            normalize("1e999999999")
        assert exc_info.value.code == "MAGNITUDE_OVERFLOW"
        assert exc_info.value.details["max_digits"] == MAX_INTEGER_DIGITS

    def test_limit_is_inclusive(self):
        assert len(normalize("9" * 66, max_integer_digits=66).integer_digits) == 66
        with pytest.raises(MagnitudeOverflowError):
            normalize("1" + "0" * 66, max_integer_digits=66)

    def test_leading_zeros_do_not_count(self):
        assert normalize("000123", max_integer_digits=3).integer_digits == "123"

    def test_limit_applies_to_numbers(self):
        with pytest.raises(MagnitudeOverflowError):
            normalize(10**66, max_integer_digits=66)
        with pytest.raises(MagnitudeOverflowError):
            normalize(Decimal("-1e66"), max_integer_digits=66)

    def test_zero_with_large_exponent_is_zero(self):
        assert normalize(Decimal("0E+5000")).is_zero


# ═══════════════════════════════════════════════════════════════════════
# CANONICAL DECIMAL MODEL
# ═══════════════════════════════════════════════════════════════════════


class TestCanonicalDecimal:
    def test_defaults_to_zero(self):
        assert CanonicalDecimal().is_zero

    def test_str(self):
        number = CanonicalDecimal(is_negative=True, integer_digits="12", fraction_digits="50")
        assert str(number) == "-12.50"

    def test_rejects_leading_zero(self):
        with pytest.raises(ValidationError):
            CanonicalDecimal(integer_digits="012")

    def test_rejects_empty_integer(self):
        with pytest.raises(ValidationError):
            CanonicalDecimal(integer_digits="")

    def test_rejects_non_digits(self):
        with pytest.raises(ValidationError):
            CanonicalDecimal(integer_digits="1", fraction_digits="5a")
        with pytest.raises(ValidationError):
            CanonicalDecimal(integer_digits="١٢")  # Arabic-Indic digits

    def test_rejects_negative_zero(self):
        with pytest.raises(ValidationError):
            CanonicalDecimal(is_negative=True, integer_digits="0", fraction_digits="00")

    def test_is_frozen(self):
        number = CanonicalDecimal(integer_digits="1")
        with pytest.raises(ValidationError):
            number.integer_digits = "2"


# ═══════════════════════════════════════════════════════════════════════
# SEGMENTER
# ═══════════════════════════════════════════════════════════════════════


class TestSegment:
    def test_groups_of_three(self):
        chunks = segment("1234567", 3)
        assert chunks == [
            Chunk(value=1, position=2, digits="1"),
            Chunk(value=234, position=1, digits="234"),
            Chunk(value=567, position=0, digits="567"),
        ]

    def test_exact_width(self):
        assert segment("1000", 4) == [Chunk(value=1000, position=0, digits="1000")]

    def test_zero_groups_are_kept(self):
        chunks = segment("100000000", 4)
        assert [c.value for c in chunks] == [1, 0, 0]
        assert [c.digits for c in chunks] == ["1", "0000", "0000"]

    def test_indian_grouping(self):
        chunks = segment("123456789", 2, first_width=3)
        assert [c.value for c in chunks] == [12, 34, 56, 789]
        assert [c.position for c in chunks] == [3, 2, 1, 0]

    def test_groups_of_six(self):
        assert [c.value for c in segment("1000001", 6)] == [1, 1]

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            segment("", 3)

    def test_rejects_non_digits(self):
        with pytest.raises(ValueError):
            segment("12a", 3)

    def test_rejects_bad_width(self):
        with pytest.raises(ValueError):
            segment("123", 0)


# ═══════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════


class TestConfig:
    def test_default_language_defaults_to_english(self, monkeypatch):
        monkeypatch.delenv(config.DEFAULT_LANGUAGE_ENV, raising=False)
        assert config.default_language() == "en"

    def test_default_language_from_env(self, monkeypatch):
        monkeypatch.setenv(config.DEFAULT_LANGUAGE_ENV, " fr ")
        assert config.default_language() == "fr"

    def test_blank_default_language_falls_back(self, monkeypatch):
        monkeypatch.setenv(config.DEFAULT_LANGUAGE_ENV, "")
        assert config.default_language() == "en"

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv(config.LOG_LEVEL_ENV, "debug")
        assert config.log_level() == logging.DEBUG

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv(config.LOG_LEVEL_ENV, "chatty")
        assert config.log_level() == logging.INFO
