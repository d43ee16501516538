"""
Decimal normalization and special-value classification.

Everything that enters the engine passes through here first. The output is a
CanonicalDecimal whose digits are exactly the digits the caller typed (for
text and Decimal input) or the shortest round-trip expansion (for floats),
never a lossy ``float -> str`` rendering such as ``"1.23e+21"``.

Supported inputs:
    1234                    -> ("1234", "")
    -0.5                    -> negative ("0", "5")
    1e21                    -> ("1000000000000000000000", "")
    "1,234.500"             -> ("1234", "500")   (typed trailing zeros kept)
    "123456789012345678901" -> all 21 digits, no float rounding
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, DecimalException
from typing import Union

from .exceptions import MagnitudeOverflowError, UnparsableInputError
from .models import CanonicalDecimal, SpecialValue

NumberInput = Union[int, float, Decimal, str]

# Fraction digits kept when expanding a float (floats carry no typed digits)
MAX_FRACTION_DIGITS = 20
_FLOAT_RESOLUTION = Decimal(f"1e-{MAX_FRACTION_DIGITS}")

# Integer digits normalize() will expand when the caller gives no limit
MAX_INTEGER_DIGITS = 1024

# Grouping separators a user may type: comma, underscore, space,
# apostrophe (Swiss), thin space, no-break space, narrow no-break space
_GROUPING_SEPARATORS = re.compile(r"[,_ '\u2009\u00a0\u202f]")

_PLAIN_DECIMAL = re.compile(r"^([+-]?)([0-9]*)(?:\.([0-9]*))?$")


# ─── Special-Value Classifier ───────────────────────────────────────


def classify(value: object) -> SpecialValue | None:
    """Return the SpecialValue for degenerate input, or None for a regular number.

    NaN, unparsable text and unsupported types are INVALID; this function
    never raises.
    """
    try:
        number = _to_decimal(value)
    except UnparsableInputError:
        return SpecialValue.INVALID

    if number.is_nan():
        return SpecialValue.INVALID
    if number.is_infinite():
        return SpecialValue.NEGATIVE_INFINITY if number < 0 else SpecialValue.POSITIVE_INFINITY
    if number.is_zero():
        return SpecialValue.ZERO
    # a float below the fraction cap expands to all zeros
    if isinstance(value, float) and number.copy_abs() < _FLOAT_RESOLUTION:
        return SpecialValue.ZERO
    return None


# ─── Decimal Normalizer ─────────────────────────────────────────────


def normalize(value: object, max_integer_digits: int = MAX_INTEGER_DIGITS) -> CanonicalDecimal:
    """Convert a number or numeric text to its CanonicalDecimal.

    Args:
        value: int, float, Decimal or numeric text.
        max_integer_digits: longest integer part to expand. The check runs
            before expansion, so "1e999999999" never builds a billion digits.

    Raises:
        UnparsableInputError: text that is not a number, NaN, infinity or an
            unsupported input type. Run classify() first to avoid this.
        MagnitudeOverflowError: the integer part is longer than max_integer_digits.
    """
    if isinstance(value, str):
        text = _clean_text(value)
        match = _PLAIN_DECIMAL.match(text)
        if match and (match.group(2) or match.group(3)):
            sign, integer, fraction = match.group(1), match.group(2), match.group(3) or ""
            integer = integer.lstrip("0")
            _check_magnitude(len(integer), max_integer_digits, value)
            return _build(sign == "-", integer, fraction)

    number = _to_decimal(value)
    if not number.is_finite():
        raise UnparsableInputError(
            f"Cannot normalize non-finite value: {value!r}",
            details={"value": repr(value)},
        )
    if not number.is_zero():
        _check_magnitude(number.adjusted() + 1, max_integer_digits, value)

    # copy_abs() and format() are exact; abs() would round to the context precision
    expanded = format(number.copy_abs(), "f")
    integer, _, fraction = expanded.partition(".")
    if isinstance(value, float):
        fraction = fraction[:MAX_FRACTION_DIGITS].rstrip("0")
    return _build(number.is_signed(), integer, fraction)


# ─── Helpers ────────────────────────────────────────────────────────


def _clean_text(text: str) -> str:
    return _GROUPING_SEPARATORS.sub("", text.strip())


def _to_decimal(value: object) -> Decimal:
    """Parse any supported input into a Decimal (finite or not)."""
    # bool is an int subclass but "True" is not a number a user typed
    if isinstance(value, bool):
        raise UnparsableInputError(f"Booleans are not numbers: {value!r}", details={"type": "bool"})
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if math.isnan(value):
            return Decimal("NaN")
        # repr() is the shortest string that round-trips to the same float
        return Decimal(repr(value))
    if isinstance(value, str):
        text = _clean_text(value)
        if not text:
            raise UnparsableInputError("Empty text is not a number", details={"value": value})
        try:
            return Decimal(text)
        except DecimalException:
            raise UnparsableInputError(
                f"Text does not denote a number: {value!r}", details={"value": value}
            ) from None
    raise UnparsableInputError(
        f"Unsupported input type: {type(value).__name__}",
        details={"type": type(value).__name__},
    )


def _check_magnitude(integer_digits: int, limit: int, value: object) -> None:
    if integer_digits > limit:
        raise MagnitudeOverflowError(
            f"{integer_digits}-digit integer exceeds the {limit}-digit limit",
            details={"value": repr(value)[:64], "digits": integer_digits, "max_digits": limit},
        )


def _build(negative: bool, integer: str, fraction: str) -> CanonicalDecimal:
    integer = integer.lstrip("0") or "0"
    if integer == "0" and not fraction.strip("0"):
        return CanonicalDecimal()
    return CanonicalDecimal(
        is_negative=negative,
        integer_digits=integer,
        fraction_digits=fraction,
    )
