"""
Pydantic models for verbalization data — strict typing at the boundary.

CanonicalDecimal is the only number representation a language strategy ever
sees. It is a sign plus two digit strings, so no strategy can lose precision
by touching a float.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ─── Special Values ─────────────────────────────────────────────────


class SpecialValue(str, Enum):
    """Inputs that short-circuit the pipeline with a fixed phrase."""

    ZERO = "ZERO"
    POSITIVE_INFINITY = "POSITIVE_INFINITY"
    NEGATIVE_INFINITY = "NEGATIVE_INFINITY"
    INVALID = "INVALID"  # NaN, unparsable text, unsupported input type


# ─── Canonical Decimal ──────────────────────────────────────────────


class CanonicalDecimal(BaseModel):
    """Sign-separated, lossless decimal form of a number.

    Invariants (enforced on construction):
      - every character of both digit strings is 0-9
      - integer_digits is never empty and has no leading zero unless it is "0"
      - a value equal to zero is never negative
    """

    model_config = ConfigDict(frozen=True)

    is_negative: bool = False
    integer_digits: str = "0"
    fraction_digits: str = ""

    @field_validator("integer_digits")
    @classmethod
    def _check_integer_digits(cls, value: str) -> str:
        if not value or not value.isascii() or not value.isdigit():
            raise ValueError(f"integer_digits must be a non-empty digit string, got {value!r}")
        if len(value) > 1 and value[0] == "0":
            raise ValueError(f"integer_digits has a leading zero: {value!r}")
        return value

    @field_validator("fraction_digits")
    @classmethod
    def _check_fraction_digits(cls, value: str) -> str:
        if value and (not value.isascii() or not value.isdigit()):
            raise ValueError(f"fraction_digits must be a digit string, got {value!r}")
        return value

    @model_validator(mode="after")
    def _zero_is_unsigned(self) -> CanonicalDecimal:
        if self.is_negative and self.is_zero:
            raise ValueError("zero cannot be negative")
        return self

    @property
    def is_zero(self) -> bool:
        return self.integer_digits == "0" and not self.fraction_digits.strip("0")

    def __str__(self) -> str:
        sign = "-" if self.is_negative else ""
        if self.fraction_digits:
            return f"{sign}{self.integer_digits}.{self.fraction_digits}"
        return f"{sign}{self.integer_digits}"


# ─── Chunk ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Chunk:
    """One digit group of the integer part.

    position indexes the language's scale table (0 = units group).
    digits is the raw group text; only the most-significant group may be
    shorter than the grouping width.
    """

    value: int
    position: int
    digits: str


# ─── Capability Query ───────────────────────────────────────────────


class LanguageInfo(BaseModel):
    """A supported language as shown by a language-selector control."""

    code: str
    name: str
    grouping_width: int = Field(description="Digits per scale tier (3, 4 or 6)")
