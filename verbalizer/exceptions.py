"""
Custom exception hierarchy for number verbalization.

Each exception type maps to one category of failure, so the dispatcher can
decide precisely which ones become a fixed phrase and which ones reach the
caller.
"""

from __future__ import annotations


class VerbalizerError(Exception):
    """Base exception for all verbalization failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class UnparsableInputError(VerbalizerError):
    """The input does not denote a number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNPARSABLE_INPUT", message, details)


class UnsupportedLanguageError(VerbalizerError):
    """The requested language code is not registered."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_LANGUAGE", message, details)


class MagnitudeOverflowError(VerbalizerError):
    """The integer part has more digit groups than the language can name."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MAGNITUDE_OVERFLOW", message, details)
