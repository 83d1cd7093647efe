"""Exception hierarchy for utmpkit.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from UtmpError for easy catching of any utmpkit-specific error.
"""

from __future__ import annotations


class UtmpError(Exception):
    """Base exception for all utmpkit errors."""

    pass


class DecodeError(UtmpError):
    """Raised when a record block cannot be decoded.

    Examples:
        - Block is not exactly one record long
        - Unknown record kind code
        - Timestamp that cannot be represented
    """

    pass


class TruncatedRecordError(DecodeError):
    """Raised when fewer bytes than one full record are available."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Truncated record: expected {expected} bytes, got {actual} bytes")
        self.expected = expected
        self.actual = actual


class InvalidKindError(DecodeError):
    """Raised when a record's leading kind code is not a known record kind."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Invalid record kind code {code}")
        self.code = code


class InvalidTimeError(DecodeError):
    """Raised when a record's time value cannot be turned into a datetime."""

    def __init__(self, seconds: int, microseconds: int) -> None:
        super().__init__(f"Invalid time value: {seconds}s {microseconds}us")
        self.seconds = seconds
        self.microseconds = microseconds


class EncodeError(UtmpError):
    """Raised when an entry cannot be encoded into a record block.

    Examples:
        - Integer value does not fit the layout's field width
        - Text field longer than its fixed capacity
    """

    pass


class ReadError(UtmpError):
    """Raised when the underlying byte source fails to read.

    The original OSError is available as ``error`` and as ``__cause__``.
    """

    def __init__(self, error: OSError) -> None:
        super().__init__(f"Failed to read record source: {error}")
        self.error = error
