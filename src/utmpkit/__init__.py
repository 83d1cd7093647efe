"""utmpkit: utmp/wtmp session log decoder

A Python library for reading the session-accounting files POSIX systems keep
in /var/run/utmp, /var/log/wtmp and /var/log/btmp. Records are decoded into
immutable Pydantic models, one record at a time.

Key Features:
- Native, explicit 32-bit and explicit 64-bit record layouts
- Lazy, pull-based parsing with fail-fast or keep-going collection
- Raw fixed-capacity text fields, no encoding guesses
- Pure Python implementation (struct-based, no C extensions)

Quick Start:
    >>> from utmpkit import RecordKind, parse_from_path
    >>>
    >>> for entry in parse_from_path("/var/log/wtmp"):
    ...     if entry.kind is RecordKind.USER_PROCESS:
    ...         print(entry.user, entry.line, entry.timestamp)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import (
    LAYOUTS,
    NATIVE,
    X32,
    X64,
    Layout,
    LayoutField,
    decode,
    encode,
    get_layout,
    text_from_bytes,
)
from .config import ReaderConfig
from .exceptions import (
    DecodeError,
    EncodeError,
    InvalidKindError,
    InvalidTimeError,
    ReadError,
    TruncatedRecordError,
    UtmpError,
)
from .models import ExitStatus, RecordKind, TimeVal, UtmpEntry
from .parser import (
    ParseResult,
    UtmpParser,
    parse,
    parse_from_bytes,
    parse_from_path,
    parse_from_reader,
)
from .utils import field_offsets, record_count, record_size

__all__ = [
    # Core API
    "UtmpEntry",
    "RecordKind",
    "ExitStatus",
    "TimeVal",
    "decode",
    "encode",
    "text_from_bytes",
    # Layouts
    "Layout",
    "LayoutField",
    "LAYOUTS",
    "NATIVE",
    "X32",
    "X64",
    "get_layout",
    # Parsing
    "UtmpParser",
    "ParseResult",
    "ReaderConfig",
    "parse",
    "parse_from_path",
    "parse_from_reader",
    "parse_from_bytes",
    # Exceptions
    "UtmpError",
    "DecodeError",
    "TruncatedRecordError",
    "InvalidKindError",
    "InvalidTimeError",
    "EncodeError",
    "ReadError",
    # Sizing
    "field_offsets",
    "record_count",
    "record_size",
    # Version
    "__version__",
]
