"""Record models for utmpkit.

This module provides the UtmpEntry model and the field helpers describing the
fixed-capacity parts of a utmp record.
"""

from __future__ import annotations

from .entry import ExitStatus, RecordKind, TimeVal, UtmpEntry
from .fields import ADDR_WORDS, HOST_SIZE, ID_SIZE, LINE_SIZE, NAME_SIZE, FixedText, SignedInt

__all__ = [
    "UtmpEntry",
    "RecordKind",
    "ExitStatus",
    "TimeVal",
    "FixedText",
    "SignedInt",
    "LINE_SIZE",
    "ID_SIZE",
    "NAME_SIZE",
    "HOST_SIZE",
    "ADDR_WORDS",
]
