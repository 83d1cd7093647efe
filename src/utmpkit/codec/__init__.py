"""Binary record codec for utmpkit.

This module provides the record layouts and the functions converting between
record blocks and UtmpEntry values.
"""

from __future__ import annotations

from .decoder import decode, text_from_bytes
from .encoder import encode
from .layout import LAYOUTS, NATIVE, X32, X64, Layout, LayoutField, LayoutLike, get_layout

__all__ = [
    "decode",
    "encode",
    "text_from_bytes",
    "Layout",
    "LayoutField",
    "LayoutLike",
    "LAYOUTS",
    "NATIVE",
    "X32",
    "X64",
    "get_layout",
]
