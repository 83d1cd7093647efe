"""Utility functions for utmpkit.

This module provides layout and size inspection helpers.
"""

from __future__ import annotations

from .sizing import field_offsets, record_count, record_size

__all__ = [
    "field_offsets",
    "record_count",
    "record_size",
]
