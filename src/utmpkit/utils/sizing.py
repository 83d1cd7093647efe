"""Record size calculation utilities.

This module provides functions to inspect record layouts and to work out how
many records a file of a given size holds, without reading it.
"""

from __future__ import annotations

from ..codec.layout import LayoutLike, get_layout


def record_size(layout: LayoutLike) -> int:
    """Size of one record in bytes.

    Example:
        >>> record_size("x32")
        384
        >>> record_size("x64")
        400
    """
    return get_layout(layout).record_size


def field_offsets(layout: LayoutLike) -> dict[str, tuple[int, int]]:
    """Get the byte offset and size of each named field of a layout.

    Padding runs are left out.

    Args:
        layout: Layout or layout name

    Returns:
        Dictionary mapping C member names to ``(offset, size)``

    Example:
        >>> field_offsets("x64")["ut_tv.tv_sec"]
        (344, 8)
    """
    return {
        field.name: (field.offset, field.size)
        for field in get_layout(layout).fields
        if field.name != "(padding)"
    }


def record_count(length: int, layout: LayoutLike) -> tuple[int, int]:
    """Split a byte length into whole records and leftover bytes.

    Args:
        length: Length of a file or buffer in bytes
        layout: Layout or layout name

    Returns:
        Tuple of (number of whole records, number of trailing bytes)

    Example:
        >>> record_count(800, "x32")
        (2, 32)
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    return divmod(length, get_layout(layout).record_size)
