"""utmp record encoder.

This module provides the encode() function that converts a UtmpEntry back to
a record block. It only produces bytes; nothing is written to disk.
"""

from __future__ import annotations

import struct

from ..exceptions import EncodeError
from ..models.entry import UtmpEntry
from ..models.fields import HOST_SIZE, ID_SIZE, LINE_SIZE, NAME_SIZE
from .layout import NATIVE, LayoutLike, get_layout


def encode(entry: UtmpEntry, layout: LayoutLike = NATIVE) -> bytes:
    """Encode a UtmpEntry to one record block.

    Text fields are NUL-padded to their capacity; padding and reserved bytes
    are zero.

    Args:
        entry: Entry to encode
        layout: Target layout (default: NATIVE)

    Returns:
        Record block of exactly ``layout.record_size`` bytes

    Raises:
        EncodeError: If a value does not fit its field in the target layout

    Example:
        >>> block = encode(UtmpEntry(kind=RecordKind.BOOT_TIME), X32)
        >>> len(block)
        384
    """
    layout = get_layout(layout)

    for name, text, capacity in (
        ("line", entry.line, LINE_SIZE),
        ("id", entry.id, ID_SIZE),
        ("user", entry.user, NAME_SIZE),
        ("host", entry.host, HOST_SIZE),
    ):
        if len(text) > capacity:
            raise EncodeError(f"Field {name}: {len(text)} bytes exceeds capacity of {capacity}")

    # Entries are validated against the widest layout, so session and time
    # values may still overflow the 32-bit words of x32.
    limit = 1 << (layout.word_size * 8 - 1)
    for name, value in (
        ("session", entry.session),
        ("time.seconds", entry.time.seconds),
        ("time.microseconds", entry.time.microseconds),
    ):
        if not -limit <= value < limit:
            raise EncodeError(
                f"Field {name}: value {value} does not fit the "
                f"{layout.word_size * 8}-bit words of the {layout.name} layout"
            )

    try:
        return layout.struct.pack(
            int(entry.kind),
            entry.pid,
            entry.line,
            entry.id,
            entry.user,
            entry.host,
            entry.exit_status.termination,
            entry.exit_status.exit,
            entry.session,
            entry.time.seconds,
            entry.time.microseconds,
            *entry.address,
        )
    except struct.error as e:
        raise EncodeError(f"Failed to encode {entry.kind.name} entry: {e}") from e
