"""utmp record decoder.

This module provides the decode() function that converts one record-sized
block of bytes into a UtmpEntry.
"""

from __future__ import annotations

from ..exceptions import DecodeError, InvalidKindError, TruncatedRecordError
from ..models.entry import ExitStatus, RecordKind, TimeVal, UtmpEntry
from .layout import NATIVE, LayoutLike, get_layout


def text_from_bytes(raw: bytes) -> bytes:
    """Return the bytes of a fixed-capacity text field up to its first NUL.

    A field that exactly fills its capacity has no terminator, in which case
    the whole field is returned. Bytes after the first NUL are ignored.

    Example:
        >>> text_from_bytes(b"tty1\\x00\\x00junk")
        b'tty1'
        >>> text_from_bytes(b"abcd")
        b'abcd'
    """
    end = raw.find(b"\x00")
    return raw if end < 0 else raw[:end]


def decode(block: bytes, layout: LayoutLike = NATIVE) -> UtmpEntry:
    """Decode one record block to a UtmpEntry.

    Integers are read in the host's byte order, which is the byte order of the
    machine that wrote the file in every real-world deployment.

    Args:
        block: Exactly one record's worth of bytes
        layout: Layout the block was written with (default: NATIVE)

    Returns:
        Decoded entry

    Raises:
        TruncatedRecordError: If block is shorter than one record
        InvalidKindError: If the record kind code is unknown
        DecodeError: If block is longer than one record

    Examples:
        ```python
        from utmpkit import X64, decode

        with open("/var/log/wtmp", "rb") as f:
            entry = decode(f.read(X64.record_size), X64)
        print(entry.kind.name, entry.user)
        ```
    """
    layout = get_layout(layout)
    size = layout.record_size

    if len(block) < size:
        raise TruncatedRecordError(size, len(block))
    if len(block) > size:
        raise DecodeError(
            f"Record block too long for {layout.name} layout: "
            f"expected {size} bytes, got {len(block)} bytes"
        )

    (
        code,
        pid,
        line,
        ut_id,
        user,
        host,
        termination,
        exit_code,
        session,
        seconds,
        microseconds,
        *address,
    ) = layout.struct.unpack(block)

    try:
        kind = RecordKind(code)
    except ValueError:
        raise InvalidKindError(code) from None

    return UtmpEntry(
        kind=kind,
        pid=pid,
        line=text_from_bytes(line),
        id=text_from_bytes(ut_id),
        user=text_from_bytes(user),
        host=text_from_bytes(host),
        exit_status=ExitStatus(termination=termination, exit=exit_code),
        session=session,
        time=TimeVal(seconds=seconds, microseconds=microseconds),
        address=tuple(address),
    )
