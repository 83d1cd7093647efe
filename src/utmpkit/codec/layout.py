"""On-disk record layouts.

A utmp record is a C struct written verbatim, so its size and the offsets of
its integer fields depend on the ABI of the program that wrote it. All layouts
share the same text field capacities; they differ only in the width of
``ut_session`` and the two ``ut_tv`` words.
"""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass, field, replace
from typing import Union

from ..models.fields import ADDR_WORDS, HOST_SIZE, ID_SIZE, LINE_SIZE, NAME_SIZE


@dataclass(frozen=True)
class LayoutField:
    """Position of one field (or padding run) inside a record.

    Attributes:
        name: C member name, or "(padding)" for alignment bytes
        offset: Byte offset from the start of the record
        size: Size in bytes
    """

    name: str
    offset: int
    size: int


@dataclass(frozen=True)
class Layout:
    """Descriptor for one record layout variant.

    Attributes:
        name: Variant name ("native", "x32" or "x64")
        word_size: Width in bytes of ut_session, ut_tv.tv_sec and ut_tv.tv_usec
        fields: Every field of the record in on-disk order, padding included
        struct: Compiled native-byte-order struct for the whole record
    """

    name: str
    word_size: int
    fields: tuple[LayoutField, ...]
    struct: struct.Struct = field(compare=False, repr=False)

    @property
    def record_size(self) -> int:
        """Size of one record in bytes."""
        return self.struct.size


def _build_layout(name: str, word: str) -> Layout:
    members = [
        ("ut_type", "h"),
        ("(padding)", "2x"),
        ("ut_pid", "i"),
        ("ut_line", f"{LINE_SIZE}s"),
        ("ut_id", f"{ID_SIZE}s"),
        ("ut_user", f"{NAME_SIZE}s"),
        ("ut_host", f"{HOST_SIZE}s"),
        ("ut_exit.e_termination", "h"),
        ("ut_exit.e_exit", "h"),
        ("ut_session", word),
        ("ut_tv.tv_sec", word),
        ("ut_tv.tv_usec", word),
        ("ut_addr_v6", f"{ADDR_WORDS}i"),
        ("__unused", "20x"),
    ]

    # "=" gives native byte order with no implicit alignment, so every
    # padding run the C compiler would insert is spelled out.
    fmt = "="
    fields = []
    for member, code in members:
        offset = struct.calcsize(fmt)
        fmt += code
        fields.append(LayoutField(member, offset, struct.calcsize(fmt) - offset))

    word_size = struct.calcsize("=" + word)
    tail = -struct.calcsize(fmt) % word_size
    if tail:
        fields.append(LayoutField("(padding)", struct.calcsize(fmt), tail))
        fmt += f"{tail}x"

    return Layout(name=name, word_size=word_size, fields=tuple(fields), struct=struct.Struct(fmt))


#: 32-bit session and time words (384-byte records)
X32 = _build_layout("x32", "i")
#: 64-bit session and time words (400-byte records)
X64 = _build_layout("x64", "q")


def _native_layout() -> Layout:
    # glibc keeps ut_session and ut_tv at 32 bits on every Linux word size
    # so that 32- and 64-bit programs can share the same files.
    if sys.platform.startswith("linux"):
        base = X32
    else:
        base = X64 if struct.calcsize("l") == 8 else X32
    return replace(base, name="native")


#: Layout written by the host's C library
NATIVE = _native_layout()

LAYOUTS: dict[str, Layout] = {layout.name: layout for layout in (NATIVE, X32, X64)}

LayoutLike = Union[Layout, str]


def get_layout(layout: LayoutLike) -> Layout:
    """Resolve a layout name or instance to a Layout.

    Args:
        layout: A Layout, or one of "native", "x32", "x64"

    Returns:
        The matching Layout

    Raises:
        ValueError: If the name is not a known layout
    """
    if isinstance(layout, Layout):
        return layout
    try:
        return LAYOUTS[layout]
    except (KeyError, TypeError):
        raise ValueError(
            f"Unknown layout: {layout!r}. Must be one of {', '.join(LAYOUTS)}"
        ) from None
