#!/usr/bin/env python3
"""Basic usage example for utmpkit.

This example demonstrates:
1. Building records in memory
2. Decoding a single record block
3. Streaming records from a file-like object
4. Keeping going past a corrupt record
"""

from __future__ import annotations

import io

from utmpkit import (
    X32,
    RecordKind,
    TimeVal,
    UtmpEntry,
    UtmpParser,
    decode,
    encode,
    field_offsets,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("utmpkit Basic Usage Example")
    print("=" * 60)
    print()

    # Build a login and its logout
    print("1. Building a login/logout pair...")
    login = UtmpEntry(
        kind=RecordKind.USER_PROCESS,
        pid=1234,
        line=b"pts/0",
        user=b"alice",
        host=b"10.0.0.7",
        time=TimeVal(seconds=1700000000, microseconds=250000),
    )
    logout = UtmpEntry(kind=RecordKind.DEAD_PROCESS, pid=1234, line=b"pts/0")
    data = encode(login, X32) + encode(logout, X32)
    print(f"   {len(data)} bytes ({X32.record_size} bytes per x32 record)")
    print()

    # Where the fields live
    print("2. Layout of an x32 record...")
    for name, (offset, size) in field_offsets(X32).items():
        print(f"   {name:<24} offset {offset:>3}, {size:>3} bytes")
    print()

    # Decode a single block
    print("3. Decoding the first block...")
    entry = decode(data[: X32.record_size], X32)
    print(f"   {entry.kind.name}: user={entry.user!r} line={entry.line!r}")
    print(f"   logged in at {entry.timestamp.isoformat()}")
    print()

    # Stream the whole buffer
    print("4. Streaming records...")
    for entry in UtmpParser.from_reader(io.BytesIO(data), X32):
        print(f"   {entry.kind.name:<13} pid={entry.pid}")
    print()

    # Corrupt the first record's kind and keep going
    print("5. Reading past a corrupt record...")
    corrupt = b"\x63\x00\x00\x00" + data[4:]
    for result in UtmpParser.from_bytes(corrupt, X32).results():
        if isinstance(result, Exception):
            print(f"   skipped: {result}")
        else:
            print(f"   {result.kind.name:<13} pid={result.pid}")
    print()


if __name__ == "__main__":
    main()
