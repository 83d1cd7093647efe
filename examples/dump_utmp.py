#!/usr/bin/env python3
"""Print every record of a utmp/wtmp file.

Usage:
    python examples/dump_utmp.py /var/log/wtmp [native|x32|x64]
"""

from __future__ import annotations

import sys

from utmpkit import parse_from_path


def main() -> int:
    """Dump the file named on the command line."""
    if len(sys.argv) < 2:
        print(f"Usage: {sys.argv[0]} <path> [layout]", file=sys.stderr)
        return 2

    layout = sys.argv[2] if len(sys.argv) > 2 else "native"
    for entry in parse_from_path(sys.argv[1], layout):
        print(repr(entry))
    return 0


if __name__ == "__main__":
    sys.exit(main())
