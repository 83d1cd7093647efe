"""Main CLI entry point for utmpkit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.describe import describe_layout
from ..cli.dump import dump_file
from ..codec.layout import LAYOUTS
from ..config import ReaderConfig
from ..exceptions import UtmpError


def main() -> int:
    """Main entry point for the utmpkit CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="utmpkit: utmp/wtmp session log decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  utmpkit --dump /var/log/wtmp              Print every record
  utmpkit --dump wtmp.old --layout x64      Read a file written with 64-bit time words
  utmpkit --dump /var/run/utmp --json       Print records as JSON lines
  utmpkit --describe x32                    Show the field offsets of a layout
        """,
    )

    parser.add_argument(
        "--dump",
        metavar="FILE",
        type=str,
        help="Decode FILE and print one record per line",
    )

    parser.add_argument(
        "--describe",
        metavar="LAYOUT",
        choices=sorted(LAYOUTS),
        help="Show field offsets and sizes of a record layout",
    )

    parser.add_argument(
        "--layout",
        choices=sorted(LAYOUTS),
        default="native",
        help="Record layout of FILE (default: native)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print records as JSON lines",
    )

    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Report bad records on stderr and continue",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"utmpkit {__version__}",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.describe:
        describe_layout(args.describe)
        return 0

    # Handle --dump
    if args.dump:
        file_path = Path(args.dump)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        config = ReaderConfig(layout=args.layout, fail_fast=not args.keep_going)
        try:
            errors = dump_file(file_path, config, json_lines=args.json)
        except (OSError, UtmpError) as e:
            print(f"Error reading {file_path}: {e}", file=sys.stderr)
            return 1
        return 1 if errors else 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
