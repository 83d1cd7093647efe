"""Record dump CLI command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from ..config import ReaderConfig
from ..exceptions import InvalidTimeError, UtmpError
from ..models.entry import UtmpEntry
from ..parser import parse

logger = logging.getLogger(__name__)


def format_entry(entry: UtmpEntry) -> str:
    """Render an entry as a single human-readable line."""
    try:
        when = entry.timestamp.isoformat()
    except InvalidTimeError:
        when = f"{entry.time.seconds}.{entry.time.microseconds:06d}?"

    def text(value: bytes) -> str:
        return value.decode("utf-8", "backslashreplace")

    return (
        f"{entry.kind.name:<13} pid={entry.pid} line={text(entry.line)!r} "
        f"id={text(entry.id)!r} user={text(entry.user)!r} host={text(entry.host)!r} "
        f"exit={entry.exit_status.termination}/{entry.exit_status.exit} "
        f"session={entry.session} time={when}"
    )


def dump_file(
    file_path: Path,
    config: ReaderConfig,
    *,
    json_lines: bool = False,
    out: TextIO = sys.stdout,
) -> int:
    """Print every record of a utmp file, one per line.

    Args:
        file_path: Path to a utmp/wtmp/btmp file
        config: Reader options
        json_lines: Print each entry as a JSON object instead of text
        out: Stream to print entries to

    Returns:
        Number of bad records reported (always 0 with fail_fast, which raises)

    Raises:
        UtmpError: On the first bad record when config.fail_fast is set
    """
    errors = 0
    for index, result in enumerate(parse(file_path, config)):
        if isinstance(result, UtmpError):
            errors += 1
            print(f"record {index}: {result}", file=sys.stderr)
            continue

        if json_lines:
            print(result.model_dump_json(), file=out)
        else:
            print(format_entry(result), file=out)

    logger.debug("Dumped %s with %d bad records", file_path, errors)
    return errors
