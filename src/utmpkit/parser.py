"""Streaming utmp file parser.

This module provides UtmpParser, a pull-based iterator that reads one record at
a time from a byte stream and decodes it, plus helpers that collect a whole
file into a list.

A parser moves through three states: open, advancing and done. Each pull reads
one record; a short read at end of stream is reported once as a
TruncatedRecordError and a failing read once as a ReadError, after which the
parser is done. An InvalidKindError only concerns the record it was raised for,
so the caller may keep pulling after catching it.
"""

from __future__ import annotations

import io
import logging
import os
from typing import BinaryIO, Iterator, Union

from .codec.decoder import decode
from .codec.layout import NATIVE, Layout, LayoutLike, get_layout
from .config import ReaderConfig
from .exceptions import ReadError, TruncatedRecordError, UtmpError
from .models.entry import UtmpEntry

logger = logging.getLogger(__name__)

ParseResult = Union[UtmpEntry, UtmpError]
PathLike = Union[str, "os.PathLike[str]"]


class UtmpParser:
    """Lazy iterator over the records of a utmp/wtmp stream.

    Iterating yields UtmpEntry values and raises the first error encountered.
    Use results() to receive errors in place instead.

    Args:
        source: Readable binary stream positioned at a record boundary
        layout: Layout the records were written with (default: NATIVE)
        close_source: Close ``source`` once the parser is done or closed

    Examples:
        ```python
        from utmpkit import UtmpParser

        with UtmpParser.from_path("/var/log/wtmp", layout="x32") as parser:
            for entry in parser:
                print(entry.kind.name, entry.user)

        # Keep going past corrupt records
        for result in UtmpParser.from_path("/var/log/wtmp").results():
            if isinstance(result, Exception):
                print(f"bad record: {result}")
        ```
    """

    def __init__(
        self, source: BinaryIO, layout: LayoutLike = NATIVE, *, close_source: bool = False
    ) -> None:
        self._source = source
        self._layout = get_layout(layout)
        self._close_source = close_source
        self._done = False
        self._count = 0

        logger.debug(
            "Reading %s records (%d bytes each) from %r",
            self._layout.name,
            self._layout.record_size,
            source,
        )

    @classmethod
    def from_path(cls, path: PathLike, layout: LayoutLike = NATIVE) -> UtmpParser:
        """Open ``path`` and parse it. The parser owns and closes the file.

        Raises:
            OSError: If the file cannot be opened
        """
        layout = get_layout(layout)
        return cls(open(path, "rb"), layout, close_source=True)

    @classmethod
    def from_reader(cls, reader: BinaryIO, layout: LayoutLike = NATIVE) -> UtmpParser:
        """Parse an already-open binary stream. The caller keeps ownership of it."""
        return cls(reader, layout)

    @classmethod
    def from_bytes(cls, data: bytes, layout: LayoutLike = NATIVE) -> UtmpParser:
        """Parse an in-memory buffer."""
        return cls(io.BytesIO(data), layout, close_source=True)

    @property
    def layout(self) -> Layout:
        """Layout used to decode records."""
        return self._layout

    @property
    def done(self) -> bool:
        """True once the stream is exhausted, broken, or the parser was closed."""
        return self._done

    def __iter__(self) -> UtmpParser:
        return self

    def __next__(self) -> UtmpEntry:
        if self._done:
            raise StopIteration

        try:
            block = self._read_record()
        except OSError as e:
            logger.warning("Read failed after %d records: %s", self._count, e)
            self._finish()
            raise ReadError(e) from e

        if not block:
            self._finish()
            raise StopIteration

        size = self._layout.record_size
        if len(block) < size:
            logger.warning(
                "Trailing partial record after %d records: %d of %d bytes",
                self._count,
                len(block),
                size,
            )
            self._finish()
            raise TruncatedRecordError(size, len(block))

        self._count += 1
        return decode(block, self._layout)

    def _read_record(self) -> bytes:
        # A single read() may return less than asked for (pipes, raw streams),
        # so keep reading until the record is complete or the stream ends.
        remaining = self._layout.record_size
        chunks = []
        while remaining:
            chunk = self._source.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def _finish(self) -> None:
        if not self._done:
            logger.debug("Finished after %d records", self._count)
        self._done = True
        if self._close_source:
            self._source.close()

    def results(self) -> Iterator[ParseResult]:
        """Yield every remaining record as an entry or the error it produced.

        Never stops early: an invalid record yields its error and reading
        continues with the next one until the stream is exhausted.
        """
        while True:
            try:
                entry = next(self)
            except StopIteration:
                return
            except UtmpError as e:
                yield e
            else:
                yield entry

    def collect(self) -> list[UtmpEntry]:
        """Read all remaining records, raising the first error encountered."""
        return list(self)

    def collect_results(self) -> list[ParseResult]:
        """Read all remaining records, keeping errors in place (see results())."""
        return list(self.results())

    def close(self) -> None:
        """Stop reading. Closes the source if the parser owns it."""
        self._finish()

    def __enter__(self) -> UtmpParser:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def parse_from_path(path: PathLike, layout: LayoutLike = NATIVE) -> list[UtmpEntry]:
    """Parse every record of the file at ``path``.

    Args:
        path: Path of a utmp/wtmp/btmp file
        layout: Layout the file was written with (default: NATIVE)

    Returns:
        Entries in file order

    Raises:
        OSError: If the file cannot be opened
        UtmpError: On the first record that fails to read or decode

    Example:
        >>> entries = parse_from_path("/var/run/utmp")
    """
    with UtmpParser.from_path(path, layout) as parser:
        return parser.collect()


def parse_from_reader(reader: BinaryIO, layout: LayoutLike = NATIVE) -> list[UtmpEntry]:
    """Parse every record of an open binary stream (which is left open)."""
    return UtmpParser.from_reader(reader, layout).collect()


def parse_from_bytes(data: bytes, layout: LayoutLike = NATIVE) -> list[UtmpEntry]:
    """Parse every record of an in-memory buffer."""
    return UtmpParser.from_bytes(data, layout).collect()


def parse(source: PathLike | BinaryIO, config: ReaderConfig | None = None) -> list[ParseResult]:
    """Parse a path or stream according to a ReaderConfig.

    With ``fail_fast`` (the default) the first error is raised and the result
    holds entries only; otherwise errors are returned in place.

    Args:
        source: Path to open, or an open binary stream (left open)
        config: Reader options (default: ReaderConfig())

    Returns:
        Entries (and, without fail_fast, errors) in file order
    """
    config = config or ReaderConfig()

    if isinstance(source, (str, os.PathLike)):
        parser = UtmpParser.from_path(source, config.layout)
    else:
        parser = UtmpParser.from_reader(source, config.layout)

    with parser:
        results: Iterator[ParseResult] = iter(parser) if config.fail_fast else parser.results()
        return [
            result
            for result in results
            if config.kinds is None
            or not isinstance(result, UtmpEntry)
            or result.kind in config.kinds
        ]
