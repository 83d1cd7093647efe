"""Decoded utmp record types.

This module provides the UtmpEntry model produced by the codec together with
its component types. Entries are immutable value objects: they are built once
from a single record block and carry no reference to the stream they came from.
"""

from __future__ import annotations

import enum
from datetime import datetime, timedelta, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, field_serializer

from ..exceptions import InvalidTimeError
from .fields import HOST_SIZE, ID_SIZE, LINE_SIZE, NAME_SIZE, FixedText, SignedInt

Int16 = Annotated[int, SignedInt(bits=16)]
Int32 = Annotated[int, SignedInt(bits=32)]
Int64 = Annotated[int, SignedInt(bits=64)]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class RecordKind(enum.IntEnum):
    """Kind of event a record describes (``ut_type``)."""

    EMPTY = 0  # Record does not contain valid info
    RUN_LVL = 1  # Change in system run-level
    BOOT_TIME = 2  # Time of system boot
    NEW_TIME = 3  # Time after system clock change
    OLD_TIME = 4  # Time before system clock change
    INIT_PROCESS = 5  # Process spawned by init
    LOGIN_PROCESS = 6  # Session leader process for user login
    USER_PROCESS = 7  # Normal process
    DEAD_PROCESS = 8  # Terminated process
    ACCOUNTING = 9  # Not implemented by any known writer


class _Frozen(BaseModel):
    model_config = ConfigDict(
        strict=False,
        frozen=True,
        extra="forbid",
    )


class ExitStatus(_Frozen):
    """Exit status of a process marked as DEAD_PROCESS (``ut_exit``)."""

    termination: Int16 = 0
    exit: Int16 = 0


class TimeVal(_Frozen):
    """Time the entry was made (``ut_tv``).

    Both components are stored at full width; their on-disk size depends on the
    layout the record was read with.
    """

    seconds: Int64 = 0
    microseconds: Int64 = 0

    def to_datetime(self) -> datetime:
        """Convert to a timezone-aware UTC datetime.

        Raises:
            InvalidTimeError: If microseconds is outside 0..999999 or the value
                falls outside the range datetime can represent
        """
        if not 0 <= self.microseconds < 1_000_000:
            raise InvalidTimeError(self.seconds, self.microseconds)
        try:
            return _EPOCH + timedelta(seconds=self.seconds, microseconds=self.microseconds)
        except OverflowError as e:
            raise InvalidTimeError(self.seconds, self.microseconds) from e


class UtmpEntry(_Frozen):
    """One decoded utmp/wtmp record.

    Every field of the on-disk record is present whatever the ``kind``; which of
    them carry meaning depends on the kind (e.g. ``host`` holds the kernel
    version for RUN_LVL records and the remote host for USER_PROCESS ones).

    Text fields (``line``, ``id``, ``user``, ``host``) hold the raw bytes before
    the first NUL, or the whole field when it has no terminator.

    ``address`` holds the four raw ``ut_addr_v6`` words. An IPv4 address uses
    only the first word; the record does not say which form is in use.

    Example:
        >>> entry = UtmpEntry(kind=RecordKind.USER_PROCESS, pid=1234, user=b"alice")
        >>> entry.user
        b'alice'
    """

    kind: RecordKind
    pid: Int32 = 0
    line: bytes = FixedText(capacity=LINE_SIZE, default=b"")
    id: bytes = FixedText(capacity=ID_SIZE, default=b"")
    user: bytes = FixedText(capacity=NAME_SIZE, default=b"")
    host: bytes = FixedText(capacity=HOST_SIZE, default=b"")
    exit_status: ExitStatus = ExitStatus()
    session: Int64 = 0
    time: TimeVal = TimeVal()
    address: tuple[Int32, Int32, Int32, Int32] = (0, 0, 0, 0)

    @property
    def timestamp(self) -> datetime:
        """The entry time as a UTC datetime (see TimeVal.to_datetime)."""
        return self.time.to_datetime()

    @field_serializer("line", "id", "user", "host", when_used="json")
    def serialize_text(self, value: bytes) -> str:
        return value.decode("utf-8", "backslashreplace")
