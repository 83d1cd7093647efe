"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from utmpkit import NATIVE, ExitStatus, RecordKind, TimeVal, UtmpEntry, encode


@pytest.fixture
def login_entry() -> UtmpEntry:
    """A user login record."""
    return UtmpEntry(
        kind=RecordKind.USER_PROCESS,
        pid=1234,
        line=b"pts/0",
        id=b"ts/0",
        user=b"alice",
        host=b"192.168.1.20",
        session=1230,
        time=TimeVal(seconds=1581199675, microseconds=609322),
        address=(0x1401A8C0, 0, 0, 0),
    )


@pytest.fixture
def logout_entry() -> UtmpEntry:
    """The logout record matching login_entry."""
    return UtmpEntry(
        kind=RecordKind.DEAD_PROCESS,
        pid=1234,
        line=b"pts/0",
        id=b"ts/0",
        exit_status=ExitStatus(termination=0, exit=0),
        time=TimeVal(seconds=1581203275, microseconds=1),
    )


@pytest.fixture
def native_login_session(login_entry: UtmpEntry, logout_entry: UtmpEntry) -> bytes:
    """Two native-layout records: a login followed by its logout."""
    return encode(login_entry, NATIVE) + encode(logout_entry, NATIVE)
