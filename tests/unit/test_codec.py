"""Unit tests for record decoding and encoding."""

from __future__ import annotations

import pytest

from utmpkit import (
    NATIVE,
    X32,
    X64,
    DecodeError,
    EncodeError,
    InvalidKindError,
    Layout,
    RecordKind,
    TruncatedRecordError,
    UtmpEntry,
    decode,
    encode,
    text_from_bytes,
)


def raw_record(
    layout: Layout,
    kind: int = RecordKind.USER_PROCESS,
    pid: int = 0,
    line: bytes = b"",
    ut_id: bytes = b"",
    user: bytes = b"",
    host: bytes = b"",
    termination: int = 0,
    exit_code: int = 0,
    session: int = 0,
    seconds: int = 0,
    microseconds: int = 0,
    address: tuple[int, int, int, int] = (0, 0, 0, 0),
) -> bytes:
    """Build a record block straight from the layout struct."""
    return layout.struct.pack(
        kind,
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
    )


class TestDecode:
    """Test decoding of well-formed records."""

    @pytest.mark.parametrize("layout", [NATIVE, X32, X64], ids=lambda layout: layout.name)
    def test_user_process(self, layout: Layout) -> None:
        """Test every field of a login record."""
        block = raw_record(
            layout,
            pid=2555,
            line=b":1",
            ut_id=b":1",
            user=b"upsuper",
            host=b":1",
            session=28786,
            seconds=1581199675,
            microseconds=609322,
            address=(1, 2, 3, 4),
        )
        entry = decode(block, layout)

        assert entry.kind is RecordKind.USER_PROCESS
        assert entry.pid == 2555
        assert entry.line == b":1"
        assert entry.id == b":1"
        assert entry.user == b"upsuper"
        assert entry.host == b":1"
        assert entry.session == 28786
        assert entry.time.seconds == 1581199675
        assert entry.time.microseconds == 609322
        assert entry.address == (1, 2, 3, 4)

    def test_dead_process_exit_status(self) -> None:
        """Test exit status words are decoded."""
        block = raw_record(X32, kind=RecordKind.DEAD_PROCESS, termination=9, exit_code=-1)
        entry = decode(block, X32)

        assert entry.kind is RecordKind.DEAD_PROCESS
        assert entry.exit_status.termination == 9
        assert entry.exit_status.exit == -1

    @pytest.mark.parametrize("kind", list(RecordKind))
    def test_every_known_kind(self, kind: RecordKind) -> None:
        """Test all ten kind codes decode."""
        assert decode(raw_record(X64, kind=kind), X64).kind is kind

    def test_x64_wide_words(self) -> None:
        """Test 64-bit session and time values survive decoding."""
        block = raw_record(X64, session=2**40, seconds=2**33, microseconds=999999)
        entry = decode(block, X64)

        assert entry.session == 2**40
        assert entry.time.seconds == 2**33

    def test_layout_by_name(self) -> None:
        """Test layouts can be selected by name."""
        block = raw_record(X64, pid=7)
        assert decode(block, "x64").pid == 7

    def test_same_block_differs_between_layouts(self) -> None:
        """Test time words land at different offsets in x32 and x64."""
        block = raw_record(X64, seconds=1000)
        with pytest.raises(DecodeError):
            decode(block, X32)


class TestTextFields:
    """Test fixed-capacity text field handling."""

    def test_stops_at_first_nul(self) -> None:
        """Test bytes after the first NUL are ignored."""
        block = raw_record(X32, user=b"bob\x00garbage")
        assert decode(block, X32).user == b"bob"

    def test_full_capacity_without_terminator(self) -> None:
        """Test a field with no NUL decodes to its whole capacity."""
        block = raw_record(X32, user=b"u" * 32, host=b"h" * 256, ut_id=b"abcd")
        entry = decode(block, X32)

        assert entry.user == b"u" * 32
        assert entry.host == b"h" * 256
        assert entry.id == b"abcd"

    def test_does_not_read_into_next_field(self) -> None:
        """Test an unterminated field stops at its capacity."""
        block = raw_record(X32, line=b"l" * 32, ut_id=b"IDID")
        assert decode(block, X32).line == b"l" * 32

    def test_invalid_utf8_is_kept_raw(self) -> None:
        """Test text bytes are not validated as any encoding."""
        block = raw_record(X32, host=b"\xff\xfe")
        assert decode(block, X32).host == b"\xff\xfe"

    def test_text_from_bytes(self) -> None:
        """Test the text conversion helper."""
        assert text_from_bytes(b"tty1\x00\x00") == b"tty1"
        assert text_from_bytes(b"\x00tty1") == b""
        assert text_from_bytes(b"abcd") == b"abcd"
        assert text_from_bytes(b"") == b""


class TestDecodeErrors:
    """Test decoding error handling."""

    @pytest.mark.parametrize("code", [10, 11, -1, 0x100, 32767])
    def test_invalid_kind(self, code: int) -> None:
        """Test unknown kind codes are rejected."""
        with pytest.raises(InvalidKindError, match="Invalid record kind") as exc_info:
            decode(raw_record(X32, kind=code), X32)

        assert exc_info.value.code == code

    def test_truncated_block(self) -> None:
        """Test short blocks are rejected."""
        with pytest.raises(TruncatedRecordError, match="[Tt]runcated") as exc_info:
            decode(b"\x07\x00" * 10, X32)

        assert exc_info.value.expected == 384
        assert exc_info.value.actual == 20

    def test_empty_block(self) -> None:
        """Test an empty block is truncated."""
        with pytest.raises(TruncatedRecordError):
            decode(b"", X64)

    def test_oversized_block(self) -> None:
        """Test a block longer than one record is rejected."""
        with pytest.raises(DecodeError, match="too long"):
            decode(raw_record(X32) + b"\x00", X32)

    def test_truncation_checked_before_kind(self) -> None:
        """Test a short block with a bad kind reports truncation."""
        with pytest.raises(TruncatedRecordError):
            decode(b"\xff\xff\x00\x00", X32)

    def test_unknown_layout(self) -> None:
        """Test an unknown layout name is rejected."""
        with pytest.raises(ValueError, match="Unknown layout"):
            decode(raw_record(X32), "x128")


class TestEncode:
    """Test in-memory encoding."""

    @pytest.mark.parametrize("layout", [NATIVE, X32, X64], ids=lambda layout: layout.name)
    def test_encode_decode_roundtrip(self, layout: Layout, login_entry: UtmpEntry) -> None:
        """Test encoding then decoding gives back the same entry."""
        block = encode(login_entry, layout)

        assert len(block) == layout.record_size
        assert decode(block, layout) == login_entry

    def test_encode_matches_struct_layout(self) -> None:
        """Test encode produces the same bytes as a hand-built record."""
        entry = UtmpEntry(kind=RecordKind.LOGIN_PROCESS, pid=28965, line=b"tty3", id=b"3")
        expected = raw_record(
            X64, kind=RecordKind.LOGIN_PROCESS, pid=28965, line=b"tty3", ut_id=b"3"
        )
        assert encode(entry, X64) == expected

    def test_session_overflows_x32(self) -> None:
        """Test 64-bit values do not fit x32 words."""
        entry = UtmpEntry(kind=RecordKind.USER_PROCESS, session=2**40)

        with pytest.raises(EncodeError, match="does not fit"):
            encode(entry, X32)

        assert len(encode(entry, X64)) == 400

    def test_text_too_long(self) -> None:
        """Test over-capacity text is rejected."""
        # Use model_construct to bypass Pydantic validation
        entry = UtmpEntry.model_construct(kind=RecordKind.USER_PROCESS, user=b"x" * 33)

        with pytest.raises(EncodeError, match="exceeds capacity"):
            encode(entry, X32)
