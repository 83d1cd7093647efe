"""Unit tests for reader configuration."""

from __future__ import annotations

import pytest

from utmpkit import ReaderConfig, RecordKind


class TestReaderConfig:
    """Test ReaderConfig validation."""

    def test_defaults(self) -> None:
        """Test default options."""
        config = ReaderConfig()

        assert config.layout == "native"
        assert config.fail_fast is True
        assert config.kinds is None

    @pytest.mark.parametrize("layout", ["native", "x32", "x64"])
    def test_layouts(self, layout: str) -> None:
        """Test every known layout name is accepted."""
        assert ReaderConfig(layout=layout).layout == layout

    def test_unknown_layout(self) -> None:
        """Test unknown layout names are rejected."""
        with pytest.raises(ValueError, match="layout must be one of"):
            ReaderConfig(layout="x86")

    def test_kinds_normalised(self) -> None:
        """Test kinds given as codes become a frozenset of RecordKind."""
        config = ReaderConfig(kinds=[7, RecordKind.DEAD_PROCESS])  # type: ignore[arg-type]
        assert config.kinds == frozenset({RecordKind.USER_PROCESS, RecordKind.DEAD_PROCESS})

    def test_unknown_kind(self) -> None:
        """Test unknown kind codes are rejected."""
        with pytest.raises(ValueError):
            ReaderConfig(kinds=frozenset({42}))  # type: ignore[arg-type]

    def test_empty_kinds(self) -> None:
        """Test an empty kind filter is rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            ReaderConfig(kinds=frozenset())
