"""Configuration for reading utmp files.

This module provides the ReaderConfig dataclass bundling the choices a caller
makes when reading a file: which layout it was written with, whether to stop at
the first bad record, and which record kinds to keep.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .codec.layout import LAYOUTS
from .models.entry import RecordKind


@dataclass
class ReaderConfig:
    """Options for reading a utmp/wtmp file.

    Attributes:
        layout: Record layout name, one of "native", "x32", "x64" (default "native").
            Files written by 64-bit programs on platforms without glibc's 32-bit
            compatibility layout use "x64".

        fail_fast: Stop at, and raise, the first bad record (default True).
            When False, bad records are reported in place and reading continues
            with the next record.

        kinds: Only keep entries of these kinds (default None keeps all).
            Filtering applies to decoded entries only; errors are never filtered.

    Examples:
        ```python
        from utmpkit import ReaderConfig, RecordKind, parse

        # Logins only, tolerating corrupt records
        config = ReaderConfig(
            layout="x32",
            fail_fast=False,
            kinds=frozenset({RecordKind.USER_PROCESS}),
        )
        results = parse("/var/log/wtmp", config)
        ```
    """

    layout: str = "native"
    fail_fast: bool = True
    kinds: Optional[frozenset[RecordKind]] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.layout not in LAYOUTS:
            raise ValueError(f"layout must be one of {', '.join(LAYOUTS)}, got {self.layout!r}")

        if self.kinds is not None:
            self.kinds = frozenset(RecordKind(kind) for kind in self.kinds)
            if not self.kinds:
                raise ValueError("kinds must not be empty (use None to keep all kinds)")
