"""Field type helpers and utilities.

This module provides convenience functions for declaring the fixed-capacity
fields of a utmp record on a Pydantic model.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

#: Capacity of ``ut_line`` in bytes
LINE_SIZE = 32
#: Capacity of ``ut_id`` in bytes
ID_SIZE = 4
#: Capacity of ``ut_user`` in bytes
NAME_SIZE = 32
#: Capacity of ``ut_host`` in bytes
HOST_SIZE = 256
#: Number of 32-bit words in ``ut_addr_v6``
ADDR_WORDS = 4


def FixedText(*, capacity: int, **kwargs: Any) -> FieldInfo:
    """Create a fixed-capacity text field.

    The value is the raw bytes of the field up to its first NUL, so it may be
    anything from empty to exactly ``capacity`` bytes long.

    Args:
        capacity: On-disk capacity of the field in bytes
        **kwargs: Additional Field() arguments

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Record(BaseModel):
        ...     user: bytes = FixedText(capacity=NAME_SIZE)
    """
    return cast(
        FieldInfo,
        Field(max_length=capacity, json_schema_extra={"capacity": capacity}, **kwargs),
    )


def SignedInt(*, bits: int, **kwargs: Any) -> FieldInfo:
    """Create a signed integer field bounded to ``bits`` bits.

    Args:
        bits: Width of the two's complement integer (16, 32 or 64)
        **kwargs: Additional Field() arguments

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.
    """
    limit = 1 << (bits - 1)
    return cast(
        FieldInfo,
        Field(ge=-limit, le=limit - 1, json_schema_extra={"bits": bits}, **kwargs),
    )
