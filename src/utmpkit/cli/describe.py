"""Layout description CLI command."""

from __future__ import annotations

from ..codec.layout import LayoutLike, get_layout


def describe_layout(layout: LayoutLike) -> None:
    """Print the field table of a record layout.

    Args:
        layout: Layout or layout name to describe
    """
    layout = get_layout(layout)

    print(f"{'=' * 19} {layout.name} layout {'=' * 19}")
    print(f"Record size: {layout.record_size} bytes")
    print(f"Session and time words: {layout.word_size * 8} bits")
    print()

    print(f"{'-' * 27} Fields {'-' * 27}")
    for i, field in enumerate(layout.fields, 1):
        field_desc = f"{i:>2}. {field.name}"
        size_desc = f"{field.size} bytes @ {field.offset}"
        dots = "." * max(1, 60 - len(field_desc) - len(size_desc))
        print(f"    {field_desc}{dots}{size_desc}")

    print()
