"""Offset/length window validation and slicing.

Windows are ``(start, exclusive end)`` pairs. The end bound is checked
against the size of the original collection when the window is
configured, while slicing runs later on the filtered records. A filtered
subset shorter than the window therefore yields a shorter or empty slice.
"""

from __future__ import annotations

from typing import Sequence

from core.errors import InvalidWindowError
from core.types import Record, WindowSpec


def build_window(offset: object, length: object, collection_size: int) -> WindowSpec:
    """Validate window bounds and build a window spec.

    Args:
        offset: Inclusive start position.
        length: Exclusive end position.
        collection_size: Record count of the original collection.

    Returns:
        Validated window spec.

    Raises:
        InvalidWindowError: If either bound is not a non-negative integer,
            offset exceeds length, or length exceeds the collection size.
    """
    checked_offset = _require_non_negative_int(offset, "offset")
    checked_length = _require_non_negative_int(length, "length")
    if checked_offset > checked_length:
        raise InvalidWindowError(
            f"Window offset {checked_offset} must be <= length {checked_length}."
        )
    if checked_length > collection_size:
        raise InvalidWindowError(
            f"Window length {checked_length} must be <= collection size {collection_size}."
        )
    return WindowSpec(offset=checked_offset, length=checked_length)


def slice_records(records: Sequence[Record], window_spec: WindowSpec | None) -> list[Record]:
    """Extract the configured window from records.

    Args:
        records: Records to slice, usually already filtered.
        window_spec: Active window, or None for all records.

    Returns:
        Records in positions ``[offset, length)``.
    """
    if window_spec is None:
        return list(records)
    return list(records[window_spec.offset : window_spec.length])


def _require_non_negative_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidWindowError(
            f"Window {field_name} must be an integer, got {type(value).__name__} {value!r}."
        )
    if value < 0:
        raise InvalidWindowError(f"Window {field_name} must be non-negative, got {value}.")
    return value
