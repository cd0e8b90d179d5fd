"""Stable single-key record sorting.

This module orders records by one field using the natural ordering of
its value. Mixed value kinds follow a fixed rank so the order is total:
absent or null values first, then NaN, booleans, numbers, and strings.
"""

from __future__ import annotations

import math
from typing import Sequence

from core.constants import DESCENDING
from core.types import Record, SortSpec

_ABSENT_RANK = 0
_NAN_RANK = 1
_BOOL_RANK = 2
_NUMBER_RANK = 3
_STRING_RANK = 4


def sort_records(records: Sequence[Record], sort_spec: SortSpec | None) -> list[Record]:
    """Sort records by the configured field and direction.

    Ties keep their input order in both directions. ``DESC`` reverses the
    comparison only, so absent values move to the end.

    Args:
        records: Records to order.
        sort_spec: Active sort configuration, or None for input order.

    Returns:
        Ordered records list.
    """
    if sort_spec is None:
        return list(records)
    return sorted(
        records,
        key=lambda record: _sort_key(record.get(sort_spec.key)),
        reverse=sort_spec.direction == DESCENDING,
    )


def _sort_key(value: object) -> tuple[int, object]:
    """Build a comparable key for one field value.

    NaN compares unequal to everything, so it gets its own rank with a
    constant payload instead of taking part in numeric comparison.

    Args:
        value: Field value read from the record.

    Returns:
        Rank and value pair comparable across value kinds.
    """
    if value is None:
        return (_ABSENT_RANK, 0)
    if isinstance(value, bool):
        return (_BOOL_RANK, value)
    if isinstance(value, float) and math.isnan(value):
        return (_NAN_RANK, 0)
    if isinstance(value, (int, float)):
        return (_NUMBER_RANK, value)
    return (_STRING_RANK, str(value))
