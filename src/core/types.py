"""Shared typed models.

This module defines the record value aliases and the immutable
configuration models accumulated by the query builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Union

RecordValue = Union[None, bool, int, float, str]
Record = Mapping[str, RecordValue]
SortDirection = Literal["ASC", "DESC"]

SUPPORTED_RECORD_VALUE_TYPES: tuple[type, ...] = (type(None), bool, int, float, str)


@dataclass(frozen=True)
class Criterion:
    """One filter condition applied to every record.

    Attributes:
        key: Record field name to read.
        value: Comparison value handed to the operator predicate.
        operator: Registered operator token.
    """

    key: str
    value: object
    operator: str


@dataclass(frozen=True)
class SortSpec:
    """Active sort configuration.

    Attributes:
        key: Record field name to order by.
        direction: ``ASC`` or ``DESC``.
    """

    key: str
    direction: SortDirection


@dataclass(frozen=True)
class WindowSpec:
    """Active slice configuration.

    Attributes:
        offset: Inclusive start position.
        length: Exclusive end position, bounded by the collection size.
    """

    offset: int
    length: int
