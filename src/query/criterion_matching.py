"""Criterion matching and cumulative filtering.

This module evaluates one criterion against one record and narrows a
record list through every accumulated criterion in order.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.types import Criterion, Record
from query.operators import resolve_operator


def match_criterion(criterion: Criterion, record: Record) -> bool:
    """Evaluate one criterion against one record.

    A missing field reads as ``None`` and is compared as-is.

    Args:
        criterion: Filter condition to evaluate.
        record: Record to test.

    Returns:
        True when the record satisfies the criterion.

    Raises:
        InvalidCriterionOperatorError: If the criterion was built with an
            unregistered operator outside the builder.
    """
    predicate = resolve_operator(criterion.operator)
    return predicate(record.get(criterion.key), criterion.value)


def filter_records(
    records: Sequence[Record],
    criteria: Iterable[Criterion],
) -> list[Record]:
    """Narrow records through every criterion in accumulation order.

    Each pass consumes the survivors of the previous pass, so the result
    is the logical AND of all criteria with input order preserved.

    Args:
        records: Input records to filter.
        criteria: Ordered filter conditions.

    Returns:
        Filtered records list; the full input when no criteria are given.
    """
    filtered = list(records)
    for criterion in criteria:
        filtered = [record for record in filtered if match_criterion(criterion, record)]
    return filtered
