"""Fluent query builder over an in-memory record collection.

This module accumulates criteria, sort, and window configuration with
fail-fast validation, then runs the fixed filter, slice, sort, and
project pipeline when results are requested.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Sequence, cast

from core.constants import (
    DEFAULT_CRITERION_OPERATOR,
    DEFAULT_SORT_DIRECTION,
    SET_MEMBERSHIP_OPERATORS,
    SUPPORTED_SORT_DIRECTIONS,
)
from core.errors import (
    EmptyCollectionError,
    InvalidCriterionOperatorError,
    InvalidCriterionValueError,
    InvalidRecordError,
    InvalidSortDirectionError,
)
from core.logging_config import get_logger
from core.types import (
    SUPPORTED_RECORD_VALUE_TYPES,
    Criterion,
    Record,
    SortDirection,
    SortSpec,
    WindowSpec,
)
from query.criterion_matching import filter_records
from query.operators import MEMBERSHIP_VALUE_TYPES, is_supported_operator, supported_operators
from query.sorting import sort_records
from query.windowing import build_window, slice_records

if TYPE_CHECKING:
    from query.query_spec import QuerySpec

_LOGGER = get_logger(__name__)


class QueryBuilder:
    """Chainable query over one fixed, non-empty record collection."""

    def __init__(self, records: Sequence[Record]) -> None:
        """Create a query over a record collection.

        Args:
            records: Ordered, non-empty sequence of records.

        Raises:
            EmptyCollectionError: If the collection has no records.
            InvalidRecordError: If the collection or any record is malformed.
        """
        self._records = _validate_collection(records)
        self._criteria: list[Criterion] = []
        self._sort_spec: SortSpec | None = None
        self._window_spec: WindowSpec | None = None

    @classmethod
    def create(cls, records: Sequence[Record]) -> "QueryBuilder":
        """Alternate constructor for call chains."""
        return cls(records)

    @property
    def collection_size(self) -> int:
        """Return the record count of the original collection."""
        return len(self._records)

    @property
    def criteria(self) -> tuple[Criterion, ...]:
        """Return accumulated criteria in evaluation order."""
        return tuple(self._criteria)

    @property
    def sort_spec(self) -> SortSpec | None:
        """Return the active sort configuration."""
        return self._sort_spec

    @property
    def window_spec(self) -> WindowSpec | None:
        """Return the active window configuration."""
        return self._window_spec

    def add_criterion(
        self,
        key: str,
        value: object,
        operator: str = DEFAULT_CRITERION_OPERATOR,
    ) -> "QueryBuilder":
        """Append one filter condition.

        Args:
            key: Record field name.
            value: Comparison value.
            operator: Registered operator token, ``=`` by default.

        Returns:
            This builder for chaining.

        Raises:
            InvalidCriterionOperatorError: If the operator is unknown.
            InvalidCriterionValueError: If a set-membership operator is
                given a non-collection value.
        """
        self._criteria.append(_build_criterion(key, value, operator))
        return self

    def sorted_by(self, key: str, direction: str = DEFAULT_SORT_DIRECTION) -> "QueryBuilder":
        """Replace the sort configuration.

        Args:
            key: Record field name to order by.
            direction: ``ASC`` or ``DESC``, case-sensitive.

        Returns:
            This builder for chaining.

        Raises:
            InvalidSortDirectionError: If the direction is unknown.
        """
        self._sort_spec = _build_sort_spec(key, direction)
        return self

    def limit(self, offset: int, length: int) -> "QueryBuilder":
        """Replace the window configuration.

        Args:
            offset: Inclusive start position.
            length: Exclusive end position, at most the collection size.

        Returns:
            This builder for chaining.

        Raises:
            InvalidWindowError: If the bounds are invalid.
        """
        self._window_spec = build_window(offset, length, len(self._records))
        return self

    def apply_spec(self, query_spec: "QuerySpec") -> "QueryBuilder":
        """Apply a declarative query spec as one all-or-nothing update.

        Every section is validated before any builder state changes, so a
        rejected spec leaves the builder as it was.

        Args:
            query_spec: Parsed query spec.

        Returns:
            This builder for chaining.

        Raises:
            RecordQueryError: The same errors as the matching fluent calls.
        """
        criteria = [
            _build_criterion(criterion.key, criterion.value, criterion.operator)
            for criterion in query_spec.criteria
        ]
        sort_spec = self._sort_spec
        if query_spec.sort is not None:
            sort_spec = _build_sort_spec(query_spec.sort.key, query_spec.sort.direction)
        window_spec = self._window_spec
        if query_spec.window is not None:
            window_spec = build_window(
                query_spec.window.offset, query_spec.window.length, len(self._records)
            )
        self._criteria.extend(criteria)
        self._sort_spec = sort_spec
        self._window_spec = window_spec
        return self

    def get_results(self) -> list[dict[str, object]]:
        """Run the filter, slice, sort, and project pipeline.

        Returns:
            Shallow ``dict`` copies of the surviving records.
        """
        filtered = filter_records(self._records, self._criteria)
        sliced = slice_records(filtered, self._window_spec)
        ordered = sort_records(sliced, self._sort_spec)
        _LOGGER.debug(
            "query_executed",
            criteria_count=len(self._criteria),
            input_count=len(self._records),
            filtered_count=len(filtered),
            result_count=len(ordered),
        )
        return [dict(record) for record in ordered]

    def get_count(self) -> int:
        """Return the number of records ``get_results`` produces."""
        return len(self.get_results())


def _validate_collection(records: object) -> tuple[Record, ...]:
    """Validate and snapshot the queried collection.

    Args:
        records: Candidate record collection.

    Returns:
        Immutable snapshot of the records.

    Raises:
        EmptyCollectionError: If the collection has no records.
        InvalidRecordError: If the collection or any record is malformed.
    """
    if not isinstance(records, Sequence) or isinstance(records, (str, bytes, bytearray)):
        raise InvalidRecordError(
            f"Expected an ordered sequence of records, got {type(records).__name__}."
        )
    if len(records) == 0:
        raise EmptyCollectionError("Empty collection provided. Supply at least one record.")
    for index, record in enumerate(records):
        _validate_record(record, index)
    return tuple(records)


def _validate_record(record: object, index: int) -> None:
    if not isinstance(record, Mapping):
        raise InvalidRecordError(
            f"Record #{index} must be a mapping, got {type(record).__name__}."
        )
    for key, value in record.items():
        if not isinstance(key, str):
            raise InvalidRecordError(
                f"Record #{index} has a non-string field name {key!r}."
            )
        if not isinstance(value, SUPPORTED_RECORD_VALUE_TYPES):
            raise InvalidRecordError(
                f"Record #{index} field '{key}' holds unsupported type "
                f"{type(value).__name__}. Use null, bool, int, float, or str values."
            )


def _build_criterion(key: str, value: object, operator: str) -> Criterion:
    """Validate one filter condition and build its criterion.

    Set-membership values are copied into a tuple so later changes to the
    caller's collection cannot alter the query.

    Raises:
        InvalidCriterionOperatorError: If the operator is unknown.
        InvalidCriterionValueError: If a set-membership operator is given
            a non-collection value.
    """
    if not is_supported_operator(operator):
        _LOGGER.debug("criterion_rejected", key=key, operator=repr(operator))
        supported_rows = ", ".join(supported_operators())
        raise InvalidCriterionOperatorError(
            f"{operator!r} is not a valid operator. Use one of: {supported_rows}."
        )
    if operator in SET_MEMBERSHIP_OPERATORS:
        if not isinstance(value, MEMBERSHIP_VALUE_TYPES):
            _LOGGER.debug("criterion_rejected", key=key, operator=operator)
            raise InvalidCriterionValueError(
                f"Operator {operator} requires a list, tuple, or set value, "
                f"got {type(value).__name__}."
            )
        value = tuple(value)
    return Criterion(key=key, value=value, operator=operator)


def _build_sort_spec(key: str, direction: str) -> SortSpec:
    if direction not in SUPPORTED_SORT_DIRECTIONS:
        _LOGGER.debug("sort_rejected", key=key, direction=repr(direction))
        supported_rows = ", ".join(SUPPORTED_SORT_DIRECTIONS)
        raise InvalidSortDirectionError(
            f"{direction!r} is not a valid sorting direction. Use one of: {supported_rows}."
        )
    return SortSpec(key=key, direction=cast(SortDirection, direction))
