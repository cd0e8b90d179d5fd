"""Criterion operator registry.

This module maps operator tokens to match predicates. The registry is
built once at import time and exposed read-only; the builder queries it
to validate tokens and the matcher queries it to fetch predicates.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from core.constants import (
    CONTAINS_OPERATOR,
    ENDS_WITH_OPERATOR,
    EQUALS_OPERATOR,
    GREATER_THAN_OPERATOR,
    GREATER_THAN_OR_EQUAL_OPERATOR,
    IN_ARRAY_OPERATOR,
    LESS_THAN_OPERATOR,
    LESS_THAN_OR_EQUAL_OPERATOR,
    NOT_EQUALS_OPERATOR,
    NOT_IN_ARRAY_OPERATOR,
    STARTS_WITH_OPERATOR,
)
from core.errors import InvalidCriterionOperatorError

MatchPredicate = Callable[[object, object], bool]

MEMBERSHIP_VALUE_TYPES: tuple[type, ...] = (list, tuple, set, frozenset)


def strict_equals(field_value: object, comparison_value: object) -> bool:
    """Compare two values by type and value.

    Values of different types are never equal, so ``"1"`` differs from
    ``1``, ``1`` differs from ``1.0``, and ``True`` differs from ``1``.

    Args:
        field_value: Value read from the record.
        comparison_value: Value supplied by the criterion.

    Returns:
        True when both type and value match.
    """
    return type(field_value) is type(comparison_value) and field_value == comparison_value


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _are_orderable(field_value: object, comparison_value: object) -> bool:
    if _is_number(field_value) and _is_number(comparison_value):
        return True
    return isinstance(field_value, str) and isinstance(comparison_value, str)


def _not_equals(field_value: object, comparison_value: object) -> bool:
    return not strict_equals(field_value, comparison_value)


def _greater_than(field_value: object, comparison_value: object) -> bool:
    return _are_orderable(field_value, comparison_value) and field_value > comparison_value  # type: ignore[operator]


def _less_than(field_value: object, comparison_value: object) -> bool:
    return _are_orderable(field_value, comparison_value) and field_value < comparison_value  # type: ignore[operator]


def _greater_than_or_equal(field_value: object, comparison_value: object) -> bool:
    return _are_orderable(field_value, comparison_value) and field_value >= comparison_value  # type: ignore[operator]


def _less_than_or_equal(field_value: object, comparison_value: object) -> bool:
    return _are_orderable(field_value, comparison_value) and field_value <= comparison_value  # type: ignore[operator]


def _contains(field_value: object, comparison_value: object) -> bool:
    if not isinstance(field_value, str) or not isinstance(comparison_value, str):
        return False
    return comparison_value in field_value


def _starts_with(field_value: object, comparison_value: object) -> bool:
    if not isinstance(field_value, str) or not isinstance(comparison_value, str):
        return False
    return field_value.startswith(comparison_value)


def _ends_with(field_value: object, comparison_value: object) -> bool:
    if not isinstance(field_value, str) or not isinstance(comparison_value, str):
        return False
    return field_value.endswith(comparison_value)


def _in_array(field_value: object, comparison_value: object) -> bool:
    if not isinstance(comparison_value, MEMBERSHIP_VALUE_TYPES):
        return False
    return any(strict_equals(field_value, member) for member in comparison_value)


def _not_in_array(field_value: object, comparison_value: object) -> bool:
    return not _in_array(field_value, comparison_value)


OPERATOR_REGISTRY: Mapping[str, MatchPredicate] = MappingProxyType(
    {
        EQUALS_OPERATOR: strict_equals,
        NOT_EQUALS_OPERATOR: _not_equals,
        GREATER_THAN_OPERATOR: _greater_than,
        LESS_THAN_OPERATOR: _less_than,
        GREATER_THAN_OR_EQUAL_OPERATOR: _greater_than_or_equal,
        LESS_THAN_OR_EQUAL_OPERATOR: _less_than_or_equal,
        CONTAINS_OPERATOR: _contains,
        STARTS_WITH_OPERATOR: _starts_with,
        ENDS_WITH_OPERATOR: _ends_with,
        IN_ARRAY_OPERATOR: _in_array,
        NOT_IN_ARRAY_OPERATOR: _not_in_array,
    }
)


def supported_operators() -> tuple[str, ...]:
    """Return every registered operator token in registration order."""
    return tuple(OPERATOR_REGISTRY)


def is_supported_operator(operator: object) -> bool:
    """Return True when the token names a registered operator."""
    return isinstance(operator, str) and operator in OPERATOR_REGISTRY


def resolve_operator(operator: str) -> MatchPredicate:
    """Fetch the match predicate registered for an operator token.

    Args:
        operator: Operator token such as ``=`` or ``CONTAINS``.

    Returns:
        Predicate taking ``(field_value, comparison_value)``.

    Raises:
        InvalidCriterionOperatorError: If the token is not registered.
    """
    if not is_supported_operator(operator):
        supported_rows = ", ".join(supported_operators())
        raise InvalidCriterionOperatorError(
            f"{operator!r} is not a valid operator. Use one of: {supported_rows}."
        )
    return OPERATOR_REGISTRY[operator]
