"""Public SDK surface for record-query.

This module provides a stable import path for library users.
It re-exports the builder, declarative spec helpers, and error types.
"""

from __future__ import annotations

from core.config import QueryConfig
from core.errors import (
    EmptyCollectionError,
    InvalidCriterionOperatorError,
    InvalidCriterionValueError,
    InvalidRecordError,
    InvalidSortDirectionError,
    InvalidWindowError,
    QueryConfigError,
    QuerySpecError,
    RecordQueryError,
)
from core.types import Criterion, Record, RecordValue, SortSpec, WindowSpec
from query.builder import QueryBuilder
from query.operators import supported_operators
from query.query_spec import QuerySpec, build_query, load_query_spec, parse_query_spec

__all__ = [
    "Criterion",
    "EmptyCollectionError",
    "InvalidCriterionOperatorError",
    "InvalidCriterionValueError",
    "InvalidRecordError",
    "InvalidSortDirectionError",
    "InvalidWindowError",
    "QueryBuilder",
    "QueryConfig",
    "QueryConfigError",
    "QuerySpec",
    "QuerySpecError",
    "Record",
    "RecordQueryError",
    "RecordValue",
    "SortSpec",
    "WindowSpec",
    "build_query",
    "load_query_spec",
    "parse_query_spec",
    "supported_operators",
]
