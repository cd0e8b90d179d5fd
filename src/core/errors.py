"""Record-query exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Every configuration call raises a specific error type on invalid input.
"""

from __future__ import annotations


class RecordQueryError(Exception):
    """Base exception for all record-query failures."""


class QueryConfigError(RecordQueryError):
    """Raised for invalid runtime configuration."""


class EmptyCollectionError(RecordQueryError):
    """Raised when a query is constructed over zero records."""


class InvalidRecordError(RecordQueryError):
    """Raised when the queried collection holds malformed records."""


class InvalidCriterionOperatorError(RecordQueryError):
    """Raised for unknown criterion operator tokens."""


class InvalidCriterionValueError(RecordQueryError):
    """Raised when a comparison value does not fit its operator."""


class InvalidSortDirectionError(RecordQueryError):
    """Raised for unknown sort direction tokens."""


class InvalidWindowError(RecordQueryError):
    """Raised for out-of-bounds or non-integer offset/length windows."""


class QuerySpecError(RecordQueryError):
    """Raised for invalid or unsupported declarative query specs."""
