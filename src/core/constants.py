"""Core constants used across record-query modules.

This module centralizes operator, direction, and environment tokens.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

EQUALS_OPERATOR = "="
NOT_EQUALS_OPERATOR = "!="
GREATER_THAN_OPERATOR = ">"
LESS_THAN_OPERATOR = "<"
GREATER_THAN_OR_EQUAL_OPERATOR = ">="
LESS_THAN_OR_EQUAL_OPERATOR = "<="
CONTAINS_OPERATOR = "CONTAINS"
STARTS_WITH_OPERATOR = "STARTS_WITH"
ENDS_WITH_OPERATOR = "ENDS_WITH"
IN_ARRAY_OPERATOR = "IN_ARRAY"
NOT_IN_ARRAY_OPERATOR = "NOT_IN_ARRAY"
DEFAULT_CRITERION_OPERATOR = EQUALS_OPERATOR
SET_MEMBERSHIP_OPERATORS = (IN_ARRAY_OPERATOR, NOT_IN_ARRAY_OPERATOR)

ASCENDING = "ASC"
DESCENDING = "DESC"
DEFAULT_SORT_DIRECTION = ASCENDING
SUPPORTED_SORT_DIRECTIONS = (ASCENDING, DESCENDING)

QUERY_SPEC_VERSION = 1

LOG_LEVEL_ENV_VAR = "RECORD_QUERY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
