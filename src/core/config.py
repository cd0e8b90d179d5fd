"""Runtime configuration model for record-query.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, SUPPORTED_LOG_LEVELS
from core.errors import QueryConfigError


@dataclass(frozen=True)
class QueryConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum structured log level name.
    """

    log_level: str

    @classmethod
    def from_env(cls) -> "QueryConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            QueryConfigError: If environment values are invalid.
        """
        log_level_value = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(log_level=_parse_log_level(log_level_value))


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-cased level name.

    Raises:
        QueryConfigError: If value is not a supported level name.
    """
    normalized_value = raw_value.strip().upper()
    if normalized_value in SUPPORTED_LOG_LEVELS:
        return normalized_value
    supported_rows = ", ".join(SUPPORTED_LOG_LEVELS)
    raise QueryConfigError(
        f"Invalid {LOG_LEVEL_ENV_VAR} value: "
        f"expected one of {supported_rows}, got '{raw_value}'. "
        f"Set {LOG_LEVEL_ENV_VAR} to a supported level name."
    )
