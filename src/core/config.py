"""Runtime configuration model for columntap.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    CLUSTER_ENV_VAR,
    DEFAULT_CLUSTER,
    DEFAULT_INSTANCE,
    DEFAULT_LOG_LEVEL,
    INSTANCE_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import ColumnTapConfigError


@dataclass(frozen=True)
class FlowConfig:
    """Validated runtime configuration.

    Attributes:
        cluster: Cluster address used to expand bare table names.
        instance: Store instance used to expand bare table names.
        log_level: Minimum structured log level.
    """

    cluster: str
    instance: str
    log_level: str

    @classmethod
    def from_env(cls) -> "FlowConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ColumnTapConfigError: If environment values are invalid.
        """
        cluster = _parse_path_segment(CLUSTER_ENV_VAR, os.getenv(CLUSTER_ENV_VAR, DEFAULT_CLUSTER))
        instance = _parse_path_segment(
            INSTANCE_ENV_VAR,
            os.getenv(INSTANCE_ENV_VAR, DEFAULT_INSTANCE),
        )
        log_level = _parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        return cls(cluster=cluster, instance=instance, log_level=log_level)


def _parse_path_segment(env_name: str, raw_value: str) -> str:
    """Validate one table URI path segment taken from the environment."""
    value = raw_value.strip()
    if not value or "/" in value:
        raise ColumnTapConfigError(
            f"Invalid {env_name} value '{raw_value}': expected a non-empty name without '/'. "
            f"Set {env_name} to a plain name."
        )
    return value


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-case level name.

    Raises:
        ColumnTapConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        supported_rows = ", ".join(SUPPORTED_LOG_LEVELS)
        raise ColumnTapConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value '{raw_value}'. Use one of: {supported_rows}."
        )
    return level
