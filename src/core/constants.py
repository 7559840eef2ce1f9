"""Core constants used across columntap modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in builder logic.
"""

from __future__ import annotations

FAMILY_QUALIFIER_SEPARATOR = ":"
TABLE_URI_SCHEME = "kiji"
DEFAULT_CLUSTER = ".env"
DEFAULT_INSTANCE = "default"
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
MIN_TIMESTAMP = 0
MAX_TIMESTAMP = 2**63 - 1
TAP_DECLARATION_VERSION = 1
CLUSTER_ENV_VAR = "COLUMNTAP_CLUSTER"
INSTANCE_ENV_VAR = "COLUMNTAP_INSTANCE"
LOG_LEVEL_ENV_VAR = "COLUMNTAP_LOG_LEVEL"
