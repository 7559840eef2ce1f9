"""Set-once field checks shared by every builder.

This module centralizes argument validation so that all builders fail
with the same error types and message shapes.
"""

from __future__ import annotations

from typing import TypeVar

from core.constants import MAX_TIMESTAMP
from core.errors import (
    AlreadySetError,
    InvalidArgumentError,
    MissingRequiredFieldError,
    NullArgumentError,
)

T = TypeVar("T")


def require_argument(value: T | None, argument_name: str) -> T:
    """Reject a None setter argument."""
    if value is None:
        raise NullArgumentError(f"Argument '{argument_name}' may not be None.")
    return value


def ensure_unset(current_value: object, field_name: str) -> None:
    """Reject assignment to a field that already holds a value."""
    if current_value is not None:
        raise AlreadySetError(field_name, current_value)


def require_field(value: T | None, field_name: str, context: str) -> T:
    """Return a configured field or fail the build."""
    if value is None:
        raise MissingRequiredFieldError(field_name, context)
    return value


def require_positive_int(value: object, argument_name: str) -> int:
    """Validate a strictly positive integer argument.

    Args:
        value: Candidate value.
        argument_name: Name used in error messages.

    Returns:
        The validated integer.

    Raises:
        NullArgumentError: If the value is None.
        InvalidArgumentError: If the value is not an integer above zero.
    """
    require_argument(value, argument_name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"Argument '{argument_name}' must be an integer, got {type(value).__name__}."
        )
    if value <= 0:
        raise InvalidArgumentError(
            f"Argument '{argument_name}' must be strictly positive, but got: {value}."
        )
    return value


def require_timestamp(value: object, argument_name: str) -> int:
    """Validate an integer timestamp in milliseconds within ``0 .. MAX_TIMESTAMP``."""
    require_argument(value, argument_name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"Timestamp '{argument_name}' must be an integer, got {type(value).__name__}."
        )
    if value < 0:
        raise InvalidArgumentError(
            f"Timestamp '{argument_name}' must not be negative, but got: {value}."
        )
    if value > MAX_TIMESTAMP:
        raise InvalidArgumentError(
            f"Timestamp '{argument_name}' must not exceed {MAX_TIMESTAMP}, but got: {value}."
        )
    return value


def require_field_name(value: object, argument_name: str) -> str:
    """Validate a non-empty pipeline field name."""
    require_argument(value, argument_name)
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(
            f"Argument '{argument_name}' must be a non-empty string, got {value!r}."
        )
    return value
