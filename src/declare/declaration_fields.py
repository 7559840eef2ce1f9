"""Type-safe field parsing helpers for tap declarations.

This module centralizes primitive parsing so the declaration loader
stays concise and reports consistent validation errors.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from core.errors import TapDeclarationError


def expect_mapping(value: object, context: str) -> Mapping[str, object]:
    """Require a mapping with string keys."""
    if not isinstance(value, Mapping):
        raise TapDeclarationError(
            f"Invalid {context}: expected object mapping, got {type(value).__name__}."
        )
    normalized_mapping: dict[str, object] = {}
    for key, payload in value.items():
        if not isinstance(key, str):
            raise TapDeclarationError(
                f"Invalid {context}: expected string keys, got {type(key).__name__}."
            )
        normalized_mapping[key] = payload
    return normalized_mapping


def expect_sequence(value: object, context: str) -> Sequence[object]:
    """Require a list value."""
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise TapDeclarationError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def optional_string(mapping: Mapping[str, object], field_name: str, context: str) -> str | None:
    """Read an optional non-blank string field."""
    value = mapping.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    raise TapDeclarationError(f"Invalid {context}: field '{field_name}' must be a string.")


def optional_int(mapping: Mapping[str, object], field_name: str, context: str) -> int | None:
    """Read an optional integer field, rejecting booleans."""
    value = mapping.get(field_name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TapDeclarationError(f"Invalid {context}: field '{field_name}' must be an integer.")
    return value


def expect_int(value: object, context: str) -> int:
    """Require an integer value, rejecting booleans."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TapDeclarationError(f"Invalid {context}: expected integer, got {value!r}.")
    return value


def reject_unknown_keys(
    mapping: Mapping[str, object],
    allowed_keys: set[str],
    context: str,
) -> None:
    """Fail on keys outside the allowed set."""
    unknown_keys = sorted(set(mapping) - allowed_keys)
    if unknown_keys:
        raise TapDeclarationError(f"{context} contains unknown fields: {', '.join(unknown_keys)}.")


def single_entry(mapping: Mapping[str, object], context: str) -> tuple[str, object]:
    """Unpack a one-key mapping such as ``{between: [1, 2]}``."""
    if len(mapping) != 1:
        raise TapDeclarationError(
            f"Invalid {context}: expected exactly one key, "
            f"got {', '.join(sorted(mapping)) or 'none'}."
        )
    key, value = next(iter(mapping.items()))
    return key, value
