"""Columntap exception hierarchy.

This module defines traceable configuration errors with clear boundaries.
Builders raise the narrowest error type so callers can tell a misuse of
the API apart from an invalid value or an incomplete specification.
"""

from __future__ import annotations


class ColumnTapError(Exception):
    """Base exception for all columntap failures."""


class NullArgumentError(ColumnTapError):
    """Raised when a required setter argument is None."""


class InvalidArgumentError(ColumnTapError):
    """Raised when a value violates a domain constraint."""


class AlreadySetError(ColumnTapError):
    """Raised when a set-once builder field is assigned a second time.

    Attributes:
        field_name: Name of the builder field.
        current_value: Value already held by the field.
    """

    def __init__(self, field_name: str, current_value: object) -> None:
        super().__init__(
            f"Field '{field_name}' is already set to {current_value!r}. "
            "Copy the builder or start a new one to change it."
        )
        self.field_name = field_name
        self.current_value = current_value


class MissingRequiredFieldError(ColumnTapError):
    """Raised when build() runs while a mandatory field is unset.

    Attributes:
        field_name: Name of the missing field.
    """

    def __init__(self, field_name: str, context: str) -> None:
        super().__init__(
            f"{context} is missing required field '{field_name}'. Set it before calling build()."
        )
        self.field_name = field_name


class CollisionError(ColumnTapError):
    """Raised when a merge would overwrite an existing column mapping.

    Attributes:
        field_name: Field name present in both maps.
        existing_value: Spec already mapped to the field.
    """

    def __init__(self, field_name: str, existing_value: object, map_name: str) -> None:
        super().__init__(
            f"Field '{field_name}' is already mapped to {map_name} column {existing_value!r}. "
            "Use a different field name."
        )
        self.field_name = field_name
        self.existing_value = existing_value


class TapConfigurationError(ColumnTapError):
    """Raised when a tap cannot be assembled from otherwise valid parts."""


class TapDeclarationError(ColumnTapError):
    """Raised for invalid or unreadable YAML tap declarations."""


class ColumnTapConfigError(ColumnTapError):
    """Raised for invalid runtime configuration."""


class ColumnTapDependencyError(ColumnTapError):
    """Raised when an optional runtime dependency is missing."""
