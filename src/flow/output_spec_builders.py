"""Builders for column output specifications.

Output builders fall back to ``DEFAULT_OUTPUT_SCHEMA_SPEC`` when no
schema selection was configured; every other field is required.
"""

from __future__ import annotations

from core.constants import FAMILY_QUALIFIER_SEPARATOR
from core.errors import InvalidArgumentError
from core.field_checks import ensure_unset, require_argument, require_field, require_field_name
from flow.builder_base import SchemaSelectingBuilder, resolve_column_name
from flow.column_name import ColumnName
from flow.column_specs import (
    DEFAULT_OUTPUT_SCHEMA_SPEC,
    ColumnFamilyOutputSpec,
    QualifiedColumnOutputSpec,
)
from flow.schema_spec import SchemaSpec


class QualifiedColumnOutputSpecBuilder(SchemaSelectingBuilder):
    """Builder for :class:`QualifiedColumnOutputSpec`."""

    def __init__(self) -> None:
        super().__init__()
        self._column: ColumnName | None = None

    def copy(self) -> "QualifiedColumnOutputSpecBuilder":
        """Return an independent builder holding the current field values."""
        duplicate = QualifiedColumnOutputSpecBuilder()
        duplicate._column = self._column
        duplicate._schema_spec = self._schema_spec
        return duplicate

    @property
    def column(self) -> ColumnName | None:
        """Configured qualified column, or None when unset."""
        return self._column

    def with_qualified_column(
        self,
        column: ColumnName | str,
        qualifier: str | None = None,
    ) -> "QualifiedColumnOutputSpecBuilder":
        """Write to the given qualified column.

        Raises:
            NullArgumentError: If column is None.
            InvalidArgumentError: If the column is not fully qualified.
            AlreadySetError: If a column was already configured.
        """
        resolved = resolve_column_name(column, qualifier, "column")
        if not resolved.is_qualified:
            raise InvalidArgumentError(
                f"Output column must be fully qualified, found: {resolved}."
            )
        ensure_unset(self._column, "column")
        self._column = resolved
        return self

    def build(self) -> QualifiedColumnOutputSpec:
        """Build an output spec, defaulting the schema selection.

        Raises:
            MissingRequiredFieldError: If no column was configured.
        """
        column = require_field(self._column, "column", "Qualified column output spec")
        schema_spec = _schema_or_default(self._schema_spec)
        return QualifiedColumnOutputSpec(column=column, schema_spec=schema_spec)


class ColumnFamilyOutputSpecBuilder(SchemaSelectingBuilder):
    """Builder for :class:`ColumnFamilyOutputSpec`.

    The qualifier of each written cell comes from the output row field
    named by the qualifier selector.
    """

    def __init__(self) -> None:
        super().__init__()
        self._family: str | None = None
        self._qualifier_selector: str | None = None

    def copy(self) -> "ColumnFamilyOutputSpecBuilder":
        """Return an independent builder holding the current field values."""
        duplicate = ColumnFamilyOutputSpecBuilder()
        duplicate._family = self._family
        duplicate._qualifier_selector = self._qualifier_selector
        duplicate._schema_spec = self._schema_spec
        return duplicate

    @property
    def column_family(self) -> str | None:
        """Configured family name, or None when unset."""
        return self._family

    @property
    def qualifier_selector(self) -> str | None:
        """Configured qualifier selector field, or None when unset."""
        return self._qualifier_selector

    def with_column_family(self, family: ColumnName | str) -> "ColumnFamilyOutputSpecBuilder":
        """Write into the given family.

        Raises:
            NullArgumentError: If family is None.
            InvalidArgumentError: If the name is qualified or contains the separator.
            AlreadySetError: If a family was already configured.
        """
        require_argument(family, "family")
        if isinstance(family, ColumnName):
            if family.is_qualified:
                raise InvalidArgumentError(
                    f"Column family may not be fully qualified, found: {family}."
                )
            family_name = family.family
        elif isinstance(family, str):
            if FAMILY_QUALIFIER_SEPARATOR in family:
                raise InvalidArgumentError(
                    f"Family name may not contain '{FAMILY_QUALIFIER_SEPARATOR}', "
                    f"found: {family!r}."
                )
            family_name = ColumnName(family=family).family
        else:
            raise InvalidArgumentError(
                f"Column family must be a ColumnName or string, got {type(family).__name__}."
            )
        ensure_unset(self._family, "column_family")
        self._family = family_name
        return self

    def with_qualifier_selector(self, qualifier_selector: str) -> "ColumnFamilyOutputSpecBuilder":
        """Take each record's qualifier from the named output field.

        Raises:
            NullArgumentError: If qualifier_selector is None.
            InvalidArgumentError: If qualifier_selector is empty.
            AlreadySetError: If a selector was already configured.
        """
        field_name = require_field_name(qualifier_selector, "qualifier_selector")
        ensure_unset(self._qualifier_selector, "qualifier_selector")
        self._qualifier_selector = field_name
        return self

    def build(self) -> ColumnFamilyOutputSpec:
        """Build an output spec, defaulting the schema selection.

        Raises:
            MissingRequiredFieldError: If family or qualifier selector is unset.
        """
        context = "Column family output spec"
        family = require_field(self._family, "column_family", context)
        qualifier_selector = require_field(self._qualifier_selector, "qualifier_selector", context)
        schema_spec = _schema_or_default(self._schema_spec)
        return ColumnFamilyOutputSpec(
            family=family,
            qualifier_selector=qualifier_selector,
            schema_spec=schema_spec,
        )


def _schema_or_default(schema_spec: SchemaSpec | None) -> SchemaSpec:
    return DEFAULT_OUTPUT_SCHEMA_SPEC if schema_spec is None else schema_spec


ColumnOutputSpecBuilder = QualifiedColumnOutputSpecBuilder | ColumnFamilyOutputSpecBuilder
COLUMN_OUTPUT_SPEC_BUILDER_TYPES = (
    QualifiedColumnOutputSpecBuilder,
    ColumnFamilyOutputSpecBuilder,
)
