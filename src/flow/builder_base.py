"""Pieces shared by the column spec builders.

Every column builder selects a schema the same way, and resolves the
same flexible column arguments, so both live here.
"""

from __future__ import annotations

from typing import Mapping, Sequence, TypeVar

from core.errors import InvalidArgumentError
from core.field_checks import ensure_unset, require_argument
from flow.column_name import ColumnName
from flow.schema_spec import (
    DEFAULT_READER_SCHEMA,
    SCHEMA_SPEC_TYPES,
    WRITER_SCHEMA,
    GenericSchema,
    SchemaSpec,
    SpecificSchema,
)

_BuilderT = TypeVar("_BuilderT", bound="SchemaSelectingBuilder")


class SchemaSelectingBuilder:
    """Base for builders that carry a set-once schema selection."""

    def __init__(self) -> None:
        self._schema_spec: SchemaSpec | None = None

    @property
    def schema_spec(self) -> SchemaSpec | None:
        """Configured schema selection, or None when unset."""
        return self._schema_spec

    def with_schema_spec(self: _BuilderT, schema_spec: SchemaSpec) -> _BuilderT:
        """Use the given schema selection.

        Raises:
            NullArgumentError: If schema_spec is None.
            InvalidArgumentError: If schema_spec is not a schema selection.
            AlreadySetError: If a schema selection was already configured.
        """
        require_argument(schema_spec, "schema_spec")
        if not isinstance(schema_spec, SCHEMA_SPEC_TYPES):
            raise InvalidArgumentError(
                f"Expected a schema spec, got {type(schema_spec).__name__}."
            )
        ensure_unset(self._schema_spec, "schema_spec")
        self._schema_spec = schema_spec
        return self

    def with_writer_schema(self: _BuilderT) -> _BuilderT:
        """Use the writer schema, inferring it from the value when writing."""
        return self.with_schema_spec(WRITER_SCHEMA)

    def with_default_reader_schema(self: _BuilderT) -> _BuilderT:
        """Use the default reader schema from the table layout."""
        return self.with_schema_spec(DEFAULT_READER_SCHEMA)

    def with_generic_schema(
        self: _BuilderT,
        schema: str | Mapping[str, object] | Sequence[object],
    ) -> _BuilderT:
        """Use an explicit Avro schema document."""
        require_argument(schema, "schema")
        return self.with_schema_spec(GenericSchema.from_schema(schema))

    def with_specific_schema(self: _BuilderT, record_type: type) -> _BuilderT:
        """Use the schema of a generated record class."""
        require_argument(record_type, "record_type")
        return self.with_schema_spec(SpecificSchema(record_type))


def resolve_column_name(
    column: ColumnName | str,
    qualifier: str | None,
    argument_name: str,
) -> ColumnName:
    """Turn the flexible column arguments into a column name.

    Args:
        column: Column name, ``family:qualifier`` text, or a bare family.
        qualifier: Optional qualifier combined with a bare family string.
        argument_name: Name used in error messages.

    Returns:
        Resolved column name.

    Raises:
        NullArgumentError: If column is None.
        InvalidArgumentError: If the arguments do not form a column name.
    """
    require_argument(column, argument_name)
    if isinstance(column, ColumnName):
        if qualifier is not None:
            raise InvalidArgumentError(
                f"Pass either a ColumnName or a family and qualifier, not both: {column}."
            )
        return column
    if not isinstance(column, str):
        raise InvalidArgumentError(
            f"Argument '{argument_name}' must be a ColumnName or string, "
            f"got {type(column).__name__}."
        )
    if qualifier is None:
        return ColumnName.parse(column)
    return ColumnName(family=column, qualifier=qualifier)
