"""Immutable column input and output specifications.

These values are what the builders produce and what a tap carries to
the pipeline layer. Each spec validates its own shape so that a value
constructed directly is as trustworthy as one produced by a builder.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import FAMILY_QUALIFIER_SEPARATOR
from core.errors import InvalidArgumentError
from flow.column_filter_spec import ColumnFilterSpec
from flow.column_name import ColumnName
from flow.paging_spec import PagingSpec
from flow.schema_spec import WRITER_SCHEMA, SchemaSpec

DEFAULT_OUTPUT_SCHEMA_SPEC: SchemaSpec = WRITER_SCHEMA


@dataclass(frozen=True)
class QualifiedColumnInputSpec:
    """Read one qualified column.

    Attributes:
        column: Qualified column to read.
        schema_spec: Reader schema selection, None for the store default.
        max_versions: Maximum versions per cell, None for the store default.
        filter_spec: Column filter, None when unset.
        paging_spec: Paging mode, None when unset.
    """

    column: ColumnName
    schema_spec: SchemaSpec | None = None
    max_versions: int | None = None
    filter_spec: ColumnFilterSpec | None = None
    paging_spec: PagingSpec | None = None

    def __post_init__(self) -> None:
        if not self.column.is_qualified:
            raise InvalidArgumentError(
                f"Input column must be fully qualified, found: {self.column}."
            )


@dataclass(frozen=True)
class ColumnFamilyInputSpec:
    """Read every qualifier of a column family.

    Attributes:
        column: Family-only column name.
        schema_spec: Reader schema selection, None for the store default.
        max_versions: Maximum versions per cell, None for the store default.
        filter_spec: Column filter, None when unset.
        paging_spec: Paging mode, None when unset.
    """

    column: ColumnName
    schema_spec: SchemaSpec | None = None
    max_versions: int | None = None
    filter_spec: ColumnFilterSpec | None = None
    paging_spec: PagingSpec | None = None

    def __post_init__(self) -> None:
        if self.column.is_qualified:
            raise InvalidArgumentError(
                f"Input column family can not be fully qualified, found: {self.column}."
            )

    @property
    def family(self) -> str:
        return self.column.family


@dataclass(frozen=True)
class QualifiedColumnOutputSpec:
    """Write one qualified column.

    Attributes:
        column: Qualified column to write.
        schema_spec: Writer schema selection.
    """

    column: ColumnName
    schema_spec: SchemaSpec = DEFAULT_OUTPUT_SCHEMA_SPEC

    def __post_init__(self) -> None:
        if not self.column.is_qualified:
            raise InvalidArgumentError(
                f"Output column must be fully qualified, found: {self.column}."
            )


@dataclass(frozen=True)
class ColumnFamilyOutputSpec:
    """Write into a family with a per-record qualifier.

    Attributes:
        family: Target column family.
        qualifier_selector: Field of the output row whose value names the qualifier.
        schema_spec: Writer schema selection.
    """

    family: str
    qualifier_selector: str
    schema_spec: SchemaSpec = DEFAULT_OUTPUT_SCHEMA_SPEC

    def __post_init__(self) -> None:
        if not self.family or FAMILY_QUALIFIER_SEPARATOR in self.family:
            raise InvalidArgumentError(
                f"Output column family must be a bare family name, found: {self.family!r}."
            )
        if not self.qualifier_selector:
            raise InvalidArgumentError("Qualifier selector must be a non-empty field name.")

    @property
    def column(self) -> ColumnName:
        return ColumnName(family=self.family)


ColumnInputSpec = QualifiedColumnInputSpec | ColumnFamilyInputSpec
COLUMN_INPUT_SPEC_TYPES = (QualifiedColumnInputSpec, ColumnFamilyInputSpec)

ColumnOutputSpec = QualifiedColumnOutputSpec | ColumnFamilyOutputSpec
COLUMN_OUTPUT_SPEC_TYPES = (QualifiedColumnOutputSpec, ColumnFamilyOutputSpec)
