"""Builders for column input specifications.

Each builder accumulates set-once fields and produces an immutable
input spec from build(). A field moves from unset to set exactly once;
a failing setter leaves the builder as it was.
"""

from __future__ import annotations

from typing import TypeVar

from core.errors import InvalidArgumentError
from core.field_checks import (
    ensure_unset,
    require_argument,
    require_field,
    require_positive_int,
)
from flow.builder_base import SchemaSelectingBuilder, resolve_column_name
from flow.column_filter_spec import (
    COLUMN_FILTER_SPEC_TYPES,
    ColumnFilterSpec,
    NativeColumnFilter,
)
from flow.column_name import ColumnName
from flow.column_specs import ColumnFamilyInputSpec, QualifiedColumnInputSpec
from flow.paging_spec import PAGING_OFF, PAGING_SPEC_TYPES, CellPaging, PagingSpec

_InputBuilderT = TypeVar("_InputBuilderT", bound="_ColumnInputSpecBuilder")


class _ColumnInputSpecBuilder(SchemaSelectingBuilder):
    """Fields shared by both input builders."""

    def __init__(self) -> None:
        super().__init__()
        self._column: ColumnName | None = None
        self._max_versions: int | None = None
        self._column_filter_spec: ColumnFilterSpec | None = None
        self._paging_spec: PagingSpec | None = None

    def _copy_fields_from(self, source: _ColumnInputSpecBuilder) -> None:
        self._column = source._column
        self._schema_spec = source._schema_spec
        self._max_versions = source._max_versions
        self._column_filter_spec = source._column_filter_spec
        self._paging_spec = source._paging_spec

    def _set_column(self, column: ColumnName) -> None:
        ensure_unset(self._column, "column")
        self._column = column

    @property
    def max_versions(self) -> int | None:
        """Configured maximum versions, or None when unset."""
        return self._max_versions

    def with_max_versions(self: _InputBuilderT, max_versions: int) -> _InputBuilderT:
        """Return at most ``max_versions`` versions of each cell.

        Raises:
            NullArgumentError: If max_versions is None.
            InvalidArgumentError: If max_versions is not strictly positive.
            AlreadySetError: If max versions were already configured.
        """
        validated = require_positive_int(max_versions, "max_versions")
        ensure_unset(self._max_versions, "max_versions")
        self._max_versions = validated
        return self

    @property
    def column_filter_spec(self) -> ColumnFilterSpec | None:
        """Configured column filter, or None when unset."""
        return self._column_filter_spec

    def with_column_filter_spec(self: _InputBuilderT, column_filter: object) -> _InputBuilderT:
        """Filter the returned cells.

        Args:
            column_filter: A column filter spec, or a store-native filter handle
                which is wrapped into ``NativeColumnFilter``.

        Raises:
            NullArgumentError: If column_filter is None.
            AlreadySetError: If a filter was already configured.
        """
        require_argument(column_filter, "column_filter")
        if isinstance(column_filter, COLUMN_FILTER_SPEC_TYPES):
            filter_spec = column_filter
        else:
            filter_spec = NativeColumnFilter(column_filter)
        ensure_unset(self._column_filter_spec, "column_filter_spec")
        self._column_filter_spec = filter_spec
        return self

    @property
    def paging_spec(self) -> PagingSpec | None:
        """Configured paging mode, or None when unset."""
        return self._paging_spec

    def with_paging_spec(self: _InputBuilderT, paging_spec: PagingSpec) -> _InputBuilderT:
        """Use the given paging mode.

        Raises:
            NullArgumentError: If paging_spec is None.
            InvalidArgumentError: If paging_spec is not a paging mode.
            AlreadySetError: If paging was already configured.
        """
        require_argument(paging_spec, "paging_spec")
        if not isinstance(paging_spec, PAGING_SPEC_TYPES):
            raise InvalidArgumentError(
                f"Expected a paging spec, got {type(paging_spec).__name__}."
            )
        ensure_unset(self._paging_spec, "paging_spec")
        self._paging_spec = paging_spec
        return self

    def with_paging_off(self: _InputBuilderT) -> _InputBuilderT:
        """Fetch all versions without paging."""
        return self.with_paging_spec(PAGING_OFF)

    def with_paging_cell_count(self: _InputBuilderT, cell_count: int) -> _InputBuilderT:
        """Fetch cells in pages of ``cell_count``."""
        require_argument(cell_count, "cell_count")
        return self.with_paging_spec(CellPaging(cell_count))


class QualifiedColumnInputSpecBuilder(_ColumnInputSpecBuilder):
    """Builder for :class:`QualifiedColumnInputSpec`."""

    def copy(self) -> "QualifiedColumnInputSpecBuilder":
        """Return an independent builder holding the current field values."""
        duplicate = QualifiedColumnInputSpecBuilder()
        duplicate._copy_fields_from(self)
        return duplicate

    @property
    def column(self) -> ColumnName | None:
        """Configured qualified column, or None when unset."""
        return self._column

    def with_qualified_column(
        self,
        column: ColumnName | str,
        qualifier: str | None = None,
    ) -> "QualifiedColumnInputSpecBuilder":
        """Read from the given qualified column.

        Args:
            column: Qualified ColumnName, ``family:qualifier`` text, or a family.
            qualifier: Qualifier when ``column`` is a bare family.

        Raises:
            NullArgumentError: If column is None.
            InvalidArgumentError: If the column is not fully qualified.
            AlreadySetError: If a column was already configured.
        """
        resolved = resolve_column_name(column, qualifier, "column")
        if not resolved.is_qualified:
            raise InvalidArgumentError(
                f"Input column must be fully qualified, found: {resolved}."
            )
        self._set_column(resolved)
        return self

    def build(self) -> QualifiedColumnInputSpec:
        """Build an input spec from the configured fields.

        Raises:
            MissingRequiredFieldError: If no column was configured.
        """
        column = require_field(self._column, "column", "Qualified column input spec")
        return QualifiedColumnInputSpec(
            column=column,
            schema_spec=self._schema_spec,
            max_versions=self._max_versions,
            filter_spec=self._column_filter_spec,
            paging_spec=self._paging_spec,
        )


class ColumnFamilyInputSpecBuilder(_ColumnInputSpecBuilder):
    """Builder for :class:`ColumnFamilyInputSpec`."""

    def copy(self) -> "ColumnFamilyInputSpecBuilder":
        """Return an independent builder holding the current field values."""
        duplicate = ColumnFamilyInputSpecBuilder()
        duplicate._copy_fields_from(self)
        return duplicate

    @property
    def column_family(self) -> ColumnName | None:
        """Configured family column, or None when unset."""
        return self._column

    def with_column_family(self, family: ColumnName | str) -> "ColumnFamilyInputSpecBuilder":
        """Read every qualifier of the given family.

        Args:
            family: Unqualified ColumnName or a bare family name.

        Raises:
            NullArgumentError: If family is None.
            InvalidArgumentError: If the name is qualified or contains the separator.
            AlreadySetError: If a family was already configured.
        """
        require_argument(family, "family")
        if isinstance(family, str):
            resolved = ColumnName(family=family)
        else:
            resolved = resolve_column_name(family, None, "family")
        if resolved.is_qualified:
            raise InvalidArgumentError(
                f"Input column family can not be fully qualified, found: {resolved}."
            )
        self._set_column(resolved)
        return self

    def build(self) -> ColumnFamilyInputSpec:
        """Build an input spec from the configured fields.

        Raises:
            MissingRequiredFieldError: If no family was configured.
        """
        column = require_field(self._column, "column_family", "Column family input spec")
        return ColumnFamilyInputSpec(
            column=column,
            schema_spec=self._schema_spec,
            max_versions=self._max_versions,
            filter_spec=self._column_filter_spec,
            paging_spec=self._paging_spec,
        )


ColumnInputSpecBuilder = QualifiedColumnInputSpecBuilder | ColumnFamilyInputSpecBuilder
COLUMN_INPUT_SPEC_BUILDER_TYPES = (QualifiedColumnInputSpecBuilder, ColumnFamilyInputSpecBuilder)
