"""Builder for tap specifications.

The tap builder collects a table URI, a time range, a timestamp field
and two field-name keyed column maps, then hands them to ``make_tap``.
Column maps can be replaced once with ``with_*`` or grown with
``add_*``; a merge never overwrites an existing field.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, TypeVar

from core.errors import CollisionError, InvalidArgumentError
from core.field_checks import ensure_unset, require_argument, require_field_name
from core.logging_config import get_logger
from flow.column_specs import (
    COLUMN_INPUT_SPEC_TYPES,
    COLUMN_OUTPUT_SPEC_TYPES,
    ColumnInputSpec,
    ColumnOutputSpec,
)
from flow.input_spec_builders import COLUMN_INPUT_SPEC_BUILDER_TYPES, ColumnInputSpecBuilder
from flow.output_spec_builders import COLUMN_OUTPUT_SPEC_BUILDER_TYPES, ColumnOutputSpecBuilder
from flow.table_uri import TableURI, parse_table_uri
from flow.tap_source import TapSpec, make_tap
from flow.time_range import ALL_TIME, TIME_RANGE_TYPES, After, At, Before, Between, TimeRange

_LOGGER = get_logger(__name__)

_SpecT = TypeVar("_SpecT")


class TapBuilder:
    """Mutable accumulator for a :class:`TapSpec`."""

    def __init__(self) -> None:
        self._table_uri: TableURI | None = None
        self._time_range: TimeRange | None = None
        self._timestamp_field: str | None = None
        self._input_columns: dict[str, ColumnInputSpec] | None = None
        self._output_columns: dict[str, ColumnOutputSpec] | None = None

    def copy(self) -> "TapBuilder":
        """Return an independent builder holding the current field values.

        Column maps are copied, so later merges into either builder stay
        invisible to the other.
        """
        duplicate = TapBuilder()
        duplicate._table_uri = self._table_uri
        duplicate._time_range = self._time_range
        duplicate._timestamp_field = self._timestamp_field
        if self._input_columns is not None:
            duplicate._input_columns = dict(self._input_columns)
        if self._output_columns is not None:
            duplicate._output_columns = dict(self._output_columns)
        return duplicate

    @property
    def table_uri(self) -> TableURI | None:
        """Configured table, or None while unset."""
        return self._table_uri

    def with_table_uri(self, table_uri: TableURI | str) -> "TapBuilder":
        """Target the given table.

        Args:
            table_uri: Parsed URI or ``kiji://cluster/instance/table`` text.

        Raises:
            NullArgumentError: If table_uri is None.
            InvalidArgumentError: If the URI is malformed or names no table.
            AlreadySetError: If a table URI was already configured.
        """
        require_argument(table_uri, "table_uri")
        if isinstance(table_uri, str):
            parsed = parse_table_uri(table_uri)
        elif isinstance(table_uri, TableURI):
            parsed = table_uri
        else:
            raise InvalidArgumentError(
                f"Table URI must be a TableURI or string, got {type(table_uri).__name__}."
            )
        if not parsed.names_table:
            raise InvalidArgumentError(f"Table URI must include a table name, found: {parsed}.")
        ensure_unset(self._table_uri, "table_uri")
        self._table_uri = parsed
        return self

    @property
    def time_range(self) -> TimeRange | None:
        """Configured time range, or None while unset."""
        return self._time_range

    def with_time_range(self, time_range: TimeRange) -> "TapBuilder":
        """Read only cells whose timestamps fall in the given range.

        Raises:
            NullArgumentError: If time_range is None.
            InvalidArgumentError: If time_range is not a time range.
            AlreadySetError: If a time range was already configured.
        """
        require_argument(time_range, "time_range")
        if not isinstance(time_range, TIME_RANGE_TYPES):
            raise InvalidArgumentError(
                f"Expected a time range, got {type(time_range).__name__}."
            )
        ensure_unset(self._time_range, "time_range")
        self._time_range = time_range
        return self

    def with_time_before(self, end: int) -> "TapBuilder":
        """Read cells written at or before ``end`` (inclusive)."""
        return self.with_time_range(Before(end))

    def with_time_after(self, start: int) -> "TapBuilder":
        """Read cells written after ``start`` (exclusive)."""
        return self.with_time_range(After(start))

    def with_time_between(self, start: int, end: int) -> "TapBuilder":
        """Read cells written from ``start`` (inclusive) up to ``end`` (exclusive)."""
        return self.with_time_range(Between(start, end))

    def with_all_time(self) -> "TapBuilder":
        """Read cells regardless of their timestamp."""
        return self.with_time_range(ALL_TIME)

    def with_exact_time(self, timestamp: int) -> "TapBuilder":
        """Read only cells written exactly at ``timestamp``."""
        return self.with_time_range(At(timestamp))

    @property
    def timestamp_field(self) -> str | None:
        """Field supplying write timestamps, or None while unset."""
        return self._timestamp_field

    def with_timestamp_field(self, timestamp_field: str) -> "TapBuilder":
        """Take explicit write timestamps from the named field.

        Raises:
            NullArgumentError: If timestamp_field is None.
            InvalidArgumentError: If timestamp_field is empty.
            AlreadySetError: If a timestamp field was already configured.
        """
        field_name = require_field_name(timestamp_field, "timestamp_field")
        ensure_unset(self._timestamp_field, "timestamp_field")
        self._timestamp_field = field_name
        return self

    @property
    def input_columns(self) -> Mapping[str, ColumnInputSpec] | None:
        """Read-only view of the input map, or None when unset."""
        if self._input_columns is None:
            return None
        return MappingProxyType(self._input_columns)

    def with_input_columns(self, input_columns: Mapping[str, ColumnInputSpec]) -> "TapBuilder":
        """Set the whole input map.

        Raises:
            NullArgumentError: If input_columns is None.
            InvalidArgumentError: If a key or value has the wrong type.
            AlreadySetError: If the input map was already configured.
        """
        entries = _validated_entries(input_columns, COLUMN_INPUT_SPEC_TYPES, "input_columns")
        ensure_unset(self._input_columns, "input_columns")
        self._input_columns = entries
        return self

    def add_input_columns(self, input_columns: Mapping[str, ColumnInputSpec]) -> "TapBuilder":
        """Merge entries into the input map.

        Raises:
            NullArgumentError: If input_columns is None.
            InvalidArgumentError: If a key or value has the wrong type.
            CollisionError: If a field is already mapped; nothing is merged then.
        """
        entries = _validated_entries(input_columns, COLUMN_INPUT_SPEC_TYPES, "input_columns")
        self._input_columns = _merged(self._input_columns, entries, "input")
        return self

    def with_input_column_builders(
        self,
        input_column_builders: Mapping[str, ColumnInputSpecBuilder],
    ) -> "TapBuilder":
        """Build each input builder now and set the whole input map."""
        entries = _built_entries(
            input_column_builders,
            COLUMN_INPUT_SPEC_BUILDER_TYPES,
            "input_column_builders",
        )
        ensure_unset(self._input_columns, "input_columns")
        self._input_columns = entries
        return self

    def add_input_column_builders(
        self,
        input_column_builders: Mapping[str, ColumnInputSpecBuilder],
    ) -> "TapBuilder":
        """Build each input builder now and merge the results into the input map."""
        entries = _built_entries(
            input_column_builders,
            COLUMN_INPUT_SPEC_BUILDER_TYPES,
            "input_column_builders",
        )
        self._input_columns = _merged(self._input_columns, entries, "input")
        return self

    @property
    def output_columns(self) -> Mapping[str, ColumnOutputSpec] | None:
        """Read-only view of the output map, or None when unset."""
        if self._output_columns is None:
            return None
        return MappingProxyType(self._output_columns)

    def with_output_columns(self, output_columns: Mapping[str, ColumnOutputSpec]) -> "TapBuilder":
        """Set the whole output map.

        Raises:
            NullArgumentError: If output_columns is None.
            InvalidArgumentError: If a key or value has the wrong type.
            AlreadySetError: If the output map was already configured.
        """
        entries = _validated_entries(output_columns, COLUMN_OUTPUT_SPEC_TYPES, "output_columns")
        ensure_unset(self._output_columns, "output_columns")
        self._output_columns = entries
        return self

    def add_output_columns(self, output_columns: Mapping[str, ColumnOutputSpec]) -> "TapBuilder":
        """Merge entries into the output map.

        Raises:
            NullArgumentError: If output_columns is None.
            InvalidArgumentError: If a key or value has the wrong type.
            CollisionError: If a field is already mapped; nothing is merged then.
        """
        entries = _validated_entries(output_columns, COLUMN_OUTPUT_SPEC_TYPES, "output_columns")
        self._output_columns = _merged(self._output_columns, entries, "output")
        return self

    def with_output_column_builders(
        self,
        output_column_builders: Mapping[str, ColumnOutputSpecBuilder],
    ) -> "TapBuilder":
        """Build each output builder now and set the whole output map."""
        entries = _built_entries(
            output_column_builders,
            COLUMN_OUTPUT_SPEC_BUILDER_TYPES,
            "output_column_builders",
        )
        ensure_unset(self._output_columns, "output_columns")
        self._output_columns = entries
        return self

    def add_output_column_builders(
        self,
        output_column_builders: Mapping[str, ColumnOutputSpecBuilder],
    ) -> "TapBuilder":
        """Build each output builder now and merge the results into the output map."""
        entries = _built_entries(
            output_column_builders,
            COLUMN_OUTPUT_SPEC_BUILDER_TYPES,
            "output_column_builders",
        )
        self._output_columns = _merged(self._output_columns, entries, "output")
        return self

    def build(self) -> TapSpec:
        """Hand the collected parts to ``make_tap``.

        Required-field checks happen in ``make_tap``, not here.

        Raises:
            MissingRequiredFieldError: If no table URI was configured.
            TapConfigurationError: If the parts do not form a valid tap.
        """
        return make_tap(
            self._table_uri,
            self._time_range,
            self._timestamp_field,
            self._input_columns or {},
            self._output_columns or {},
        )


def _validated_entries(
    columns: Mapping[str, _SpecT],
    value_types: tuple[type, ...],
    argument_name: str,
) -> dict[str, _SpecT]:
    require_argument(columns, argument_name)
    if not isinstance(columns, Mapping):
        raise InvalidArgumentError(
            f"Argument '{argument_name}' must be a mapping, got {type(columns).__name__}."
        )
    entries: dict[str, _SpecT] = {}
    for field_name, spec in columns.items():
        require_field_name(field_name, f"{argument_name} key")
        if not isinstance(spec, value_types):
            expected = ", ".join(value_type.__name__ for value_type in value_types)
            raise InvalidArgumentError(
                f"Field '{field_name}' in {argument_name} must map to one of: {expected}; "
                f"got {type(spec).__name__}."
            )
        entries[field_name] = spec
    return entries


def _built_entries(
    builders: Mapping[str, object],
    builder_types: tuple[type, ...],
    argument_name: str,
) -> dict:
    """Build every builder before any builder state is touched."""
    validated_builders = _validated_entries(builders, builder_types, argument_name)
    return {field_name: builder.build() for field_name, builder in validated_builders.items()}


def _merged(
    existing: dict[str, _SpecT] | None,
    incoming: dict[str, _SpecT],
    map_name: str,
) -> dict[str, _SpecT]:
    """Insert-if-absent merge that fails before mutating anything."""
    if existing is None:
        return incoming
    for field_name in incoming:
        if field_name in existing:
            raise CollisionError(field_name, existing[field_name], map_name)
    existing.update(incoming)
    _LOGGER.debug("tap_columns_merged", map_name=map_name, added_fields=sorted(incoming))
    return existing
