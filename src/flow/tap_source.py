"""Tap construction for the pipeline layer.

This module turns the parts collected by a tap builder into the frozen
``TapSpec`` handed to pipeline jobs. It is the only place that checks
the tap as a whole.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from core.errors import MissingRequiredFieldError, TapConfigurationError
from core.logging_config import get_logger
from flow.column_specs import ColumnInputSpec, ColumnOutputSpec
from flow.table_uri import TableURI
from flow.time_range import TimeRange

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class TapSpec:
    """Access specification for one table.

    Attributes:
        table_uri: Table the tap reads from and writes to.
        time_range: Timestamp window for reads, None for the store default.
        timestamp_field: Output field supplying explicit write timestamps.
        input_columns: Pipeline field name to input column spec.
        output_columns: Pipeline field name to output column spec.
    """

    table_uri: TableURI
    time_range: TimeRange | None = None
    timestamp_field: str | None = None
    input_columns: Mapping[str, ColumnInputSpec] = field(
        default_factory=lambda: MappingProxyType({})
    )
    output_columns: Mapping[str, ColumnOutputSpec] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def is_source(self) -> bool:
        """Whether the tap reads any columns."""
        return len(self.input_columns) > 0

    @property
    def is_sink(self) -> bool:
        """Whether the tap writes any columns."""
        return len(self.output_columns) > 0

    @property
    def input_fields(self) -> tuple[str, ...]:
        return tuple(sorted(self.input_columns))

    @property
    def output_fields(self) -> tuple[str, ...]:
        return tuple(sorted(self.output_columns))


def make_tap(
    table_uri: TableURI | None,
    time_range: TimeRange | None,
    timestamp_field: str | None,
    input_columns: Mapping[str, ColumnInputSpec],
    output_columns: Mapping[str, ColumnOutputSpec],
) -> TapSpec:
    """Assemble a tap from builder state.

    Args:
        table_uri: Table identity, required.
        time_range: Optional read time window.
        timestamp_field: Optional field carrying write timestamps.
        input_columns: Field name to input spec mapping.
        output_columns: Field name to output spec mapping.

    Returns:
        Frozen tap specification with read-only column maps.

    Raises:
        MissingRequiredFieldError: If no table URI is given.
        TapConfigurationError: If the timestamp field is also an input or
            output column field.
    """
    if table_uri is None:
        raise MissingRequiredFieldError("table_uri", "Tap")
    if timestamp_field is not None:
        for role, columns in (("input", input_columns), ("output", output_columns)):
            if timestamp_field in columns:
                raise TapConfigurationError(
                    f"Timestamp field '{timestamp_field}' is also mapped to {role} column "
                    f"{columns[timestamp_field]!r}. Use a dedicated timestamp field."
                )
    tap = TapSpec(
        table_uri=table_uri,
        time_range=time_range,
        timestamp_field=timestamp_field,
        input_columns=MappingProxyType(dict(input_columns)),
        output_columns=MappingProxyType(dict(output_columns)),
    )
    _LOGGER.info(
        "tap_built",
        table_uri=str(table_uri),
        time_range=None if time_range is None else time_range.kind,
        timestamp_field=timestamp_field,
        input_fields=list(tap.input_fields),
        output_fields=list(tap.output_fields),
    )
    return tap
