"""Unit tests for schema, paging, filter and time-range variants."""

from __future__ import annotations

import pytest

from core.constants import MAX_TIMESTAMP
from core.errors import InvalidArgumentError, NullArgumentError
from flow.column_filter_spec import NativeColumnFilter
from flow.paging_spec import CellPaging
from flow.schema_spec import GenericSchema, SpecificSchema
from flow.time_range import ALL_TIME, After, At, Before, Between


class _UserRecord:
    pass


def test_generic_schema_equal_for_text_and_mapping() -> None:
    """JSON text and decoded mappings should yield the same canonical schema."""
    from_text = GenericSchema.from_schema('{"type": "record", "name": "User", "fields": []}')
    from_mapping = GenericSchema.from_schema({"name": "User", "fields": [], "type": "record"})

    assert from_text == from_mapping


def test_generic_schema_accepts_primitive_name() -> None:
    """Primitive schema names are valid schemas."""
    assert GenericSchema.from_schema("string").schema == "string"


def test_generic_schema_rejects_invalid_json() -> None:
    """Malformed schema text should be rejected."""
    with pytest.raises(InvalidArgumentError):
        GenericSchema.from_schema("{not json")


@pytest.mark.parametrize("schema_text", ["this is not a schema", '"user record"', "com..User"])
def test_generic_schema_rejects_unknown_type_names(schema_text: str) -> None:
    """Bare schema text must be a primitive type or a dotted type name."""
    with pytest.raises(InvalidArgumentError):
        GenericSchema.from_schema(schema_text)


def test_generic_schema_accepts_named_type_reference() -> None:
    """Dotted named types reference a schema defined elsewhere."""
    assert GenericSchema.from_schema("com.example.User").schema == "com.example.User"


def test_specific_schema_requires_class() -> None:
    """Specific schemas need a record class, not an instance."""
    with pytest.raises(InvalidArgumentError):
        SpecificSchema(_UserRecord())  # type: ignore[arg-type]


def test_specific_schema_keeps_record_type() -> None:
    """The record class should be carried as is."""
    assert SpecificSchema(_UserRecord).record_type is _UserRecord


@pytest.mark.parametrize("cell_count", [0, -3])
def test_cell_paging_requires_positive_count(cell_count: int) -> None:
    """Page sizes must be strictly positive."""
    with pytest.raises(InvalidArgumentError):
        CellPaging(cell_count)


def test_native_filter_rejects_none() -> None:
    """A native filter must wrap a real handle."""
    with pytest.raises(NullArgumentError):
        NativeColumnFilter(None)


def test_time_range_bounds() -> None:
    """Before includes its bound and After excludes its bound."""
    bounds = [
        (time_range.begin, time_range.end)
        for time_range in (ALL_TIME, Before(50), After(10), Between(100, 200), At(7))
    ]

    assert bounds == [(0, MAX_TIMESTAMP), (0, 51), (11, MAX_TIMESTAMP), (100, 200), (7, 8)]


def test_between_rejects_reversed_bounds() -> None:
    """Start after end should be rejected."""
    with pytest.raises(InvalidArgumentError):
        Between(200, 100)


def test_time_range_rejects_negative_timestamp() -> None:
    """Timestamps start at zero."""
    with pytest.raises(InvalidArgumentError):
        After(-1)


def test_time_range_rejects_timestamp_above_maximum() -> None:
    """Timestamps past the largest bound should be rejected."""
    with pytest.raises(InvalidArgumentError):
        After(MAX_TIMESTAMP + 5)


@pytest.mark.parametrize("time_range_type", [Before, After])
def test_open_ended_range_rejects_maximum_bound(time_range_type: type) -> None:
    """A bound at the maximum would shift past the representable range."""
    with pytest.raises(InvalidArgumentError):
        time_range_type(MAX_TIMESTAMP)


def test_before_keeps_inclusive_bound() -> None:
    """The requested bound is kept on the value and the interval end moves past it."""
    time_range = Before(MAX_TIMESTAMP - 1)

    assert (time_range.until, time_range.end) == (MAX_TIMESTAMP - 1, MAX_TIMESTAMP)


def test_time_range_kinds_are_distinct() -> None:
    """Every variant carries its own tag for dispatch."""
    time_ranges = (ALL_TIME, Before(1), After(1), Between(1, 2), At(1))
    kinds = {time_range.kind for time_range in time_ranges}

    assert kinds == {"all", "before", "after", "between", "at"}
