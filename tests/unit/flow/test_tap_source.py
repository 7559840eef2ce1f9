"""Unit tests for tap construction."""

from __future__ import annotations

import pytest

from core.errors import MissingRequiredFieldError, TapConfigurationError
from flow.column_name import ColumnName
from flow.column_specs import (
    ColumnFamilyOutputSpec,
    QualifiedColumnInputSpec,
    QualifiedColumnOutputSpec,
)
from flow.table_uri import parse_table_uri
from flow.tap_source import make_tap

_TABLE_URI = parse_table_uri("kiji://.env/default/users")


def test_make_tap_requires_table_uri() -> None:
    """Taps always address a table."""
    with pytest.raises(MissingRequiredFieldError):
        make_tap(None, None, None, {}, {})


def test_make_tap_freezes_column_maps() -> None:
    """Tap column maps should be read-only."""
    tap = make_tap(
        _TABLE_URI,
        None,
        None,
        {"name": QualifiedColumnInputSpec(column=ColumnName("info", "name"))},
        {},
    )

    with pytest.raises(TypeError):
        tap.input_columns["other"] = tap.input_columns["name"]  # type: ignore[index]


def test_make_tap_detaches_from_caller_maps() -> None:
    """Changing the caller's dict after construction should not alter the tap."""
    inputs = {"name": QualifiedColumnInputSpec(column=ColumnName("info", "name"))}
    tap = make_tap(_TABLE_URI, None, None, inputs, {})
    inputs.clear()

    assert tap.input_fields == ("name",)


def test_make_tap_reports_source_and_sink_roles() -> None:
    """Source and sink flags should follow the column maps."""
    tap = make_tap(
        _TABLE_URI,
        None,
        None,
        {},
        {"comment": ColumnFamilyOutputSpec("comments", "author")},
    )

    assert (tap.is_source, tap.is_sink) == (False, True)


def test_make_tap_rejects_timestamp_field_used_as_output_column() -> None:
    """The timestamp field cannot also be written as a column."""
    with pytest.raises(TapConfigurationError):
        make_tap(
            _TABLE_URI,
            None,
            "ts",
            {},
            {"ts": QualifiedColumnOutputSpec(column=ColumnName("info", "ts"))},
        )


def test_make_tap_rejects_timestamp_field_used_as_input_column() -> None:
    """The timestamp field cannot also be read from a column."""
    with pytest.raises(TapConfigurationError, match="input column"):
        make_tap(
            _TABLE_URI,
            None,
            "ts",
            {"ts": QualifiedColumnInputSpec(column=ColumnName("info", "ts"))},
            {},
        )


def test_make_tap_accepts_dedicated_timestamp_field() -> None:
    """A timestamp field outside both column maps is kept on the tap."""
    tap = make_tap(
        _TABLE_URI,
        None,
        "written_at",
        {"name": QualifiedColumnInputSpec(column=ColumnName("info", "name"))},
        {"score": QualifiedColumnOutputSpec(column=ColumnName("stats", "score"))},
    )

    assert tap.timestamp_field == "written_at"
