"""Integration tests for declaring, extending and building taps."""

from __future__ import annotations

import pytest

from columntap import (
    CollisionError,
    QualifiedColumnInputSpecBuilder,
    QualifiedColumnOutputSpecBuilder,
    load_tap_declaration,
)
from tests.fixture_paths import fixture_path


def test_declared_tap_extended_in_code_builds_full_spec(flow_config) -> None:
    """A declared tap should accept extra columns and build one spec."""
    builder = load_tap_declaration(str(fixture_path("taps/users_tap.yaml")), flow_config)
    builder.add_input_column_builders(
        {"email": QualifiedColumnInputSpecBuilder().with_qualified_column("info", "email")}
    )
    builder.add_output_column_builders(
        {"rank": QualifiedColumnOutputSpecBuilder().with_qualified_column("stats:rank")}
    )

    tap = builder.build()

    assert (
        str(tap.table_uri) == "kiji://.env/default/users"
        and tap.input_fields == ("email", "events", "name", "profile")
        and tap.output_fields == ("comment", "rank", "score")
        and tap.is_source
        and tap.is_sink
    )


def test_declared_tap_copy_diverges_from_original(flow_config) -> None:
    """Copies of a declared tap should grow independently."""
    original = load_tap_declaration(str(fixture_path("taps/users_tap.yaml")), flow_config)
    variant = original.copy()
    variant.add_input_column_builders(
        {"email": QualifiedColumnInputSpecBuilder().with_qualified_column("info:email")}
    )

    assert "email" not in original.build().input_columns
    assert "email" in variant.build().input_columns


def test_declared_tap_rejects_colliding_extension(flow_config) -> None:
    """Extending a declared field should fail without touching the declaration."""
    builder = load_tap_declaration(str(fixture_path("taps/users_tap.yaml")), flow_config)
    declared_name = (builder.input_columns or {})["name"]

    with pytest.raises(CollisionError):
        builder.add_input_column_builders(
            {"name": QualifiedColumnInputSpecBuilder().with_qualified_column("info:nickname")}
        )

    assert (builder.input_columns or {})["name"] == declared_name
