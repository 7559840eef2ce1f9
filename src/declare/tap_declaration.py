"""YAML tap declarations.

This module loads tap declarations from YAML files and replays them
through the tap and column builders, so a declared tap obeys exactly
the rules of one assembled in code.
"""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Mapping, cast

from core.config import FlowConfig
from core.constants import TABLE_URI_SCHEME, TAP_DECLARATION_VERSION
from core.errors import ColumnTapDependencyError, TapDeclarationError
from core.logging_config import configure_logging, get_logger
from declare.declaration_fields import (
    expect_int,
    expect_mapping,
    expect_sequence,
    optional_int,
    optional_string,
    reject_unknown_keys,
    single_entry,
)
from flow.builder_base import SchemaSelectingBuilder
from flow.input_spec_builders import (
    ColumnFamilyInputSpecBuilder,
    ColumnInputSpecBuilder,
    QualifiedColumnInputSpecBuilder,
)
from flow.output_spec_builders import (
    ColumnFamilyOutputSpecBuilder,
    ColumnOutputSpecBuilder,
    QualifiedColumnOutputSpecBuilder,
)
from flow.tap_builder import TapBuilder

_LOGGER = get_logger(__name__)

_ROOT_KEYS = {"version", "table", "time_range", "timestamp_field", "inputs", "outputs"}
_INPUT_KEYS = {"column", "family", "schema", "max_versions", "paging"}
_OUTPUT_KEYS = {"column", "family", "qualifier_selector", "schema"}


def load_tap_declaration(declaration_path: str, config: FlowConfig | None = None) -> TapBuilder:
    """Load a YAML tap declaration from disk.

    Args:
        declaration_path: File path to the YAML declaration.
        config: Optional runtime configuration used to expand bare table names.

    Returns:
        Tap builder populated from the declaration.

    Raises:
        ColumnTapDependencyError: If PyYAML is unavailable.
        TapDeclarationError: If the file is unreadable or malformed.
        ColumnTapError: If a declared value breaks a builder rule.
    """
    resolved_config = config or FlowConfig.from_env()
    configure_logging(resolved_config.log_level)
    payload = _load_yaml_payload(declaration_path)
    builder = parse_tap_declaration(payload, resolved_config)
    _LOGGER.info(
        "tap_declaration_loaded",
        declaration_path=declaration_path,
        table_uri=str(builder.table_uri),
        input_fields=sorted(builder.input_columns or {}),
        output_fields=sorted(builder.output_columns or {}),
    )
    return builder


def parse_tap_declaration(payload: object, config: FlowConfig | None = None) -> TapBuilder:
    """Replay an already decoded declaration through a new tap builder.

    Args:
        payload: Decoded YAML document.
        config: Optional runtime configuration used to expand bare table names.

    Returns:
        Populated tap builder.
    """
    resolved_config = config or FlowConfig.from_env()
    root_mapping = expect_mapping(payload, "tap declaration root")
    reject_unknown_keys(root_mapping, _ROOT_KEYS, "Tap declaration")
    _parse_version(root_mapping)
    builder = TapBuilder()
    table = optional_string(root_mapping, "table", "tap declaration")
    if table is None:
        raise TapDeclarationError("Tap declaration missing required field 'table'.")
    builder.with_table_uri(_expand_table_uri(table, resolved_config))
    if "time_range" in root_mapping:
        _apply_time_range(builder, root_mapping["time_range"])
    timestamp_field = optional_string(root_mapping, "timestamp_field", "tap declaration")
    if timestamp_field is not None:
        builder.with_timestamp_field(timestamp_field)
    if root_mapping.get("inputs") is not None:
        builder.with_input_column_builders(_parse_inputs(root_mapping["inputs"]))
    if root_mapping.get("outputs") is not None:
        builder.with_output_column_builders(_parse_outputs(root_mapping["outputs"]))
    return builder


def _load_yaml_payload(declaration_path: str) -> object:
    try:
        import yaml
    except ImportError as error:  # pragma: no cover - dependency failure
        raise ColumnTapDependencyError(
            "YAML tap declarations require PyYAML. Install with 'pip install pyyaml'."
        ) from error
    declaration_file = Path(declaration_path).expanduser().resolve()
    if not declaration_file.exists():
        raise TapDeclarationError(
            f"Tap declaration does not exist at {declaration_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(declaration_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise TapDeclarationError(
            f"Failed to read tap declaration at {declaration_file}: {error}."
        ) from error
    except yaml.YAMLError as error:
        raise TapDeclarationError(
            f"Failed to parse YAML tap declaration at {declaration_file}: {error}. "
            "Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise TapDeclarationError(
            f"Tap declaration at {declaration_file} is empty. Define 'version' and 'table'."
        )
    return payload


def _parse_version(root_mapping: Mapping[str, object]) -> None:
    raw_version = root_mapping.get("version")
    if isinstance(raw_version, bool) or not isinstance(raw_version, int):
        raise TapDeclarationError(
            f"Tap declaration field 'version' must be an integer. "
            f"Set version: {TAP_DECLARATION_VERSION}."
        )
    if raw_version != TAP_DECLARATION_VERSION:
        raise TapDeclarationError(
            f"Unsupported tap declaration version {raw_version}. "
            f"Use version: {TAP_DECLARATION_VERSION}."
        )


def _expand_table_uri(table: str, config: FlowConfig) -> str:
    """Expand ``table`` or ``instance/table`` into a full table URI."""
    if table.startswith(f"{TABLE_URI_SCHEME}://"):
        return table
    segments = table.split("/")
    if len(segments) == 1:
        return f"{TABLE_URI_SCHEME}://{config.cluster}/{config.instance}/{table}"
    if len(segments) == 2:
        return f"{TABLE_URI_SCHEME}://{config.cluster}/{table}"
    raise TapDeclarationError(
        f"Invalid table '{table}': use a table name, instance/table, or a full "
        f"{TABLE_URI_SCHEME}:// URI."
    )


def _apply_time_range(builder: TapBuilder, raw_range: object) -> None:
    if raw_range == "all":
        builder.with_all_time()
        return
    range_mapping = expect_mapping(raw_range, "time_range")
    range_kind, range_value = single_entry(range_mapping, "time_range")
    context = f"time_range '{range_kind}'"
    if range_kind == "before":
        builder.with_time_before(expect_int(range_value, context))
    elif range_kind == "after":
        builder.with_time_after(expect_int(range_value, context))
    elif range_kind == "at":
        builder.with_exact_time(expect_int(range_value, context))
    elif range_kind == "between":
        bounds = expect_sequence(range_value, context)
        if len(bounds) != 2:
            raise TapDeclarationError(f"Invalid {context}: expected [start, end].")
        builder.with_time_between(expect_int(bounds[0], context), expect_int(bounds[1], context))
    else:
        raise TapDeclarationError(
            f"Unsupported time_range '{range_kind}'. Use all, before, after, between, or at."
        )


def _parse_inputs(raw_inputs: object) -> dict[str, ColumnInputSpecBuilder]:
    inputs_mapping = expect_mapping(raw_inputs, "inputs")
    builders: dict[str, ColumnInputSpecBuilder] = {}
    for field_name, raw_column in inputs_mapping.items():
        context = f"input '{field_name}'"
        column_mapping = expect_mapping(raw_column, context)
        reject_unknown_keys(column_mapping, _INPUT_KEYS, f"Input '{field_name}'")
        builder = _input_builder_for(column_mapping, context)
        _apply_schema(builder, column_mapping.get("schema"), context)
        max_versions = optional_int(column_mapping, "max_versions", context)
        if max_versions is not None:
            builder.with_max_versions(max_versions)
        if "paging" in column_mapping:
            _apply_paging(builder, column_mapping["paging"], context)
        builders[field_name] = builder
    return builders


def _input_builder_for(
    column_mapping: Mapping[str, object],
    context: str,
) -> ColumnInputSpecBuilder:
    column, family = _column_or_family(column_mapping, context)
    if column is not None:
        return QualifiedColumnInputSpecBuilder().with_qualified_column(column)
    return ColumnFamilyInputSpecBuilder().with_column_family(cast(str, family))


def _parse_outputs(raw_outputs: object) -> dict[str, ColumnOutputSpecBuilder]:
    outputs_mapping = expect_mapping(raw_outputs, "outputs")
    builders: dict[str, ColumnOutputSpecBuilder] = {}
    for field_name, raw_column in outputs_mapping.items():
        context = f"output '{field_name}'"
        column_mapping = expect_mapping(raw_column, context)
        reject_unknown_keys(column_mapping, _OUTPUT_KEYS, f"Output '{field_name}'")
        column, family = _column_or_family(column_mapping, context)
        qualifier_selector = optional_string(column_mapping, "qualifier_selector", context)
        builder: ColumnOutputSpecBuilder
        if column is not None:
            if qualifier_selector is not None:
                raise TapDeclarationError(
                    f"Invalid {context}: 'qualifier_selector' only applies to family outputs."
                )
            builder = QualifiedColumnOutputSpecBuilder().with_qualified_column(column)
        else:
            family_builder = ColumnFamilyOutputSpecBuilder().with_column_family(cast(str, family))
            if qualifier_selector is not None:
                family_builder.with_qualifier_selector(qualifier_selector)
            builder = family_builder
        _apply_schema(builder, column_mapping.get("schema"), context)
        builders[field_name] = builder
    return builders


def _column_or_family(
    column_mapping: Mapping[str, object],
    context: str,
) -> tuple[str | None, str | None]:
    column = optional_string(column_mapping, "column", context)
    family = optional_string(column_mapping, "family", context)
    if (column is None) == (family is None):
        raise TapDeclarationError(
            f"Invalid {context}: set exactly one of 'column' or 'family'."
        )
    return column, family


def _apply_schema(builder: SchemaSelectingBuilder, raw_schema: object, context: str) -> None:
    if raw_schema is None:
        return
    if raw_schema == "writer":
        builder.with_writer_schema()
        return
    if raw_schema == "default_reader":
        builder.with_default_reader_schema()
        return
    schema_mapping = expect_mapping(raw_schema, f"{context} schema")
    schema_kind, schema_value = single_entry(schema_mapping, f"{context} schema")
    if schema_kind == "generic":
        if not isinstance(schema_value, (str, Mapping, list)):
            raise TapDeclarationError(
                f"Invalid {context} generic schema: expected an Avro schema document, "
                f"got {type(schema_value).__name__}."
            )
        builder.with_generic_schema(schema_value)
    elif schema_kind == "specific":
        builder.with_specific_schema(_import_record_type(schema_value, context))
    else:
        raise TapDeclarationError(
            f"Unsupported schema '{schema_kind}' in {context}. "
            "Use writer, default_reader, generic, or specific."
        )


def _apply_paging(builder: ColumnInputSpecBuilder, raw_paging: object, context: str) -> None:
    # YAML 1.1 reads a bare `off` as False.
    if raw_paging is False or raw_paging == "off":
        builder.with_paging_off()
        return
    paging_mapping = expect_mapping(raw_paging, f"{context} paging")
    reject_unknown_keys(paging_mapping, {"cells"}, f"{context} paging")
    cell_count = optional_int(paging_mapping, "cells", f"{context} paging")
    if cell_count is None:
        raise TapDeclarationError(f"Invalid {context} paging: expected off or {{cells: N}}.")
    builder.with_paging_cell_count(cell_count)


def _import_record_type(raw_reference: object, context: str) -> type:
    """Resolve ``package.module:ClassName`` to a record class."""
    if not isinstance(raw_reference, str) or raw_reference.count(":") != 1:
        raise TapDeclarationError(
            f"Invalid {context} specific schema {raw_reference!r}: use 'module:ClassName'."
        )
    module_name, class_name = raw_reference.split(":", 1)
    try:
        module = importlib.import_module(module_name)
    except ImportError as error:
        raise TapDeclarationError(
            f"Failed to import module '{module_name}' for {context}: {error}."
        ) from error
    record_type = getattr(module, class_name, None)
    if not isinstance(record_type, type):
        raise TapDeclarationError(
            f"Module '{module_name}' has no record class '{class_name}' for {context}."
        )
    return record_type
