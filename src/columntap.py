"""Public SDK surface for columntap.

This module provides a stable import path for pipeline authors.
It re-exports the builders, spec values and the declaration loader.
"""

from __future__ import annotations

from core.config import FlowConfig
from core.errors import (
    AlreadySetError,
    CollisionError,
    ColumnTapError,
    InvalidArgumentError,
    MissingRequiredFieldError,
    NullArgumentError,
    TapConfigurationError,
    TapDeclarationError,
)
from declare.tap_declaration import load_tap_declaration, parse_tap_declaration
from flow.column_filter_spec import NO_COLUMN_FILTER, NativeColumnFilter, NoColumnFilter
from flow.column_name import ColumnName
from flow.column_specs import (
    DEFAULT_OUTPUT_SCHEMA_SPEC,
    ColumnFamilyInputSpec,
    ColumnFamilyOutputSpec,
    QualifiedColumnInputSpec,
    QualifiedColumnOutputSpec,
)
from flow.input_spec_builders import ColumnFamilyInputSpecBuilder, QualifiedColumnInputSpecBuilder
from flow.output_spec_builders import (
    ColumnFamilyOutputSpecBuilder,
    QualifiedColumnOutputSpecBuilder,
)
from flow.paging_spec import PAGING_OFF, CellPaging, PagingOff
from flow.schema_spec import (
    DEFAULT_READER_SCHEMA,
    WRITER_SCHEMA,
    DefaultReaderSchema,
    GenericSchema,
    SpecificSchema,
    WriterSchema,
)
from flow.table_uri import TableURI, parse_table_uri
from flow.tap_builder import TapBuilder
from flow.tap_source import TapSpec
from flow.time_range import ALL_TIME, After, AllTime, At, Before, Between

__all__ = [
    "ALL_TIME",
    "After",
    "AllTime",
    "AlreadySetError",
    "At",
    "Before",
    "Between",
    "CellPaging",
    "CollisionError",
    "ColumnFamilyInputSpec",
    "ColumnFamilyInputSpecBuilder",
    "ColumnFamilyOutputSpec",
    "ColumnFamilyOutputSpecBuilder",
    "ColumnName",
    "ColumnTapError",
    "DEFAULT_OUTPUT_SCHEMA_SPEC",
    "DEFAULT_READER_SCHEMA",
    "DefaultReaderSchema",
    "FlowConfig",
    "GenericSchema",
    "InvalidArgumentError",
    "MissingRequiredFieldError",
    "NO_COLUMN_FILTER",
    "NativeColumnFilter",
    "NoColumnFilter",
    "NullArgumentError",
    "PAGING_OFF",
    "PagingOff",
    "QualifiedColumnInputSpec",
    "QualifiedColumnInputSpecBuilder",
    "QualifiedColumnOutputSpec",
    "QualifiedColumnOutputSpecBuilder",
    "SpecificSchema",
    "TableURI",
    "TapBuilder",
    "TapConfigurationError",
    "TapDeclarationError",
    "TapSpec",
    "WRITER_SCHEMA",
    "WriterSchema",
    "load_tap_declaration",
    "parse_table_uri",
    "parse_tap_declaration",
]
