"""Column filter selections for input columns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

from core.errors import NullArgumentError

FilterKind = Literal["none", "native"]


@dataclass(frozen=True)
class NoColumnFilter:
    """Return every cell of the column."""

    kind: ClassVar[FilterKind] = "none"


@dataclass(frozen=True)
class NativeColumnFilter:
    """Apply a store-native column filter.

    Attributes:
        native_filter: Opaque filter handle understood by the store client.
    """

    native_filter: object
    kind: ClassVar[FilterKind] = "native"

    def __post_init__(self) -> None:
        if self.native_filter is None:
            raise NullArgumentError("Native column filter may not be None.")


ColumnFilterSpec = NoColumnFilter | NativeColumnFilter
COLUMN_FILTER_SPEC_TYPES = (NoColumnFilter, NativeColumnFilter)

NO_COLUMN_FILTER = NoColumnFilter()
