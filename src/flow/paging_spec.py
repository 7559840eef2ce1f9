"""Paging modes for multi-version cell reads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

from core.errors import InvalidArgumentError

PagingKind = Literal["off", "cells"]


@dataclass(frozen=True)
class PagingOff:
    """Fetch all requested versions in one request."""

    kind: ClassVar[PagingKind] = "off"


@dataclass(frozen=True)
class CellPaging:
    """Fetch cells in pages of a fixed size.

    Attributes:
        cell_count: Number of cells per page, strictly positive.
    """

    cell_count: int
    kind: ClassVar[PagingKind] = "cells"

    def __post_init__(self) -> None:
        if isinstance(self.cell_count, bool) or not isinstance(self.cell_count, int):
            raise InvalidArgumentError(
                f"Page cell count must be an integer, got {type(self.cell_count).__name__}."
            )
        if self.cell_count <= 0:
            raise InvalidArgumentError(
                f"Page cell count must be strictly positive, but got: {self.cell_count}."
            )


PagingSpec = PagingOff | CellPaging
PAGING_SPEC_TYPES = (PagingOff, CellPaging)

PAGING_OFF = PagingOff()
