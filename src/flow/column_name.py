"""Column name model.

This module defines the family/qualifier pair that addresses a column
in a column-family-oriented table.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import FAMILY_QUALIFIER_SEPARATOR
from core.errors import InvalidArgumentError, NullArgumentError


@dataclass(frozen=True)
class ColumnName:
    """Column address made of a family and an optional qualifier.

    Attributes:
        family: Column family name, never containing the separator.
        qualifier: Column qualifier, or None for a whole family.
    """

    family: str
    qualifier: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.family, str) or not self.family:
            raise InvalidArgumentError(
                f"Column family must be a non-empty string, got {self.family!r}."
            )
        if FAMILY_QUALIFIER_SEPARATOR in self.family:
            raise InvalidArgumentError(
                f"Column family may not contain '{FAMILY_QUALIFIER_SEPARATOR}', "
                f"found: {self.family!r}."
            )
        if self.qualifier is not None:
            if not isinstance(self.qualifier, str) or not self.qualifier:
                raise InvalidArgumentError(
                    f"Column qualifier must be a non-empty string, got {self.qualifier!r}."
                )

    @classmethod
    def parse(cls, name: str) -> "ColumnName":
        """Parse ``family`` or ``family:qualifier`` into a column name.

        Args:
            name: Column name text.

        Returns:
            Parsed column name.

        Raises:
            NullArgumentError: If name is None.
            InvalidArgumentError: If either part is empty.
        """
        if name is None:
            raise NullArgumentError("Column name may not be None.")
        if not isinstance(name, str):
            raise InvalidArgumentError(f"Column name must be a string, got {type(name).__name__}.")
        if FAMILY_QUALIFIER_SEPARATOR not in name:
            return cls(family=name)
        family, qualifier = name.split(FAMILY_QUALIFIER_SEPARATOR, 1)
        return cls(family=family, qualifier=qualifier)

    @property
    def is_qualified(self) -> bool:
        """Whether this name addresses a single qualified column."""
        return self.qualifier is not None

    @property
    def name(self) -> str:
        """Render the name as ``family`` or ``family:qualifier``."""
        if self.qualifier is None:
            return self.family
        return f"{self.family}{FAMILY_QUALIFIER_SEPARATOR}{self.qualifier}"

    def __str__(self) -> str:
        return self.name
