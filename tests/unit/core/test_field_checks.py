"""Unit tests for shared builder field checks."""

from __future__ import annotations

import pytest

from core.constants import MAX_TIMESTAMP
from core.errors import (
    AlreadySetError,
    InvalidArgumentError,
    MissingRequiredFieldError,
    NullArgumentError,
)
from core.field_checks import (
    ensure_unset,
    require_argument,
    require_field,
    require_field_name,
    require_positive_int,
    require_timestamp,
)


def test_require_argument_rejects_none() -> None:
    """None arguments should raise a null-argument error."""
    with pytest.raises(NullArgumentError):
        require_argument(None, "value")


def test_ensure_unset_reports_field_and_current_value() -> None:
    """Already-set errors should carry diagnostics."""
    with pytest.raises(AlreadySetError) as error_info:
        ensure_unset(3, "max_versions")

    assert (error_info.value.field_name, error_info.value.current_value) == ("max_versions", 3)


def test_require_field_reports_missing_field() -> None:
    """Missing-field errors should name the field."""
    with pytest.raises(MissingRequiredFieldError) as error_info:
        require_field(None, "column", "Input spec")

    assert error_info.value.field_name == "column"


@pytest.mark.parametrize("value", [0, -1, True, 1.5, "3"])
def test_require_positive_int_rejects_invalid_values(value: object) -> None:
    """Only integers above zero should pass."""
    with pytest.raises(InvalidArgumentError):
        require_positive_int(value, "count")


def test_require_positive_int_accepts_one() -> None:
    """One is the smallest accepted value."""
    assert require_positive_int(1, "count") == 1


def test_require_timestamp_rejects_negative_values() -> None:
    """Timestamps start at zero."""
    with pytest.raises(InvalidArgumentError):
        require_timestamp(-5, "start")


def test_require_timestamp_rejects_values_above_maximum() -> None:
    """Timestamps stop at the largest signed 64-bit value."""
    assert require_timestamp(MAX_TIMESTAMP, "end") == MAX_TIMESTAMP
    with pytest.raises(InvalidArgumentError):
        require_timestamp(MAX_TIMESTAMP + 1, "end")


def test_require_field_name_rejects_blank_names() -> None:
    """Blank pipeline field names should be rejected."""
    with pytest.raises(InvalidArgumentError):
        require_field_name("  ", "field")
