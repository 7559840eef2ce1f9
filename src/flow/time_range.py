"""Time-range selections over cell timestamps.

Every variant maps onto a half-open ``[begin, end)`` interval of
millisecond timestamps so the pipeline layer never has to dispatch on
the variant itself. ``Before`` is inclusive of its bound and ``After``
exclusive of its bound, so both shift by one when mapped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

from core.constants import MAX_TIMESTAMP, MIN_TIMESTAMP
from core.errors import InvalidArgumentError
from core.field_checks import require_timestamp

TimeRangeKind = Literal["all", "before", "after", "between", "at"]


@dataclass(frozen=True)
class AllTime:
    """Every timestamp."""

    kind: ClassVar[TimeRangeKind] = "all"

    @property
    def begin(self) -> int:
        return MIN_TIMESTAMP

    @property
    def end(self) -> int:
        return MAX_TIMESTAMP


@dataclass(frozen=True)
class Before:
    """Timestamps at or earlier than ``until``.

    The bound is inclusive, so ``end`` is ``until + 1``.
    """

    until: int
    kind: ClassVar[TimeRangeKind] = "before"

    def __post_init__(self) -> None:
        require_timestamp(self.until, "end")
        if self.until >= MAX_TIMESTAMP:
            raise InvalidArgumentError(
                f"Inclusive end must be below {MAX_TIMESTAMP}, but got: {self.until}. "
                "Use the all-time range instead."
            )

    @property
    def begin(self) -> int:
        return MIN_TIMESTAMP

    @property
    def end(self) -> int:
        return self.until + 1


@dataclass(frozen=True)
class After:
    """Timestamps strictly later than ``start``."""

    start: int
    kind: ClassVar[TimeRangeKind] = "after"

    def __post_init__(self) -> None:
        require_timestamp(self.start, "start")
        if self.start >= MAX_TIMESTAMP:
            raise InvalidArgumentError(
                f"Exclusive start must be below {MAX_TIMESTAMP}, but got: {self.start}. "
                "No timestamp lies after it."
            )

    @property
    def begin(self) -> int:
        return self.start + 1

    @property
    def end(self) -> int:
        return MAX_TIMESTAMP


@dataclass(frozen=True)
class Between:
    """Timestamps in ``[start, end)``."""

    start: int
    end: int
    kind: ClassVar[TimeRangeKind] = "between"

    def __post_init__(self) -> None:
        require_timestamp(self.start, "start")
        require_timestamp(self.end, "end")
        if self.start > self.end:
            raise InvalidArgumentError(
                f"Time range start {self.start} is after end {self.end}. Swap the bounds."
            )

    @property
    def begin(self) -> int:
        return self.start


@dataclass(frozen=True)
class At:
    """Exactly one timestamp."""

    timestamp: int
    kind: ClassVar[TimeRangeKind] = "at"

    def __post_init__(self) -> None:
        require_timestamp(self.timestamp, "timestamp")
        if self.timestamp >= MAX_TIMESTAMP:
            raise InvalidArgumentError(
                f"Exact timestamp must be below {MAX_TIMESTAMP}, but got: {self.timestamp}."
            )

    @property
    def begin(self) -> int:
        return self.timestamp

    @property
    def end(self) -> int:
        return self.timestamp + 1


TimeRange = AllTime | Before | After | Between | At
TIME_RANGE_TYPES = (AllTime, Before, After, Between, At)

ALL_TIME = AllTime()
