"""Duration — an immutable span of time counted in milliseconds."""

from __future__ import annotations

import math
from datetime import timedelta
from functools import total_ordering
from typing import ClassVar


@total_ordering
class Duration:
    """A span of time.

    Built from a millisecond count, keyword units, or both; the parts are
    summed and ``None`` units are skipped::

        Duration(1500)
        Duration(hours=1, minutes=30)
        Duration(250, seconds=2)
    """

    __slots__ = ("_count",)

    ZERO: ClassVar[Duration]

    HOURS_PER_DAY: ClassVar[int] = 24

    MINUTES_PER_HOUR: ClassVar[int] = 60
    MINUTES_PER_DAY: ClassVar[int] = MINUTES_PER_HOUR * HOURS_PER_DAY

    SECONDS_PER_MINUTE: ClassVar[int] = 60
    SECONDS_PER_HOUR: ClassVar[int] = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
    SECONDS_PER_DAY: ClassVar[int] = SECONDS_PER_HOUR * HOURS_PER_DAY

    MILLISECONDS_PER_SECOND: ClassVar[int] = 1000
    MILLISECONDS_PER_MINUTE: ClassVar[int] = MILLISECONDS_PER_SECOND * SECONDS_PER_MINUTE
    MILLISECONDS_PER_HOUR: ClassVar[int] = MILLISECONDS_PER_MINUTE * MINUTES_PER_HOUR
    MILLISECONDS_PER_DAY: ClassVar[int] = MILLISECONDS_PER_HOUR * HOURS_PER_DAY

    def __init__(
        self,
        milliseconds: float = 0,
        *,
        days: float | None = None,
        hours: float | None = None,
        minutes: float | None = None,
        seconds: float | None = None,
    ) -> None:
        count = milliseconds
        if days:
            count += days * self.MILLISECONDS_PER_DAY
        if hours:
            count += hours * self.MILLISECONDS_PER_HOUR
        if minutes:
            count += minutes * self.MILLISECONDS_PER_MINUTE
        if seconds:
            count += seconds * self.MILLISECONDS_PER_SECOND
        self._count = count

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        return cls(delta.total_seconds() * cls.MILLISECONDS_PER_SECOND)

    @property
    def in_days(self) -> float:
        return self._count / self.MILLISECONDS_PER_DAY

    @property
    def in_hours(self) -> float:
        return self._count / self.MILLISECONDS_PER_HOUR

    @property
    def in_minutes(self) -> float:
        return self._count / self.MILLISECONDS_PER_MINUTE

    @property
    def in_seconds(self) -> float:
        return self._count / self.MILLISECONDS_PER_SECOND

    @property
    def in_milliseconds(self) -> float:
        return self._count

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self._count)

    def __float__(self) -> float:
        return float(self._count)

    def __int__(self) -> int:
        return int(self._count)

    def __bool__(self) -> bool:
        return self._count != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._count == other._count

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._count < other._count

    def __hash__(self) -> int:
        return hash(self._count)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._count + other._count)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._count - other._count)

    def __str__(self) -> str:
        """Format as ``hours:minutes:seconds.milliseconds`` (unpadded).

        Negative durations are the formatted magnitude with a leading ``-``.
        """
        sign = "-" if self._count < 0 else ""
        count = abs(self._count)
        hours = math.floor(count / self.MILLISECONDS_PER_HOUR)
        minutes = math.floor((count % self.MILLISECONDS_PER_HOUR) / self.MILLISECONDS_PER_MINUTE)
        seconds = math.floor((count % self.MILLISECONDS_PER_MINUTE) / self.MILLISECONDS_PER_SECOND)
        milliseconds = math.floor(count % self.MILLISECONDS_PER_SECOND)
        return f"{sign}{hours}:{minutes}:{seconds}.{milliseconds}"

    def __repr__(self) -> str:
        return f"Duration(milliseconds={self._count!r})"


Duration.ZERO = Duration(0)
