"""Time source used for year validation, season resolution and health checks."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Anything that can tell the current time."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to a single instant.

    Usage:
        clock = FixedClock(datetime(2025, 6, 1, tzinfo=timezone.utc))
        clock = FixedClock.for_year(2025)
    """

    instant: datetime

    @classmethod
    def for_year(cls, year: int) -> FixedClock:
        return cls(datetime(year, 6, 1, tzinfo=timezone.utc))

    def now(self) -> datetime:
        return self.instant


def current_year(clock: Clock) -> int:
    return clock.now().year
