"""F1 Calendar API - Formula 1 season data aggregated from Ergast and OpenF1."""

from f1calendar._clock import Clock, FixedClock, SystemClock
from f1calendar._year import validate_year
from f1calendar.aggregator import SeasonAggregator
from f1calendar.exceptions import (
    F1CalendarError,
    InvalidYearError,
    NoDataFoundError,
    UpstreamPayloadError,
    UpstreamTransportError,
    UpstreamUnavailableError,
)

__all__ = [
    "Clock",
    "F1CalendarError",
    "FixedClock",
    "InvalidYearError",
    "NoDataFoundError",
    "SeasonAggregator",
    "SystemClock",
    "UpstreamPayloadError",
    "UpstreamTransportError",
    "UpstreamUnavailableError",
    "validate_year",
]

__version__ = "1.0.0"
