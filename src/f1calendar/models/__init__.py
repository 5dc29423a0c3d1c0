"""Response models for the F1 calendar API."""

from f1calendar.models.constructor import Constructor
from f1calendar.models.driver import Driver
from f1calendar.models.race import Circuit, Location, Race, ScheduledSession, Sessions
from f1calendar.models.responses import (
    Calendar,
    CalendarResponse,
    ConstructorsResponse,
    ConstructorStandingsResponse,
    DriversResponse,
    DriverStandingsResponse,
    HealthResponse,
    Sources,
)
from f1calendar.models.standings import (
    ConstructorStanding,
    DriverStanding,
    StandingConstructor,
    StandingDriver,
    StandingTeam,
)

__all__ = [
    "Calendar",
    "CalendarResponse",
    "Circuit",
    "Constructor",
    "ConstructorStanding",
    "ConstructorStandingsResponse",
    "ConstructorsResponse",
    "Driver",
    "DriverStanding",
    "DriverStandingsResponse",
    "DriversResponse",
    "HealthResponse",
    "Location",
    "Race",
    "ScheduledSession",
    "Sessions",
    "Sources",
    "StandingConstructor",
    "StandingDriver",
    "StandingTeam",
]
