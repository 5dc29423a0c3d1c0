"""Top-level response bodies for each endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import computed_field

from f1calendar.models._base import OptionalText, OutputModel
from f1calendar.models.constructor import Constructor
from f1calendar.models.driver import Driver
from f1calendar.models.race import Race
from f1calendar.models.standings import ConstructorStanding, DriverStanding


class Calendar(OutputModel):
    requested_year: str
    races: list[Race]

    @computed_field(alias="totalRaces")  # type: ignore[prop-decorator]
    @property
    def total_races(self) -> int:
        return len(self.races)


class Sources(OutputModel):
    """URLs queried to build a calendar; ``optional`` is null when skipped."""

    primary: str
    optional: str | None = None


class CalendarResponse(OutputModel):
    calendar: Calendar
    supplemental_payload: Any = None
    sources: Sources


class DriversResponse(OutputModel):
    season: OptionalText = None
    drivers: list[Driver]

    @computed_field(alias="totalDrivers")  # type: ignore[prop-decorator]
    @property
    def total_drivers(self) -> int:
        return len(self.drivers)


class ConstructorsResponse(OutputModel):
    season: OptionalText = None
    constructors: list[Constructor]

    @computed_field(alias="totalConstructors")  # type: ignore[prop-decorator]
    @property
    def total_constructors(self) -> int:
        return len(self.constructors)


class DriverStandingsResponse(OutputModel):
    season: OptionalText = None
    round: OptionalText = None
    standings: list[DriverStanding]


class ConstructorStandingsResponse(OutputModel):
    season: OptionalText = None
    round: OptionalText = None
    standings: list[ConstructorStanding]


class HealthResponse(OutputModel):
    status: str = "ok"
    timestamp: str
    version: str
