"""Championship standings models (drivers and constructors)."""

from __future__ import annotations

from f1calendar.models._base import OptionalText, OutputModel


class StandingDriver(OutputModel):
    driver_id: str
    code: OptionalText = None
    given_name: str
    family_name: str
    nationality: OptionalText = None


class StandingTeam(OutputModel):
    """Constructor reference inside a driver standing."""

    constructor_id: str
    name: str


class StandingConstructor(OutputModel):
    constructor_id: str
    name: str
    nationality: OptionalText = None


class DriverStanding(OutputModel):
    """Driver championship standing entry."""

    position: OptionalText = None
    position_text: OptionalText = None
    points: str
    wins: str
    driver: StandingDriver
    constructors: list[StandingTeam]


class ConstructorStanding(OutputModel):
    """Constructor championship standing entry."""

    position: OptionalText = None
    position_text: OptionalText = None
    points: str
    wins: str
    constructor: StandingConstructor
