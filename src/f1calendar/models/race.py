"""Race weekend models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BeforeValidator, ConfigDict

from f1calendar.models._base import OptionalText, OutputModel, blank_to_none


class Location(OutputModel):
    """Geographic position of a circuit."""

    lat: OptionalText = None
    long: OptionalText = None
    locality: OptionalText = None
    country: OptionalText = None


class Circuit(OutputModel):
    circuit_id: str
    url: OptionalText = None
    circuit_name: str
    location: Location


class ScheduledSession(OutputModel):
    """Date and start time of one session of a race weekend.

    Any other keys the upstream sends for the session are kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    date: OptionalText = None
    time: OptionalText = None


OptionalSession = Annotated[ScheduledSession | None, BeforeValidator(blank_to_none)]


class Sessions(OutputModel):
    """Non-race sessions of a weekend; absent sessions are null."""

    first_practice: OptionalSession = None
    second_practice: OptionalSession = None
    third_practice: OptionalSession = None
    qualifying: OptionalSession = None
    sprint: OptionalSession = None


class Race(OutputModel):
    """One round of the championship calendar."""

    season: str
    round: str
    url: OptionalText = None
    race_name: str
    date: str
    time: OptionalText = None
    circuit: Circuit
    sessions: Sessions
