"""Mapping of Ergast-style payloads into the response models.

Container lookups return ``None`` when the upstream has nothing to shape, so
callers can report "no data" before any record is mapped. Mappers take one
raw upstream record and build the matching model; optional fields that are
missing, blank or null come out as ``None``.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from pydantic import ValidationError

from f1calendar.exceptions import UpstreamPayloadError
from f1calendar.models import (
    Circuit,
    Constructor,
    ConstructorStanding,
    Driver,
    DriverStanding,
    Location,
    Race,
    Sessions,
    StandingConstructor,
    StandingDriver,
    StandingTeam,
)

T = TypeVar("T")
Record = dict[str, Any]


def _dig(payload: Any, *path: str) -> Any:
    """Follow ``path`` through nested dicts, returning None on any gap."""
    node = payload
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _table(payload: Any, table: str, items: str) -> list[Record] | None:
    records = _dig(payload, "MRData", table, items)
    if not isinstance(records, list) or not records:
        return None
    return records


def _obj(record: Record, key: str) -> Record:
    value = record.get(key)
    return value if isinstance(value, dict) else {}


# ── Containers ─────────────────────────────────────────────


def race_table(payload: Any) -> list[Record] | None:
    """``MRData.RaceTable.Races``."""
    return _table(payload, "RaceTable", "Races")


def driver_table(payload: Any) -> list[Record] | None:
    """``MRData.DriverTable.Drivers``."""
    return _table(payload, "DriverTable", "Drivers")


def constructor_table(payload: Any) -> list[Record] | None:
    """``MRData.ConstructorTable.Constructors``."""
    return _table(payload, "ConstructorTable", "Constructors")


def first_standings_list(payload: Any) -> Record | None:
    """First entry of ``MRData.StandingsTable.StandingsLists``.

    A season or round query yields exactly one standings list.
    """
    lists = _table(payload, "StandingsTable", "StandingsLists")
    if lists is None or not isinstance(lists[0], dict):
        return None
    return lists[0]


def table_season(payload: Any, table: str) -> str | None:
    season = _dig(payload, "MRData", table, "season")
    return str(season) if season is not None else None


# ── Records ────────────────────────────────────────────────


def shape_race(raw: Record) -> Race:
    circuit = _obj(raw, "Circuit")
    location = _obj(circuit, "Location")
    return Race(
        season=raw.get("season"),
        round=raw.get("round"),
        url=raw.get("url"),
        race_name=raw.get("raceName"),
        date=raw.get("date"),
        time=raw.get("time"),
        circuit=Circuit(
            circuit_id=circuit.get("circuitId"),
            url=circuit.get("url"),
            circuit_name=circuit.get("circuitName"),
            location=Location(
                lat=location.get("lat"),
                long=location.get("long"),
                locality=location.get("locality"),
                country=location.get("country"),
            ),
        ),
        sessions=Sessions(
            first_practice=raw.get("FirstPractice"),
            second_practice=raw.get("SecondPractice"),
            third_practice=raw.get("ThirdPractice"),
            qualifying=raw.get("Qualifying"),
            sprint=raw.get("Sprint"),
        ),
    )


def shape_driver(raw: Record) -> Driver:
    return Driver(
        driver_id=raw.get("driverId"),
        permanent_number=raw.get("permanentNumber"),
        code=raw.get("code"),
        url=raw.get("url"),
        given_name=raw.get("givenName"),
        family_name=raw.get("familyName"),
        date_of_birth=raw.get("dateOfBirth"),
        nationality=raw.get("nationality"),
    )


def shape_constructor(raw: Record) -> Constructor:
    return Constructor(
        constructor_id=raw.get("constructorId"),
        url=raw.get("url"),
        name=raw.get("name"),
        nationality=raw.get("nationality"),
    )


def shape_driver_standing(raw: Record) -> DriverStanding:
    driver = _obj(raw, "Driver")
    teams = raw.get("Constructors") or []
    return DriverStanding(
        position=raw.get("position"),
        position_text=raw.get("positionText"),
        points=raw.get("points"),
        wins=raw.get("wins"),
        driver=StandingDriver(
            driver_id=driver.get("driverId"),
            code=driver.get("code"),
            given_name=driver.get("givenName"),
            family_name=driver.get("familyName"),
            nationality=driver.get("nationality"),
        ),
        constructors=[
            StandingTeam(constructor_id=c.get("constructorId"), name=c.get("name"))
            for c in teams
            if isinstance(c, dict)
        ],
    )


def shape_constructor_standing(raw: Record) -> ConstructorStanding:
    constructor = _obj(raw, "Constructor")
    return ConstructorStanding(
        position=raw.get("position"),
        position_text=raw.get("positionText"),
        points=raw.get("points"),
        wins=raw.get("wins"),
        constructor=StandingConstructor(
            constructor_id=constructor.get("constructorId"),
            name=constructor.get("name"),
            nationality=constructor.get("nationality"),
        ),
    )


def shape_all(shaper: Callable[[Record], T], records: list[Any]) -> list[T]:
    """Map every record, keeping upstream order."""
    try:
        return [shaper(raw if isinstance(raw, dict) else {}) for raw in records]
    except ValidationError as exc:
        raise UpstreamPayloadError(
            f"Unexpected {shaper.__name__.removeprefix('shape_')} record from upstream: {exc}"
        ) from exc
