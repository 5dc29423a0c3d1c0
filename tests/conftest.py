"""Shared test fixtures and sample upstream responses."""

from __future__ import annotations

import copy

import pytest
import pytest_asyncio

from f1calendar._clock import FixedClock
from f1calendar._http import AsyncTransport
from f1calendar.aggregator import SeasonAggregator

ERGAST_URL = "https://ergast.com/api/f1"
OPENF1_URL = "https://api.openf1.org/v1"


SAMPLE_RACE = {
    "season": "2024",
    "round": "1",
    "url": "https://en.wikipedia.org/wiki/2024_Bahrain_Grand_Prix",
    "raceName": "Bahrain Grand Prix",
    "Circuit": {
        "circuitId": "bahrain",
        "url": "https://en.wikipedia.org/wiki/Bahrain_International_Circuit",
        "circuitName": "Bahrain International Circuit",
        "Location": {
            "lat": "26.0325",
            "long": "50.5106",
            "locality": "Sakhir",
            "country": "Bahrain",
        },
    },
    "date": "2024-03-02",
    "time": "15:00:00Z",
    "FirstPractice": {"date": "2024-02-29", "time": "11:30:00Z"},
    "SecondPractice": {"date": "2024-02-29", "time": "15:00:00Z"},
    "ThirdPractice": {"date": "2024-03-01", "time": "12:30:00Z"},
    "Qualifying": {"date": "2024-03-01", "time": "16:00:00Z"},
    "Sprint": {"date": "2024-03-01", "time": "11:00:00Z"},
}

SAMPLE_DRIVER = {
    "driverId": "max_verstappen",
    "permanentNumber": "33",
    "code": "VER",
    "url": "http://en.wikipedia.org/wiki/Max_Verstappen",
    "givenName": "Max",
    "familyName": "Verstappen",
    "dateOfBirth": "1997-09-30",
    "nationality": "Dutch",
}

SAMPLE_CONSTRUCTOR = {
    "constructorId": "red_bull",
    "url": "http://en.wikipedia.org/wiki/Red_Bull_Racing",
    "name": "Red Bull",
    "nationality": "Austrian",
}

SAMPLE_DRIVER_STANDING = {
    "position": "1",
    "positionText": "1",
    "points": "575",
    "wins": "19",
    "Driver": SAMPLE_DRIVER,
    "Constructors": [SAMPLE_CONSTRUCTOR],
}

SAMPLE_CONSTRUCTOR_STANDING = {
    "position": "1",
    "positionText": "1",
    "points": "860",
    "wins": "21",
    "Constructor": SAMPLE_CONSTRUCTOR,
}

SAMPLE_MEETING = {
    "circuit_key": 63,
    "circuit_short_name": "Sakhir",
    "country_code": "BRN",
    "country_name": "Bahrain",
    "date_start": "2024-02-29T11:30:00+00:00",
    "location": "Sakhir",
    "meeting_key": 1229,
    "meeting_name": "Bahrain Grand Prix",
    "year": 2024,
}


def mrdata(**tables: dict) -> dict:
    """Wrap tables in the Ergast ``MRData`` envelope."""
    return {"MRData": {"xmlns": "", "series": "f1", "limit": "30", "offset": "0", **tables}}


def race_payload(*races: dict, season: str = "2024") -> dict:
    return mrdata(total=str(len(races)), RaceTable={"season": season, "Races": list(races)})


def driver_payload(*drivers: dict, season: str = "2024") -> dict:
    return mrdata(DriverTable={"season": season, "Drivers": list(drivers)})


def constructor_payload(*constructors: dict, season: str = "2024") -> dict:
    return mrdata(ConstructorTable={"season": season, "Constructors": list(constructors)})


def standings_payload(key: str, *entries: dict, season: str = "2023", round_: str = "22") -> dict:
    lists = [{"season": season, "round": round_, key: list(entries)}] if entries else []
    return mrdata(StandingsTable={"season": season, "StandingsLists": lists})


def race_without(*keys: str) -> dict:
    race = copy.deepcopy(SAMPLE_RACE)
    for key in keys:
        race.pop(key)
    return race


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock.for_year(2025)


@pytest_asyncio.fixture
async def aggregator(clock: FixedClock):
    agg = SeasonAggregator(
        primary=AsyncTransport(ERGAST_URL),
        live=AsyncTransport(OPENF1_URL),
        clock=clock,
    )
    yield agg
    await agg.close()
