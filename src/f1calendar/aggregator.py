"""Request orchestration: validate, fetch, shape, respond.

The calendar combines the mandatory Ergast-compatible source with the
optional OpenF1 meetings feed. Every other resource comes from the primary
source alone.
"""

from __future__ import annotations

import logging
from typing import Any

from f1calendar._clock import Clock, SystemClock
from f1calendar._http import AsyncTransport
from f1calendar._year import OPENF1_MIN_YEAR, resolve_year, validate_year
from f1calendar.exceptions import InvalidYearError, NoDataFoundError
from f1calendar.models import (
    Calendar,
    CalendarResponse,
    ConstructorsResponse,
    ConstructorStandingsResponse,
    DriversResponse,
    DriverStandingsResponse,
    Sources,
)
from f1calendar.shaping import (
    constructor_table,
    driver_table,
    first_standings_list,
    race_table,
    shape_all,
    shape_constructor,
    shape_constructor_standing,
    shape_driver,
    shape_driver_standing,
    shape_race,
    table_season,
)

logger = logging.getLogger(__name__)

STANDINGS_UNAVAILABLE = "Classificação não disponível para este ano"


class SeasonAggregator:
    """Serves season resources from the primary source, plus OpenF1 for calendars.

    Usage:
        aggregator = SeasonAggregator(
            primary=AsyncTransport("https://ergast.com/api/f1"),
            live=AsyncTransport("https://api.openf1.org/v1"),
        )
        calendar = await aggregator.calendar("2024")
        await aggregator.close()
    """

    def __init__(
        self,
        primary: AsyncTransport,
        live: AsyncTransport,
        clock: Clock | None = None,
        live_min_year: int = OPENF1_MIN_YEAR,
    ) -> None:
        self._primary = primary
        self._live = live
        self._clock = clock or SystemClock()
        self._live_min_year = live_min_year

    @property
    def clock(self) -> Clock:
        return self._clock

    async def close(self) -> None:
        """Close both upstream connection pools."""
        await self._primary.close()
        await self._live.close()

    def _validate(self, year: str) -> None:
        check = validate_year(year, self._clock)
        if not check.valid:
            raise InvalidYearError(check.error)

    async def _fetch_primary(self, year: str, resource: str | None, status_message: str) -> tuple[str, Any]:
        endpoint = f"/{year}.json" if resource is None else f"/{year}/{resource}.json"
        result = await self._primary.get_json(endpoint)
        return result.url, result.unwrap(status_message)

    async def _fetch_meetings(self, season: int) -> tuple[str, Any]:
        """Best-effort OpenF1 meetings lookup; a failure yields a null payload."""
        result = await self._live.get_json("/meetings", params={"year": season})
        if not result.ok:
            logger.warning("OpenF1 API não disponível: %s", result.failure.message)
            return result.url, None
        return result.url, result.data

    # ── Resources ──────────────────────────────────────────────

    async def calendar(self, year: str) -> CalendarResponse:
        """Race calendar for a season, with OpenF1 meetings from 2023 onwards."""
        self._validate(year)
        primary_url, payload = await self._fetch_primary(
            year, None, "Erro ao buscar dados da Ergast API",
        )

        season = resolve_year(year, self._clock)
        live_url: str | None = None
        meetings: Any = None
        if season >= self._live_min_year:
            live_url, meetings = await self._fetch_meetings(season)

        raw_races = race_table(payload)
        if raw_races is None:
            raise NoDataFoundError("Nenhuma corrida encontrada para este ano", year=year)

        return CalendarResponse(
            calendar=Calendar(
                requested_year=table_season(payload, "RaceTable") or year,
                races=shape_all(shape_race, raw_races),
            ),
            supplemental_payload=meetings,
            sources=Sources(primary=primary_url, optional=live_url),
        )

    async def drivers(self, year: str) -> DriversResponse:
        """Drivers entered in a season."""
        self._validate(year)
        _, payload = await self._fetch_primary(
            year, "drivers", "Erro ao buscar dados dos pilotos",
        )
        raw = driver_table(payload)
        if raw is None:
            raise NoDataFoundError("Nenhum piloto encontrado para este ano", year=year)
        return DriversResponse(
            season=table_season(payload, "DriverTable"),
            drivers=shape_all(shape_driver, raw),
        )

    async def constructors(self, year: str) -> ConstructorsResponse:
        """Constructors entered in a season."""
        self._validate(year)
        _, payload = await self._fetch_primary(
            year, "constructors", "Erro ao buscar dados das equipes",
        )
        raw = constructor_table(payload)
        if raw is None:
            raise NoDataFoundError("Nenhuma equipe encontrada para este ano", year=year)
        return ConstructorsResponse(
            season=table_season(payload, "ConstructorTable"),
            constructors=shape_all(shape_constructor, raw),
        )

    async def driver_standings(self, year: str) -> DriverStandingsResponse:
        """Drivers' championship after the latest round of a season."""
        self._validate(year)
        _, payload = await self._fetch_primary(
            year, "driverStandings", "Erro ao buscar classificação de pilotos",
        )
        standings = first_standings_list(payload)
        if standings is None:
            raise NoDataFoundError(STANDINGS_UNAVAILABLE)
        return DriverStandingsResponse(
            season=standings.get("season"),
            round=standings.get("round"),
            standings=shape_all(shape_driver_standing, standings.get("DriverStandings") or []),
        )

    async def constructor_standings(self, year: str) -> ConstructorStandingsResponse:
        """Constructors' championship after the latest round of a season."""
        self._validate(year)
        _, payload = await self._fetch_primary(
            year, "constructorStandings", "Erro ao buscar classificação de construtores",
        )
        standings = first_standings_list(payload)
        if standings is None:
            raise NoDataFoundError(STANDINGS_UNAVAILABLE)
        return ConstructorStandingsResponse(
            season=standings.get("season"),
            round=standings.get("round"),
            standings=shape_all(shape_constructor_standing, standings.get("ConstructorStandings") or []),
        )
