"""HTTP routes for season data."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from f1calendar import __version__
from f1calendar.aggregator import SeasonAggregator
from f1calendar.models import (
    CalendarResponse,
    ConstructorsResponse,
    ConstructorStandingsResponse,
    DriversResponse,
    DriverStandingsResponse,
    HealthResponse,
)

router = APIRouter(prefix="/api")


def get_aggregator(request: Request) -> SeasonAggregator:
    return request.app.state.aggregator


@router.get("/calendar/{year}", response_model=CalendarResponse)
async def calendar(year: str, aggregator: SeasonAggregator = Depends(get_aggregator)):
    """Race calendar, merged with OpenF1 meetings for recent seasons."""
    return await aggregator.calendar(year)


@router.get("/drivers/{year}", response_model=DriversResponse)
async def drivers(year: str, aggregator: SeasonAggregator = Depends(get_aggregator)):
    return await aggregator.drivers(year)


@router.get("/constructors/{year}", response_model=ConstructorsResponse)
async def constructors(year: str, aggregator: SeasonAggregator = Depends(get_aggregator)):
    return await aggregator.constructors(year)


@router.get("/standings/drivers/{year}", response_model=DriverStandingsResponse)
async def driver_standings(year: str, aggregator: SeasonAggregator = Depends(get_aggregator)):
    return await aggregator.driver_standings(year)


@router.get("/standings/constructors/{year}", response_model=ConstructorStandingsResponse)
async def constructor_standings(year: str, aggregator: SeasonAggregator = Depends(get_aggregator)):
    return await aggregator.constructor_standings(year)


@router.get("/health", response_model=HealthResponse)
def health(aggregator: SeasonAggregator = Depends(get_aggregator)):
    return HealthResponse(
        timestamp=aggregator.clock.now().isoformat(),
        version=__version__,
    )
