"""Basic usage of the season aggregator without the HTTP server."""

import asyncio

from f1calendar import F1CalendarError, SeasonAggregator
from f1calendar._http import AsyncTransport
from f1calendar.config import Settings


async def main() -> None:
    settings = Settings.from_env()
    aggregator = SeasonAggregator(
        primary=AsyncTransport(settings.ergast_base_url),
        live=AsyncTransport(settings.openf1_base_url),
    )
    try:
        # Calendar for the current season, merged with OpenF1 meetings
        print("=== Current calendar ===")
        result = await aggregator.calendar("current")
        for race in result.calendar.races[:5]:
            print(f"  R{race.round} {race.race_name} - {race.circuit.location.locality}, {race.date}")
        meetings = result.supplemental_payload or []
        print(f"  {result.calendar.total_races} races, {len(meetings)} OpenF1 meetings")

        # Championship leaders
        print("\n=== Drivers' standings ===")
        standings = await aggregator.driver_standings("current")
        for entry in standings.standings[:3]:
            print(f"  P{entry.position} {entry.driver.given_name} {entry.driver.family_name} - {entry.points} pts")

        # Historic season: OpenF1 is not queried
        print("\n=== 1988 calendar ===")
        result = await aggregator.calendar("1988")
        print(f"  {result.calendar.total_races} races, sources: {result.sources.to_json_dict()}")
    except F1CalendarError as exc:
        print(f"  Request failed ({exc.status_code}): {exc.to_body()}")
    finally:
        await aggregator.close()


if __name__ == "__main__":
    asyncio.run(main())
