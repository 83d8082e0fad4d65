"""Background refresh of city snapshots.

Failures here are logged and swallowed so they never reach the scheduler
or the user; a failed city keeps whatever snapshot it had before.
"""

import asyncio
import logging
import time
from collections.abc import Iterable

from weatherboard.ingest.errors import WeatherboardError
from weatherboard.ingest.weather_client import WeatherClient
from weatherboard.models.results import RefreshSummary
from weatherboard.state.app_state import AppState

logger = logging.getLogger(__name__)


async def refresh_city(client: WeatherClient, state: AppState, city: str) -> bool:
    """Fetch and record one city's current weather. Returns True on success."""
    try:
        snapshot = await client.get_weather(city)
    except WeatherboardError as e:
        logger.warning("Refresh failed for %s: %s", city, e)
        return False
    except Exception:
        logger.exception("Unexpected error refreshing %s", city)
        return False

    state.record_success(city, snapshot)
    logger.info(
        "Refreshed %s: %s°C, %s", city, snapshot.temperature, snapshot.condition
    )
    return True


async def refresh_all(
    client: WeatherClient, state: AppState, cities: Iterable[str]
) -> RefreshSummary:
    """Refresh every city concurrently; one city's failure never aborts another."""
    cities = list(cities)
    start = time.monotonic()
    results = await asyncio.gather(
        *(refresh_city(client, state, city) for city in cities)
    )

    summary = RefreshSummary(cities_attempted=len(cities))
    for city, ok in zip(cities, results):
        (summary.succeeded if ok else summary.failed).append(city)
    summary.duration_seconds = time.monotonic() - start

    if summary.failed:
        logger.warning(
            "Bulk refresh: %d/%d ok, failed: %s",
            len(summary.succeeded), len(cities), ", ".join(summary.failed),
        )
    else:
        logger.info("Bulk refresh: %d/%d ok", len(summary.succeeded), len(cities))
    return summary
