"""On-demand loaders behind a card's two affordances."""

import logging

from weatherboard.ingest.errors import WeatherboardError
from weatherboard.ingest.weather_client import WeatherClient
from weatherboard.models.results import ForecastResult, WeatherResult
from weatherboard.render.formatters import (
    FORECAST_ERROR_MESSAGE,
    WEATHER_ERROR_MESSAGE,
    format_forecast_message,
    format_weather_message,
)
from weatherboard.state.app_state import AppState

logger = logging.getLogger(__name__)


async def load_weather(
    client: WeatherClient, state: AppState, city: str
) -> WeatherResult:
    """Fetch current weather for a city and record it as the last-viewed one."""
    state.last_viewed = city
    try:
        snapshot = await client.get_weather(city)
    except WeatherboardError as e:
        logger.warning("Loading weather for %s failed: %s", city, e)
        return WeatherResult(city=city, ok=False, message=WEATHER_ERROR_MESSAGE, error=str(e))

    state.record_success(city, snapshot)
    return WeatherResult(
        city=city,
        ok=True,
        message=format_weather_message(snapshot),
        snapshot=snapshot,
    )


async def load_forecast(
    client: WeatherClient, state: AppState, city: str
) -> ForecastResult:
    """Fetch the 5-day forecast for a city. The forecast is never stored."""
    state.last_viewed = city
    try:
        forecast = await client.get_forecast(city)
    except WeatherboardError as e:
        logger.warning("Loading forecast for %s failed: %s", city, e)
        return ForecastResult(city=city, ok=False, message=FORECAST_ERROR_MESSAGE, error=str(e))

    state.mark_refreshed()
    return ForecastResult(
        city=city,
        ok=True,
        message=format_forecast_message(city, forecast),
        forecast=forecast,
    )
