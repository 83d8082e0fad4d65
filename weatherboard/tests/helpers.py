"""Builders and fakes shared by the test modules."""

import json
from pathlib import Path

from weatherboard.ingest.errors import FetchExhausted, HttpError
from weatherboard.models.weather import ForecastDay, WeatherSnapshot

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name, encoding="utf-8") as f:
        return json.load(f)


def make_snapshot(location: str = "Zagreb", temperature: float = 3, **kwargs) -> WeatherSnapshot:
    fields = {
        "condition": "Cloudy",
        "emoji": "☁️",
        "wind_speed": 12,
        "humidity": 75,
        "feels_like": temperature - 2,
    }
    fields.update(kwargs)
    return WeatherSnapshot(location=location, temperature=temperature, **fields)


def make_forecast(n: int = 5) -> tuple[ForecastDay, ...]:
    return tuple(
        ForecastDay(date=f"Day {i + 1}", emoji="☀️", high=10 + i, low=i, condition="Sunny")
        for i in range(n)
    )


def exhausted(city: str, status: int = 500) -> FetchExhausted:
    return FetchExhausted(4, HttpError(status, f"https://test/api/weather/{city}"))


class FakeClient:
    """Stands in for WeatherClient; answers from dicts keyed by city."""

    def __init__(self, weather: dict | None = None, forecasts: dict | None = None):
        self.weather = weather or {}
        self.forecasts = forecasts or {}
        self.weather_calls: list[str] = []
        self.forecast_calls: list[str] = []
        self.closed = False

    async def get_weather(self, city: str) -> WeatherSnapshot:
        self.weather_calls.append(city)
        result = self.weather.get(city) or exhausted(city, 404)
        if isinstance(result, Exception):
            raise result
        return result

    async def get_forecast(self, city: str):
        self.forecast_calls.append(city)
        result = self.forecasts.get(city) or exhausted(city, 404)
        if isinstance(result, Exception):
            raise result
        return result

    async def aclose(self) -> None:
        self.closed = True
