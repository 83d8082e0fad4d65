"""Current-weather and forecast models as returned by the backend."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class WeatherSnapshot:
    location: str
    temperature: float  # °C
    condition: str
    emoji: str
    wind_speed: float  # km/h
    humidity: float  # %
    feels_like: float
    dramatic_message: str | None = None
    uv_index: float | None = None
    precip_chance: int | None = None
    fetched_at: datetime | None = None


@dataclass(frozen=True)
class ForecastDay:
    date: str
    emoji: str
    high: float
    low: float
    condition: str = ""


Forecast = tuple[ForecastDay, ...]
