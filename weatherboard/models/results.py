"""Outcome objects handed to whatever UI layer presents them."""

from dataclasses import dataclass, field

from weatherboard.models.weather import Forecast, WeatherSnapshot


@dataclass(frozen=True)
class WeatherResult:
    city: str
    ok: bool
    message: str
    snapshot: WeatherSnapshot | None = None
    error: str | None = None


@dataclass(frozen=True)
class ForecastResult:
    city: str
    ok: bool
    message: str
    forecast: Forecast = ()
    error: str | None = None


@dataclass
class RefreshSummary:
    cities_attempted: int = 0
    succeeded: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.failed
