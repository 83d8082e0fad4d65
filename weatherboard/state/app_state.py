"""Application state shared by the refresh pipeline, scheduler and UI."""

from dataclasses import dataclass, field
from datetime import datetime

from weatherboard.models.common import utc_now
from weatherboard.models.weather import WeatherSnapshot
from weatherboard.state.store import CityDataStore


@dataclass
class AppState:
    store: CityDataStore = field(default_factory=CityDataStore)
    last_viewed: str | None = None
    last_refresh_at: datetime | None = None

    def record_success(
        self, city: str, snapshot: WeatherSnapshot, now: datetime | None = None
    ) -> None:
        self.store.record_snapshot(city, snapshot)
        self.mark_refreshed(now)

    def mark_refreshed(self, now: datetime | None = None) -> None:
        self.last_refresh_at = now or utc_now()
