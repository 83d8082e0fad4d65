"""In-memory city data store: latest snapshot per city plus a short
temperature history used for trend arrows."""

from collections import deque

from weatherboard.models.weather import WeatherSnapshot

HISTORY_LIMIT = 48


class CityDataStore:
    def __init__(self, history_limit: int = HISTORY_LIMIT):
        self._snapshots: dict[str, WeatherSnapshot] = {}
        self._history: dict[str, deque[float]] = {}
        self._history_limit = history_limit

    def record_snapshot(self, city: str, snapshot: WeatherSnapshot) -> None:
        """Insert or replace the snapshot for a city."""
        self._snapshots[city] = snapshot
        history = self._history.setdefault(city, deque(maxlen=self._history_limit))
        history.append(snapshot.temperature)

    def get_snapshot(self, city: str) -> WeatherSnapshot | None:
        return self._snapshots.get(city)

    def trend(self, city: str) -> str:
        """'rising', 'falling' or 'stable' from the last two readings."""
        history = self._history.get(city)
        if not history or len(history) < 2:
            return "stable"
        current, previous = history[-1], history[-2]
        if current > previous:
            return "rising"
        if current < previous:
            return "falling"
        return "stable"

    def history(self, city: str) -> list[float]:
        return list(self._history.get(city, ()))

    def __contains__(self, city: object) -> bool:
        return city in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)
