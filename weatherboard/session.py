"""A board session wires the client, state, card board and scheduler."""

import logging
from collections.abc import Awaitable, Callable

from weatherboard.config.schema import BoardConfig, CityConfig
from weatherboard.ingest.weather_client import WeatherClient
from weatherboard.models.results import ForecastResult, RefreshSummary, WeatherResult
from weatherboard.pipeline.loaders import load_forecast, load_weather
from weatherboard.pipeline.refresh import refresh_all
from weatherboard.render.board import CARD, CardBoard
from weatherboard.render.cards import CardView, build_cards
from weatherboard.render.status import format_status_line, status_label
from weatherboard.scheduler import RefreshScheduler
from weatherboard.state.app_state import AppState

logger = logging.getLogger(__name__)


class BoardSession:
    def __init__(
        self,
        config: BoardConfig,
        client: WeatherClient,
        state: AppState | None = None,
        on_status: Callable[[str], None] | None = None,
        on_render: Callable[[list[CardView]], None] | None = None,
    ):
        self.config = config
        self.client = client
        self.state = state or AppState()
        self.cities: list[CityConfig] = [c for c in config.cities if c.enabled]
        self._on_render = on_render
        self.board = CardBoard(
            on_primary=self.open_weather,
            on_secondary=self.open_forecast,
        )
        self.scheduler = RefreshScheduler(
            client,
            self.state,
            config.enabled_slugs(),
            data_interval=config.refresh.data_interval_minutes * 60,
            status_interval=config.refresh.status_interval_seconds,
            on_status=on_status,
            on_render=self.render,
        )

    async def initial_load(self) -> RefreshSummary:
        summary = await refresh_all(
            self.client, self.state, self.config.enabled_slugs()
        )
        self.render()
        self.scheduler.update_status()
        return summary

    def cards(self) -> list[CardView]:
        return build_cards(self.state.store, self.cities)

    def render(self) -> list[str]:
        cards = self.cards()
        changed = self.board.render(cards)
        if self._on_render is not None:
            self._on_render(cards)
        return changed

    def status_line(self) -> str:
        """Current status text; does not fire the on_status callback."""
        label = status_label(self.state.last_refresh_at, self.scheduler.clock())
        return format_status_line(label)

    async def open_weather(self, city: str) -> WeatherResult:
        result = await load_weather(self.client, self.state, city)
        if result.ok:
            self.render()
        return result

    async def open_forecast(self, city: str) -> ForecastResult:
        return await load_forecast(self.client, self.state, city)

    async def click(self, city: str, target: str = CARD) -> list:
        """Dispatch a click through the board and await the fired loaders."""
        results = []
        for outcome in self.board.click(city, target):
            if isinstance(outcome, Awaitable):
                outcome = await outcome
            results.append(outcome)
        return results

    def start(self) -> None:
        self.scheduler.start()

    async def stop(self) -> None:
        await self.scheduler.stop()
