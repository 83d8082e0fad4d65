"""Refresh scheduler: periodic data refresh plus a 1-second status label.

Both loops are asyncio tasks owned by the scheduler and run until stop()
is awaited. A failing refresh is logged and the next one still fires.

Refresh policy: every fire refreshes all known cities, not only the
last-viewed one, so no card goes stale while another is being looked at.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from weatherboard.ingest.weather_client import WeatherClient
from weatherboard.models.common import utc_now
from weatherboard.models.results import RefreshSummary
from weatherboard.pipeline.refresh import refresh_all
from weatherboard.render.status import status_label
from weatherboard.state.app_state import AppState

logger = logging.getLogger(__name__)

DEFAULT_DATA_INTERVAL = 15 * 60  # 15 minutes
DEFAULT_STATUS_INTERVAL = 1.0


class RefreshScheduler:
    """Owns the data-refresh and status-label tasks."""

    def __init__(
        self,
        client: WeatherClient,
        state: AppState,
        cities: list[str],
        data_interval: float = DEFAULT_DATA_INTERVAL,
        status_interval: float = DEFAULT_STATUS_INTERVAL,
        on_status: Callable[[str], None] | None = None,
        on_render: Callable[[], None] | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.client = client
        self.state = state
        self.cities = list(cities)
        self.data_interval = data_interval
        self.status_interval = status_interval
        self.on_status = on_status
        self.on_render = on_render
        self.clock = clock
        self.status = status_label(state.last_refresh_at, clock())
        self._tasks: list[asyncio.Task] = []
        self._total_refreshes = 0
        self._total_failures = 0

    @property
    def running(self) -> bool:
        return bool(self._tasks)

    def start(self) -> None:
        """Start both loops. Must be called from inside a running event loop."""
        if self._tasks:
            logger.debug("Scheduler already running")
            return
        self._tasks = [
            asyncio.create_task(self._data_loop(), name="weatherboard-data-refresh"),
            asyncio.create_task(self._status_loop(), name="weatherboard-status"),
        ]
        logger.info(
            "Scheduler started: %d cities, refresh every %ds",
            len(self.cities), self.data_interval,
        )

    async def stop(self) -> None:
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        if tasks:
            logger.info(
                "Scheduler stopped after %d refreshes (%d with failures)",
                self._total_refreshes, self._total_failures,
            )

    async def refresh_once(self) -> RefreshSummary | None:
        """Run a single bulk refresh and re-render. Never raises."""
        self._total_refreshes += 1
        try:
            summary = await refresh_all(self.client, self.state, self.cities)
        except Exception:
            self._total_failures += 1
            logger.exception("Refresh #%d crashed", self._total_refreshes)
            return None

        if summary.failed:
            self._total_failures += 1
        self._render()
        self.update_status()
        return summary

    def update_status(self) -> str:
        self.status = status_label(self.state.last_refresh_at, self.clock())
        if self.on_status is not None:
            try:
                self.on_status(self.status)
            except Exception:
                logger.exception("Status callback failed")
        return self.status

    def stats(self) -> dict:
        return {
            "running": self.running,
            "total_refreshes": self._total_refreshes,
            "total_failures": self._total_failures,
            "status": self.status,
        }

    def _render(self) -> None:
        if self.on_render is None:
            return
        try:
            self.on_render()
        except Exception:
            logger.exception("Render callback failed")

    async def _data_loop(self) -> None:
        while True:
            await asyncio.sleep(self.data_interval)
            await self.refresh_once()

    async def _status_loop(self) -> None:
        while True:
            self.update_status()
            await asyncio.sleep(self.status_interval)
