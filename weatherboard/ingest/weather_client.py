"""Backend weather API client with fixed-delay retry."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

import httpx

from weatherboard.config.schema import ApiConfig
from weatherboard.ingest.errors import HttpError, NetworkError, ParseError
from weatherboard.ingest.payloads import parse_forecast, parse_weather
from weatherboard.ingest.retry import fetch_with_retry
from weatherboard.models.weather import Forecast, WeatherSnapshot

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8081"
DEFAULT_USER_AGENT = "weatherboard/0.1.0"


class WeatherClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        http: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._sleep = sleep
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(
            timeout=timeout, headers={"User-Agent": DEFAULT_USER_AGENT}
        )

    @classmethod
    def from_config(cls, api: ApiConfig, **kwargs) -> "WeatherClient":
        return cls(
            base_url=api.base_url,
            timeout=api.timeout_seconds,
            max_retries=api.retry_attempts,
            retry_delay=api.retry_delay_ms / 1000,
            **kwargs,
        )

    async def get_weather(self, city: str) -> WeatherSnapshot:
        """Fetch current weather for a city. Raises FetchExhausted on failure."""
        return await fetch_with_retry(
            lambda: self._get_parsed(f"/api/weather/{city}", parse_weather),
            attempts=self.max_retries,
            delay=self.retry_delay,
            sleep=self._sleep,
        )

    async def get_forecast(self, city: str) -> Forecast:
        """Fetch the 5-day forecast for a city. Raises FetchExhausted on failure."""
        return await fetch_with_retry(
            lambda: self._get_parsed(f"/api/forecast/{city}", parse_forecast),
            attempts=self.max_retries,
            delay=self.retry_delay,
            sleep=self._sleep,
        )

    async def _get_parsed(self, path: str, parse):
        url = f"{self.base_url}{path}"
        try:
            resp = await self._http.get(url, timeout=self.timeout)
        except httpx.RequestError as e:
            raise NetworkError(f"{url}: {e}") from e

        if not resp.is_success:
            raise HttpError(resp.status_code, url)

        try:
            data = resp.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON from {url}: {e}") from e
        return parse(data)

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "WeatherClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
