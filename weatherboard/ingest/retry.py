"""Bounded retry with a fixed delay between attempts.

The delay never grows and carries no jitter. That keeps the behaviour easy
to reason about for a handful of cities; it is not meant for high fan-out.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from weatherboard.ingest.errors import RETRYABLE_ERRORS, FetchExhausted

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ATTEMPTS = 3
DEFAULT_DELAY = 1.0  # seconds


async def fetch_with_retry(
    request: Callable[[], Awaitable[T]],
    attempts: int = DEFAULT_ATTEMPTS,
    delay: float = DEFAULT_DELAY,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Await ``request()`` until it succeeds or the attempt budget is spent.

    Each failure consumes one attempt; with ``attempts=3`` the request is
    made at most four times (the initial call plus three retries). When the
    budget reaches zero, raises FetchExhausted wrapping the last error.
    """
    remaining = attempts
    calls = 0
    while True:
        calls += 1
        try:
            return await request()
        except RETRYABLE_ERRORS as e:
            if remaining <= 0:
                raise FetchExhausted(calls, e) from e
            remaining -= 1
            logger.warning(
                "Request failed (%s), retrying in %.1fs (%d left)",
                e, delay, remaining,
            )
            await sleep(delay)
