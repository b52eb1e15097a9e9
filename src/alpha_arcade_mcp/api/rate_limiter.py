"""
Client-side throttling for the Alpha Arcade partners API.

Agents tend to fire tool calls in bursts (list markets, then an orderbook per
market). A token bucket lets a short burst through and then paces the rest at
the sustained rate instead of tripping HTTP 429s.
"""

import asyncio
import time

import structlog

from alpha_arcade_mcp.constants import DEFAULT_API_READS_PER_SECOND

logger = structlog.get_logger()

# Waits shorter than this are routine and not worth a log line.
_LOGGED_WAIT_SECONDS = 0.1


class TokenBucket:
    """Refills at `rate` tokens/second up to `capacity` (defaults to one second's worth)."""

    def __init__(self, rate: float, capacity: float | None = None) -> None:
        if rate <= 0:
            raise ValueError("rate must be positive")
        self.rate = rate
        self.capacity = capacity or rate
        self._available = float(self.capacity)
        self._refilled_at = time.monotonic()
        self._lock = asyncio.Lock()

    def _refill(self) -> None:
        now = time.monotonic()
        self._available = min(
            self.capacity, self._available + (now - self._refilled_at) * self.rate
        )
        self._refilled_at = now

    async def take(self, count: float = 1.0) -> float:
        """
        Take `count` tokens, sleeping until they are available.

        Returns:
            Seconds spent waiting.
        """
        async with self._lock:
            self._refill()
            shortfall = count - self._available
            if shortfall <= 0:
                self._available -= count
                return 0.0

            delay = shortfall / self.rate
            await asyncio.sleep(delay)
            self._refill()
            self._available = max(0.0, self._available - count)
            return delay


class RateLimiter:
    """Paces partners API reads; every endpoint shares one budget."""

    def __init__(
        self,
        reads_per_second: float = DEFAULT_API_READS_PER_SECOND,
        safety_margin: float = 0.9,
    ) -> None:
        self._bucket = TokenBucket(reads_per_second * safety_margin)
        logger.debug("Rate limiter initialized", read_rate=self._bucket.rate)

    async def acquire(self, method: str, path: str) -> None:
        """Wait for permission to send `method path`."""
        waited = await self._bucket.take()
        if waited > _LOGGED_WAIT_SECONDS:
            logger.debug("Throttled API request", method=method, path=path, waited=waited)

    @property
    def read_rate(self) -> float:
        return self._bucket.rate
