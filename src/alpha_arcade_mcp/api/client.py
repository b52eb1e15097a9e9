"""Alpha Arcade partners API client (read-only market data)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from alpha_arcade_mcp.api.exceptions import (
    AlphaAPIError,
    AuthenticationError,
    MarketNotFoundError,
    RateLimitError,
)
from alpha_arcade_mcp.api.models.market import Market
from alpha_arcade_mcp.api.models.order import OpenOrder
from alpha_arcade_mcp.api.models.orderbook import OrderbookResponse, RawBook
from alpha_arcade_mcp.api.models.position import WalletPosition
from alpha_arcade_mcp.api.rate_limiter import RateLimiter
from alpha_arcade_mcp.config import ServerConfig

if TYPE_CHECKING:
    from tenacity import RetryCallState


logger = structlog.get_logger()

API_KEY_HEADER = "x-api-key"

# Transient failures worth another attempt; anything else surfaces immediately.
_RETRYABLE = (RateLimitError, httpx.NetworkError, httpx.TimeoutException)

_BACKOFF = wait_exponential(multiplier=1, min=1, max=60)


def _backoff_seconds(retry_state: RetryCallState) -> float:
    """Honour a server-provided Retry-After; otherwise back off exponentially."""
    failure = retry_state.outcome.exception() if retry_state.outcome else None
    if isinstance(failure, RateLimitError) and failure.retry_after is not None:
        return float(failure.retry_after)
    return float(_BACKOFF(retry_state))


def _retry_after(response: httpx.Response) -> int | None:
    value = response.headers.get("Retry-After", "").strip()
    return int(value) if value.isdigit() else None


def _raise_for_status(response: httpx.Response) -> None:
    """Map HTTP error statuses onto the AlphaAPIError hierarchy."""
    status = response.status_code
    if status < 400:
        return
    if status == 429:
        raise RateLimitError(
            message=response.text or "Rate limit exceeded",
            retry_after=_retry_after(response),
        )
    if status == 401:
        raise AuthenticationError(response.text or "Authentication failed")
    raise AlphaAPIError(status_code=status, message=response.text)


class AlphaPublicClient:
    """
    Client for the Alpha Arcade partners API.

    Covers market discovery, orderbook snapshots, open orders and positions.
    No wallet is needed; an API key is sent when one is configured.
    """

    def __init__(
        self,
        config: ServerConfig | None = None,
        timeout: float = 30.0,
        max_retries: int = 5,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        config = config or ServerConfig()

        headers = {"Accept": "application/json"}
        if config.api_key is not None:
            headers[API_KEY_HEADER] = config.api_key.get_secret_value()

        self._http = httpx.AsyncClient(
            base_url=config.api_base_url, timeout=timeout, headers=headers
        )
        self._max_retries = max_retries
        self._rate_limiter = rate_limiter or RateLimiter()

    async def __aenter__(self) -> AlphaPublicClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.aclose()

    @property
    def rate_limiter(self) -> RateLimiter:
        return self._rate_limiter

    async def aclose(self) -> None:
        await self._http.aclose()

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception_type(_RETRYABLE),
            stop=stop_after_attempt(self._max_retries),
            wait=_backoff_seconds,
            reraise=True,
        )

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET `path` under the rate limit, retrying transient failures; returns the JSON body."""
        await self._rate_limiter.acquire("GET", path)

        async for attempt in self._retrying():
            with attempt:
                response = await self._http.get(path, params=params)
                _raise_for_status(response)
                body: dict[str, Any] = response.json()
                return body

        raise AssertionError("unreachable: AsyncRetrying reraises")  # pragma: no cover

    # ==================== Markets ====================

    async def get_markets(self) -> list[Market]:
        """Fetch all live, tradeable markets."""
        data = await self._get("/get-live-markets")
        return [Market.model_validate(m) for m in data.get("markets", [])]

    async def get_market(self, market_id: str) -> Market | None:
        """Fetch a single market by ID. Returns None if the market does not exist."""
        try:
            data = await self._get("/get-market", params={"marketId": market_id})
        except AlphaAPIError as e:
            if e.status_code == 404:
                return None
            raise
        market = data.get("market")
        if market is None:
            return None
        return Market.model_validate(market)

    async def get_orderbook(self, market_app_id: int) -> RawBook:
        """
        Fetch the four-sided orderbook (YES/NO bids and asks) for a market app.

        Raises:
            MarketNotFoundError: If the market app is unknown.
        """
        try:
            data = await self._get("/get-orderbook", params={"marketAppId": market_app_id})
        except AlphaAPIError as e:
            if e.status_code == 404:
                raise MarketNotFoundError(market_app_id) from e
            raise
        book = OrderbookResponse.model_validate(data.get("orderbook") or {}).to_raw_book()
        logger.debug(
            "Fetched orderbook",
            market_app_id=market_app_id,
            total_orders=book.total_orders,
        )
        return book

    # ==================== Wallet ====================

    async def get_open_orders(self, market_app_id: int, wallet_address: str) -> list[OpenOrder]:
        """Fetch open orders a wallet has resting on a market."""
        data = await self._get(
            "/get-open-orders",
            params={"marketAppId": market_app_id, "walletAddress": wallet_address},
        )
        return [OpenOrder.model_validate(o) for o in data.get("orders", [])]

    async def get_positions(self, wallet_address: str) -> list[WalletPosition]:
        """Fetch YES/NO token balances for a wallet across all markets."""
        data = await self._get("/get-positions", params={"walletAddress": wallet_address})
        return [WalletPosition.model_validate(p) for p in data.get("positions", [])]
