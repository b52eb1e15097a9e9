"""Shared state handed to every tool handler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from alpha_arcade_mcp.api.chain import create_trading_client, resolve_wallet_address
from alpha_arcade_mcp.api.client import AlphaPublicClient
from alpha_arcade_mcp.api.rate_limiter import RateLimiter

if TYPE_CHECKING:
    from collections.abc import Callable

    from alpha_arcade_mcp.api.protocols import TradingClient
    from alpha_arcade_mcp.config import ServerConfig


@dataclass
class ToolContext:
    """
    Configuration plus the factories tools use to reach their collaborators.

    Factories are injectable so tests (and alternative deployments) can swap the
    HTTP client or trading backend without touching tool code. Every public client
    shares `rate_limiter`, so pacing carries over from one tool call to the next.
    """

    config: ServerConfig
    public_client_factory: Callable[..., AlphaPublicClient] = AlphaPublicClient
    trading_client_factory: Callable[[ServerConfig], TradingClient] = create_trading_client
    rate_limiter: RateLimiter = field(default_factory=RateLimiter)
    _trading_client: TradingClient | None = field(default=None, init=False, repr=False)

    def public_client(self) -> AlphaPublicClient:
        """New read-only client on the shared rate limiter; use as an async context manager."""
        return self.public_client_factory(self.config, rate_limiter=self.rate_limiter)

    def trading_client(self) -> TradingClient:
        """
        Trading client for the configured wallet, built on first use.

        Raises:
            TradingNotConfiguredError: If no mnemonic or backend is configured.
        """
        if self._trading_client is None:
            self._trading_client = self.trading_client_factory(self.config)
        return self._trading_client

    def wallet_address(self, wallet_address: str | None) -> str:
        """Explicit wallet address, else the configured one."""
        return resolve_wallet_address(wallet_address, self.config)
