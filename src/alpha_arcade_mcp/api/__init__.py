"""Alpha Arcade API client module."""

from alpha_arcade_mcp.api.client import AlphaPublicClient
from alpha_arcade_mcp.api.exceptions import (
    AlphaAPIError,
    AlphaError,
    AuthenticationError,
    ConfigError,
    MarketNotFoundError,
    RateLimitError,
    TradingNotConfiguredError,
    WalletAddressRequiredError,
)
from alpha_arcade_mcp.api.models import Market, OpenOrder, RawBook, RawOrderEntry, WalletPosition
from alpha_arcade_mcp.api.protocols import TradingClient

__all__ = [
    # Clients
    "AlphaPublicClient",
    "TradingClient",
    # Exceptions
    "AlphaAPIError",
    "AlphaError",
    "AuthenticationError",
    "ConfigError",
    "MarketNotFoundError",
    "RateLimitError",
    "TradingNotConfiguredError",
    "WalletAddressRequiredError",
    # Models
    "Market",
    "OpenOrder",
    "RawBook",
    "RawOrderEntry",
    "WalletPosition",
]
