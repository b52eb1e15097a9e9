"""Custom exceptions for Alpha Arcade API and tool errors."""

from __future__ import annotations


class AlphaError(Exception):
    """Base exception for Alpha Arcade errors."""


class AlphaAPIError(AlphaError):
    """HTTP API error with status code."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"API Error {status_code}: {message}")


class RateLimitError(AlphaAPIError):
    """Rate limit exceeded (HTTP 429)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: int | None = None,
    ) -> None:
        super().__init__(429, message)
        self.retry_after = retry_after


class AuthenticationError(AlphaAPIError):
    """API key rejected (HTTP 401)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(401, message)


class MarketNotFoundError(AlphaAPIError):
    """Market identifier not found (HTTP 404)."""

    def __init__(self, market_id: str | int) -> None:
        super().__init__(404, f"Market not found: {market_id}")


class ConfigError(AlphaError):
    """Invalid environment configuration."""


class TradingNotConfiguredError(AlphaError):
    """A trading operation was requested without a wallet or trading backend."""


class WalletAddressRequiredError(AlphaError):
    """No wallet address was passed and none could be derived from the mnemonic."""

    def __init__(self) -> None:
        super().__init__(
            "No wallet address provided. Either pass a wallet_address parameter, or set "
            "ALPHA_MNEMONIC in your MCP server configuration so the default wallet is used."
        )
