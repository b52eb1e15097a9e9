"""
Server configuration (environment handling).

Environment variables are read once, when the server starts, into an immutable
`ServerConfig` that is passed explicitly to the collaborators that need it.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, SecretStr

from alpha_arcade_mcp.api.exceptions import ConfigError
from alpha_arcade_mcp.constants import (
    DEFAULT_ALGOD_SERVER,
    DEFAULT_API_BASE_URL,
    DEFAULT_INDEXER_SERVER,
    DEFAULT_MATCHER_APP_ID,
    DEFAULT_NODE_PORT,
    DEFAULT_USDC_ASSET_ID,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


class NodeEndpoint(BaseModel):
    """Connection settings for an Algorand algod or indexer node."""

    model_config = ConfigDict(frozen=True)

    server: str
    token: str = ""
    port: int = DEFAULT_NODE_PORT

    @property
    def address(self) -> str:
        """Node address in the `server:port` form expected by py-algorand-sdk clients."""
        return f"{self.server.rstrip('/')}:{self.port}"


class ServerConfig(BaseModel):
    """Configuration for the MCP server and its collaborators."""

    model_config = ConfigDict(frozen=True)

    mnemonic: SecretStr | None = None
    api_key: SecretStr | None = None
    algod: NodeEndpoint = NodeEndpoint(server=DEFAULT_ALGOD_SERVER)
    indexer: NodeEndpoint = NodeEndpoint(server=DEFAULT_INDEXER_SERVER)
    matcher_app_id: int = DEFAULT_MATCHER_APP_ID
    usdc_asset_id: int = DEFAULT_USDC_ASSET_ID
    api_base_url: str = DEFAULT_API_BASE_URL
    trading_backend: str | None = None
    """Import path (`module:callable`) of the trading backend factory."""

    @property
    def has_mnemonic(self) -> bool:
        return self.mnemonic is not None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Build configuration from `ALPHA_*` environment variables.

        Raises:
            ConfigError: If a numeric variable is not an integer.
        """
        env = os.environ if environ is None else environ

        def _optional(name: str) -> str | None:
            value = env.get(name, "").strip()
            return value or None

        def _int(name: str, default: int) -> int:
            raw = _optional(name)
            if raw is None:
                return default
            try:
                return int(raw)
            except ValueError:
                raise ConfigError(f"{name} must be an integer, got {raw!r}") from None

        mnemonic = _optional("ALPHA_MNEMONIC")
        api_key = _optional("ALPHA_API_KEY")

        return cls(
            mnemonic=SecretStr(mnemonic) if mnemonic else None,
            api_key=SecretStr(api_key) if api_key else None,
            algod=NodeEndpoint(
                server=_optional("ALPHA_ALGOD_SERVER") or DEFAULT_ALGOD_SERVER,
                token=env.get("ALPHA_ALGOD_TOKEN", ""),
                port=_int("ALPHA_ALGOD_PORT", DEFAULT_NODE_PORT),
            ),
            indexer=NodeEndpoint(
                server=_optional("ALPHA_INDEXER_SERVER") or DEFAULT_INDEXER_SERVER,
                token=env.get("ALPHA_INDEXER_TOKEN", ""),
                port=_int("ALPHA_INDEXER_PORT", DEFAULT_NODE_PORT),
            ),
            matcher_app_id=_int("ALPHA_MATCHER_APP_ID", DEFAULT_MATCHER_APP_ID),
            usdc_asset_id=_int("ALPHA_USDC_ASSET_ID", DEFAULT_USDC_ASSET_ID),
            api_base_url=_optional("ALPHA_API_BASE_URL") or DEFAULT_API_BASE_URL,
            trading_backend=_optional("ALPHA_TRADING_BACKEND"),
        )
