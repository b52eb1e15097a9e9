"""
Wallet and trading backend wiring tests.

Real py-algorand-sdk keys are generated locally; node clients are constructed
but never contacted.
"""

from __future__ import annotations

import sys
import types
from typing import Any

import pytest
from algosdk import account, mnemonic
from pydantic import SecretStr

from alpha_arcade_mcp.api.chain import (
    ChainContext,
    build_chain_context,
    configured_wallet_address,
    create_trading_client,
    derive_wallet_address,
    load_trading_backend,
    resolve_wallet_address,
)
from alpha_arcade_mcp.api.exceptions import (
    ConfigError,
    TradingNotConfiguredError,
    WalletAddressRequiredError,
)
from alpha_arcade_mcp.config import ServerConfig

BACKEND_MODULE = "fake_alpha_trading_backend"


@pytest.fixture
def wallet() -> tuple[str, str]:
    """(mnemonic, address) for a freshly generated account."""
    private_key, address = account.generate_account()
    return mnemonic.from_private_key(private_key), address


@pytest.fixture
def trading_config(wallet: tuple[str, str]) -> ServerConfig:
    return ServerConfig(
        mnemonic=SecretStr(wallet[0]),
        api_key=SecretStr("k"),
        trading_backend=f"{BACKEND_MODULE}:create",
    )


@pytest.fixture
def backend_module(monkeypatch: pytest.MonkeyPatch, fake_trading: Any) -> dict[str, Any]:
    """Install an importable backend module; returns what its factory received."""
    received: dict[str, Any] = {}
    module = types.ModuleType(BACKEND_MODULE)

    def create(context: ChainContext) -> Any:
        received["context"] = context
        return fake_trading

    module.create = create  # type: ignore[attr-defined]
    module.not_callable = 42  # type: ignore[attr-defined]
    module.wrong_type = lambda context: object()  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, BACKEND_MODULE, module)
    return received


class TestWalletAddress:
    def test_derive_from_mnemonic(self, wallet: tuple[str, str]) -> None:
        words, address = wallet
        assert derive_wallet_address(words) == address

    @pytest.mark.parametrize("words", ["not a mnemonic", "abandon " * 25])
    def test_invalid_mnemonic_gives_none(self, words: str) -> None:
        assert derive_wallet_address(words) is None

    def test_configured_address(
        self, trading_config: ServerConfig, wallet: tuple[str, str]
    ) -> None:
        assert configured_wallet_address(trading_config) == wallet[1]
        assert configured_wallet_address(ServerConfig()) is None

    def test_explicit_address_wins(self, trading_config: ServerConfig) -> None:
        assert resolve_wallet_address("EXPLICIT", trading_config) == "EXPLICIT"

    def test_falls_back_to_configured_wallet(
        self, trading_config: ServerConfig, wallet: tuple[str, str]
    ) -> None:
        assert resolve_wallet_address(None, trading_config) == wallet[1]
        assert resolve_wallet_address("", trading_config) == wallet[1]

    def test_no_address_available(self) -> None:
        with pytest.raises(WalletAddressRequiredError, match="wallet_address parameter"):
            resolve_wallet_address(None, ServerConfig())

    def test_invalid_configured_mnemonic_requires_address(self) -> None:
        config = ServerConfig(mnemonic=SecretStr("garbage"))
        with pytest.raises(WalletAddressRequiredError):
            resolve_wallet_address(None, config)


class TestBuildChainContext:
    def test_requires_mnemonic(self) -> None:
        with pytest.raises(TradingNotConfiguredError, match="ALPHA_MNEMONIC"):
            build_chain_context(ServerConfig())

    def test_invalid_mnemonic(self) -> None:
        with pytest.raises(ConfigError, match="not a valid Algorand mnemonic"):
            build_chain_context(ServerConfig(mnemonic=SecretStr("one two three")))

    def test_context_fields(self, trading_config: ServerConfig, wallet: tuple[str, str]) -> None:
        context = build_chain_context(trading_config)

        assert context.active_address == wallet[1]
        assert context.matcher_app_id == 3078581851
        assert context.usdc_asset_id == 31566704
        assert context.api_base_url == "https://partners.alphaarcade.com/api"
        assert context.api_key == "k"


class TestTradingBackend:
    @pytest.mark.parametrize("path", ["no_colon", ":factory", "module:"])
    def test_malformed_path(self, path: str) -> None:
        with pytest.raises(ConfigError, match="package.module:factory"):
            load_trading_backend(path)

    def test_missing_module(self) -> None:
        with pytest.raises(ConfigError, match="Cannot import"):
            load_trading_backend("alpha_arcade_mcp_no_such_backend:create")

    def test_attribute_not_callable(self, backend_module: dict[str, Any]) -> None:
        with pytest.raises(ConfigError, match="not a callable"):
            load_trading_backend(f"{BACKEND_MODULE}:not_callable")
        with pytest.raises(ConfigError, match="not a callable"):
            load_trading_backend(f"{BACKEND_MODULE}:missing")

    def test_create_trading_client(
        self,
        trading_config: ServerConfig,
        backend_module: dict[str, Any],
        fake_trading: Any,
        wallet: tuple[str, str],
    ) -> None:
        client = create_trading_client(trading_config)

        assert client is fake_trading
        assert backend_module["context"].active_address == wallet[1]

    def test_backend_required(self, wallet: tuple[str, str]) -> None:
        config = ServerConfig(mnemonic=SecretStr(wallet[0]))
        with pytest.raises(TradingNotConfiguredError, match="ALPHA_TRADING_BACKEND"):
            create_trading_client(config)

    def test_mnemonic_checked_before_backend(self) -> None:
        config = ServerConfig(trading_backend=f"{BACKEND_MODULE}:create")
        with pytest.raises(TradingNotConfiguredError, match="ALPHA_MNEMONIC"):
            create_trading_client(config)

    def test_backend_must_return_trading_client(
        self, trading_config: ServerConfig, backend_module: dict[str, Any]
    ) -> None:
        config = trading_config.model_copy(
            update={"trading_backend": f"{BACKEND_MODULE}:wrong_type"}
        )
        with pytest.raises(ConfigError, match="did not return a TradingClient"):
            create_trading_client(config)
