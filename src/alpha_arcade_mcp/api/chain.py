"""Algorand wallet and trading backend wiring.

Builds the pieces an Alpha Arcade trading backend needs (node clients, a
transaction signer, contract ids) from `ServerConfig`, and resolves which
wallet read-only tools should look at.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog
from algosdk import account, mnemonic
from algosdk import error as algosdk_error
from algosdk.atomic_transaction_composer import AccountTransactionSigner
from algosdk.v2client import algod, indexer

from alpha_arcade_mcp.api.exceptions import (
    ConfigError,
    TradingNotConfiguredError,
    WalletAddressRequiredError,
)
from alpha_arcade_mcp.api.protocols import TradingClient

if TYPE_CHECKING:
    from alpha_arcade_mcp.api.protocols import TradingBackendFactory
    from alpha_arcade_mcp.config import ServerConfig


logger = structlog.get_logger()

_MNEMONIC_ERRORS = (
    KeyError,
    ValueError,
    algosdk_error.WrongChecksumError,
    algosdk_error.WrongMnemonicLengthError,
)


@dataclass(frozen=True)
class ChainContext:
    """Everything a trading backend needs to build and submit transactions."""

    algod_client: algod.AlgodClient
    indexer_client: indexer.IndexerClient
    signer: AccountTransactionSigner
    active_address: str
    matcher_app_id: int
    usdc_asset_id: int
    api_base_url: str
    api_key: str | None = None


def derive_wallet_address(words: str) -> str | None:
    """Return the Algorand address for a 25-word mnemonic, or None if it is invalid."""
    try:
        private_key = mnemonic.to_private_key(words)
        return str(account.address_from_private_key(private_key))
    except _MNEMONIC_ERRORS:
        logger.warning("Configured mnemonic could not be decoded")
        return None


def configured_wallet_address(config: ServerConfig) -> str | None:
    """Address of the wallet behind ALPHA_MNEMONIC, if one is configured and valid."""
    if config.mnemonic is None:
        return None
    return derive_wallet_address(config.mnemonic.get_secret_value())


def resolve_wallet_address(wallet_address: str | None, config: ServerConfig) -> str:
    """
    Pick the wallet for position/order lookups.

    An explicit address wins; otherwise the configured wallet is used.

    Raises:
        WalletAddressRequiredError: If neither is available.
    """
    if wallet_address:
        return wallet_address
    configured = configured_wallet_address(config)
    if configured:
        return configured
    raise WalletAddressRequiredError()


def build_chain_context(config: ServerConfig) -> ChainContext:
    """
    Create node clients and a signer for the configured wallet.

    Raises:
        TradingNotConfiguredError: If ALPHA_MNEMONIC is not set.
        ConfigError: If the mnemonic is invalid.
    """
    if config.mnemonic is None:
        raise TradingNotConfiguredError(
            "ALPHA_MNEMONIC environment variable is required for trading operations. "
            "Set it in your MCP server configuration."
        )
    try:
        private_key = mnemonic.to_private_key(config.mnemonic.get_secret_value())
    except _MNEMONIC_ERRORS:
        raise ConfigError("ALPHA_MNEMONIC is not a valid Algorand mnemonic") from None

    return ChainContext(
        algod_client=algod.AlgodClient(config.algod.token, config.algod.address),
        indexer_client=indexer.IndexerClient(config.indexer.token, config.indexer.address),
        signer=AccountTransactionSigner(private_key),
        active_address=str(account.address_from_private_key(private_key)),
        matcher_app_id=config.matcher_app_id,
        usdc_asset_id=config.usdc_asset_id,
        api_base_url=config.api_base_url,
        api_key=config.api_key.get_secret_value() if config.api_key else None,
    )


def load_trading_backend(import_path: str) -> TradingBackendFactory:
    """
    Import a trading backend factory given as `package.module:callable`.

    Raises:
        ConfigError: If the path is malformed or cannot be imported.
    """
    module_name, sep, attr = import_path.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(
            f"ALPHA_TRADING_BACKEND must look like 'package.module:factory', got {import_path!r}"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import trading backend module {module_name!r}: {e}") from e
    factory = getattr(module, attr, None)
    if not callable(factory):
        raise ConfigError(f"Trading backend {import_path!r} is not a callable")
    return factory  # type: ignore[no-any-return]


def create_trading_client(config: ServerConfig) -> TradingClient:
    """
    Build the trading client for write tools.

    Raises:
        TradingNotConfiguredError: If the mnemonic or the backend is missing.
        ConfigError: If the backend cannot be loaded or returns the wrong type.
    """
    context = build_chain_context(config)
    if not config.trading_backend:
        raise TradingNotConfiguredError(
            "ALPHA_TRADING_BACKEND must name a trading backend factory "
            "('package.module:factory') to place or manage orders."
        )
    factory = load_trading_backend(config.trading_backend)
    client = factory(context)
    if not isinstance(client, TradingClient):
        raise ConfigError(
            f"Trading backend {config.trading_backend!r} did not return a TradingClient"
        )
    logger.info(
        "Trading client ready",
        backend=config.trading_backend,
        active_address=context.active_address,
    )
    return client
