"""Interfaces for the trading SDK collaborators.

Order execution (transaction construction, signing, submission, matching) is
provided by an external Alpha Arcade trading backend. The server only depends
on these shapes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from alpha_arcade_mcp.api.chain import ChainContext
    from alpha_arcade_mcp.api.models.order import (
        CancelOrderRequest,
        ClaimRequest,
        LimitOrderRequest,
        MarketOrderRequest,
        MarketOrderResult,
        OrderResult,
        ProposeMatchRequest,
        SharesRequest,
        TxConfirmation,
        TxResult,
    )


@runtime_checkable
class TradingClient(Protocol):
    """Signed trading operations for the configured wallet."""

    async def create_limit_order(self, request: LimitOrderRequest) -> OrderResult: ...

    async def create_market_order(self, request: MarketOrderRequest) -> MarketOrderResult: ...

    async def cancel_order(self, request: CancelOrderRequest) -> TxResult: ...

    async def propose_match(self, request: ProposeMatchRequest) -> TxResult: ...

    async def split_shares(self, request: SharesRequest) -> TxConfirmation: ...

    async def merge_shares(self, request: SharesRequest) -> TxConfirmation: ...

    async def claim(self, request: ClaimRequest) -> TxConfirmation: ...


class TradingBackendFactory(Protocol):
    """Builds a `TradingClient` from node clients, signer and contract ids."""

    def __call__(self, context: ChainContext) -> TradingClient: ...
