"""
Shared test fixtures.

PHILOSOPHY: Use REAL objects wherever possible. Only mock at system boundaries.
- Real Pydantic models and frozen dataclasses (not dicts pretending to be models)
- respx ONLY for the HTTP boundary
- A recording fake ONLY for the external trading backend
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from alpha_arcade_mcp.api.models.order import (
    MarketOrderResult,
    OrderResult,
    TxConfirmation,
    TxResult,
)
from alpha_arcade_mcp.api.models.orderbook import RawBook, RawOrderEntry
from alpha_arcade_mcp.config import ServerConfig
from alpha_arcade_mcp.server.context import ToolContext

if TYPE_CHECKING:
    from collections.abc import Callable

API_BASE_URL = "https://partners.alphaarcade.com/api"


@pytest.fixture
def api_base_url() -> str:
    return API_BASE_URL


# ============================================================================
# Domain Object Builders (create REAL objects, not dicts)
# ============================================================================


@pytest.fixture
def make_entry() -> Callable[..., RawOrderEntry]:
    """Factory for RawOrderEntry with unique escrow ids by default."""
    counter = {"next": 1000}

    def _make(
        price: int,
        quantity: int = 1_000_000,
        escrow_app_id: int | None = None,
        owner: str = "OWNER",
    ) -> RawOrderEntry:
        if escrow_app_id is None:
            counter["next"] += 1
            escrow_app_id = counter["next"]
        return RawOrderEntry(
            price=price, quantity=quantity, escrow_app_id=escrow_app_id, owner=owner
        )

    return _make


@pytest.fixture
def worked_example_book(make_entry: Callable[..., RawOrderEntry]) -> RawBook:
    """YES ask 0.60, NO bid 0.35 (-> YES ask 0.65), YES bid 0.48."""
    return RawBook(
        yes_asks=(make_entry(600_000, 1_000_000, escrow_app_id=1),),
        no_bids=(make_entry(350_000, 2_000_000, escrow_app_id=2),),
        yes_bids=(make_entry(480_000, 1_000_000, escrow_app_id=3),),
        no_asks=(),
    )


@pytest.fixture
def orderbook_payload() -> dict[str, Any]:
    """Orderbook response matching the partners API shape (camelCase entries)."""
    return {
        "orderbook": {
            "yes": {
                "bids": [
                    {"price": 480000, "quantity": 1000000, "escrowAppId": 3, "owner": "BIDDER"}
                ],
                "asks": [
                    {"price": 600000, "quantity": 1000000, "escrowAppId": 1, "owner": "SELLER"}
                ],
            },
            "no": {
                "bids": [
                    {"price": 350000, "quantity": 2000000, "escrowAppId": 2, "owner": "NO-BUYER"}
                ],
                "asks": [],
            },
        }
    }


@pytest.fixture
def market_payload() -> dict[str, Any]:
    return {
        "id": "7f0c6a5e-0b7b-4c55-9b8e-1d2f3a4b5c6d",
        "title": "Will BTC close above $100k on Dec 31?",
        "marketAppId": 3100000001,
        "endTs": 1767225600,
        "isResolved": False,
        "yesProb": 620000,
        "noProb": 380000,
        "volume": 15250000000,
        "categories": ["crypto"],
        "options": [],
    }


# ============================================================================
# Trading backend fake (external collaborator boundary)
# ============================================================================


class FakeTradingClient:
    """Records every request and returns canned confirmations."""

    def __init__(self, *, succeed: bool = True) -> None:
        self.succeed = succeed
        self.calls: list[tuple[str, Any]] = []

    async def create_limit_order(self, request: Any) -> OrderResult:
        self.calls.append(("create_limit_order", request))
        return OrderResult(escrow_app_id=777, tx_ids=("TX1", "TX2"), confirmed_round=100)

    async def create_market_order(self, request: Any) -> MarketOrderResult:
        self.calls.append(("create_market_order", request))
        return MarketOrderResult(
            escrow_app_id=778,
            tx_ids=("TX3",),
            confirmed_round=101,
            matched_quantity=request.quantity,
        )

    async def cancel_order(self, request: Any) -> TxResult:
        self.calls.append(("cancel_order", request))
        return TxResult(success=self.succeed, tx_ids=("TX4",) if self.succeed else ())

    async def propose_match(self, request: Any) -> TxResult:
        self.calls.append(("propose_match", request))
        return TxResult(success=self.succeed, tx_ids=("TX5",) if self.succeed else ())

    async def split_shares(self, request: Any) -> TxConfirmation:
        self.calls.append(("split_shares", request))
        return TxConfirmation(tx_ids=("TX6",), confirmed_round=102)

    async def merge_shares(self, request: Any) -> TxConfirmation:
        self.calls.append(("merge_shares", request))
        return TxConfirmation(tx_ids=("TX7",), confirmed_round=103)

    async def claim(self, request: Any) -> TxConfirmation:
        self.calls.append(("claim", request))
        return TxConfirmation(tx_ids=("TX8",), confirmed_round=104)


@pytest.fixture
def fake_trading() -> FakeTradingClient:
    return FakeTradingClient()


@pytest.fixture
def server_config() -> ServerConfig:
    """Read-only configuration (no mnemonic, no backend)."""
    return ServerConfig()


@pytest.fixture
def tool_context(server_config: ServerConfig, fake_trading: FakeTradingClient) -> ToolContext:
    return ToolContext(config=server_config, trading_client_factory=lambda _config: fake_trading)
