"""Tests for display strings and tool output documents."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest

from alpha_arcade_mcp.api.models import (
    CancelOrderRequest,
    LimitOrderRequest,
    Market,
    OpenOrder,
    OrderResult,
    Position,
    ProposeMatchRequest,
    RawBook,
    TxConfirmation,
    TxResult,
    WalletPosition,
)
from alpha_arcade_mcp.formatting import (
    cancel_receipt,
    format_price,
    format_qty,
    limit_order_receipt,
    market_summary,
    match_receipt,
    micro_to_decimal,
    open_order_to_dict,
    position_to_dict,
    raw_book_to_dict,
    split_receipt,
    unified_book_to_dict,
)
from alpha_arcade_mcp.orderbook import unify


class TestUnits:
    @pytest.mark.parametrize(
        ("micro", "expected"),
        [(600_000, "$0.60"), (1_000_000, "$1.00"), (0, "$0.00"), (5_000, "$0.01")],
    )
    def test_format_price(self, micro: int, expected: str) -> None:
        assert format_price(micro) == expected

    def test_format_qty(self) -> None:
        assert format_qty(1_500_000) == "1.50 shares"

    def test_rounds_half_up(self) -> None:
        assert micro_to_decimal(4_999) == Decimal("0.00")
        assert micro_to_decimal(125_000) == Decimal("0.13")

    def test_negative_values(self) -> None:
        assert format_price(-50_000) == "$-0.05"


class TestOrderbookOutput:
    def test_unified_book(self, worked_example_book: RawBook) -> None:
        doc = unified_book_to_dict(unify(worked_example_book))

        assert [a["yes_price"] for a in doc["asks"]] == ["$0.60", "$0.65"]
        assert doc["asks"][1] == {
            "yes_price": "$0.65",
            "yes_price_micro": 650_000,
            "quantity": "2.00 shares",
            "quantity_micro": 2_000_000,
            "escrow_app_id": 2,
            "owner": "OWNER",
            "origin": "no_bid_as_yes_ask",
        }
        assert doc["spread"] == "$0.12"
        assert doc["spread_micro"] == 120_000
        assert doc["total_orders"] == 3

    def test_missing_spread_is_not_zero(self) -> None:
        doc = unified_book_to_dict(unify(RawBook()))

        assert doc["spread"] == "N/A"
        assert doc["spread_micro"] is None
        assert doc["asks"] == []
        assert doc["bids"] == []

    def test_raw_book(self, worked_example_book: RawBook) -> None:
        doc = raw_book_to_dict(worked_example_book)

        assert doc["no"]["bids"][0]["price"] == "$0.35"
        assert doc["no"]["asks"] == []
        assert doc["total_orders"] == 3


class TestMarketSummary:
    def test_api_market(self, market_payload: dict[str, Any]) -> None:
        summary = market_summary(Market.model_validate(market_payload))

        assert summary["yes_price"] == "$0.62"
        assert summary["no_price"] == "$0.38"
        assert summary["volume"] == "$15250.00"
        assert summary["ends_at"] == "2026-01-01T00:00:00+00:00"
        assert summary["categories"] == ["crypto"]
        assert "options" not in summary

    def test_unpriced_market_omits_optional_keys(self) -> None:
        summary = market_summary(Market(id="1", title="T", market_app_id=1, end_ts=0))

        assert set(summary) == {"id", "title", "market_app_id", "ends_at", "is_resolved"}


def test_open_order_and_position() -> None:
    order = OpenOrder(
        escrow_app_id=9,
        position=0,
        side=0,
        price=300_000,
        quantity=2_000_000,
        quantity_filled=500_000,
    )
    assert open_order_to_dict(order) == {
        "escrow_app_id": 9,
        "position": "NO",
        "side": "SELL",
        "price": "$0.30",
        "quantity": "2.00 shares",
        "filled": "0.50 shares",
        "remaining": "1.50 shares",
    }
    assert position_to_dict(WalletPosition(market_app_id=7, no_balance=1_000_000)) == {
        "market_app_id": 7,
        "yes_balance": "0.00 shares",
        "no_balance": "1.00 shares",
    }


class TestReceipts:
    def test_limit_order(self) -> None:
        request = LimitOrderRequest(
            market_app_id=1,
            position=Position.YES,
            price=500_000,
            quantity=1_000_000,
            is_buying=True,
        )
        text = limit_order_receipt(
            request, OrderResult(escrow_app_id=77, tx_ids=("A", "B"), confirmed_round=5)
        )

        assert text.splitlines() == [
            "Limit order created.",
            "  Escrow App ID: 77",
            "  Position: YES",
            "  Side: BUY",
            "  Price: $0.50",
            "  Quantity: 1.00 shares",
            "  Tx IDs: A, B",
            "  Confirmed round: 5",
        ]

    def test_cancel_success_and_failure(self) -> None:
        request = CancelOrderRequest(market_app_id=1, escrow_app_id=55, order_owner="O")

        assert cancel_receipt(request, TxResult(success=True, tx_ids=("T",))).startswith(
            "Order cancelled successfully."
        )
        assert cancel_receipt(request, TxResult(success=False)) == "Failed to cancel order 55."

    def test_match_failure(self) -> None:
        request = ProposeMatchRequest(
            market_app_id=1, maker_escrow_app_id=8, maker_address="M", quantity_matched=1
        )

        assert match_receipt(request, TxResult(success=False)) == (
            "Failed to propose match with escrow 8."
        )

    def test_split(self) -> None:
        text = split_receipt(2_000_000, TxConfirmation(tx_ids=("S",), confirmed_round=9))

        assert text == (
            "Split $2.00 USDC into YES + NO tokens.\n  Tx IDs: S\n  Confirmed round: 9"
        )
