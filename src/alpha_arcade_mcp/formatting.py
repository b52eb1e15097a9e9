"""Presentation helpers: micro-unit display strings and tool output documents.

Everything here sits outside the orderbook core; numeric micro-unit values are
carried through unchanged next to their display strings.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any

from alpha_arcade_mcp.api.models.order import OrderSide, Position
from alpha_arcade_mcp.constants import MICRO_UNIT_SCALE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from alpha_arcade_mcp.api.models.market import Market
    from alpha_arcade_mcp.api.models.order import (
        CancelOrderRequest,
        LimitOrderRequest,
        MarketOrderRequest,
        MarketOrderResult,
        OpenOrder,
        OrderResult,
        ProposeMatchRequest,
        TxConfirmation,
        TxResult,
    )
    from alpha_arcade_mcp.api.models.orderbook import RawBook, RawOrderEntry
    from alpha_arcade_mcp.api.models.position import WalletPosition
    from alpha_arcade_mcp.orderbook import UnifiedBook, UnifiedEntry

_CENT = Decimal("0.01")


def micro_to_decimal(micro_units: int) -> Decimal:
    """Micro-units as a Decimal rounded half-up to two places."""
    return (Decimal(micro_units) / MICRO_UNIT_SCALE).quantize(_CENT, rounding=ROUND_HALF_UP)


def format_price(micro_units: int) -> str:
    """Format a micro-unit price: 600000 -> '$0.60'."""
    return f"${micro_to_decimal(micro_units)}"


def format_qty(micro_units: int) -> str:
    """Format a micro-unit quantity: 1500000 -> '1.50 shares'."""
    return f"{micro_to_decimal(micro_units)} shares"


def _position_label(position: Position) -> str:
    return "YES" if position == Position.YES else "NO"


def _side_label(is_buying: bool) -> str:
    return "BUY" if is_buying else "SELL"


# ==================== Markets ====================


def market_summary(market: Market) -> dict[str, Any]:
    """Compact listing entry; API-only fields appear only when populated."""
    entry: dict[str, Any] = {
        "id": market.id,
        "title": market.title,
        "market_app_id": market.market_app_id,
        "ends_at": market.ends_at.isoformat(),
        "is_resolved": market.is_resolved,
    }
    if market.yes_prob is not None:
        entry["yes_price"] = format_price(market.yes_prob)
    if market.no_prob is not None:
        entry["no_price"] = format_price(market.no_prob)
    if market.volume is not None:
        entry["volume"] = format_price(market.volume)
    if market.categories:
        entry["categories"] = list(market.categories)
    if market.options:
        entry["options"] = [
            {"title": o.title, "market_app_id": o.market_app_id} for o in market.options
        ]
    return entry


# ==================== Orderbook ====================


def unified_entry_to_dict(entry: UnifiedEntry) -> dict[str, Any]:
    return {
        "yes_price": format_price(entry.yes_price),
        "yes_price_micro": entry.yes_price,
        "quantity": format_qty(entry.quantity),
        "quantity_micro": entry.quantity,
        "escrow_app_id": entry.escrow_app_id,
        "owner": entry.owner,
        "origin": entry.origin.value,
    }


def unified_book_to_dict(book: UnifiedBook) -> dict[str, Any]:
    """Serialize a unified book; a missing spread is "N/A" (`spread_micro=None`), not 0."""
    return {
        "asks": [unified_entry_to_dict(e) for e in book.asks],
        "bids": [unified_entry_to_dict(e) for e in book.bids],
        "spread": format_price(book.spread) if book.spread is not None else "N/A",
        "spread_micro": book.spread,
        "total_orders": book.total_orders,
    }


def _raw_side(entries: Iterable[RawOrderEntry]) -> list[dict[str, Any]]:
    return [
        {
            "price": format_price(e.price),
            "quantity": format_qty(e.quantity),
            "escrow_app_id": e.escrow_app_id,
            "owner": e.owner,
        }
        for e in entries
    ]


def raw_book_to_dict(book: RawBook) -> dict[str, Any]:
    return {
        "yes": {"bids": _raw_side(book.yes_bids), "asks": _raw_side(book.yes_asks)},
        "no": {"bids": _raw_side(book.no_bids), "asks": _raw_side(book.no_asks)},
        "total_orders": book.total_orders,
    }


# ==================== Wallet ====================


def open_order_to_dict(order: OpenOrder) -> dict[str, Any]:
    return {
        "escrow_app_id": order.escrow_app_id,
        "position": _position_label(order.position),
        "side": _side_label(order.side == OrderSide.BUY),
        "price": format_price(order.price),
        "quantity": format_qty(order.quantity),
        "filled": format_qty(order.quantity_filled),
        "remaining": format_qty(order.remaining),
    }


def position_to_dict(position: WalletPosition) -> dict[str, Any]:
    return {
        "market_app_id": position.market_app_id,
        "yes_balance": format_qty(position.yes_balance),
        "no_balance": format_qty(position.no_balance),
    }


# ==================== Receipts ====================


def _tx_ids(tx_ids: Iterable[str]) -> str:
    return ", ".join(tx_ids)


def limit_order_receipt(request: LimitOrderRequest, result: OrderResult) -> str:
    return (
        "Limit order created.\n"
        f"  Escrow App ID: {result.escrow_app_id}\n"
        f"  Position: {_position_label(request.position)}\n"
        f"  Side: {_side_label(request.is_buying)}\n"
        f"  Price: {format_price(request.price)}\n"
        f"  Quantity: {format_qty(request.quantity)}\n"
        f"  Tx IDs: {_tx_ids(result.tx_ids)}\n"
        f"  Confirmed round: {result.confirmed_round}"
    )


def market_order_receipt(request: MarketOrderRequest, result: MarketOrderResult) -> str:
    return (
        "Market order created and matched.\n"
        f"  Escrow App ID: {result.escrow_app_id}\n"
        f"  Position: {_position_label(request.position)}\n"
        f"  Side: {_side_label(request.is_buying)}\n"
        f"  Price: {format_price(request.price)}\n"
        f"  Quantity: {format_qty(request.quantity)}\n"
        f"  Matched: {format_qty(result.matched_quantity)}\n"
        f"  Tx IDs: {_tx_ids(result.tx_ids)}\n"
        f"  Confirmed round: {result.confirmed_round}"
    )


def cancel_receipt(request: CancelOrderRequest, result: TxResult) -> str:
    if not result.success:
        return f"Failed to cancel order {request.escrow_app_id}."
    return (
        "Order cancelled successfully.\n"
        f"  Escrow App ID: {request.escrow_app_id}\n"
        f"  Tx IDs: {_tx_ids(result.tx_ids)}"
    )


def match_receipt(request: ProposeMatchRequest, result: TxResult) -> str:
    if not result.success:
        return f"Failed to propose match with escrow {request.maker_escrow_app_id}."
    return (
        "Match proposed successfully.\n"
        f"  Maker escrow: {request.maker_escrow_app_id}\n"
        f"  Quantity: {format_qty(request.quantity_matched)}\n"
        f"  Tx IDs: {_tx_ids(result.tx_ids)}"
    )


def confirmation_receipt(headline: str, result: TxConfirmation) -> str:
    return (
        f"{headline}\n"
        f"  Tx IDs: {_tx_ids(result.tx_ids)}\n"
        f"  Confirmed round: {result.confirmed_round}"
    )


def split_receipt(amount: int, result: TxConfirmation) -> str:
    return confirmation_receipt(f"Split {format_price(amount)} USDC into YES + NO tokens.", result)


def merge_receipt(amount: int, result: TxConfirmation) -> str:
    return confirmation_receipt(
        f"Merged YES + NO tokens back into {format_price(amount)} USDC.", result
    )


def claim_receipt(result: TxConfirmation) -> str:
    return confirmation_receipt("Claim successful.", result)
