"""Read-only tool handlers (no mnemonic needed)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import structlog

from alpha_arcade_mcp.formatting import (
    market_summary,
    open_order_to_dict,
    position_to_dict,
    raw_book_to_dict,
    unified_book_to_dict,
)
from alpha_arcade_mcp.orderbook import unify

if TYPE_CHECKING:
    from alpha_arcade_mcp.server.context import ToolContext


logger = structlog.get_logger()


def _json(data: Any) -> str:
    return json.dumps(data, indent=2)


async def get_markets(ctx: ToolContext) -> str:
    """All live, tradeable markets as a JSON list of summaries."""
    async with ctx.public_client() as client:
        markets = await client.get_markets()
    return _json([market_summary(m) for m in markets])


async def get_market(ctx: ToolContext, market_id: str) -> str:
    """Full details of one market, or a not-found sentence."""
    async with ctx.public_client() as client:
        market = await client.get_market(market_id)
    if market is None:
        return f'Market "{market_id}" not found.'
    return market.model_dump_json(indent=2)


async def get_orderbook(ctx: ToolContext, market_app_id: int, include_raw: bool = False) -> str:
    """
    Orderbook for a market app as a unified YES view.

    NO bids appear as YES asks and NO asks as YES bids at the complement price.
    With `include_raw`, the original four sides are included under "raw".
    """
    async with ctx.public_client() as client:
        raw_book = await client.get_orderbook(market_app_id)

    book = unify(raw_book)
    logger.debug(
        "Unified orderbook",
        market_app_id=market_app_id,
        asks=len(book.asks),
        bids=len(book.bids),
        spread=book.spread,
    )

    result = unified_book_to_dict(book)
    if include_raw:
        result["raw"] = raw_book_to_dict(raw_book)
    return _json(result)


async def get_open_orders(
    ctx: ToolContext, market_app_id: int, wallet_address: str | None = None
) -> str:
    address = ctx.wallet_address(wallet_address)
    async with ctx.public_client() as client:
        orders = await client.get_open_orders(market_app_id, address)
    if not orders:
        return "No open orders found for this wallet on this market."
    return _json([open_order_to_dict(o) for o in orders])


async def get_positions(ctx: ToolContext, wallet_address: str | None = None) -> str:
    address = ctx.wallet_address(wallet_address)
    async with ctx.public_client() as client:
        positions = await client.get_positions(address)
    if not positions:
        return "No positions found for this wallet."
    return _json([position_to_dict(p) for p in positions])
