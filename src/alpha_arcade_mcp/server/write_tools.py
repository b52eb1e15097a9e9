"""Trading tool handlers. All of them require ALPHA_MNEMONIC and a trading backend."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from alpha_arcade_mcp.api.models.order import (
    CancelOrderRequest,
    ClaimRequest,
    LimitOrderRequest,
    MarketOrderRequest,
    Position,
    ProposeMatchRequest,
    SharesRequest,
)
from alpha_arcade_mcp.formatting import (
    cancel_receipt,
    claim_receipt,
    limit_order_receipt,
    market_order_receipt,
    match_receipt,
    merge_receipt,
    split_receipt,
)

if TYPE_CHECKING:
    from alpha_arcade_mcp.server.context import ToolContext


logger = structlog.get_logger()


async def create_limit_order(
    ctx: ToolContext,
    market_app_id: int,
    position: int,
    price: int,
    quantity: int,
    is_buying: bool,
) -> str:
    request = LimitOrderRequest(
        market_app_id=market_app_id,
        position=Position(position),
        price=price,
        quantity=quantity,
        is_buying=is_buying,
    )
    client = ctx.trading_client()
    logger.info("Creating limit order", **request.model_dump())
    result = await client.create_limit_order(request)
    return limit_order_receipt(request, result)


async def create_market_order(
    ctx: ToolContext,
    market_app_id: int,
    position: int,
    price: int,
    quantity: int,
    is_buying: bool,
    slippage: int,
) -> str:
    request = MarketOrderRequest(
        market_app_id=market_app_id,
        position=Position(position),
        price=price,
        quantity=quantity,
        is_buying=is_buying,
        slippage=slippage,
    )
    client = ctx.trading_client()
    logger.info("Creating market order", **request.model_dump())
    result = await client.create_market_order(request)
    return market_order_receipt(request, result)


async def cancel_order(
    ctx: ToolContext, market_app_id: int, escrow_app_id: int, order_owner: str
) -> str:
    request = CancelOrderRequest(
        market_app_id=market_app_id,
        escrow_app_id=escrow_app_id,
        order_owner=order_owner,
    )
    result = await ctx.trading_client().cancel_order(request)
    if not result.success:
        logger.warning("Cancel failed", escrow_app_id=escrow_app_id)
    return cancel_receipt(request, result)


async def propose_match(
    ctx: ToolContext,
    market_app_id: int,
    maker_escrow_app_id: int,
    maker_address: str,
    quantity_matched: int,
) -> str:
    request = ProposeMatchRequest(
        market_app_id=market_app_id,
        maker_escrow_app_id=maker_escrow_app_id,
        maker_address=maker_address,
        quantity_matched=quantity_matched,
    )
    result = await ctx.trading_client().propose_match(request)
    if not result.success:
        logger.warning("Match proposal failed", maker_escrow_app_id=maker_escrow_app_id)
    return match_receipt(request, result)


async def split_shares(ctx: ToolContext, market_app_id: int, amount: int) -> str:
    request = SharesRequest(market_app_id=market_app_id, amount=amount)
    result = await ctx.trading_client().split_shares(request)
    return split_receipt(amount, result)


async def merge_shares(ctx: ToolContext, market_app_id: int, amount: int) -> str:
    request = SharesRequest(market_app_id=market_app_id, amount=amount)
    result = await ctx.trading_client().merge_shares(request)
    return merge_receipt(amount, result)


async def claim(
    ctx: ToolContext, market_app_id: int, asset_id: int, amount: int | None = None
) -> str:
    request = ClaimRequest(market_app_id=market_app_id, asset_id=asset_id, amount=amount)
    result = await ctx.trading_client().claim(request)
    return claim_receipt(result)
