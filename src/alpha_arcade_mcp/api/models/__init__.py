"""Pydantic models for Alpha Arcade API payloads."""

from alpha_arcade_mcp.api.models.market import Market, MarketOption, MarketSource
from alpha_arcade_mcp.api.models.order import (
    CancelOrderRequest,
    ClaimRequest,
    LimitOrderRequest,
    MarketOrderRequest,
    MarketOrderResult,
    OpenOrder,
    OrderResult,
    OrderSide,
    Position,
    ProposeMatchRequest,
    SharesRequest,
    TxConfirmation,
    TxResult,
)
from alpha_arcade_mcp.api.models.orderbook import (
    BookSide,
    OrderbookResponse,
    RawBook,
    RawOrderEntry,
)
from alpha_arcade_mcp.api.models.position import WalletPosition

__all__ = [
    "BookSide",
    "CancelOrderRequest",
    "ClaimRequest",
    "LimitOrderRequest",
    "Market",
    "MarketOption",
    "MarketOrderRequest",
    "MarketOrderResult",
    "MarketSource",
    "OpenOrder",
    "OrderResult",
    "OrderSide",
    "OrderbookResponse",
    "Position",
    "ProposeMatchRequest",
    "RawBook",
    "RawOrderEntry",
    "SharesRequest",
    "TxConfirmation",
    "TxResult",
    "WalletPosition",
]
