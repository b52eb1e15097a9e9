"""Order models: open orders, trading requests and transaction results."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from alpha_arcade_mcp.constants import MICRO_UNIT_SCALE


class Position(IntEnum):
    """Outcome token an order trades (wire values used by the matcher contract)."""

    NO = 0
    YES = 1


class OrderSide(IntEnum):
    """Order direction."""

    SELL = 0
    BUY = 1


_CAMEL = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class OpenOrder(BaseModel):
    """A resting order owned by a wallet."""

    model_config = _CAMEL

    escrow_app_id: int
    position: Position
    side: OrderSide
    price: int
    quantity: int
    quantity_filled: int = 0

    @property
    def remaining(self) -> int:
        return self.quantity - self.quantity_filled


# ==================== Requests ====================


class LimitOrderRequest(BaseModel):
    """Request to place a limit order. Price and quantity are micro-units."""

    model_config = _CAMEL

    market_app_id: int
    position: Position
    price: int = Field(gt=0, lt=MICRO_UNIT_SCALE, description="Price in micro-units")
    quantity: int = Field(gt=0, description="Quantity in micro-units")
    is_buying: bool


class MarketOrderRequest(LimitOrderRequest):
    """Request to place a market order that auto-matches within `slippage` of `price`."""

    slippage: int = Field(ge=0, description="Slippage tolerance in micro-units")


class CancelOrderRequest(BaseModel):
    model_config = _CAMEL

    market_app_id: int
    escrow_app_id: int
    order_owner: str


class ProposeMatchRequest(BaseModel):
    """Match an existing maker order with the configured wallet as taker."""

    model_config = _CAMEL

    market_app_id: int
    maker_escrow_app_id: int
    maker_address: str
    quantity_matched: int = Field(gt=0)


class SharesRequest(BaseModel):
    """Split USDC into YES + NO tokens, or merge them back (1 USDC == 1 YES + 1 NO)."""

    model_config = _CAMEL

    market_app_id: int
    amount: int = Field(gt=0)


class ClaimRequest(BaseModel):
    """Redeem outcome tokens of a resolved market. `amount=None` claims the whole balance."""

    model_config = _CAMEL

    market_app_id: int
    asset_id: int
    amount: int | None = Field(default=None, gt=0)


# ==================== Results ====================


class TxConfirmation(BaseModel):
    """Transactions submitted for an operation and the round that confirmed them."""

    model_config = _CAMEL

    tx_ids: tuple[str, ...] = ()
    confirmed_round: int


class OrderResult(TxConfirmation):
    escrow_app_id: int


class MarketOrderResult(OrderResult):
    matched_quantity: int


class TxResult(BaseModel):
    """Outcome of a cancel or match proposal."""

    model_config = _CAMEL

    success: bool
    tx_ids: tuple[str, ...] = ()
