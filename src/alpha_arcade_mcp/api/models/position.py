"""Wallet position models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WalletPosition(BaseModel):
    """YES/NO outcome token balances a wallet holds in one market (micro-units)."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    market_app_id: int
    yes_balance: int = 0
    no_balance: int = 0
