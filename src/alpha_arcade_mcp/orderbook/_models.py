"""Data models for the unified (YES-denominated) orderbook view.

This module contains:
- EntryOrigin enum naming the raw side each unified entry came from
- Frozen dataclasses for unified entries and the unified book
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class EntryOrigin(str, Enum):
    """Raw orderbook side a unified entry was derived from."""

    YES_BID = "yes_bid"
    YES_ASK = "yes_ask"
    NO_BID_AS_YES_ASK = "no_bid_as_yes_ask"
    NO_ASK_AS_YES_BID = "no_ask_as_yes_bid"

    @property
    def is_complemented(self) -> bool:
        """True when the entry's price was converted from NO terms."""
        return self in (EntryOrigin.NO_BID_AS_YES_ASK, EntryOrigin.NO_ASK_AS_YES_BID)


@dataclass(frozen=True)
class UnifiedEntry:
    """One resting order expressed in YES-price terms (micro-units)."""

    yes_price: int
    quantity: int
    escrow_app_id: int
    owner: str
    origin: EntryOrigin


@dataclass(frozen=True)
class UnifiedBook:
    """
    Two-sided YES view of a four-sided orderbook.

    `asks` are cheapest first, `bids` highest first. `spread` is None when either
    side is empty, which is distinct from a zero (locked) spread.
    """

    asks: tuple[UnifiedEntry, ...]
    bids: tuple[UnifiedEntry, ...]
    spread: int | None
    total_orders: int

    @property
    def best_ask(self) -> UnifiedEntry | None:
        return self.asks[0] if self.asks else None

    @property
    def best_bid(self) -> UnifiedEntry | None:
        return self.bids[0] if self.bids else None

    @property
    def midpoint(self) -> Decimal | None:
        """YES midpoint in micro-units, when both sides are populated."""
        if not self.asks or not self.bids:
            return None
        return (Decimal(self.asks[0].yes_price) + Decimal(self.bids[0].yes_price)) / 2
