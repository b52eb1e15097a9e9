"""Orderbook data models for the Alpha Arcade API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RawOrderEntry(BaseModel):
    """
    One resting order on one side of one outcome token.

    Price and quantity are integer micro-units (1_000_000 = $1.00 / 1 share).
    No range checks are applied here; the producer owns order validity.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    price: int
    quantity: int
    escrow_app_id: int
    owner: str


class RawBook(BaseModel):
    """
    Four-sided on-chain orderbook snapshot for one market.

    Sides are kept in the order the source returned them; nothing here assumes
    sortedness or uniqueness.
    """

    model_config = ConfigDict(frozen=True)

    yes_bids: tuple[RawOrderEntry, ...] = ()
    yes_asks: tuple[RawOrderEntry, ...] = ()
    no_bids: tuple[RawOrderEntry, ...] = ()
    no_asks: tuple[RawOrderEntry, ...] = ()

    @property
    def total_orders(self) -> int:
        return len(self.yes_bids) + len(self.yes_asks) + len(self.no_bids) + len(self.no_asks)


class BookSide(BaseModel):
    """Bids and asks for one outcome token, as returned by the API."""

    model_config = ConfigDict(frozen=True)

    bids: tuple[RawOrderEntry, ...] = ()
    asks: tuple[RawOrderEntry, ...] = ()

    @field_validator("bids", "asks", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return () if value is None else value


class OrderbookResponse(BaseModel):
    """
    Orderbook payload shape: `{"yes": {"bids": [...], "asks": [...]}, "no": {...}}`.

    Missing or null sides are treated as empty.
    """

    model_config = ConfigDict(frozen=True)

    yes: BookSide = Field(default_factory=BookSide)
    no: BookSide = Field(default_factory=BookSide)

    @field_validator("yes", "no", mode="before")
    @classmethod
    def _null_side_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_raw_book(self) -> RawBook:
        return RawBook(
            yes_bids=self.yes.bids,
            yes_asks=self.yes.asks,
            no_bids=self.no.bids,
            no_asks=self.no.asks,
        )
