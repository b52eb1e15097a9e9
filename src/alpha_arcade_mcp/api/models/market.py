"""Market data models for the Alpha Arcade API."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MarketSource(str, Enum):
    """Where a market record was discovered."""

    ONCHAIN = "onchain"
    API = "api"


class MarketOption(BaseModel):
    """One outcome of a multi-choice market (each option is its own binary market app)."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title: str
    market_app_id: int


class Market(BaseModel):
    """
    Represents an Alpha Arcade prediction market.

    Probabilities, volume, categories and options are only populated for markets
    served by the partners API; on-chain records leave them unset. They are
    explicit optionals rather than keys that may or may not be present.

    `source` is read from the payload's `source` field. This server only talks
    to the partners API, so a payload without one is tagged `API`.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Market ID (app ID string on-chain, UUID from the API)")
    title: str
    market_app_id: int
    end_ts: int = Field(..., description="Market end time (Unix seconds)")
    is_resolved: bool = False
    source: MarketSource = MarketSource.API

    # Micro-unit prices / volume (API-sourced markets only)
    yes_prob: int | None = None
    no_prob: int | None = None
    volume: int | None = None
    categories: tuple[str, ...] = ()
    options: tuple[MarketOption, ...] = ()

    @property
    def ends_at(self) -> datetime:
        """Market end time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.end_ts, tz=UTC)

    @property
    def is_multi_choice(self) -> bool:
        return bool(self.options)
