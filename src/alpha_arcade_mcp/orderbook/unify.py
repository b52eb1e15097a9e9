"""Four-sided orderbook normalization.

An Alpha Arcade market keeps separate books for its YES and NO tokens. Because a
YES price `p` and a NO price `SCALE - p` describe the same position:

- a NO bid at `q` is a YES ask at `SCALE - q` (filling it sells YES at that price)
- a NO ask at `q` is a YES bid at `SCALE - q`

`unify` folds the four raw sides into one YES-denominated book so a caller can
read the price to transact in YES without reasoning about the NO side.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from alpha_arcade_mcp.constants import MICRO_UNIT_SCALE
from alpha_arcade_mcp.orderbook._models import EntryOrigin, UnifiedBook, UnifiedEntry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from alpha_arcade_mcp.api.models.orderbook import RawBook, RawOrderEntry


def complement_price(price: int) -> int:
    """YES-equivalent of a NO price (and vice versa). No range check is applied."""
    return MICRO_UNIT_SCALE - price


def _to_unified(
    entries: Iterable[RawOrderEntry], origin: EntryOrigin, *, complement: bool
) -> list[UnifiedEntry]:
    return [
        UnifiedEntry(
            yes_price=complement_price(e.price) if complement else e.price,
            quantity=e.quantity,
            escrow_app_id=e.escrow_app_id,
            owner=e.owner,
            origin=origin,
        )
        for e in entries
    ]


def unify(book: RawBook) -> UnifiedBook:
    """
    Merge YES and NO sides into a single YES-price book.

    Sorting is stable: entries at the same price keep their input order (native
    YES entries ahead of converted NO entries), so identical input always gives
    identical output. Entries are never validated, deduplicated or dropped.
    """
    asks = _to_unified(book.yes_asks, EntryOrigin.YES_ASK, complement=False)
    asks += _to_unified(book.no_bids, EntryOrigin.NO_BID_AS_YES_ASK, complement=True)

    bids = _to_unified(book.yes_bids, EntryOrigin.YES_BID, complement=False)
    bids += _to_unified(book.no_asks, EntryOrigin.NO_ASK_AS_YES_BID, complement=True)

    asks.sort(key=lambda e: e.yes_price)
    # reverse=True keeps equal keys in their original order
    bids.sort(key=lambda e: e.yes_price, reverse=True)

    spread = asks[0].yes_price - bids[0].yes_price if asks and bids else None

    return UnifiedBook(
        asks=tuple(asks),
        bids=tuple(bids),
        spread=spread,
        total_orders=book.total_orders,
    )
