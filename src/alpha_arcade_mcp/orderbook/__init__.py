"""Unified YES-denominated orderbook view."""

from alpha_arcade_mcp.orderbook._models import EntryOrigin, UnifiedBook, UnifiedEntry
from alpha_arcade_mcp.orderbook.unify import complement_price, unify

__all__ = [
    "EntryOrigin",
    "UnifiedBook",
    "UnifiedEntry",
    "complement_price",
    "unify",
]
