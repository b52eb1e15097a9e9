"""Centralized constants for the Alpha Arcade MCP server.

Named constants for protocol-level literals that would otherwise be scattered
across the API client, the orderbook unifier and the tool layer.
"""

from __future__ import annotations

# =============================================================================
# Fixed-point units
# =============================================================================

# Micro-unit scale shared by prices and quantities.
#
# 1_000_000 micro-units == $1.00 of price, or 1 share of quantity.
# A YES price `p` and a NO price `MICRO_UNIT_SCALE - p` describe the same position.
#
# Used by:
# - orderbook/unify.py: complement price for NO-side orders
# - formatting.py: decimal display strings
MICRO_UNIT_SCALE: int = 1_000_000

# =============================================================================
# Server identity
# =============================================================================

SERVER_NAME: str = "alpha-arcade"

# =============================================================================
# Network defaults
# =============================================================================

DEFAULT_ALGOD_SERVER: str = "https://mainnet-api.algonode.cloud"
DEFAULT_INDEXER_SERVER: str = "https://mainnet-idx.algonode.cloud"
DEFAULT_NODE_PORT: int = 443

# Alpha Arcade matcher application and the USDC ASA used as collateral (mainnet).
DEFAULT_MATCHER_APP_ID: int = 3078581851
DEFAULT_USDC_ASSET_ID: int = 31566704

DEFAULT_API_BASE_URL: str = "https://partners.alphaarcade.com/api"


# =============================================================================
# Partners API
# =============================================================================

# Sustained read rate (requests/second) for the partners API.
#
# Used by:
# - api/rate_limiter.py: default token bucket refill rate
DEFAULT_API_READS_PER_SECOND: float = 10.0
