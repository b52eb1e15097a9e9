"""
Alpha Arcade MCP server.

Exposes Alpha Arcade prediction markets to AI agents as MCP tools, including a
unified YES-denominated orderbook view.
"""

__version__ = "0.1.0"

from alpha_arcade_mcp.api import AlphaPublicClient
from alpha_arcade_mcp.config import ServerConfig

# Configure structlog once at import time (quiet by default).
from alpha_arcade_mcp.logging import configure_structlog
from alpha_arcade_mcp.orderbook import UnifiedBook, unify

configure_structlog()

__all__ = [
    "AlphaPublicClient",
    "ServerConfig",
    "UnifiedBook",
    "__version__",
    "unify",
]
