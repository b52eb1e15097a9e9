"""MCP tool server for Alpha Arcade."""

from alpha_arcade_mcp.server.app import create_server
from alpha_arcade_mcp.server.context import ToolContext

__all__ = ["ToolContext", "create_server"]
