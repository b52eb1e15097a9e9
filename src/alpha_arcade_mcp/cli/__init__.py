"""
CLI application for the Alpha Arcade MCP server.

Runs the MCP server over stdio and offers a few market inspection commands.
"""

from __future__ import annotations

import typer
from dotenv import find_dotenv, load_dotenv

from alpha_arcade_mcp.cli.market import market_list, market_orderbook
from alpha_arcade_mcp.cli.utils import console, load_config

app = typer.Typer(
    name="alpha-mcp",
    help="Alpha Arcade MCP server and market inspection tools.",
    add_completion=False,
)

app.command("markets")(market_list)
app.command("orderbook")(market_orderbook)


@app.callback()
def main() -> None:
    """Alpha Arcade MCP server CLI."""
    load_dotenv(find_dotenv(usecwd=True))


@app.command()
def version() -> None:
    """Show version information."""
    from alpha_arcade_mcp import __version__

    console.print(f"alpha-arcade-mcp v{__version__}")


@app.command()
def serve() -> None:
    """Run the MCP server over stdio."""
    import structlog

    from alpha_arcade_mcp.server import ToolContext, create_server

    config = load_config()
    server = create_server(ToolContext(config=config))
    structlog.get_logger().info("Starting MCP server", transport="stdio")
    server.run(transport="stdio")


__all__ = ["app"]
