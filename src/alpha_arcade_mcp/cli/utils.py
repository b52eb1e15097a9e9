"""Shared utilities for CLI commands (console output, async helpers)."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer
from rich.console import Console

if TYPE_CHECKING:
    from collections.abc import Coroutine

    from alpha_arcade_mcp.api.exceptions import AlphaAPIError
    from alpha_arcade_mcp.config import ServerConfig

# Human output goes to stdout; `serve` never prints here because stdout is the MCP transport.
console = Console()

T = TypeVar("T")


def run_async(coro: Coroutine[object, object, T]) -> T:
    """Run a coroutine from a sync CLI command.

    Raises:
        typer.Exit: With code 130 on KeyboardInterrupt (standard SIGINT exit code).
    """
    try:
        return asyncio.run(coro)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(130) from None


def exit_api_error(e: AlphaAPIError) -> NoReturn:
    console.print(f"[red]API Error {e.status_code}:[/red] {e.message}")
    raise typer.Exit(1) from None


def load_config() -> ServerConfig:
    """Read ServerConfig from the environment, exiting cleanly on bad values."""
    from alpha_arcade_mcp.api.exceptions import ConfigError
    from alpha_arcade_mcp.config import ServerConfig

    try:
        return ServerConfig.from_env()
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1) from None
