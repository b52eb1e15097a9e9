"""Market inspection commands: list markets and show unified orderbooks."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.table import Table

from alpha_arcade_mcp.cli.utils import console, exit_api_error, load_config, run_async


def market_list(
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List live, tradeable markets."""
    from alpha_arcade_mcp.api import AlphaAPIError, AlphaPublicClient
    from alpha_arcade_mcp.formatting import market_summary

    config = load_config()

    async def _fetch() -> list[dict[str, object]]:
        async with AlphaPublicClient(config) as client:
            try:
                markets = await client.get_markets()
            except AlphaAPIError as e:
                exit_api_error(e)
        return [market_summary(m) for m in markets]

    summaries = run_async(_fetch())

    if output_json:
        typer.echo(json.dumps(summaries, indent=2))
        return

    if not summaries:
        console.print("[yellow]No live markets found.[/yellow]")
        return

    table = Table(title="Live Markets")
    table.add_column("App ID", style="cyan")
    table.add_column("Title")
    table.add_column("YES", style="green")
    table.add_column("NO", style="red")
    table.add_column("Ends At", style="dim")
    for m in summaries:
        table.add_row(
            str(m["market_app_id"]),
            str(m["title"]),
            str(m.get("yes_price", "-")),
            str(m.get("no_price", "-")),
            str(m["ends_at"]),
        )
    console.print(table)


def market_orderbook(
    market_app_id: Annotated[int, typer.Argument(help="Market app ID to fetch orderbook for.")],
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the unified YES orderbook for a market."""
    from alpha_arcade_mcp.api import AlphaAPIError, AlphaPublicClient
    from alpha_arcade_mcp.formatting import format_price, format_qty, unified_book_to_dict
    from alpha_arcade_mcp.orderbook import UnifiedBook, unify

    config = load_config()

    async def _fetch() -> UnifiedBook:
        async with AlphaPublicClient(config) as client:
            try:
                raw = await client.get_orderbook(market_app_id)
            except AlphaAPIError as e:
                exit_api_error(e)
        return unify(raw)

    book = run_async(_fetch())

    if output_json:
        typer.echo(json.dumps(unified_book_to_dict(book), indent=2))
        return

    table = Table(title=f"Orderbook: {market_app_id} (YES terms)")
    table.add_column("Bids", style="green")
    table.add_column("Asks", style="red")

    for i in range(max(len(book.bids), len(book.asks))):
        bid = book.bids[i] if i < len(book.bids) else None
        ask = book.asks[i] if i < len(book.asks) else None
        table.add_row(
            f"{format_price(bid.yes_price)} x {format_qty(bid.quantity)}" if bid else "",
            f"{format_price(ask.yes_price)} x {format_qty(ask.quantity)}" if ask else "",
        )

    console.print(table)
    spread = format_price(book.spread) if book.spread is not None else "N/A"
    console.print(f"\nSpread: {spread}")
    console.print(f"Total orders: {book.total_orders}")
