"""MCP server: registers the Alpha Arcade tools on a FastMCP instance."""

from typing import Annotated, Literal

import structlog
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from alpha_arcade_mcp.constants import SERVER_NAME
from alpha_arcade_mcp.server import read_tools, write_tools
from alpha_arcade_mcp.server.context import ToolContext

logger = structlog.get_logger()

INSTRUCTIONS = (
    "Alpha Arcade prediction markets on Algorand. Prices and quantities passed to tools are "
    "micro-units: 1000000 = $1.00 of price or 1 share. Orderbooks are returned as a unified "
    "YES view where NO bids appear as YES asks at (1000000 - price) and NO asks as YES bids."
)

MarketAppId = Annotated[int, Field(description="The market app ID")]
WalletAddress = Annotated[
    str | None,
    Field(description="Algorand wallet address (required if ALPHA_MNEMONIC is not set)"),
]
PositionArg = Annotated[Literal[0, 1], Field(description="1 = Yes, 0 = No")]
PriceArg = Annotated[int, Field(description="Price in microunits (e.g. 500000 = $0.50)")]
QuantityArg = Annotated[
    int, Field(description="Quantity in microunits (e.g. 1000000 = 1 share)")
]
IsBuyingArg = Annotated[bool, Field(description="true = buy order, false = sell order")]


def create_server(ctx: ToolContext) -> FastMCP:
    """Build the FastMCP server with every read and write tool bound to `ctx`."""
    mcp = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS)

    # ------------------------------------------
    # Read-only tools
    # ------------------------------------------

    @mcp.tool(
        name="get_markets",
        description=(
            "Fetch all live, tradeable prediction markets from Alpha Arcade. "
            "Returns market titles, prices, volume, and app IDs."
        ),
    )
    async def get_markets() -> str:
        return await read_tools.get_markets(ctx)

    @mcp.tool(
        name="get_market",
        description=(
            "Fetch a single market by its ID. Returns full market details including "
            "options for multi-choice markets."
        ),
    )
    async def get_market(
        market_id: Annotated[
            str, Field(description="The market ID (app ID string for on-chain, UUID for API)")
        ],
    ) -> str:
        return await read_tools.get_market(ctx, market_id)

    @mcp.tool(
        name="get_orderbook",
        description=(
            "Fetch the on-chain orderbook for a market as a unified YES view: asks cheapest "
            "first, bids highest first, with the spread and escrow app IDs. NO-side orders are "
            "converted to YES prices. Set include_raw to also get the four raw sides."
        ),
    )
    async def get_orderbook(
        market_app_id: MarketAppId,
        include_raw: Annotated[
            bool, Field(description="Also return raw YES/NO bids and asks")
        ] = False,
    ) -> str:
        return await read_tools.get_orderbook(ctx, market_app_id, include_raw=include_raw)

    @mcp.tool(
        name="get_open_orders",
        description=(
            "Fetch all open orders for a wallet on a specific market. "
            "You must provide wallet_address or set ALPHA_MNEMONIC."
        ),
    )
    async def get_open_orders(
        market_app_id: MarketAppId, wallet_address: WalletAddress = None
    ) -> str:
        return await read_tools.get_open_orders(ctx, market_app_id, wallet_address)

    @mcp.tool(
        name="get_positions",
        description=(
            "Fetch all YES/NO token positions for a wallet across all markets. "
            "You must provide wallet_address or set ALPHA_MNEMONIC."
        ),
    )
    async def get_positions(wallet_address: WalletAddress = None) -> str:
        return await read_tools.get_positions(ctx, wallet_address)

    # ------------------------------------------
    # Write tools (require mnemonic)
    # ------------------------------------------

    @mcp.tool(
        name="create_limit_order",
        description=(
            "Place a limit order on a prediction market. Price is in microunits "
            "(500000 = $0.50). Quantity is in microunits (1000000 = 1 share)."
        ),
    )
    async def create_limit_order(
        market_app_id: MarketAppId,
        position: PositionArg,
        price: PriceArg,
        quantity: QuantityArg,
        is_buying: IsBuyingArg,
    ) -> str:
        return await write_tools.create_limit_order(
            ctx, market_app_id, position, price, quantity, is_buying
        )

    @mcp.tool(
        name="create_market_order",
        description=(
            "Place a market order with auto-matching. Price in microunits (500000 = $0.50). "
            "Slippage in microunits (50000 = $0.05)."
        ),
    )
    async def create_market_order(
        market_app_id: MarketAppId,
        position: PositionArg,
        price: PriceArg,
        quantity: QuantityArg,
        is_buying: IsBuyingArg,
        slippage: Annotated[
            int, Field(description="Slippage tolerance in microunits (e.g. 50000 = $0.05)")
        ],
    ) -> str:
        return await write_tools.create_market_order(
            ctx, market_app_id, position, price, quantity, is_buying, slippage
        )

    @mcp.tool(
        name="cancel_order",
        description=(
            "Cancel an open order by its escrow app ID. "
            "Returns escrowed funds to the order owner."
        ),
    )
    async def cancel_order(
        market_app_id: MarketAppId,
        escrow_app_id: Annotated[int, Field(description="The escrow app ID of the order")],
        order_owner: Annotated[str, Field(description="The Algorand address that owns the order")],
    ) -> str:
        return await write_tools.cancel_order(ctx, market_app_id, escrow_app_id, order_owner)

    @mcp.tool(
        name="propose_match",
        description=(
            "Propose a match between an existing maker order and the configured wallet as taker."
        ),
    )
    async def propose_match(
        market_app_id: MarketAppId,
        maker_escrow_app_id: Annotated[
            int, Field(description="The escrow app ID of the maker order")
        ],
        maker_address: Annotated[str, Field(description="The Algorand address of the maker")],
        quantity_matched: Annotated[int, Field(description="Quantity to match in microunits")],
    ) -> str:
        return await write_tools.propose_match(
            ctx, market_app_id, maker_escrow_app_id, maker_address, quantity_matched
        )

    @mcp.tool(
        name="split_shares",
        description=(
            "Split USDC into equal YES and NO outcome tokens. "
            "1 USDC (1000000 microunits) = 1 YES + 1 NO."
        ),
    )
    async def split_shares(
        market_app_id: MarketAppId,
        amount: Annotated[
            int, Field(description="Amount to split in microunits (e.g. 1000000 = $1.00 USDC)")
        ],
    ) -> str:
        return await write_tools.split_shares(ctx, market_app_id, amount)

    @mcp.tool(
        name="merge_shares",
        description="Merge equal YES and NO outcome tokens back into USDC. 1 YES + 1 NO = 1 USDC.",
    )
    async def merge_shares(
        market_app_id: MarketAppId,
        amount: Annotated[int, Field(description="Amount to merge in microunits")],
    ) -> str:
        return await write_tools.merge_shares(ctx, market_app_id, amount)

    @mcp.tool(
        name="claim",
        description=(
            "Claim USDC from a resolved market by redeeming outcome tokens. "
            "Winning = 1:1 USDC. Losing = burned."
        ),
    )
    async def claim(
        market_app_id: MarketAppId,
        asset_id: Annotated[int, Field(description="The outcome token ASA ID to redeem")],
        amount: Annotated[
            int | None,
            Field(description="Amount to claim in microunits (omit to claim entire balance)"),
        ] = None,
    ) -> str:
        return await write_tools.claim(ctx, market_app_id, asset_id, amount)

    logger.debug("MCP server created", name=SERVER_NAME, trading=ctx.config.has_mnemonic)
    return mcp
