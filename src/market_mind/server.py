"""MarketMind MCP server using FastMCP."""

import json
import logging
import os

from fastmcp import FastMCP

from market_mind import SCHEMA_VERSION, SERVER_VERSION
from market_mind.config import Settings
from market_mind.prompts.templates import get_prompt
from market_mind.sentiment.assessor import GeminiSentimentAssessor
from market_mind.service import MarketMindService
from market_mind.tools import stock_list, stock_lookup, stock_ranking, ticker_analysis

# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
logger = logging.getLogger(__name__)

settings = Settings.from_env()

# One service (and analysis cache) per server process
service = MarketMindService.from_settings(settings)

# Create FastMCP server instance
mcp = FastMCP(
    name="market-mind",
)


# ============================================================================
# TOOLS
# ============================================================================


@mcp.tool
async def list_stocks(page: int = 1, page_size: int = settings.page_size) -> str:
    """
    List tracked stocks with their analyses, one page at a time.

    Args:
        page: 1-based page number (default: 1)
        page_size: Stocks per page

    Returns:
        JSON with stocks (quote + analysis), total count, and total pages
    """
    result = await stock_list(service, page=page, page_size=page_size)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def get_analysis(ticker: str, force_refresh: bool = False) -> str:
    """
    Get the composite analysis for a ticker.

    Combines news sentiment with technical, relative strength, short interest,
    earnings, insider, and analyst factor scores. Results are cached per
    ticker for the life of the server; concurrent requests share one
    computation.

    Args:
        ticker: Stock ticker symbol (e.g., AAPL, MSFT)
        force_refresh: Recompute even if a cached analysis exists

    Returns:
        JSON with factor scores, overall score (0-10), expected move (%),
        trend status, sentiment reasoning, and outlook
    """
    result = await ticker_analysis(service, ticker=ticker, force_refresh=force_refresh)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def get_stock(ticker: str) -> str:
    """
    Look up a tracked stock by ticker, with its analysis.

    Args:
        ticker: Stock ticker symbol

    Returns:
        JSON with quote and analysis, or a not_found error
    """
    result = await stock_lookup(service, ticker=ticker)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def rank_stocks(tickers: list[str] | None = None) -> str:
    """
    Rank tickers by overall score, best first.

    Args:
        tickers: Tickers to rank (default: every tracked stock)

    Returns:
        JSON with ranked rows
    """
    result = await stock_ranking(service, tickers=tickers)
    return json.dumps(result, indent=2, default=str)


# ============================================================================
# PROMPTS
# ============================================================================


@mcp.prompt
def sentiment_analysis(ticker: str) -> str:
    """News sentiment and RSI trend assessment for a ticker, as JSON."""
    result = get_prompt("sentiment_analysis", {"ticker": ticker})
    if result:
        return result["messages"][0]["content"]
    return f"Assess news sentiment for {ticker}."


# ============================================================================
# ENTRY POINT
# ============================================================================


def main() -> None:
    """Run the MCP server."""
    logger.info(f"Starting MarketMind MCP Server v{SERVER_VERSION} (schema v{SCHEMA_VERSION})")
    try:
        mcp.run()
    finally:
        service.engine.close()
        if isinstance(service.engine.assessor, GeminiSentimentAssessor):
            service.engine.assessor.close()


if __name__ == "__main__":
    main()
