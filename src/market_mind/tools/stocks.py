"""Stock listing and lookup tools."""

import math
from time import perf_counter
from typing import Any

from market_mind.errors import InvalidTickerError, UpstreamHardFailureError
from market_mind.service import MarketMindService
from market_mind.utils.provenance import build_error_response, build_meta


async def stock_list(service: MarketMindService, page: int = 1, page_size: int = 10) -> dict[str, Any]:
    """
    List one page of stocks with their analyses.

    Args:
        service: Session service
        page: 1-based page number
        page_size: Items per page

    Returns:
        Dict with stocks, pagination info, and failed tickers
    """
    start_time = perf_counter()

    try:
        items, total = await service.list_page(page, page_size)
    except ValueError as e:
        return build_error_response(error_type="invalid_request", message=str(e))

    failed = [item.quote.ticker for item in items if item.analysis is None]
    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("stock_list", duration_ms),
        "page": page,
        "page_size": page_size,
        "total": total,
        "total_pages": math.ceil(total / page_size),
        "stocks": [item.to_dict() for item in items],
        "warnings": [f"Analysis unavailable for {t}" for t in failed] or None,
    }


async def stock_lookup(service: MarketMindService, ticker: str) -> dict[str, Any]:
    """
    Look up one listed stock with its analysis.

    Args:
        service: Session service
        ticker: Stock ticker symbol

    Returns:
        Dict with the stock, or an error response
    """
    start_time = perf_counter()

    try:
        item = await service.get_stock(ticker)
    except InvalidTickerError as e:
        return build_error_response(
            error_type="invalid_ticker", message=str(e), ticker=ticker, retryable=False
        )
    except UpstreamHardFailureError as e:
        return build_error_response(
            error_type="data_unavailable", message=str(e), ticker=e.ticker, retryable=True
        )

    if item is None:
        return build_error_response(
            error_type="not_found",
            message=f"Stock with ticker {ticker.upper().strip()} could not be found.",
            ticker=ticker.upper().strip(),
            retryable=False,
        )

    duration_ms = (perf_counter() - start_time) * 1000
    return {
        "meta": build_meta("stock_lookup", duration_ms),
        "stock": item.to_dict(),
    }
