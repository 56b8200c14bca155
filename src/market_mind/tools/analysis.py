"""Ticker analysis tool."""

from time import perf_counter
from typing import Any

from market_mind.errors import InvalidTickerError, UpstreamHardFailureError
from market_mind.service import MarketMindService
from market_mind.utils.provenance import build_error_response, build_meta


async def ticker_analysis(
    service: MarketMindService,
    ticker: str,
    force_refresh: bool = False,
) -> dict[str, Any]:
    """
    Get (or compute) the analysis for one ticker.

    Args:
        service: Session service owning the analysis cache
        ticker: Stock ticker symbol
        force_refresh: Recompute even if a cached analysis exists

    Returns:
        Dict with the analysis, or an error response
    """
    start_time = perf_counter()

    try:
        result = await service.get_or_compute(ticker, force_refresh=force_refresh)
    except InvalidTickerError as e:
        return build_error_response(
            error_type="invalid_ticker",
            message=str(e),
            ticker=ticker,
            retryable=False,
        )
    except UpstreamHardFailureError as e:
        return build_error_response(
            error_type="data_unavailable",
            message=str(e),
            ticker=e.ticker,
            retryable=True,
        )

    warnings: list[str] = []
    if result.sentiment.is_fallback:
        warnings.append("Sentiment assessment unavailable; fallback values used")

    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("ticker_analysis", duration_ms),
        "analysis": result.to_dict(),
        "warnings": warnings if warnings else None,
    }
