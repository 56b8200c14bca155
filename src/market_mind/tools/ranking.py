"""Ranking tool."""

from time import perf_counter
from typing import Any

from market_mind.service import MarketMindService
from market_mind.utils.provenance import build_meta


async def stock_ranking(service: MarketMindService, tickers: list[str] | None = None) -> dict[str, Any]:
    """
    Rank tickers by composite score.

    Args:
        service: Session service
        tickers: Tickers to rank (default: whole catalog)

    Returns:
        Dict with ranked rows (best first) and skipped tickers
    """
    start_time = perf_counter()

    df = await service.rank(tickers)
    ranked = set(df["ticker"])
    requested = tickers if tickers is not None else service.catalog.tickers()
    skipped = [t for t in requested if t.upper().strip() not in ranked]

    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("stock_ranking", duration_ms),
        "count": len(df),
        "ranking": df.round(4).to_dict(orient="records"),
        "skipped": skipped if skipped else None,
    }
