"""Operations exposed to the presentation layer."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from market_mind.config import Settings
from market_mind.data.cache import AnalysisCache
from market_mind.data.catalog import StockCatalog, StockQuote
from market_mind.engine import AnalysisEngine, AnalysisResult
from market_mind.errors import InvalidTickerError, MarketMindError
from market_mind.scoring.factors import Factor
from market_mind.sentiment.assessor import GeminiSentimentAssessor, SentimentAssessor
from market_mind.utils.validators import PageParams, normalize_ticker

logger = logging.getLogger(__name__)

RANKING_COLUMNS = [
    "ticker",
    "overall_score",
    "expected_move",
    "status",
    *[f.value for f in Factor],
]


@dataclass(frozen=True)
class StockItem:
    """Catalog row with its analysis attached (None when the analysis failed)."""

    quote: StockQuote
    analysis: AnalysisResult | None

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.quote.to_dict(),
            "analysis": self.analysis.to_dict() if self.analysis is not None else None,
        }


class MarketMindService:
    """
    Session-scoped facade over the catalog, engine, and analysis cache.

    Build one per session; tests build fresh instances.
    """

    def __init__(self, engine: AnalysisEngine, catalog: StockCatalog | None = None):
        self.engine = engine
        self.catalog = catalog if catalog is not None else StockCatalog()
        self.cache = AnalysisCache(engine.compute_analysis)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        assessor: SentimentAssessor | None = None,
    ) -> "MarketMindService":
        rng = np.random.default_rng(settings.seed)
        if assessor is None:
            assessor = GeminiSentimentAssessor.from_settings(settings, rng=rng)
        engine = AnalysisEngine.from_settings(settings, assessor, rng=rng)
        return cls(engine)

    async def get_or_compute(self, ticker: str, force_refresh: bool = False) -> AnalysisResult:
        """Fetch-or-reuse the analysis for a ticker (see AnalysisCache.get_or_compute)."""
        return await self.cache.get_or_compute(ticker, force_refresh=force_refresh)

    async def _analysis_or_none(self, ticker: str) -> AnalysisResult | None:
        try:
            return await self.cache.get_or_compute(ticker)
        except MarketMindError as e:
            logger.warning(f"Failed to get analysis for {ticker}: {e}")
            return None

    async def list_page(self, page: int, page_size: int) -> tuple[list[StockItem], int]:
        """
        One page of the catalog with analyses attached.

        Analyses for the page run concurrently. A failed analysis leaves its
        item's analysis as None instead of failing the page.

        Args:
            page: 1-based page number
            page_size: Items per page

        Returns:
            Tuple of (items, total catalog size)

        Raises:
            ValueError: If page or page_size is < 1
        """
        params = PageParams(page=page, page_size=page_size)
        quotes = self.catalog.page(params)
        analyses = await asyncio.gather(*[self._analysis_or_none(q.ticker) for q in quotes])
        items = [StockItem(quote=q, analysis=a) for q, a in zip(quotes, analyses)]
        return items, len(self.catalog)

    async def get_stock(self, ticker: str) -> StockItem | None:
        """
        Catalog lookup with analysis. None when the ticker is not listed.

        Raises:
            InvalidTickerError: If the ticker fails validation
            UpstreamHardFailureError: If the analysis hit a hard failure
        """
        quote = self.catalog.find(normalize_ticker(ticker))
        if quote is None:
            return None
        analysis = await self.cache.get_or_compute(quote.ticker)
        return StockItem(quote=quote, analysis=analysis)

    async def rank(self, tickers: list[str] | None = None) -> pd.DataFrame:
        """
        Rank tickers by overall score, best first.

        Tickers whose analysis fails are left out and logged.

        Args:
            tickers: Tickers to rank (default: whole catalog)

        Returns:
            DataFrame with RANKING_COLUMNS plus a 1-based 'rank' column
        """
        tickers = tickers if tickers is not None else self.catalog.tickers()
        valid: list[str] = []
        for t in tickers:
            try:
                valid.append(normalize_ticker(t))
            except InvalidTickerError as e:
                logger.warning(f"Skipping ticker in ranking: {e}")

        # dict.fromkeys keeps order while dropping duplicates
        unique = list(dict.fromkeys(valid))
        analyses = await asyncio.gather(*[self._analysis_or_none(t) for t in unique])

        rows = [
            {
                "ticker": a.ticker,
                "overall_score": a.overall_score,
                "expected_move": a.expected_move,
                "status": a.status.value,
                **a.scores.to_dict(),
            }
            for a in analyses
            if a is not None
        ]
        df = pd.DataFrame(rows, columns=RANKING_COLUMNS)
        df = df.sort_values("overall_score", ascending=False, kind="mergesort").reset_index(drop=True)
        df.insert(0, "rank", range(1, len(df) + 1))
        return df
