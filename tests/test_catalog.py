"""Tests for the stock catalog and placeholder news."""

import numpy as np
import pytest

from market_mind.data.catalog import STOCKS, StockCatalog
from market_mind.data.news import MARKET_SENTIMENT_RANGE, get_financial_news, get_market_sentiment
from market_mind.utils.validators import PageParams


class TestStockCatalog:
    """Tests for StockCatalog."""

    def test_size(self) -> None:
        assert len(StockCatalog()) == len(STOCKS) == 15

    def test_pages_cover_catalog_once(self) -> None:
        catalog = StockCatalog()
        seen = []
        for page in range(1, 5):
            seen += [q.ticker for q in catalog.page(PageParams(page, 4))]
        assert seen == catalog.tickers()

    def test_page_past_end(self) -> None:
        assert StockCatalog().page(PageParams(10, 10)) == []

    @pytest.mark.parametrize("ticker", ["AAPL", "aapl", " Aapl "])
    def test_find_case_insensitive(self, ticker: str) -> None:
        quote = StockCatalog().find(ticker)
        assert quote is not None
        assert quote.company_name == "Apple Inc."

    def test_find_missing(self) -> None:
        assert StockCatalog().find("ZZZZ") is None

    def test_quote_dict(self) -> None:
        assert set(STOCKS[0].to_dict()) == {
            "ticker",
            "company_name",
            "price",
            "change",
            "change_percent",
            "market_cap",
        }


class TestNews:
    def test_headlines_mention_ticker(self) -> None:
        headlines = get_financial_news("GOOGL")
        assert len(headlines) == 5
        assert all("GOOGL" in h for h in headlines)

    def test_market_sentiment_range(self) -> None:
        rng = np.random.default_rng(3)
        low, high = MARKET_SENTIMENT_RANGE
        assert all(low <= get_market_sentiment(rng) <= high for _ in range(100))
