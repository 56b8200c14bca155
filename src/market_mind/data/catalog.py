"""Placeholder stock catalog (fixed-shape market data payload)."""

from dataclasses import asdict, dataclass
from typing import Any

from market_mind.utils.validators import PageParams


@dataclass(frozen=True)
class StockQuote:
    """Static quote row for one listed ticker."""

    ticker: str
    company_name: str
    price: float
    change: float
    change_percent: float
    market_cap: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


STOCKS: tuple[StockQuote, ...] = (
    StockQuote("AAPL", "Apple Inc.", 172.25, 1.50, 0.88, "2.8T"),
    StockQuote("MSFT", "Microsoft Corp.", 340.54, -0.23, -0.07, "2.5T"),
    StockQuote("GOOGL", "Alphabet Inc.", 138.58, 2.12, 1.55, "1.7T"),
    StockQuote("AMZN", "Amazon.com, Inc.", 140.80, -1.40, -0.98, "1.4T"),
    StockQuote("NVDA", "NVIDIA Corp.", 475.69, 5.11, 1.09, "1.2T"),
    StockQuote("TSLA", "Tesla, Inc.", 250.22, -4.89, -1.92, "798B"),
    StockQuote("META", "Meta Platforms, Inc.", 325.48, 1.20, 0.37, "830B"),
    StockQuote("BRK.B", "Berkshire Hathaway", 360.41, 0.78, 0.22, "780B"),
    StockQuote("JPM", "JPMorgan Chase & Co.", 155.15, -1.05, -0.67, "460B"),
    StockQuote("V", "Visa Inc.", 245.23, 0.99, 0.41, "510B"),
    StockQuote("DIS", "Walt Disney Co", 91.30, -0.54, -0.59, "167B"),
    StockQuote("PYPL", "PayPal Holdings, Inc.", 63.21, 1.11, 1.79, "70B"),
    StockQuote("NFLX", "Netflix, Inc.", 440.76, -3.14, -0.71, "195B"),
    StockQuote("ADBE", "Adobe Inc.", 550.99, 2.30, 0.42, "250B"),
    StockQuote("CRM", "Salesforce, Inc.", 220.88, -1.90, -0.85, "215B"),
)


class StockCatalog:
    """In-memory catalog with pagination and case-insensitive lookup."""

    def __init__(self, stocks: tuple[StockQuote, ...] = STOCKS):
        self._stocks = stocks
        self._by_ticker = {s.ticker.upper(): s for s in stocks}

    def __len__(self) -> int:
        return len(self._stocks)

    def page(self, params: PageParams) -> list[StockQuote]:
        """Slice of the catalog for a 1-based page. Past the end yields []."""
        return list(self._stocks[params.start : params.end])

    def find(self, ticker: str) -> StockQuote | None:
        return self._by_ticker.get(ticker.upper().strip())

    def tickers(self) -> list[str]:
        return [s.ticker for s in self._stocks]
