"""Data layer: placeholder providers and the analysis cache."""

from market_mind.data.cache import AnalysisCache, CacheStats
from market_mind.data.catalog import STOCKS, StockCatalog, StockQuote
from market_mind.data.news import get_financial_news, get_market_sentiment

__all__ = [
    # Cache
    "AnalysisCache",
    "CacheStats",
    # Catalog
    "STOCKS",
    "StockCatalog",
    "StockQuote",
    # News
    "get_financial_news",
    "get_market_sentiment",
]
