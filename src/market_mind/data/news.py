"""Placeholder news headlines and market sentiment context."""

import numpy as np

MARKET_SENTIMENT_RANGE = (-0.7, 0.7)

_HEADLINE_TEMPLATES: tuple[str, ...] = (
    "{ticker} announces record Q3 earnings, beating analyst expectations.",
    "New product launch from {ticker} receives positive initial reviews.",
    "Analyst upgrades {ticker} to 'Strong Buy' with a new $250 price target.",
    "Global chip shortage could impact {ticker}'s production pipeline.",
    "SEC launches inquiry into {ticker}'s accounting practices.",
)


def get_financial_news(ticker: str) -> list[str]:
    """Latest headlines for a ticker (fixed placeholder set)."""
    return [t.format(ticker=ticker) for t in _HEADLINE_TEMPLATES]


def get_market_sentiment(rng: np.random.Generator | None = None) -> float:
    """Overall market sentiment score in [-0.7, 0.7]."""
    rng = rng if rng is not None else np.random.default_rng()
    low, high = MARKET_SENTIMENT_RANGE
    return float(rng.uniform(low, high))
