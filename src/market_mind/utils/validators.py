"""Validation utilities and parameter classes."""

import math
from dataclasses import dataclass

from market_mind.errors import InvalidTickerError

MAX_TICKER_LENGTH = 10


def normalize_ticker(ticker: str) -> str:
    """
    Validate a ticker and return its canonical (upper-case, stripped) form.

    Args:
        ticker: Raw ticker symbol

    Returns:
        Normalized ticker

    Raises:
        InvalidTickerError: If the ticker is not a string, empty, or too long
    """
    if not isinstance(ticker, str):
        raise InvalidTickerError(ticker, "must be a string")

    normalized = ticker.upper().strip()
    if not normalized:
        raise InvalidTickerError(ticker, "must not be empty")
    if len(normalized) > MAX_TICKER_LENGTH:
        raise InvalidTickerError(ticker, f"must be at most {MAX_TICKER_LENGTH} characters")
    return normalized


@dataclass(frozen=True)
class PageParams:
    """Immutable pagination parameters (1-based page)."""

    page: int
    page_size: int

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"Invalid page {self.page}. Must be >= 1")
        if self.page_size < 1:
            raise ValueError(f"Invalid page_size {self.page_size}. Must be >= 1")

    @property
    def start(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def end(self) -> int:
        return self.start + self.page_size


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def is_finite_number(value: object) -> bool:
    """True for int/float values that are not NaN or infinite (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
