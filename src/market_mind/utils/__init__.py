"""Utility modules."""

from market_mind.utils.provenance import build_error_response, build_meta
from market_mind.utils.sanitize import sanitize_text
from market_mind.utils.validators import (
    MAX_TICKER_LENGTH,
    PageParams,
    clamp,
    is_finite_number,
    normalize_ticker,
)

__all__ = [
    "MAX_TICKER_LENGTH",
    "PageParams",
    "build_error_response",
    "build_meta",
    "clamp",
    "is_finite_number",
    "normalize_ticker",
    "sanitize_text",
]
