"""Exception types raised by the analysis engine."""


class MarketMindError(Exception):
    """Base class for analysis engine errors."""

    pass


class InvalidTickerError(MarketMindError, ValueError):
    """Raised when a ticker fails format validation."""

    def __init__(self, ticker: object, reason: str):
        super().__init__(f"Invalid ticker symbol {ticker!r}: {reason}")
        self.ticker = ticker
        self.reason = reason


class UpstreamHardFailureError(MarketMindError):
    """Raised when the upstream market-data service is down for a ticker."""

    def __init__(self, ticker: str, message: str | None = None):
        super().__init__(
            message or f"Failed to fetch market data for {ticker}. The service may be down."
        )
        self.ticker = ticker


class SentimentUnavailableError(MarketMindError):
    """Raised when the sentiment assessor fails or returns a malformed payload.

    Recovered inside the engine by the fallback assessment.
    """

    def __init__(self, ticker: str, message: str, last_error: Exception | None = None):
        super().__init__(f"Sentiment assessment unavailable for {ticker}: {message}")
        self.ticker = ticker
        self.last_error = last_error


class FactorProviderError(MarketMindError):
    """Raised when a factor score provider fails or returns a non-finite value."""

    def __init__(self, factor: str, ticker: str, message: str):
        super().__init__(f"Factor provider {factor} failed for {ticker}: {message}")
        self.factor = factor
        self.ticker = ticker
