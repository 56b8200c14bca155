"""Pytest configuration and fixtures."""

import asyncio

import numpy as np
import pytest

from market_mind.engine import AnalysisEngine
from market_mind.scoring.factors import Factor
from market_mind.sentiment.models import SentimentAssessment
from market_mind.service import MarketMindService

BULLISH_REASONING = "The stock is in a Strong Bullish trend with an RSI range of 60-80."


class FakeAssessor:
    """Scripted sentiment assessor that counts its calls."""

    def __init__(
        self,
        reasoning: str = BULLISH_REASONING,
        overall: float = 0.4,
        error: Exception | None = None,
        delay: float = 0.0,
        result: object = None,
    ):
        self.reasoning = reasoning
        self.overall = overall
        self.error = error
        self.delay = delay
        self.result = result
        self.calls: list[str] = []

    async def assess(self, ticker: str) -> SentimentAssessment:
        self.calls.append(ticker)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if self.result is not None:
            return self.result
        return SentimentAssessment(
            headlines=(f"{ticker} beats estimates", f"{ticker} faces probe"),
            polarity_scores=(0.8, -0.3),
            overall_score=self.overall,
            reasoning=self.reasoning,
        )


class FixedProvider:
    """Synchronous provider returning fixed scores and counting calls."""

    def __init__(self, scores: dict[Factor, float] | None = None, default: float = 6.0):
        self.scores = scores or {}
        self.default = default
        self.calls: list[tuple[Factor, str]] = []

    def score(self, factor: Factor, ticker: str) -> float:
        self.calls.append((factor, ticker))
        return self.scores.get(factor, self.default)


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source."""
    return np.random.default_rng(42)


@pytest.fixture
def assessor() -> FakeAssessor:
    return FakeAssessor()


@pytest.fixture
def provider() -> FixedProvider:
    return FixedProvider()


@pytest.fixture
def engine(assessor: FakeAssessor, provider: FixedProvider, rng: np.random.Generator) -> AnalysisEngine:
    """Engine wired to the fake assessor and fixed provider."""
    return AnalysisEngine(assessor, provider, rng=rng, sentiment_timeout=1.0, provider_timeout=1.0)


@pytest.fixture
def service(engine: AnalysisEngine) -> MarketMindService:
    """Fresh session service (new cache) per test."""
    return MarketMindService(engine)
