"""Analysis aggregation engine."""

import asyncio
import logging
from collections.abc import Collection, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timezone
from time import perf_counter
from typing import Any

import numpy as np

from market_mind.config import Settings
from market_mind.errors import (
    FactorProviderError,
    SentimentUnavailableError,
    UpstreamHardFailureError,
)
from market_mind.scoring.classifier import TrendLabel, classify
from market_mind.scoring.factors import (
    PROVIDER_FACTORS,
    Factor,
    FactorScores,
    neutral_score,
    sentiment_to_factor,
)
from market_mind.scoring.outlook import build_outlook
from market_mind.scoring.providers import (
    FactorScoreProvider,
    RandomFactorProvider,
    fetch_factor_score,
)
from market_mind.scoring.weights import (
    FACTOR_WEIGHTS,
    composite_score,
    expected_move,
    validate_weights,
)
from market_mind.sentiment.assessor import SentimentAssessor
from market_mind.sentiment.models import SentimentAssessment, fallback_assessment
from market_mind.utils.validators import normalize_ticker

logger = logging.getLogger(__name__)

# Tickers that simulate the market-data service being down
HARD_FAILURE_TICKERS: frozenset[str] = frozenset({"ERR"})


@dataclass(frozen=True)
class AnalysisResult:
    """Immutable analysis of one ticker."""

    ticker: str
    scores: FactorScores
    overall_score: float
    expected_move: float
    status: TrendLabel
    sentiment: SentimentAssessment
    computed_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(), compare=False
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "ticker": self.ticker,
            "expectedMove": round(self.expected_move, 4),
            "overallScore": round(self.overall_score, 4),
            "status": self.status.value,
            "statusDisplay": self.status.display,
            "scores": {k: round(v, 4) for k, v in self.scores.to_dict().items()},
            "sentimentAnalysis": self.sentiment.to_dict(),
            "outlook": build_outlook(self.scores, self.overall_score, self.expected_move),
            "computedAt": self.computed_at,
        }


class AnalysisEngine:
    """
    Combine a sentiment assessment and factor scores into an AnalysisResult.

    Sentiment and factor collection run concurrently. Assessor failures
    (including timeouts) are absorbed by the fallback assessment, provider
    failures by the factor's neutral score. Only invalid tickers and hard
    upstream failures reach the caller.
    """

    def __init__(
        self,
        assessor: SentimentAssessor,
        providers: Mapping[Factor, FactorScoreProvider] | FactorScoreProvider | None = None,
        *,
        weights: Mapping[Factor, float] = FACTOR_WEIGHTS,
        rng: np.random.Generator | None = None,
        sentiment_timeout: float = 10.0,
        provider_timeout: float = 5.0,
        max_workers: int = 4,
        hard_failure_tickers: Collection[str] = HARD_FAILURE_TICKERS,
    ):
        validate_weights(weights)
        self.assessor = assessor
        self.weights = dict(weights)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.sentiment_timeout = sentiment_timeout
        self.provider_timeout = provider_timeout
        self.hard_failure_tickers = frozenset(t.upper() for t in hard_failure_tickers)
        # Synchronous providers run here, off the event loop
        self._executor = ThreadPoolExecutor(max_workers=max_workers)

        if providers is None:
            providers = RandomFactorProvider(self.rng)
        if isinstance(providers, Mapping):
            missing = [f.value for f in PROVIDER_FACTORS if f not in providers]
            if missing:
                raise ValueError(f"No provider configured for factors: {missing}")
            self.providers: dict[Factor, FactorScoreProvider] = dict(providers)
        else:
            self.providers = {f: providers for f in PROVIDER_FACTORS}

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        assessor: SentimentAssessor,
        providers: Mapping[Factor, FactorScoreProvider] | FactorScoreProvider | None = None,
        rng: np.random.Generator | None = None,
    ) -> "AnalysisEngine":
        if rng is None:
            rng = np.random.default_rng(settings.seed)
        return cls(
            assessor,
            providers,
            rng=rng,
            sentiment_timeout=settings.sentiment_timeout,
            provider_timeout=settings.provider_timeout,
            max_workers=settings.max_workers,
        )

    async def compute_analysis(self, ticker: str) -> AnalysisResult:
        """
        Compute the analysis for one ticker.

        Args:
            ticker: Raw ticker symbol

        Returns:
            Immutable AnalysisResult

        Raises:
            InvalidTickerError: If the ticker fails validation
            UpstreamHardFailureError: If market data is unavailable for the ticker
        """
        start_time = perf_counter()
        normalized = normalize_ticker(ticker)

        if normalized in self.hard_failure_tickers:
            raise UpstreamHardFailureError(normalized)

        sentiment, provider_scores = await asyncio.gather(
            self._assess_with_fallback(normalized),
            self._collect_factor_scores(normalized),
        )

        scores = FactorScores(
            {**provider_scores, Factor.SENTIMENT: sentiment_to_factor(sentiment.overall_score)}
        )
        overall = composite_score(scores, self.weights)
        move = expected_move(overall)
        status = classify(sentiment.reasoning)

        result = AnalysisResult(
            ticker=normalized,
            scores=scores,
            overall_score=overall,
            expected_move=move,
            status=status,
            sentiment=sentiment,
        )

        duration_ms = (perf_counter() - start_time) * 1000
        logger.info(
            f"compute_analysis({normalized}): score={overall:.2f} move={move:+.2f}% "
            f"status={status.value} fallback={sentiment.is_fallback} ({duration_ms:.0f}ms)"
        )
        return result

    async def _assess(self, ticker: str) -> SentimentAssessment:
        """Single assessor attempt under the engine's timeout."""
        try:
            result = await asyncio.wait_for(
                self.assessor.assess(ticker), timeout=self.sentiment_timeout
            )
        except asyncio.TimeoutError as e:
            raise SentimentUnavailableError(
                ticker, f"timed out after {self.sentiment_timeout}s", last_error=e
            ) from e
        except Exception as e:
            raise SentimentUnavailableError(ticker, str(e) or type(e).__name__, last_error=e) from e

        if not isinstance(result, SentimentAssessment):
            raise SentimentUnavailableError(
                ticker, f"assessor returned {type(result).__name__}, not SentimentAssessment"
            )
        return result

    async def _assess_with_fallback(self, ticker: str) -> SentimentAssessment:
        try:
            return await self._assess(ticker)
        except SentimentUnavailableError as e:
            logger.warning(f"{e}. Using fallback assessment.")
            return fallback_assessment(ticker, self.rng)

    async def _collect_factor_scores(self, ticker: str) -> dict[Factor, float]:
        factors = list(PROVIDER_FACTORS)
        results = await asyncio.gather(
            *[
                fetch_factor_score(
                    self.providers[f], f, ticker, self.provider_timeout, self._executor
                )
                for f in factors
            ],
            return_exceptions=True,
        )

        scores: dict[Factor, float] = {}
        for factor, result in zip(factors, results):
            if isinstance(result, FactorProviderError):
                substitute = neutral_score(factor)
                logger.warning(f"{result}. Using neutral score {substitute}.")
                scores[factor] = substitute
            elif isinstance(result, BaseException):
                raise result
            else:
                scores[factor] = result
        return scores

    def close(self) -> None:
        """Release the provider thread pool without waiting on blocked calls."""
        self._executor.shutdown(wait=False, cancel_futures=True)
