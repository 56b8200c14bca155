"""Factor set, documented score bounds, and the FactorScores value object."""

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from market_mind.utils.validators import clamp, is_finite_number

SCORE_MIN = 0.0
SCORE_MAX = 10.0


class Factor(str, Enum):
    """Closed set of factors combined into the composite score."""

    TECHNICAL_PATTERNS = "technicalPatterns"
    RELATIVE_STRENGTH = "relativeStrength"
    SHORT_INTEREST = "shortInterest"
    EARNINGS_CATALYST = "earningsCatalyst"
    INSIDER_ACTIVITY = "insiderActivity"
    ANALYST_SENTIMENT = "analystSentiment"
    SENTIMENT = "sentiment"


# Factors whose raw score is bearish when high; contribution is 10 - score
INVERTED_FACTORS: frozenset[Factor] = frozenset({Factor.SHORT_INTEREST})

# Factors fed by providers (sentiment comes from the assessor)
PROVIDER_FACTORS: tuple[Factor, ...] = (
    Factor.TECHNICAL_PATTERNS,
    Factor.RELATIVE_STRENGTH,
    Factor.SHORT_INTEREST,
    Factor.EARNINGS_CATALYST,
    Factor.INSIDER_ACTIVITY,
    Factor.ANALYST_SENTIMENT,
)

# Documented range of each placeholder provider
FACTOR_RANGES: dict[Factor, tuple[float, float]] = {
    Factor.TECHNICAL_PATTERNS: (3.0, 9.5),  # RSI, moving averages
    Factor.RELATIVE_STRENGTH: (2.0, 9.0),
    Factor.SHORT_INTEREST: (2.0, 7.0),
    Factor.EARNINGS_CATALYST: (4.0, 9.0),
    Factor.INSIDER_ACTIVITY: (3.0, 8.0),
    Factor.ANALYST_SENTIMENT: (5.0, 9.0),
    Factor.SENTIMENT: (0.5, 9.5),
}

FACTOR_TITLES: dict[Factor, str] = {
    Factor.TECHNICAL_PATTERNS: "Technical Score",
    Factor.RELATIVE_STRENGTH: "Relative Strength",
    Factor.SHORT_INTEREST: "Short Interest",
    Factor.SENTIMENT: "News Sentiment",
    Factor.ANALYST_SENTIMENT: "Analyst Sentiment",
    Factor.INSIDER_ACTIVITY: "Insider Activity",
    Factor.EARNINGS_CATALYST: "Earnings Catalyst",
}


def neutral_score(factor: Factor) -> float:
    """Midpoint of a factor's documented range, used when its provider fails."""
    low, high = FACTOR_RANGES[factor]
    return (low + high) / 2


def sentiment_to_factor(overall_sentiment: float) -> float:
    """
    Map an aggregate sentiment in [-1, 1] onto the factor scale.

    0 maps to 5; +/-1 maps to 9.5/0.5.
    """
    return overall_sentiment * 4.5 + 5


class FactorScores(Mapping[Factor, float]):
    """
    Immutable mapping of every factor to a score in [0, 10].

    Out-of-range values are clamped, not rejected.
    """

    __slots__ = ("_scores",)

    def __init__(self, scores: Mapping[Factor | str, float]):
        resolved: dict[Factor, float] = {}
        for key, value in scores.items():
            factor = Factor(key)
            if not is_finite_number(value):
                raise ValueError(f"Score for {factor.value} must be a finite number, got {value!r}")
            resolved[factor] = clamp(float(value), SCORE_MIN, SCORE_MAX)

        missing = [f.value for f in Factor if f not in resolved]
        if missing:
            raise ValueError(f"Missing factor scores: {missing}")

        self._scores = resolved

    def __getitem__(self, key: Factor | str) -> float:
        return self._scores[Factor(key)]

    def __iter__(self) -> Iterator[Factor]:
        # Stable enumeration order regardless of construction order
        return iter(f for f in Factor)

    def __len__(self) -> int:
        return len(self._scores)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FactorScores):
            return self._scores == other._scores
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._scores[f] for f in Factor))

    def __repr__(self) -> str:
        inner = ", ".join(f"{f.value}={self._scores[f]:.2f}" for f in Factor)
        return f"FactorScores({inner})"

    def to_dict(self) -> dict[str, Any]:
        """Plain dict keyed by factor name."""
        return {f.value: self._scores[f] for f in Factor}
