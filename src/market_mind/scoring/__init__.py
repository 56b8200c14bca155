"""Factor scoring, weighting, and trend classification."""

from market_mind.scoring.classifier import CLASSIFIER_RULES, TrendLabel, classify
from market_mind.scoring.factors import (
    FACTOR_RANGES,
    FACTOR_TITLES,
    INVERTED_FACTORS,
    PROVIDER_FACTORS,
    Factor,
    FactorScores,
    neutral_score,
    sentiment_to_factor,
)
from market_mind.scoring.outlook import build_outlook, factor_outlook, overall_outlook
from market_mind.scoring.providers import (
    FactorScoreProvider,
    RandomFactorProvider,
    fetch_factor_score,
)
from market_mind.scoring.weights import (
    FACTOR_WEIGHTS,
    composite_score,
    effective_score,
    expected_move,
    validate_weights,
)

__all__ = [
    # Classifier
    "CLASSIFIER_RULES",
    "TrendLabel",
    "classify",
    # Factors
    "FACTOR_RANGES",
    "FACTOR_TITLES",
    "INVERTED_FACTORS",
    "PROVIDER_FACTORS",
    "Factor",
    "FactorScores",
    "neutral_score",
    "sentiment_to_factor",
    # Outlook
    "build_outlook",
    "factor_outlook",
    "overall_outlook",
    # Providers
    "FactorScoreProvider",
    "RandomFactorProvider",
    "fetch_factor_score",
    # Weights
    "FACTOR_WEIGHTS",
    "composite_score",
    "effective_score",
    "expected_move",
    "validate_weights",
]
