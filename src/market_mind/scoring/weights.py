"""Composite weighting scheme."""

import logging
import math
from collections.abc import Mapping

from market_mind.scoring.factors import (
    INVERTED_FACTORS,
    SCORE_MAX,
    SCORE_MIN,
    Factor,
    FactorScores,
)

logger = logging.getLogger(__name__)

WEIGHT_TOLERANCE = 1e-9

# Short-term swing bias: technicals, relative strength and news lead
FACTOR_WEIGHTS: dict[Factor, float] = {
    Factor.TECHNICAL_PATTERNS: 0.20,
    Factor.RELATIVE_STRENGTH: 0.20,
    Factor.SENTIMENT: 0.20,
    Factor.SHORT_INTEREST: 0.10,
    Factor.EARNINGS_CATALYST: 0.15,
    Factor.INSIDER_ACTIVITY: 0.07,
    Factor.ANALYST_SENTIMENT: 0.08,
}

MAX_EXPECTED_MOVE = 2.5  # percent


def validate_weights(weights: Mapping[Factor, float]) -> None:
    """
    Check that weights cover every factor, are non-negative, and sum to 1.

    Raises:
        ValueError: On any violation
    """
    missing = [f.value for f in Factor if f not in weights]
    if missing:
        raise ValueError(f"Weights missing for factors: {missing}")

    negative = {f.value: w for f, w in weights.items() if w < 0}
    if negative:
        raise ValueError(f"Weights must be non-negative: {negative}")

    total = math.fsum(weights.values())
    if abs(total - 1.0) > WEIGHT_TOLERANCE:
        raise ValueError(f"Weights must sum to 1.0, got {total!r}")


def effective_score(factor: Factor, score: float) -> float:
    """Contribution basis of a factor; inverted factors count 10 - score."""
    if factor in INVERTED_FACTORS:
        return SCORE_MAX - score
    return score


def composite_score(
    scores: FactorScores,
    weights: Mapping[Factor, float] = FACTOR_WEIGHTS,
) -> float:
    """
    Weighted composite of all factor scores, in [0, 10].

    Args:
        scores: Clamped factor scores
        weights: Validated weights (default: FACTOR_WEIGHTS)

    Returns:
        Composite score
    """
    total = math.fsum(weights[f] * effective_score(f, scores[f]) for f in Factor)

    if not SCORE_MIN - WEIGHT_TOLERANCE <= total <= SCORE_MAX + WEIGHT_TOLERANCE:
        logger.warning(f"Composite score invariant violation: {total} outside [0, 10]")

    # Absorb float drift at the edges
    return max(SCORE_MIN, min(SCORE_MAX, total))


def expected_move(overall_score: float) -> float:
    """Signed percentage move estimate; 0 at a composite of 5, +/-2.5 at the ends."""
    return (overall_score / SCORE_MAX - 0.5) * (2 * MAX_EXPECTED_MOVE)


validate_weights(FACTOR_WEIGHTS)
