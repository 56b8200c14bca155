"""Tests for the weighting scheme and composite score."""

import math

import numpy as np
import pytest

from market_mind.scoring.factors import Factor, FactorScores
from market_mind.scoring.weights import (
    FACTOR_WEIGHTS,
    composite_score,
    effective_score,
    expected_move,
    validate_weights,
)


def _scores(**overrides: float) -> FactorScores:
    values = {f.value: 5.0 for f in Factor}
    values.update(overrides)
    return FactorScores(values)


class TestWeights:
    """Tests for FACTOR_WEIGHTS and validate_weights."""

    def test_sum_to_one(self) -> None:
        assert abs(math.fsum(FACTOR_WEIGHTS.values()) - 1.0) <= 1e-9

    def test_documented_values(self) -> None:
        assert FACTOR_WEIGHTS[Factor.TECHNICAL_PATTERNS] == 0.20
        assert FACTOR_WEIGHTS[Factor.RELATIVE_STRENGTH] == 0.20
        assert FACTOR_WEIGHTS[Factor.SENTIMENT] == 0.20
        assert FACTOR_WEIGHTS[Factor.SHORT_INTEREST] == 0.10
        assert FACTOR_WEIGHTS[Factor.EARNINGS_CATALYST] == 0.15
        assert FACTOR_WEIGHTS[Factor.INSIDER_ACTIVITY] == 0.07
        assert FACTOR_WEIGHTS[Factor.ANALYST_SENTIMENT] == 0.08

    def test_all_non_negative(self) -> None:
        assert all(w >= 0 for w in FACTOR_WEIGHTS.values())

    def test_validate_accepts_defaults(self) -> None:
        validate_weights(FACTOR_WEIGHTS)

    def test_validate_rejects_bad_sum(self) -> None:
        weights = dict(FACTOR_WEIGHTS)
        weights[Factor.SENTIMENT] = 0.25
        with pytest.raises(ValueError, match="sum to 1.0"):
            validate_weights(weights)

    def test_validate_rejects_negative(self) -> None:
        weights = dict(FACTOR_WEIGHTS)
        weights[Factor.SENTIMENT] = -0.1
        weights[Factor.TECHNICAL_PATTERNS] = 0.5
        with pytest.raises(ValueError, match="non-negative"):
            validate_weights(weights)

    def test_validate_rejects_missing(self) -> None:
        weights = dict(FACTOR_WEIGHTS)
        del weights[Factor.ANALYST_SENTIMENT]
        with pytest.raises(ValueError, match="missing"):
            validate_weights(weights)


class TestCompositeScore:
    """Tests for composite_score."""

    def test_all_fives_is_five(self) -> None:
        assert composite_score(_scores()) == pytest.approx(5.0)

    def test_short_interest_inverted(self) -> None:
        assert effective_score(Factor.SHORT_INTEREST, 8.0) == 2.0
        assert effective_score(Factor.TECHNICAL_PATTERNS, 8.0) == 8.0

    def test_increasing_short_interest_lowers_score(self) -> None:
        low = composite_score(_scores(shortInterest=2.0))
        high = composite_score(_scores(shortInterest=7.0))
        assert high < low
        assert low - high == pytest.approx(0.5)

    def test_maximum(self) -> None:
        best = {f.value: 10.0 for f in Factor}
        best["shortInterest"] = 0.0
        assert composite_score(FactorScores(best)) == pytest.approx(10.0)

    def test_minimum(self) -> None:
        worst = {f.value: 0.0 for f in Factor}
        worst["shortInterest"] = 10.0
        assert composite_score(FactorScores(worst)) == pytest.approx(0.0)

    def test_range_for_random_scores(self) -> None:
        """Composite and move stay in range for arbitrary clamped scores."""
        rng = np.random.default_rng(7)
        for _ in range(200):
            values = {f.value: float(rng.uniform(-2.0, 12.0)) for f in Factor}
            overall = composite_score(FactorScores(values))
            assert 0.0 <= overall <= 10.0
            assert -2.5 <= expected_move(overall) <= 2.5


class TestExpectedMove:
    """Tests for expected_move."""

    def test_zero_at_midpoint(self) -> None:
        assert expected_move(5.0) == 0.0

    def test_bounds(self) -> None:
        assert expected_move(10.0) == pytest.approx(2.5)
        assert expected_move(0.0) == pytest.approx(-2.5)

    def test_monotonic(self) -> None:
        assert expected_move(6.0) > expected_move(5.5)
