"""Tests for the factor set and FactorScores."""

import math

import pytest

from market_mind.scoring.factors import (
    FACTOR_RANGES,
    FACTOR_TITLES,
    PROVIDER_FACTORS,
    Factor,
    FactorScores,
    neutral_score,
    sentiment_to_factor,
)


def _all(value: float) -> dict[Factor, float]:
    return {f: value for f in Factor}


class TestFactorScores:
    """Tests for FactorScores value object."""

    def test_every_factor_present(self) -> None:
        scores = FactorScores(_all(5.0))
        assert set(scores) == set(Factor)
        assert len(scores) == len(Factor)

    def test_missing_factor_raises(self) -> None:
        values = _all(5.0)
        del values[Factor.INSIDER_ACTIVITY]
        with pytest.raises(ValueError, match="insiderActivity"):
            FactorScores(values)

    def test_clamps_high_and_low(self) -> None:
        values = _all(5.0)
        values[Factor.TECHNICAL_PATTERNS] = 12.5
        values[Factor.SHORT_INTEREST] = -3.0
        scores = FactorScores(values)
        assert scores[Factor.TECHNICAL_PATTERNS] == 10.0
        assert scores[Factor.SHORT_INTEREST] == 0.0

    def test_non_finite_rejected(self) -> None:
        values = _all(5.0)
        values[Factor.SENTIMENT] = math.nan
        with pytest.raises(ValueError, match="finite"):
            FactorScores(values)

    def test_accepts_string_keys(self) -> None:
        scores = FactorScores({f.value: 4.0 for f in Factor})
        assert scores["relativeStrength"] == 4.0
        assert scores[Factor.RELATIVE_STRENGTH] == 4.0

    def test_unknown_key_rejected(self) -> None:
        values: dict = {f.value: 4.0 for f in Factor}
        values["momentum"] = 3.0
        with pytest.raises(ValueError):
            FactorScores(values)

    def test_equality_and_hash(self) -> None:
        a = FactorScores(_all(5.0))
        b = FactorScores({f.value: 5.0 for f in Factor})
        assert a == b
        assert hash(a) == hash(b)

    def test_to_dict_keys(self) -> None:
        d = FactorScores(_all(5.0)).to_dict()
        assert list(d) == [f.value for f in Factor]


class TestSentimentMapping:
    """Tests for sentiment_to_factor."""

    def test_zero_maps_to_midpoint(self) -> None:
        assert sentiment_to_factor(0.0) == 5.0

    def test_extremes(self) -> None:
        assert sentiment_to_factor(1.0) == pytest.approx(9.5)
        assert sentiment_to_factor(-1.0) == pytest.approx(0.5)

    def test_monotonic(self) -> None:
        assert sentiment_to_factor(0.2) < sentiment_to_factor(0.3)


class TestFactorTables:
    """Tests for factor metadata tables."""

    def test_provider_factors_exclude_sentiment(self) -> None:
        assert Factor.SENTIMENT not in PROVIDER_FACTORS
        assert len(PROVIDER_FACTORS) == len(Factor) - 1

    def test_ranges_within_scale(self) -> None:
        for factor, (low, high) in FACTOR_RANGES.items():
            assert 0.0 <= low < high <= 10.0, factor

    def test_neutral_score_is_range_midpoint(self) -> None:
        assert neutral_score(Factor.SHORT_INTEREST) == pytest.approx(4.5)
        assert neutral_score(Factor.ANALYST_SENTIMENT) == pytest.approx(7.0)

    def test_titles_cover_all_factors(self) -> None:
        assert set(FACTOR_TITLES) == set(Factor)
