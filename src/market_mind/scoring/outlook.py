"""Human-facing outlook labels derived from numeric scores."""

from typing import Any

from market_mind.scoring.factors import FACTOR_TITLES, INVERTED_FACTORS, Factor, FactorScores

# (exclusive lower bound, label, insight), checked top-down
_OVERALL_OUTLOOK: tuple[tuple[float, str, str], ...] = (
    (7.0, "Strong Bullish", "Strong buy candidate based on multiple factors."),
    (5.5, "Bullish", "Favorable conditions for a long position."),
    (4.5, "Neutral", "Neutral outlook. Wait for a clearer signal."),
    (3.0, "Bearish", "Unfavorable conditions. Consider a short position."),
)
_OVERALL_FLOOR = ("Strong Bearish", "Strong sell candidate. High bearish signal.")


def overall_outlook(overall_score: float) -> tuple[str, str]:
    """Return (label, insight) for a composite score."""
    for threshold, label, insight in _OVERALL_OUTLOOK:
        if overall_score > threshold:
            return label, insight
    return _OVERALL_FLOOR


def factor_outlook(factor: Factor, score: float) -> str:
    """Positive / Negative / Neutral for one factor; inverted factors flip at 5."""
    if factor in INVERTED_FACTORS:
        return "Negative" if score > 5 else "Positive"
    if score > 6:
        return "Positive"
    if score < 4:
        return "Negative"
    return "Neutral"


def score_strength(score: float) -> str:
    if score > 7:
        return "Strong"
    if score > 4:
        return "Neutral"
    return "Weak"


def move_direction(expected_move: float) -> str:
    if expected_move > 0:
        return "up"
    if expected_move < 0:
        return "down"
    return "neutral"


def build_outlook(scores: FactorScores, overall_score: float, expected_move: float) -> dict[str, Any]:
    """
    Build the outlook block shown alongside an analysis.

    Args:
        scores: Factor scores
        overall_score: Composite score
        expected_move: Expected move percentage

    Returns:
        Dict with overall label/insight, move direction, and per-factor outlooks
    """
    label, insight = overall_outlook(overall_score)
    return {
        "overall": label,
        "insight": insight,
        "move_direction": move_direction(expected_move),
        "factors": {
            f.value: {
                "title": FACTOR_TITLES[f],
                "score": round(scores[f], 2),
                "outlook": factor_outlook(f, scores[f]),
                "strength": score_strength(scores[f]),
            }
            for f in Factor
        },
    }
