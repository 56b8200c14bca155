"""Trend label extraction from free-text reasoning."""

import re
from enum import Enum


class TrendLabel(str, Enum):
    """Closed set of trend labels. NEUTRAL is the unknown/default label."""

    STRONG_BULLISH = "StrongBullish"
    BULLISH = "Bullish"
    SIDEWAYS = "Sideways"
    BEARISH = "Bearish"
    STRONG_BEARISH = "StrongBearish"
    NEUTRAL = "Neutral"

    @property
    def display(self) -> str:
        """Human-readable label with its RSI range."""
        return _DISPLAY[self]


_DISPLAY: dict[TrendLabel, str] = {
    TrendLabel.STRONG_BULLISH: "Strong Bullish (60-80)",
    TrendLabel.BULLISH: "Bullish (40-80)",
    TrendLabel.SIDEWAYS: "Sideways (40-60)",
    TrendLabel.BEARISH: "Bearish (60-20)",
    TrendLabel.STRONG_BEARISH: "Strong Bearish (40-20)",
    TrendLabel.NEUTRAL: "Neutral",
}

# Ordered: first match wins. "strong bullish" must precede "bullish", etc.
# Each rule is (label, keywords, RSI range patterns).
CLASSIFIER_RULES: tuple[tuple[TrendLabel, tuple[str, ...], tuple[re.Pattern[str], ...]], ...] = (
    (TrendLabel.STRONG_BULLISH, ("strong bullish",), (re.compile(r"60-80"),)),
    (TrendLabel.BULLISH, ("bullish",), (re.compile(r"40-80"),)),
    (TrendLabel.STRONG_BEARISH, ("strong bearish",), (re.compile(r"40-20"),)),
    (TrendLabel.BEARISH, ("bearish",), (re.compile(r"60-20"),)),
    (TrendLabel.SIDEWAYS, ("sideways",), (re.compile(r"40-60"), re.compile(r"60-40"))),
)


def classify(reasoning: str | None) -> TrendLabel:
    """
    Map reasoning text to a trend label. Never raises.

    Matching is substring/range based, so negations ("not bullish") are
    not distinguished from positive statements.
    """
    if not reasoning:
        return TrendLabel.NEUTRAL

    text = reasoning.lower()
    for label, keywords, patterns in CLASSIFIER_RULES:
        if any(k in text for k in keywords) or any(p.search(text) for p in patterns):
            return label
    return TrendLabel.NEUTRAL
