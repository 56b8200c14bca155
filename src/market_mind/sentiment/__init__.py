"""Sentiment assessment."""

from market_mind.sentiment.assessor import GeminiSentimentAssessor, SentimentAssessor
from market_mind.sentiment.models import (
    FALLBACK_REASONING,
    SentimentAssessment,
    fallback_assessment,
    parse_assessment,
)

__all__ = [
    "FALLBACK_REASONING",
    "GeminiSentimentAssessor",
    "SentimentAssessment",
    "SentimentAssessor",
    "fallback_assessment",
    "parse_assessment",
]
