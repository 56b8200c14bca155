"""Sentiment assessment value object, payload parsing, and fallback."""

import json
import re
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from market_mind.data.news import get_financial_news
from market_mind.utils.sanitize import sanitize_text
from market_mind.utils.validators import is_finite_number

FALLBACK_REASONING = (
    "Sentiment assessment was unavailable. This is a fallback based on random data."
)
FALLBACK_POLARITY_RANGE = (-0.5, 0.5)
FALLBACK_OVERALL_RANGE = (-1.0, 1.0)

_MAX_REASONING_LENGTH = 4000
_MAX_HEADLINE_LENGTH = 200

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*|\s*```$")


@dataclass(frozen=True)
class SentimentAssessment:
    """
    Structured news sentiment assessment for one ticker.

    Invariants: one polarity score per headline; every score and the
    overall score lie in [-1, 1].
    """

    headlines: tuple[str, ...]
    polarity_scores: tuple[float, ...]
    overall_score: float
    reasoning: str
    is_fallback: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headlines", tuple(self.headlines))
        object.__setattr__(self, "polarity_scores", tuple(float(s) for s in self.polarity_scores))

        if len(self.polarity_scores) != len(self.headlines):
            raise ValueError(
                f"polarity_scores has {len(self.polarity_scores)} entries "
                f"but headlines has {len(self.headlines)}"
            )
        for s in self.polarity_scores:
            if not -1.0 <= s <= 1.0:
                raise ValueError(f"Polarity score {s} outside [-1, 1]")
        if not is_finite_number(self.overall_score) or not -1.0 <= self.overall_score <= 1.0:
            raise ValueError(f"Overall sentiment score {self.overall_score!r} outside [-1, 1]")

    def to_dict(self) -> dict[str, Any]:
        return {
            "headlines": list(self.headlines),
            "sentimentPolarityScores": [round(s, 4) for s in self.polarity_scores],
            "overallSentimentScore": round(self.overall_score, 4),
            "reasoning": self.reasoning,
            "isFallback": self.is_fallback,
        }


def _strip_code_fence(text: str) -> str:
    """Models often wrap JSON in ```json ... ``` fences."""
    return _CODE_FENCE.sub("", text.strip()).strip()


def parse_assessment(payload: str | dict[str, Any]) -> SentimentAssessment:
    """
    Parse a model payload into a SentimentAssessment.

    Accepts a JSON string (optionally fenced) or an already-decoded dict
    using the camelCase keys requested in the prompt.

    Raises:
        ValueError: If the payload is not JSON, misses keys, or breaks an invariant
    """
    if isinstance(payload, str):
        try:
            payload = json.loads(_strip_code_fence(payload))
        except json.JSONDecodeError as e:
            raise ValueError(f"Assessment payload is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise ValueError(f"Assessment payload must be an object, got {type(payload).__name__}")

    missing = [
        k
        for k in ("headlines", "sentimentPolarityScores", "overallSentimentScore", "reasoning")
        if k not in payload
    ]
    if missing:
        raise ValueError(f"Assessment payload missing keys: {missing}")

    headlines = payload["headlines"]
    scores = payload["sentimentPolarityScores"]
    overall = payload["overallSentimentScore"]
    reasoning = payload["reasoning"]

    if not isinstance(headlines, list) or not all(isinstance(h, str) for h in headlines):
        raise ValueError("headlines must be a list of strings")
    if not isinstance(scores, list) or not all(is_finite_number(s) for s in scores):
        raise ValueError("sentimentPolarityScores must be a list of finite numbers")
    if not is_finite_number(overall):
        raise ValueError("overallSentimentScore must be a finite number")
    if not isinstance(reasoning, str):
        raise ValueError("reasoning must be a string")

    return SentimentAssessment(
        headlines=tuple(sanitize_text(h, max_length=_MAX_HEADLINE_LENGTH) or "" for h in headlines),
        polarity_scores=tuple(float(s) for s in scores),
        overall_score=float(overall),
        reasoning=sanitize_text(reasoning, max_length=_MAX_REASONING_LENGTH) or "",
    )


def fallback_assessment(
    ticker: str,
    rng: np.random.Generator | None = None,
    headlines: list[str] | None = None,
) -> SentimentAssessment:
    """
    Synthetic assessment used when the assessor is unavailable.

    The reasoning says so explicitly and carries no trend vocabulary, so
    it classifies as Neutral.

    Args:
        ticker: Normalized ticker
        rng: Random source (seed it for reproducible output)
        headlines: Headlines to attach (default: placeholder news for ticker)
    """
    rng = rng if rng is not None else np.random.default_rng()
    headlines = headlines if headlines is not None else get_financial_news(ticker)

    low, high = FALLBACK_POLARITY_RANGE
    polarity = rng.uniform(low, high, size=len(headlines))
    overall = rng.uniform(*FALLBACK_OVERALL_RANGE)

    return SentimentAssessment(
        headlines=tuple(headlines),
        polarity_scores=tuple(float(s) for s in polarity),
        overall_score=float(overall),
        reasoning=FALLBACK_REASONING,
        is_fallback=True,
    )
