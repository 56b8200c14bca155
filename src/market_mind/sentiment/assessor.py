"""Sentiment assessors backed by a text-generation model."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Protocol, runtime_checkable

import numpy as np
import requests

from market_mind.config import DEFAULT_MODEL, Settings
from market_mind.data.news import get_financial_news, get_market_sentiment
from market_mind.prompts.templates import build_sentiment_prompt
from market_mind.sentiment.models import SentimentAssessment, parse_assessment

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

# Allowed finish reasons for a usable candidate
_OK_FINISH_REASONS = {"", "STOP", "MAX_TOKENS"}


@runtime_checkable
class SentimentAssessor(Protocol):
    """Produces a SentimentAssessment for a ticker. May raise anything."""

    async def assess(self, ticker: str) -> SentimentAssessment: ...


class GeminiSentimentAssessor:
    """
    Assess news sentiment with Google Gemini over its REST API.

    Single attempt per call; retry and fallback policy belong to the caller.
    The blocking HTTP request runs in a bounded thread pool.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        request_timeout: float = 30.0,
        max_workers: int = 4,
        rng: np.random.Generator | None = None,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.request_timeout = request_timeout
        self.rng = rng if rng is not None else np.random.default_rng()
        self._session = session or requests.Session()
        self._executor = ThreadPoolExecutor(max_workers=max_workers)
        if not self.api_key:
            logger.warning("GEMINI_API_KEY not set; sentiment assessments will use the fallback")

    @classmethod
    def from_settings(
        cls, settings: Settings, rng: np.random.Generator | None = None
    ) -> "GeminiSentimentAssessor":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.model,
            request_timeout=settings.sentiment_timeout,
            max_workers=settings.max_workers,
            rng=rng,
        )

    async def assess(self, ticker: str) -> SentimentAssessment:
        """
        Run one assessment for a normalized ticker.

        Raises:
            RuntimeError: If no API key is configured or the model returns no usable text
            requests.RequestException: On transport or HTTP errors
            ValueError: If the model output is malformed
        """
        if not self.api_key:
            raise RuntimeError("GEMINI_API_KEY not set")

        headlines = get_financial_news(ticker)
        prompt = build_sentiment_prompt(ticker, headlines, get_market_sentiment(self.rng))

        loop = asyncio.get_running_loop()
        text = await loop.run_in_executor(self._executor, self._generate, prompt)
        return parse_assessment(text)

    def _generate(self, prompt: str) -> str:
        """Blocking generateContent call returning the first candidate's text."""
        payload: dict[str, Any] = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": 0.4,
                "responseMimeType": "application/json",
            },
        }
        response = self._session.post(
            GEMINI_URL.format(model=self.model),
            params={"key": self.api_key},
            json=payload,
            timeout=self.request_timeout,
        )
        response.raise_for_status()

        candidates = response.json().get("candidates") or []
        if not candidates:
            raise RuntimeError(f"No candidates returned by {self.model}")

        candidate = candidates[0]
        finish_reason = candidate.get("finishReason", "")
        if finish_reason not in _OK_FINISH_REASONS:
            raise RuntimeError(f"Generation stopped: {finish_reason} ({self.model})")

        parts = candidate.get("content", {}).get("parts") or []
        text = parts[0].get("text", "") if parts else ""
        if not text:
            raise RuntimeError(f"Empty response from {self.model}")
        return text

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
        self._session.close()
