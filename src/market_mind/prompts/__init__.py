"""Prompt templates."""

from market_mind.prompts.templates import build_sentiment_prompt, get_prompt, list_prompts

__all__ = ["build_sentiment_prompt", "get_prompt", "list_prompts"]
