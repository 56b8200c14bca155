"""Environment-driven configuration."""

import os
from dataclasses import dataclass

DEFAULT_MODEL = "gemini-2.5-flash"


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    gemini_api_key: str | None = None
    model: str = DEFAULT_MODEL
    sentiment_timeout: float = 10.0  # seconds
    provider_timeout: float = 5.0  # seconds
    max_workers: int = 4
    page_size: int = 10
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Raises:
            ValueError: If a numeric variable is malformed or not positive
        """
        seed_raw = os.environ.get("MARKET_MIND_SEED")
        seed: int | None = None
        if seed_raw is not None and seed_raw.strip() != "":
            try:
                seed = int(seed_raw)
            except ValueError as e:
                raise ValueError(f"MARKET_MIND_SEED must be an integer, got {seed_raw!r}") from e

        return cls(
            gemini_api_key=os.environ.get("GEMINI_API_KEY") or None,
            model=os.environ.get("MARKET_MIND_MODEL", DEFAULT_MODEL),
            sentiment_timeout=_env_float("MARKET_MIND_SENTIMENT_TIMEOUT", 10.0),
            provider_timeout=_env_float("MARKET_MIND_PROVIDER_TIMEOUT", 5.0),
            max_workers=_env_int("MARKET_MIND_MAX_WORKERS", 4),
            page_size=_env_int("MARKET_MIND_PAGE_SIZE", 10),
            seed=seed,
        )
