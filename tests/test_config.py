"""Tests for environment configuration."""

import pytest

from market_mind.config import DEFAULT_MODEL, Settings

ENV_VARS = [
    "GEMINI_API_KEY",
    "MARKET_MIND_MODEL",
    "MARKET_MIND_SENTIMENT_TIMEOUT",
    "MARKET_MIND_PROVIDER_TIMEOUT",
    "MARKET_MIND_MAX_WORKERS",
    "MARKET_MIND_PAGE_SIZE",
    "MARKET_MIND_SEED",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults(self) -> None:
        settings = Settings.from_env()
        assert settings == Settings()
        assert settings.model == DEFAULT_MODEL
        assert settings.gemini_api_key is None
        assert settings.sentiment_timeout == 10.0
        assert settings.seed is None

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "k")
        monkeypatch.setenv("MARKET_MIND_MODEL", "gemini-2.0-flash")
        monkeypatch.setenv("MARKET_MIND_SENTIMENT_TIMEOUT", "2.5")
        monkeypatch.setenv("MARKET_MIND_MAX_WORKERS", "8")
        monkeypatch.setenv("MARKET_MIND_SEED", "7")

        settings = Settings.from_env()
        assert settings.gemini_api_key == "k"
        assert settings.model == "gemini-2.0-flash"
        assert settings.sentiment_timeout == 2.5
        assert settings.max_workers == 8
        assert settings.seed == 7

    def test_empty_key_is_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "")
        assert Settings.from_env().gemini_api_key is None

    @pytest.mark.parametrize(
        "name, value",
        [
            ("MARKET_MIND_SENTIMENT_TIMEOUT", "soon"),
            ("MARKET_MIND_PROVIDER_TIMEOUT", "0"),
            ("MARKET_MIND_PAGE_SIZE", "-3"),
            ("MARKET_MIND_MAX_WORKERS", "2.5"),
            ("MARKET_MIND_SEED", "abc"),
        ],
    )
    def test_malformed_values(self, monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
        monkeypatch.setenv(name, value)
        with pytest.raises(ValueError, match=name):
            Settings.from_env()
