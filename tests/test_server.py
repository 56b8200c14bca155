"""Smoke test for server wiring."""

import pytest


def test_server_module_builds_service(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    from market_mind import server

    assert server.mcp.name == "market-mind"
    assert len(server.service.cache) == 0
    assert server.settings.page_size >= 1
