"""Meta block and error envelope shared by every tool response."""

from typing import Any

from market_mind import SCHEMA_VERSION, SERVER_VERSION


def build_meta(tool: str, duration_ms: float | None = None) -> dict[str, Any]:
    """Version stamp for a response, with timing when the tool measured it."""
    meta: dict[str, Any] = {
        "server_version": SERVER_VERSION,
        "schema_version": SCHEMA_VERSION,
        "tool": tool,
    }
    if duration_ms is not None:
        meta["duration_ms"] = round(duration_ms, 1)
    return meta


def build_error_response(
    error_type: str,
    message: str,
    ticker: str | None = None,
    retryable: bool | None = None,
) -> dict[str, Any]:
    """
    Error envelope returned by tools instead of raising.

    Args:
        error_type: invalid_ticker, invalid_request, data_unavailable or not_found
        message: Text shown to the client
        ticker: Offending ticker, when there is one
        retryable: True when the same request may succeed later

    Returns:
        Dict with error=True, error_type, message, meta, and the optional fields that were given
    """
    optional = {"ticker": ticker, "retryable": retryable}
    return {
        "error": True,
        "error_type": error_type,
        "message": message,
        "meta": build_meta("error"),
        **{k: v for k, v in optional.items() if v is not None},
    }
