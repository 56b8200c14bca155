"""MarketMind analysis engine."""

import os
from importlib.metadata import PackageNotFoundError, version


def get_server_version() -> str:
    """SERVER_VERSION env override, else the installed distribution version, else "dev"."""
    override = os.environ.get("SERVER_VERSION")
    if override:
        return override
    try:
        return version("market-mind")
    except PackageNotFoundError:
        return "dev"


SERVER_VERSION = get_server_version()

# Response schema version; bump on renamed/removed fields or structural changes
# 1: initial analysis payload
# 2: sentiment isFallback, analysis computedAt and outlook block
SCHEMA_VERSION = "2"
