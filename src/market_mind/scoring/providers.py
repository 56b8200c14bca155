"""Factor score providers."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable
from concurrent.futures import Executor
from typing import Protocol, runtime_checkable

import numpy as np

from market_mind.errors import FactorProviderError
from market_mind.scoring.factors import FACTOR_RANGES, Factor
from market_mind.utils.validators import is_finite_number

logger = logging.getLogger(__name__)


@runtime_checkable
class FactorScoreProvider(Protocol):
    """Anything that scores a factor for a ticker, synchronously or not."""

    def score(self, factor: Factor, ticker: str) -> float | Awaitable[float]: ...


class RandomFactorProvider:
    """
    Placeholder provider drawing uniform scores from each factor's documented range.

    Pass a seeded numpy Generator for reproducible draws.
    """

    def __init__(self, rng: np.random.Generator | None = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    async def score(self, factor: Factor, ticker: str) -> float:
        low, high = FACTOR_RANGES[Factor(factor)]
        return float(self.rng.uniform(low, high))


async def fetch_factor_score(
    provider: FactorScoreProvider,
    factor: Factor,
    ticker: str,
    timeout: float,
    executor: Executor | None = None,
) -> float:
    """
    Call a provider with a timeout and validate its output.

    Coroutine providers run on the loop. Synchronous providers run in the
    executor, so a blocking call cannot stall the loop. The timeout bounds
    both.

    Args:
        provider: Sync or async provider
        factor: Factor to score
        ticker: Normalized ticker
        timeout: Seconds to wait for the provider
        executor: Pool for synchronous providers (default: the loop's default executor)

    Returns:
        Raw (unclamped) finite score

    Raises:
        FactorProviderError: If the provider raises, times out, or returns a non-finite value
    """
    try:
        if inspect.iscoroutinefunction(provider.score):
            pending = provider.score(factor, ticker)
        else:
            loop = asyncio.get_running_loop()
            pending = loop.run_in_executor(executor, provider.score, factor, ticker)
        result = await asyncio.wait_for(pending, timeout=timeout)
        # Sync callables may still hand back an awaitable
        if inspect.isawaitable(result):
            result = await asyncio.wait_for(result, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise FactorProviderError(factor.value, ticker, f"timed out after {timeout}s") from e
    except FactorProviderError:
        raise
    except Exception as e:
        raise FactorProviderError(factor.value, ticker, str(e)) from e

    if not is_finite_number(result):
        raise FactorProviderError(factor.value, ticker, f"non-finite score {result!r}")
    return float(result)
