"""Session-scoped analysis cache with single-flight deduplication."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from market_mind.errors import InvalidTickerError
from market_mind.utils.validators import normalize_ticker

if TYPE_CHECKING:
    from market_mind.engine import AnalysisResult

logger = logging.getLogger(__name__)

ComputeFn = Callable[[str], Awaitable["AnalysisResult"]]


@dataclass
class CacheStats:
    """Counters for cache diagnostics."""

    hits: int = 0
    misses: int = 0
    joins: int = 0
    failures: int = 0
    refreshes: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


class AnalysisCache:
    """
    Per-ticker memo of analysis results.

    Each normalized ticker maps to either an in-flight task (pending) or a
    completed AnalysisResult (ready). Concurrent requests for a pending
    ticker await the same task, so the compute function runs at most once
    per ticker at a time. Failed computations are evicted so the next
    request retries. Entries have no TTL; construct a new cache for a new
    session.
    """

    def __init__(self, compute: ComputeFn):
        self._compute = compute
        self._ready: dict[str, "AnalysisResult"] = {}
        self._pending: dict[str, "asyncio.Task[AnalysisResult]"] = {}
        self._lock = asyncio.Lock()
        self.stats = CacheStats()

    def __len__(self) -> int:
        return len(self._ready) + len(self._pending)

    def __contains__(self, ticker: object) -> bool:
        key = _key(ticker)
        return key is not None and (key in self._ready or key in self._pending)

    def peek(self, ticker: str) -> "AnalysisResult | None":
        """Ready result for ticker without computing, or None (also for invalid tickers)."""
        key = _key(ticker)
        return self._ready.get(key) if key is not None else None

    def is_pending(self, ticker: str) -> bool:
        key = _key(ticker)
        return key is not None and key in self._pending

    async def get_or_compute(self, ticker: str, force_refresh: bool = False) -> "AnalysisResult":
        """
        Return the cached analysis for ticker, computing it on a miss.

        Args:
            ticker: Raw ticker symbol
            force_refresh: Drop a ready entry and compute afresh.
                An in-flight computation is joined, not duplicated.

        Returns:
            AnalysisResult shared by every caller for this entry

        Raises:
            InvalidTickerError: If the ticker fails validation (cache untouched)
            Exception: Whatever the compute function raised, for the creator
                and every joiner alike
        """
        key = normalize_ticker(ticker)

        # Check/create atomically
        async with self._lock:
            if not force_refresh and key in self._ready:
                self.stats.hits += 1
                logger.debug(f"get_or_compute({key}): cache hit")
                return self._ready[key]

            task = self._pending.get(key)
            if task is None:
                if force_refresh and self._ready.pop(key, None) is not None:
                    self.stats.refreshes += 1
                    logger.debug(f"get_or_compute({key}): forced refresh")
                self.stats.misses += 1
                task = asyncio.create_task(self._run(key))
                task.add_done_callback(_retrieve_exception)
                self._pending[key] = task
                logger.debug(f"get_or_compute({key}): created singleflight task")
            else:
                self.stats.joins += 1
                logger.debug(f"get_or_compute({key}): joining existing singleflight")

        # Await outside the lock. Shield so an abandoned caller does not cancel
        # the shared computation; it completes and populates the cache.
        return await asyncio.shield(task)

    async def _run(self, key: str) -> "AnalysisResult":
        """Compute and settle the entry for key: ready on success, evicted on failure."""
        try:
            result = await self._compute(key)
        except BaseException as e:
            async with self._lock:
                if self._pending.get(key) is asyncio.current_task():
                    self._pending.pop(key, None)
                self.stats.failures += 1
            logger.info(f"get_or_compute({key}): computation failed ({type(e).__name__}: {e})")
            raise

        async with self._lock:
            if self._pending.get(key) is asyncio.current_task():
                self._pending.pop(key, None)
                self._ready[key] = result
        return result

    def invalidate(self, ticker: str) -> bool:
        """Drop a ready entry. Returns True if one existed. Pending work is left alone."""
        key = _key(ticker)
        return key is not None and self._ready.pop(key, None) is not None

    def clear(self) -> None:
        """Drop all ready entries."""
        self._ready.clear()

    def snapshot(self) -> dict[str, Any]:
        """Diagnostic view of the cache."""
        return {
            "ready": sorted(self._ready),
            "pending": sorted(self._pending),
            "stats": self.stats.to_dict(),
        }


def _retrieve_exception(task: "asyncio.Task[Any]") -> None:
    """Mark a failed task's exception as retrieved when every caller walked away."""
    if not task.cancelled():
        task.exception()


def _key(ticker: object) -> str | None:
    """Normalized cache key, or None when the ticker would fail validation."""
    try:
        return normalize_ticker(ticker)
    except InvalidTickerError:
        return None
