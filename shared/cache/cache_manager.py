"""
Cache Manager for YouTube Channel Feed
Response caching for upstream lookups
"""

import logging
import threading
import time
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600


def cache_key(operation: str, resource_id: str, fields: str) -> str:
    """Builds the cache key for one upstream lookup."""
    return f"youtube:{operation}:{resource_id}:{fields}"


class CacheManager:
    """
    In-memory key-value cache with a per-instance TTL.

    Responsibilities:
    - Hold raw upstream responses keyed by (operation, resource id, fields).
    - Expire entries once they outlive the TTL.
    - Allow concurrent get/set from simultaneous requests.
    """

    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        """
        Initialize the CacheManager.

        Args:
            ttl_seconds (float): Lifetime of an entry. Zero or less disables caching.
            clock (Callable): Time source, injectable for tests.
        """
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, key: str) -> Optional[Any]:
        """Returns the cached value, or None when missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if expires_at <= self._clock():
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: Any) -> None:
        if self._ttl <= 0:
            return
        with self._lock:
            self._entries[key] = (self._clock() + self._ttl, value)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self):
        return f"CacheManager(ttl={self._ttl}, entries={len(self)})"


async def read_through(cache: CacheManager, key: str, fetch: Callable[[], Awaitable[Any]]) -> Any:
    """
    Returns the cached value for `key`, or awaits `fetch()` and stores its result.

    Errors raised by `fetch` propagate and nothing is stored.
    """
    cached = cache.get(key)
    if cached is not None:
        logger.debug(f"Cache hit: {key}")
        return cached

    logger.info(f"Cache miss: {key}")
    value = await fetch()
    cache.set(key, value)
    return value
