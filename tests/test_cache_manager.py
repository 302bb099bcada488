import asyncio
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import AsyncMock

import pytest

from shared.cache import CacheManager, cache_key, read_through


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_cache_key_shape():
    assert cache_key("playlistItems", "UU123", "snippet") == "youtube:playlistItems:UU123:snippet"


def test_get_set_and_expiry():
    clock = FakeClock()
    cache = CacheManager(ttl_seconds=10, clock=clock)

    cache.set("k", {"items": []})
    assert cache.get("k") == {"items": []}

    clock.now = 9.9
    assert cache.get("k") == {"items": []}

    clock.now = 10.0
    assert cache.get("k") is None
    assert len(cache) == 0


def test_zero_ttl_disables_storage():
    cache = CacheManager(ttl_seconds=0)

    cache.set("k", "v")

    assert cache.get("k") is None


def test_clear():
    cache = CacheManager()
    cache.set("a", 1)
    cache.set("b", 2)

    cache.clear()

    assert len(cache) == 0


def test_concurrent_writers_do_not_corrupt():
    cache = CacheManager()

    def work(i):
        cache.set(f"k{i % 50}", i)
        return cache.get(f"k{i % 50}")

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(work, range(1000)))

    assert all(r is not None for r in results)
    assert len(cache) == 50


async def test_read_through_fetches_once():
    cache = CacheManager()
    fetch = AsyncMock(return_value={"items": [1]})

    first = await read_through(cache, "k", fetch)
    second = await read_through(cache, "k", fetch)

    assert first == second == {"items": [1]}
    fetch.assert_awaited_once()


async def test_read_through_does_not_store_failures():
    cache = CacheManager()
    fetch = AsyncMock(side_effect=RuntimeError("boom"))

    with pytest.raises(RuntimeError):
        await read_through(cache, "k", fetch)

    assert cache.get("k") is None


async def test_concurrent_requests_share_the_cache():
    cache = CacheManager()
    fetch = AsyncMock(return_value={"items": []})

    await read_through(cache, "k", fetch)
    await asyncio.gather(*(read_through(cache, "k", fetch) for _ in range(10)))

    fetch.assert_awaited_once()
