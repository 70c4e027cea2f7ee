import threading

import pytest

from core.cache import TTLCache


class FakeClock:
    def __init__(self, initial: float = 0.0):
        self._value = initial

    def now(self) -> float:
        return self._value

    def advance(self, seconds: float) -> None:
        self._value += seconds


def test_cache_expires_entries():
    clock = FakeClock()
    cache = TTLCache(time_func=clock.now)

    cache.set("k", "v", ttl_seconds=1)
    assert cache.get("k") == "v"

    clock.advance(2)
    assert cache.get("k") is None


def test_get_or_load_calls_loader_once_per_window():
    clock = FakeClock()
    cache = TTLCache(time_func=clock.now)
    calls = []

    def loader():
        calls.append(1)
        return ["post"]

    assert cache.get_or_load("posts", loader, ttl_seconds=10) == ["post"]
    assert cache.get_or_load("posts", loader, ttl_seconds=10) == ["post"]
    assert len(calls) == 1

    clock.advance(11)
    cache.get_or_load("posts", loader, ttl_seconds=10)
    assert len(calls) == 2


def test_get_or_load_does_not_cache_failures():
    cache = TTLCache()

    def broken():
        raise ValueError("boom")

    with pytest.raises(ValueError):
        cache.get_or_load("posts", broken, ttl_seconds=10)
    assert cache.get("posts") is None


def test_invalidate_single_key_and_all():
    cache = TTLCache()
    cache.set("a", 1, ttl_seconds=30)
    cache.set("b", 2, ttl_seconds=30)

    cache.invalidate("a")
    assert cache.get("a") is None
    assert cache.get("b") == 2

    cache.invalidate()
    assert cache.get("b") is None


def test_cache_concurrent_get_or_load_is_thread_safe():
    cache = TTLCache()
    start = threading.Barrier(8)
    calls = []

    def loader():
        calls.append(1)
        return 42

    def worker():
        start.wait()
        for _ in range(200):
            assert cache.get_or_load("answer", loader, ttl_seconds=30) == 42

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
