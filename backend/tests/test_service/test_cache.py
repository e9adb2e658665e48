"""Tests for the FIFO cache."""

import threading

import pytest

from sigma_avatars.service.cache import FifoCache


def test_get_set():
    cache: FifoCache[str] = FifoCache(2)
    assert cache.get("a") is None
    assert cache.set("a", "1") == "1"
    assert cache.get("a") == "1"
    assert "a" in cache
    assert len(cache) == 1


def test_evicts_oldest_insertion():
    cache: FifoCache[int] = FifoCache(2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.get("a")  # reads do not refresh
    cache.set("c", 3)
    assert "a" not in cache
    assert cache.get("b") == 2
    assert cache.get("c") == 3


def test_overwrite_does_not_evict():
    cache: FifoCache[int] = FifoCache(2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("a", 10)
    assert len(cache) == 2
    assert cache.get("a") == 10
    assert cache.get("b") == 2


def test_invalidate():
    cache: FifoCache[int] = FifoCache()
    cache.set("a", 1)
    cache.invalidate()
    assert len(cache) == 0


def test_rejects_zero_size():
    with pytest.raises(ValueError):
        FifoCache(0)


def test_concurrent_writers_respect_bound():
    cache: FifoCache[int] = FifoCache(50)

    def writer(offset: int) -> None:
        for i in range(200):
            cache.set(f"{offset}-{i}", i)

    threads = [threading.Thread(target=writer, args=(t,)) for t in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(cache) == 50
