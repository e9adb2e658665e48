"""Bounded in-memory FIFO cache.

Entries are never refreshed or reordered: once full, the oldest insertion is
evicted first. Safe to share between executor threads.
"""

from __future__ import annotations

import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_MAX_SIZE = 1000


class FifoCache(Generic[T]):
    """Keyed cache with sync get/set and first-in-first-out eviction."""

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = int(max_size)
        self._entries: dict[str, T] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: T) -> T:
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.max_size:
                oldest = next(iter(self._entries))
                del self._entries[oldest]
            self._entries[key] = value
        return value

    def invalidate(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
