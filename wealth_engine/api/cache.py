"""Time-boxed memo for projection responses.

Only the HTTP layer uses this; the projection engine never caches.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, TypeVar

T = TypeVar("T")


@dataclass
class CachedEntry(Generic[T]):
    stored_at: float
    value: T


class TTLCache(Generic[T]):
    """In-memory cache whose entries expire ``ttl_seconds`` after being stored."""

    def __init__(self, ttl_seconds: float, *, max_entries: int = 256, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._store: dict[Hashable, CachedEntry[T]] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> T | None:
        if self.ttl_seconds <= 0:
            return None
        with self._lock:
            cached = self._store.get(key)
            if cached is None:
                return None
            if self._clock() - cached.stored_at > self.ttl_seconds:
                self._store.pop(key, None)
                return None
            return cached.value

    def set(self, key: Hashable, value: T) -> None:
        if self.ttl_seconds <= 0:
            return
        with self._lock:
            if len(self._store) >= self.max_entries and key not in self._store:
                oldest = min(self._store, key=lambda k: self._store[k].stored_at)
                self._store.pop(oldest, None)
            self._store[key] = CachedEntry(stored_at=self._clock(), value=value)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        return len(self._store)


__all__ = ["TTLCache"]
