"""Time-bounded in-memory cache for upstream responses, keyed by region."""

import threading
import time
from collections.abc import Callable
from typing import Any

DEFAULT_TTL_SECONDS = 300
DEFAULT_MAX_ENTRIES = 64


class ResponseCache:
    """Holds one payload per key for ``ttl_seconds``.

    The clock is injectable so freshness can be tested without sleeping.
    A TTL of zero disables caching. Expired entries are swept on every put,
    and the oldest entry is evicted once ``max_entries`` is reached.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            stored_at, value = entry
            if self._clock() - stored_at > self.ttl_seconds:
                del self._entries[key]
                return None
            return value

    def put(self, key: str, value: Any) -> None:
        if self.ttl_seconds <= 0 or self.max_entries <= 0:
            return
        with self._lock:
            now = self._clock()
            self._sweep(now)
            self._entries.pop(key, None)
            while len(self._entries) >= self.max_entries:
                # dicts keep insertion order, so the first key is the oldest
                del self._entries[next(iter(self._entries))]
            self._entries[key] = (now, value)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _sweep(self, now: float) -> None:
        expired = [
            key
            for key, (stored_at, _) in self._entries.items()
            if now - stored_at > self.ttl_seconds
        ]
        for key in expired:
            del self._entries[key]
