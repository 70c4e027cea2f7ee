"""In-memory TTL cache for loaded content.

Process-local and thread-safe. The post collection is parsed from disk at most
once per TTL window; every worker process keeps its own copy.
"""

import threading
import time
from typing import Any, Callable, Optional


class TTLCache:
    def __init__(self, time_func: Callable[[], float] = time.time):
        self._store: dict[str, tuple[float, Any]] = {}
        self._lock = threading.RLock()
        self._time_func = time_func

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            item = self._store.get(key)
            if item is None:
                return None

            expires_at, value = item
            if self._time_func() > expires_at:
                self._store.pop(key, None)
                return None
            return value

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        with self._lock:
            self._store[key] = (self._time_func() + ttl_seconds, value)

    def get_or_load(self, key: str, loader: Callable[[], Any], ttl_seconds: int) -> Any:
        """Return the cached value or call ``loader`` once and cache its result.

        Loader errors propagate and nothing is cached.
        """
        with self._lock:
            cached = self.get(key)
            if cached is not None:
                return cached
            value = loader()
            if ttl_seconds > 0:
                self.set(key, value, ttl_seconds)
            return value

    def invalidate(self, key: Optional[str] = None) -> None:
        with self._lock:
            if key is None:
                self._store.clear()
            else:
                self._store.pop(key, None)


cache = TTLCache()
