# src/bytecache/policies/locked.py
from threading import Lock
from typing import Any, List, Optional, Tuple

from .base import OnEvicted, Value
from .lru import LRUCache


class LockedLRUCache:
    """
    Thread-safe wrapper around LRUCache.

    Every call, get() included, holds the same lock. on_evicted runs with
    the lock held and must not call back into this cache.
    """
    def __init__(self, max_bytes: int = 0, on_evicted: OnEvicted = None):
        self._lock  = Lock()
        self._inner = LRUCache(max_bytes, on_evicted)

    @property
    def max_bytes(self) -> int:
        return self._inner.max_bytes

    @property
    def nbytes(self) -> int:
        with self._lock:
            return self._inner.nbytes

    def __len__(self) -> int:
        with self._lock:
            return len(self._inner)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._inner

    def keys(self) -> List[str]:
        with self._lock:
            return self._inner.keys()

    def add(self, key: str, value: Value) -> None:
        with self._lock:
            self._inner.add(key, value)

    def get(self, key: str) -> Tuple[Optional[Any], bool]:
        with self._lock:
            return self._inner.get(key)

    def remove_oldest(self) -> None:
        with self._lock:
            self._inner.remove_oldest()

    def resize(self, new_cap: int) -> None:
        with self._lock:
            self._inner.resize(new_cap)

    def request(self, key: str, obj_size: int, ts=None, *_, **__) -> bool:
        with self._lock:
            return self._inner.request(key, obj_size, ts)
