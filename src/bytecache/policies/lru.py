# src/bytecache/policies/lru.py
import logging
from collections import OrderedDict
from typing import Any, List, Optional, Tuple

from .base import OnEvicted, TraceObject, Value

log = logging.getLogger(__name__)


class LRUCache:
    """
    Least-Recently-Used cache with a byte budget.
    Stores {key: value}; every entry costs len(key) + len(value) bytes.
    max_bytes == 0 means unbounded.

    Not thread-safe. get() reorders entries, so an external lock has to
    treat it like add(). See LockedLRUCache.
    """
    def __init__(self, max_bytes: int = 0, on_evicted: OnEvicted = None):
        if max_bytes < 0:
            raise ValueError("max_bytes must be >= 0")
        self._max_bytes = int(max_bytes)
        self._nbytes    = 0                  # current bytes in cache
        self._cache     = OrderedDict()      # key -> value, LRU first
        self.on_evicted = on_evicted

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    @property
    def nbytes(self) -> int:
        return self._nbytes

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: str) -> bool:
        # membership only; does not count as a use
        return key in self._cache

    def keys(self) -> List[str]:
        """Keys from least to most recently used."""
        return list(self._cache)

    # ----------------------------------------------------------
    def add(self, key: str, value: Value) -> None:
        size = len(value)
        if self._max_bytes != 0 and len(key) + size > self._max_bytes:
            log.debug("oversized key=%s size=%d max_bytes=%d",
                      key, len(key) + size, self._max_bytes)
        if key in self._cache:
            self._cache.move_to_end(key)
            self._nbytes += size - len(self._cache[key])
            self._cache[key] = value
        else:
            self._cache[key] = value
            self._nbytes += len(key) + size
        self._evict()

    def get(self, key: str) -> Tuple[Optional[Any], bool]:
        if key not in self._cache:
            return None, False
        # move to MRU position
        self._cache.move_to_end(key)
        return self._cache[key], True

    def remove_oldest(self) -> None:
        if not self._cache:
            return
        key, value = self._cache.popitem(last=False)   # LRU item
        self._nbytes -= len(key) + len(value)
        log.debug("evicted key=%s nbytes=%d", key, self._nbytes)
        if self.on_evicted is not None:
            self.on_evicted(key, value)

    def _evict(self) -> None:
        # an entry bigger than the whole budget ends up evicted as well
        while self._max_bytes != 0 and self._nbytes > self._max_bytes and self._cache:
            self.remove_oldest()

    # ----------------------------------------------------------
    def resize(self, new_cap: int) -> None:
        if new_cap < 0:
            raise ValueError("max_bytes must be >= 0")
        self._max_bytes = int(new_cap)
        self._evict()

    def request(self, key: str, obj_size: int, ts=None, *_, **__) -> bool:
        """
        Process one trace request.
        Return True on hit, False on miss (after inserting).
        """
        _, hit = self.get(key)
        if not hit:
            self.add(key, TraceObject(obj_size))
        return hit
