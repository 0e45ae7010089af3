# src/bytecache/policies/__init__.py
from .base import OnEvicted, TraceObject, Value
from .locked import LockedLRUCache
from .lru import LRUCache

__all__ = ["LRUCache", "LockedLRUCache", "OnEvicted", "TraceObject", "Value"]
