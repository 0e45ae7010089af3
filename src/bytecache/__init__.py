# src/bytecache/__init__.py
# Trace replay lives in bytecache.simulator and bytecache.policies.metrics;
# it pulls in pandas and is not imported here.
import logging

from .config import CacheConfig
from .policies import LockedLRUCache, LRUCache, TraceObject, Value

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CacheConfig",
    "LockedLRUCache",
    "LRUCache",
    "TraceObject",
    "Value",
]
