# src/bytecache/policies/base.py
from typing import Any, Callable, Optional, Protocol

MB = 1024 * 1024


class Value(Protocol):
    """Anything the cache can hold: it must report its size in bytes."""
    def __len__(self) -> int: ...


OnEvicted = Optional[Callable[[str, Any], None]]


class TraceObject:
    """
    Size-only stand-in for a cached object.
    Traces carry byte counts but no payloads, so this is what gets stored
    when a request is replayed through a cache.
    """
    __slots__ = ("nbytes",)

    def __init__(self, nbytes: int):
        if nbytes < 0:
            raise ValueError("nbytes must be >= 0")
        self.nbytes = int(nbytes)

    def __len__(self) -> int:
        return self.nbytes

    def __repr__(self) -> str:
        return f"TraceObject({self.nbytes})"
