# src/bytecache/config.py
# Budget settings from a dict, a JSON file or a size in megabytes.
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .policies.base import MB, OnEvicted
from .policies.lru import LRUCache

log = logging.getLogger(__name__)


@dataclass
class CacheConfig:
    # 0 disables the byte limit.
    max_bytes: int = 0

    def __post_init__(self) -> None:
        if self.max_bytes < 0:
            raise ValueError("max_bytes must be >= 0")

    def to_dict(self) -> dict[str, Any]:
        return {"max_bytes": self.max_bytes}

    @classmethod
    def from_mb(cls, mb: float) -> "CacheConfig":
        return cls(max_bytes=int(mb * MB))

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CacheConfig":
        known = {k: v for k, v in raw.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    @classmethod
    def load(cls, path: Path) -> "CacheConfig":
        path = Path(path)
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("config_unreadable path=%s error=%s", path, exc)
            return cls()
        if not isinstance(data, dict):
            return cls()
        try:
            return cls.from_dict(data)
        except (TypeError, ValueError) as exc:
            log.warning("config_invalid path=%s error=%s", path, exc)
            return cls()

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    def build(self, on_evicted: OnEvicted = None) -> LRUCache:
        return LRUCache(self.max_bytes, on_evicted)
