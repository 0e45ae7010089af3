# src/bytecache/simulator.py
import logging
from typing import Callable, Optional

import pandas as pd

from .policies.base import MB

log = logging.getLogger(__name__)


class CacheSim:
    """
    Replays a trace through a policy object that implements:
      request(key, size, ts) -> bool
      resize(new_cap)  (optional)
    """
    def __init__(self, capacity_mb: float, policy_ctor: Callable):
        if capacity_mb < 0:
            raise ValueError("capacity_mb must be >= 0")
        self.cap_bytes = int(capacity_mb * MB)
        self.policy    = policy_ctor(self.cap_bytes)

    def replay(self, df: pd.DataFrame, key_func: Optional[Callable] = None,
               size_attr: str = "bytes", ts_attr: str = "ts") -> float:
        key_func = key_func or (lambda r: r.key)
        hits = 0
        for row in df.itertuples(index=False):
            key = key_func(row)
            ts  = getattr(row, ts_attr, None)
            if self.policy.request(key, getattr(row, size_attr), ts):
                hits += 1
        if len(df) == 0:
            return 0.0
        ratio = hits / len(df)
        log.info("replay_done rows=%d hits=%d hit_ratio=%.4f cap_bytes=%d",
                 len(df), hits, ratio, self.cap_bytes)
        return ratio

    # optional helper for dynamic resize simulations
    def resize(self, new_cap_mb: float) -> None:
        if new_cap_mb < 0:
            raise ValueError("capacity_mb must be >= 0")
        new_cap = int(new_cap_mb * MB)
        self.policy.resize(new_cap)
        self.cap_bytes = new_cap
