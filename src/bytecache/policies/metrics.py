# src/bytecache/policies/metrics.py
from ..simulator import CacheSim

EDGE_LAT_MS = 5
MISS_LAT_MS = {"480p": 60, "720p": 40, "1080p": 20}
DEFAULT_MISS_LAT_MS = 40


def replay_with_metrics(df, policy_ctor, cap_mb, key_func=lambda r: r.key,
                        size_attr="bytes", ts_attr="ts"):
    """
    Replay df and report hit ratio, share of bytes served from cache,
    average latency and evictions. Evictions are None when the policy
    has no on_evicted hook to count through.
    """
    sim = CacheSim(cap_mb, policy_ctor)
    hits = reqs = 0
    bytes_hit = bytes_total = 0
    lat_sum = 0.0

    evictions = None
    if hasattr(sim.policy, "on_evicted"):
        evictions = 0
        chained = sim.policy.on_evicted

        def _count(key, value):
            nonlocal evictions
            evictions += 1
            if chained is not None:
                chained(key, value)

        sim.policy.on_evicted = _count

    for row in df.itertuples(index=False):
        key = key_func(row)
        size = getattr(row, size_attr)
        hit = sim.policy.request(key, size, getattr(row, ts_attr, None))
        reqs += 1
        bytes_total += size
        if hit:
            hits += 1
            bytes_hit += size
            lat_sum += EDGE_LAT_MS
        else:
            lat_sum += MISS_LAT_MS.get(getattr(row, "ladder", None),
                                       DEFAULT_MISS_LAT_MS)

    return {
        "hit_ratio": hits / reqs if reqs else 0.0,
        "bytes_saved_pct": bytes_hit / bytes_total if bytes_total else 0.0,
        "avg_latency_ms": lat_sum / reqs if reqs else 0.0,
        "evictions": evictions,
    }
