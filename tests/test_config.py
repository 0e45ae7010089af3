import json
from pathlib import Path

import pytest

from bytecache.config import CacheConfig


def test_defaults_are_unbounded() -> None:
    cfg = CacheConfig()
    assert cfg.max_bytes == 0
    assert cfg.build().max_bytes == 0


def test_from_mb() -> None:
    assert CacheConfig.from_mb(2).max_bytes == 2 * 1024 * 1024


def test_from_dict_ignores_unknown_keys() -> None:
    cfg = CacheConfig.from_dict({"max_bytes": 64, "colour": "red"})
    assert cfg.max_bytes == 64


def test_negative_budget_rejected() -> None:
    with pytest.raises(ValueError):
        CacheConfig(max_bytes=-1)


def test_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "cache.json"
    CacheConfig(max_bytes=128).save(path)
    assert json.loads(path.read_text(encoding="utf-8")) == {"max_bytes": 128}
    assert CacheConfig.load(path).max_bytes == 128


def test_load_missing_or_broken_file_gives_defaults(tmp_path: Path) -> None:
    assert CacheConfig.load(tmp_path / "absent.json") == CacheConfig()
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert CacheConfig.load(broken) == CacheConfig()
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")
    assert CacheConfig.load(listing) == CacheConfig()


def test_build_wires_callback() -> None:
    seen: list[str] = []
    cache = CacheConfig(max_bytes=3).build(lambda k, v: seen.append(k))
    cache.add("a", "1")
    cache.add("b", "2")
    assert seen == ["a"]


def test_load_invalid_values_gives_defaults(tmp_path: Path) -> None:
    negative = tmp_path / "negative.json"
    negative.write_text('{"max_bytes": -1}', encoding="utf-8")
    assert CacheConfig.load(negative) == CacheConfig()
    wrong_type = tmp_path / "wrong_type.json"
    wrong_type.write_text('{"max_bytes": "64"}', encoding="utf-8")
    assert CacheConfig.load(wrong_type) == CacheConfig()
