from __future__ import annotations

import pytest

from handdrawn.cache import PathCache
from handdrawn.geometry import Size, StrokePath
from handdrawn.offsets import GenerationConfig

CONFIG = GenerationConfig(seed=42, segments=4, irregularity=1.0)


def _path() -> StrokePath:
    return StrokePath.from_points([(0, 0), (1, 1)])


def test_cache_hit_and_miss_counters():
    cache = PathCache()
    key = (CONFIG, Size(10, 10), "rect")
    assert cache.get(key) is None
    path = _path()
    cache.set(key, path)
    assert cache.get(key) is path
    assert key in cache
    assert (cache.hits, cache.misses) == (1, 1)


def test_cache_key_changes_are_misses():
    cache = PathCache()
    cache.set((CONFIG, Size(10, 10), "rect"), _path())
    assert cache.get((CONFIG, Size(11, 10), "rect")) is None
    other = GenerationConfig(seed=43, segments=4, irregularity=1.0)
    assert cache.get((other, Size(10, 10), "rect")) is None


def test_cache_evicts_least_recently_used():
    cache = PathCache(max_size=2)
    keys = [(CONFIG, Size(n, n), "rect") for n in (1, 2, 3)]
    cache.set(keys[0], _path())
    cache.set(keys[1], _path())
    cache.get(keys[0])
    cache.set(keys[2], _path())
    assert keys[0] in cache
    assert keys[1] not in cache
    assert len(cache) == 2
    cache.clear()
    assert len(cache) == 0


def test_cache_requires_positive_size():
    with pytest.raises(ValueError):
        PathCache(max_size=0)
