from __future__ import annotations

from collections import OrderedDict
from typing import Hashable, Tuple

from .geometry import Size, StrokePath
from .offsets import GenerationConfig

PathKey = Tuple[GenerationConfig, Size, Hashable]


class PathCache:
    """LRU memo of generated strokes keyed on ``(config, size, shape)``.

    Any change to the key (a new size, seed, segment count or irregularity)
    is a miss, so stale strokes are never returned.
    """

    def __init__(self, max_size: int = 128) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be positive.")
        self._max_size = max_size
        self._store: OrderedDict[PathKey, StrokePath] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def get(self, key: PathKey) -> StrokePath | None:
        if key not in self._store:
            self.misses += 1
            return None
        self.hits += 1
        self._store.move_to_end(key)
        return self._store[key]

    def set(self, key: PathKey, path: StrokePath) -> None:
        self._store[key] = path
        self._store.move_to_end(key)
        if len(self._store) > self._max_size:
            self._store.popitem(last=False)

    def clear(self) -> None:
        self._store.clear()
