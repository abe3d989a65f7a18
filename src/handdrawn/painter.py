from __future__ import annotations

from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from . import defaults
from ._color import ColorLike, _normalize_color, to_rgba8
from .cache import PathCache
from .geometry import Size, StrokePath
from .helpers import HandDrawnHelpers, PathBuilder
from .offsets import GenerationConfig


def stroke_path(
    image: Image.Image,
    path: StrokePath,
    color: ColorLike,
    stroke_width: float,
    origin: Sequence[float] = (0.0, 0.0),
) -> None:
    """Stroke ``path`` onto ``image`` with curved joins and round caps on open ends."""
    if len(path) == 0:
        return
    fill = to_rgba8(color)
    width = max(int(round(stroke_width)), 1)
    pts = path.effective_points() + np.asarray(origin, dtype=float).reshape(2)
    xy = [(float(x), float(y)) for x, y in pts]
    draw = ImageDraw.Draw(image, "RGBA")
    draw.line(xy, fill=fill, width=width, joint="curve")
    if not path.closed and width > 2:
        radius = stroke_width / 2.0
        for x, y in (xy[0], xy[-1]):
            draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=fill)


class HandDrawnLinePainter:
    """Strokes a hand-drawn path and remembers it between paints.

    ``build_path`` receives the target :class:`Size` and a fresh
    :class:`HandDrawnHelpers` configured with this painter's seed, segments and
    irregularity. The result is memoized in a :class:`PathCache`; pass a shared
    cache to reuse strokes across painters.

    >>> painter = HandDrawnLinePainter("black", lambda size, h: h.rect_border(size))
    """

    def __init__(
        self,
        color: ColorLike,
        build_path: PathBuilder,
        stroke_width: float = defaults.STROKE_WIDTH,
        irregularity: float = defaults.IRREGULARITY,
        seed: int = defaults.SEED,
        segments: int = defaults.SEGMENTS,
        cache: PathCache | None = None,
    ) -> None:
        if not stroke_width > 0:
            raise ValueError("stroke_width must be positive.")
        self.color = _normalize_color(color)
        self.build_path = build_path
        self.stroke_width = float(stroke_width)
        self._config = GenerationConfig(seed=seed, segments=segments, irregularity=irregularity)
        self._owns_cache = cache is None
        self.cache = cache if cache is not None else PathCache(max_size=8)

    @property
    def config(self) -> GenerationConfig:
        return self._config

    @property
    def irregularity(self) -> float:
        return self._config.irregularity

    @property
    def seed(self) -> int:
        return self._config.seed

    @property
    def segments(self) -> int:
        return self._config.segments

    def path_for(self, size: Size | Sequence[float]) -> StrokePath:
        size = Size.coerce(size)
        key = (self._config, size, self.build_path)
        path = self.cache.get(key)
        if path is None:
            helpers = HandDrawnHelpers.from_config(self._config)
            path = self.build_path(size, helpers)
            self.cache.set(key, path)
        return path

    def should_repaint(self, old: "HandDrawnLinePainter") -> bool:
        changed = (
            old.color != self.color
            or old.stroke_width != self.stroke_width
            or old.irregularity != self.irregularity
            or old.seed != self.seed
            or old.segments != self.segments
        )
        # shared caches are left intact
        if changed and self._owns_cache:
            self.cache.clear()
        return changed

    def paint(
        self,
        image: Image.Image,
        origin: Sequence[float] = (0.0, 0.0),
        size: Size | Sequence[float] | None = None,
    ) -> StrokePath:
        """Stroke this painter's path into ``image``; ``size`` defaults to the image size."""
        if size is None:
            size = Size(*image.size)
        path = self.path_for(size)
        stroke_path(image, path, self.color, self.stroke_width, origin=origin)
        return path


__all__ = ["HandDrawnLinePainter", "stroke_path"]
