from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from .geometry import Size, StrokePath
from .offsets import GenerationConfig, OffsetGenerator, RandomSource, default_random_source

SHAPES = ("horizontal", "vertical", "rect")


class HandDrawnHelpers:
    """Builds jittered strokes sized to a box.

    All shapes draw from one :class:`OffsetGenerator`, so the jitter is fully
    determined by ``seed``, ``segments`` and ``irregularity`` plus the order of
    calls on this instance. Build a fresh instance to start the stream over.

    >>> helpers = HandDrawnHelpers(seed=42, segments=24, irregularity=3.5)
    >>> border = helpers.rect_border(Size(200, 100))
    """

    def __init__(
        self,
        seed: int,
        segments: int,
        irregularity: float,
        *,
        random_source: RandomSource = default_random_source,
    ) -> None:
        self.config = GenerationConfig(seed=seed, segments=segments, irregularity=irregularity)
        self._generator = OffsetGenerator(self.config, random_source=random_source)

    @classmethod
    def from_config(
        cls,
        config: GenerationConfig,
        *,
        random_source: RandomSource = default_random_source,
    ) -> "HandDrawnHelpers":
        return cls(config.seed, config.segments, config.irregularity, random_source=random_source)

    @property
    def seed(self) -> int:
        return self.config.seed

    @property
    def segments(self) -> int:
        return self.config.segments

    @property
    def irregularity(self) -> float:
        return self.config.irregularity

    def smoothed_offsets(self) -> np.ndarray:
        """Raw access to the offsets, for shapes the built-ins don't cover."""
        return self._generator.smoothed_offsets()

    def line_horizontal(self, size: Size | Sequence[float]) -> StrokePath:
        """Left-to-right stroke centred at ``height / 2``, ending exactly on the right edge."""
        size = Size.coerce(size)
        offs = self.smoothed_offsets()
        segments = self.segments
        y0 = size.height / 2
        dx = size.width / segments
        xs = dx * np.arange(segments + 1, dtype=float)
        ys = y0 + offs
        xs[-1] = size.width
        ys[-1] = y0
        return StrokePath(np.column_stack([xs, ys]), closed=False)

    def line_vertical(self, size: Size | Sequence[float]) -> StrokePath:
        """Top-to-bottom stroke centred at ``width / 2``, ending exactly on the bottom edge."""
        size = Size.coerce(size)
        offs = self.smoothed_offsets()
        segments = self.segments
        x0 = size.width / 2
        dy = size.height / segments
        xs = x0 + offs
        ys = dy * np.arange(segments + 1, dtype=float)
        xs[-1] = x0
        ys[-1] = size.height
        return StrokePath(np.column_stack([xs, ys]), closed=False)

    def rect_border(self, size: Size | Sequence[float]) -> StrokePath:
        """Closed border stitched from four independently jittered edges.

        Offsets are drawn top, right, bottom, left. Corners are left unmitred,
        so adjacent edges wobble independently where they meet.
        """
        size = Size.coerce(size)
        top = self.smoothed_offsets()
        right = self.smoothed_offsets()
        bottom = self.smoothed_offsets()
        left = self.smoothed_offsets()

        segments = self.segments
        w, h = size.width, size.height
        dx = w / segments
        dy = h / segments
        steps = np.arange(1, segments + 1, dtype=float)
        idx = slice(1, None)

        edges = [
            np.array([[0.0, top[0]]]),
            # top: left -> right, jitter along y
            np.column_stack([dx * steps, top[idx]]),
            # right: top -> bottom, jitter along x
            np.column_stack([w + right[idx], dy * steps]),
            # bottom: right -> left, jitter along y
            np.column_stack([w - dx * steps, h + bottom[idx]]),
            # left: bottom -> top, jitter along x
            np.column_stack([left[idx], h - dy * steps]),
        ]
        return StrokePath(np.vstack(edges), closed=True)

    def build(self, shape: str, size: Size | Sequence[float]) -> StrokePath:
        """Dispatch to a built-in shape by name."""
        builders: dict[str, Callable[[Size | Sequence[float]], StrokePath]] = {
            "horizontal": self.line_horizontal,
            "vertical": self.line_vertical,
            "rect": self.rect_border,
        }
        try:
            builder = builders[shape]
        except KeyError as exc:
            raise ValueError(f"Unknown shape {shape!r}; expected one of {', '.join(SHAPES)}.") from exc
        return builder(size)


PathBuilder = Callable[[Size, HandDrawnHelpers], StrokePath]

__all__ = ["HandDrawnHelpers", "PathBuilder", "SHAPES"]
