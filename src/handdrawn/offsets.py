"""Seeded, smoothed perpendicular offsets for jittered polylines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from .validation import validate_generation

RandomSource = Callable[[int], np.random.Generator]

_SEED_MASK = (1 << 64) - 1


def default_random_source(seed: int) -> np.random.Generator:
    """PCG64 generator; negative seeds wrap into the unsigned 64-bit range."""
    return np.random.default_rng(seed & _SEED_MASK)


@dataclass(frozen=True)
class GenerationConfig:
    """Everything that determines the jitter of one path-generation call."""

    seed: int
    segments: int
    irregularity: float

    def __post_init__(self) -> None:
        seed, segments, irregularity = validate_generation(self.seed, self.segments, self.irregularity)
        object.__setattr__(self, "seed", seed)
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "irregularity", irregularity)


class OffsetGenerator:
    """Produces smoothed random offsets for a polyline of ``segments + 1`` points.

    The random stream is seeded once, at construction. Every call to
    :meth:`smoothed_offsets` advances it by ``segments - 1`` draws, so two
    generators built from the same config return the same sequence of results
    call for call.
    """

    def __init__(self, config: GenerationConfig, random_source: RandomSource = default_random_source) -> None:
        self.config = config
        self._rng = random_source(config.seed)

    @property
    def segments(self) -> int:
        return self.config.segments

    @property
    def irregularity(self) -> float:
        return self.config.irregularity

    def raw_offsets(self) -> np.ndarray:
        """Unsmoothed jitter in ``[-irregularity/2, irregularity/2)`` with zero endpoints."""
        segments = self.config.segments
        raw = np.zeros(segments + 1, dtype=float)
        if segments > 1:
            draws = self._rng.random(segments - 1)
            raw[1:segments] = (draws - 0.5) * self.config.irregularity
        return raw

    def smoothed_offsets(self) -> np.ndarray:
        """Jitter softened by a single 3-point moving average over the raw values.

        Indices 0 and ``segments`` are always exactly ``0.0``; the interior
        points next to them average against that zero, which tapers the wobble
        toward the ends of the stroke.
        """
        raw = self.raw_offsets()
        smooth = raw.copy()
        smooth[1:-1] = (raw[:-2] + raw[1:-1] + raw[2:]) / 3.0
        return smooth


__all__ = ["GenerationConfig", "OffsetGenerator", "RandomSource", "default_random_source"]
