from __future__ import annotations

import math
import numbers


class ValidationError(ValueError):
    """Raised when validation constraints are violated."""


class InvalidConfiguration(ValidationError):
    """Raised when jitter generation parameters are out of range."""


def _require_int(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfiguration(f"{label} must be an integer, got {value!r}.")
    return int(value)


def validate_generation(seed: object, segments: object, irregularity: object) -> tuple[int, int, float]:
    """Check jitter parameters and return them normalized to int/int/float."""

    seed = _require_int(seed, "seed")
    segments = _require_int(segments, "segments")
    if segments < 1:
        raise InvalidConfiguration(f"segments must be >= 1, got {segments}.")
    if isinstance(irregularity, bool) or not isinstance(irregularity, numbers.Real):
        raise InvalidConfiguration(f"irregularity must be a number, got {irregularity!r}.")
    irregularity = float(irregularity)
    if not math.isfinite(irregularity):
        raise InvalidConfiguration("irregularity must be finite.")
    if irregularity < 0:
        raise InvalidConfiguration(f"irregularity must be >= 0, got {irregularity}.")
    return seed, segments, irregularity
