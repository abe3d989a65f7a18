from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from PIL import ImageColor

RGBA = Tuple[float, float, float, float]
ColorLike = Sequence[float] | str


def _normalize_color(color: ColorLike) -> RGBA:
    """Return ``color`` as an RGBA tuple of floats in [0, 1]."""
    if isinstance(color, str):
        try:
            rgba = ImageColor.getcolor(color, "RGBA")
        except ValueError as exc:
            raise ValueError(f"Unknown color {color!r}.") from exc
        return tuple(c / 255.0 for c in rgba)  # type: ignore[return-value]

    arr = np.asarray(color, dtype=float).flatten()
    if arr.size not in (3, 4):
        raise ValueError("Color must be RGB or RGBA.")
    if not np.all(np.isfinite(arr)) or arr.min() < 0:
        raise ValueError("Color components must be finite and non-negative.")
    if arr.max() > 1.0:
        arr = arr / 255.0
    alpha = float(arr[3]) if arr.size == 4 else 1.0
    return (float(arr[0]), float(arr[1]), float(arr[2]), alpha)


def with_opacity(color: ColorLike, opacity: float) -> RGBA:
    """Scale the alpha of ``color`` by ``opacity``."""
    if not 0.0 <= opacity <= 1.0:
        raise ValueError("opacity must be within [0, 1].")
    r, g, b, a = _normalize_color(color)
    return (r, g, b, a * opacity)


def to_rgba8(color: ColorLike) -> Tuple[int, int, int, int]:
    """Pillow-ready 8-bit RGBA."""
    return tuple(int(round(c * 255)) for c in _normalize_color(color))  # type: ignore[return-value]


def to_svg_color(color: ColorLike) -> tuple[str, float]:
    """Return an ``#rrggbb`` string and the separate opacity SVG expects."""
    r, g, b, a = to_rgba8(color)
    return f"#{r:02x}{g:02x}{b:02x}", a / 255.0
