from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np
import pyvista as pv


def _require_extent(value: float, label: str) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label} must be a number.") from exc
    if not math.isfinite(value):
        raise ValueError(f"{label} must be finite.")
    if value < 0:
        raise ValueError(f"{label} must be >= 0.")
    return value


@dataclass(frozen=True)
class Size:
    """Width and height of the box a stroke is laid out in. Zero is allowed."""

    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _require_extent(self.width, "width"))
        object.__setattr__(self, "height", _require_extent(self.height, "height"))

    @classmethod
    def coerce(cls, value: "Size | Sequence[float]") -> "Size":
        if isinstance(value, Size):
            return value
        width, height = value
        return cls(width, height)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0


@dataclass(frozen=True)
class EdgeInsets:
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    def __post_init__(self) -> None:
        for name in ("left", "top", "right", "bottom"):
            object.__setattr__(self, name, _require_extent(getattr(self, name), name))

    @classmethod
    def all(cls, value: float) -> "EdgeInsets":
        return cls(value, value, value, value)

    @classmethod
    def symmetric(cls, horizontal: float = 0.0, vertical: float = 0.0) -> "EdgeInsets":
        return cls(horizontal, vertical, horizontal, vertical)

    @classmethod
    def only(cls, *, left: float = 0.0, top: float = 0.0, right: float = 0.0, bottom: float = 0.0) -> "EdgeInsets":
        return cls(left, top, right, bottom)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def deflate(self, size: Size) -> Size:
        """Shrink ``size`` by the insets, never below zero."""
        return Size(max(size.width - self.horizontal, 0.0), max(size.height - self.vertical, 0.0))


@dataclass
class StrokePath:
    """Ordered 2D points of a stroke plus whether the stroke closes on itself."""

    points: np.ndarray
    closed: bool = False

    def __post_init__(self) -> None:
        self.points = np.asarray(self.points, dtype=float).reshape(-1, 2).copy()

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]], closed: bool = False) -> "StrokePath":
        pts = [np.asarray(p, dtype=float).reshape(2) for p in points]
        if len(pts) < 2:
            raise ValueError("StrokePath requires at least two points.")
        return cls(points=np.vstack(pts), closed=closed)

    def __len__(self) -> int:
        return int(self.points.shape[0])

    @property
    def start(self) -> np.ndarray:
        return self.points[0]

    @property
    def end(self) -> np.ndarray:
        return self.points[-1]

    def effective_points(self) -> np.ndarray:
        """Points as they are stroked: closed paths return to their first point."""
        pts = self.points
        if self.closed and len(pts) > 0 and not np.array_equal(pts[0], pts[-1]):
            pts = np.vstack([pts, pts[0]])
        return pts

    def bounds(self) -> tuple[float, float, float, float]:
        """Return ``(left, top, right, bottom)`` of the points."""
        if len(self.points) == 0:
            return (0.0, 0.0, 0.0, 0.0)
        mins = self.points.min(axis=0)
        maxs = self.points.max(axis=0)
        return (float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))

    @property
    def width(self) -> float:
        left, _, right, _ = self.bounds()
        return right - left

    @property
    def height(self) -> float:
        _, top, _, bottom = self.bounds()
        return bottom - top

    def length(self) -> float:
        pts = self.effective_points()
        if len(pts) < 2:
            return 0.0
        return float(np.linalg.norm(np.diff(pts, axis=0), axis=1).sum())

    def translated(self, dx: float, dy: float) -> "StrokePath":
        return StrokePath(self.points + np.array([dx, dy], dtype=float), closed=self.closed)

    def to_svg_d(self, precision: int = 3) -> str:
        """SVG path data: ``M`` to the first point, ``L`` to the rest, ``Z`` when closed."""
        if len(self.points) == 0:
            return ""
        commands = []
        for idx, (x, y) in enumerate(self.points):
            op = "M" if idx == 0 else "L"
            commands.append(f"{op}{x:.{precision}f} {y:.{precision}f}")
        if self.closed:
            commands.append("Z")
        return " ".join(commands)

    def to_polydata(self, z: float = 0.0) -> pv.PolyData:
        """Lift the stroke into a PyVista polyline lying in the plane ``z``."""
        pts = self.effective_points()
        pts3 = np.column_stack([pts, np.full((pts.shape[0], 1), float(z))])
        n_pts = len(pts3)
        lines = np.hstack(([n_pts], np.arange(n_pts)))
        return pv.PolyData(pts3, lines=lines)


__all__ = ["EdgeInsets", "Size", "StrokePath"]
