"""Divider and container compositions over :class:`HandDrawnLinePainter`."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Callable, Sequence

from PIL import Image, ImageDraw

from . import defaults
from ._color import ColorLike, to_rgba8, with_opacity
from .geometry import EdgeInsets, Size
from .painter import HandDrawnLinePainter

Box = tuple[float, float, float, float]
ChildPainter = Callable[[Image.Image, Box], None]

DIRECTIONS = ("horizontal", "vertical")


def _blank(size: Size, background: ColorLike | None) -> Image.Image:
    fill = (0, 0, 0, 0) if background is None else to_rgba8(background)
    return Image.new("RGBA", (max(int(round(size.width)), 1), max(int(round(size.height)), 1)), fill)


def _line_horizontal(size, h):
    return h.line_horizontal(size)


def _line_vertical(size, h):
    return h.line_vertical(size)


def _rect_border(size, h):
    return h.rect_border(size)


@dataclass(frozen=True)
class HandDrawnDivider:
    """A horizontal or vertical separator drawn with a subtle wobble.

    The stroke gets a cross-axis band of ``thickness * 4`` so the jitter has
    room without clipping. ``length`` defaults to whatever main-axis extent
    is available; ``indent`` and ``end_indent`` trim the stroke at each end.
    """

    direction: str = "horizontal"
    color: ColorLike = (0.0, 0.0, 0.0, 0.54)
    thickness: float = defaults.DIVIDER_THICKNESS
    irregularity: float = defaults.DIVIDER_IRREGULARITY
    segments: int = defaults.DIVIDER_SEGMENTS
    seed: int = defaults.SEED
    length: float | None = None
    indent: float = 0.0
    end_indent: float = 0.0
    _painter: HandDrawnLinePainter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.direction not in DIRECTIONS:
            raise ValueError(f"direction must be one of {', '.join(DIRECTIONS)}.")
        if self.indent < 0 or self.end_indent < 0:
            raise ValueError("indent and end_indent must be >= 0.")
        painter = HandDrawnLinePainter(
            color=self.color,
            build_path=_line_horizontal if self.is_horizontal else _line_vertical,
            stroke_width=self.thickness,
            irregularity=self.irregularity,
            seed=self.seed,
            segments=self.segments,
        )
        object.__setattr__(self, "_painter", painter)
        # smoothed jitter stays within +-irregularity/2 of the centre line
        if self.irregularity / 2 + self.thickness / 2 > self.cross_axis_extent / 2:
            warnings.warn(
                f"Divider irregularity {self.irregularity:.3g} exceeds its {self.cross_axis_extent:.3g}px band; "
                "the stroke may be clipped.",
                RuntimeWarning,
            )

    @property
    def is_horizontal(self) -> bool:
        return self.direction == "horizontal"

    @property
    def cross_axis_extent(self) -> float:
        return self.thickness * 4

    @property
    def painter(self) -> HandDrawnLinePainter:
        return self._painter

    def layout(self, available: Size | Sequence[float]) -> tuple[tuple[float, float], Size]:
        """Return the stroke box origin and size inside ``available``."""
        available = Size.coerce(available)
        main = available.width if self.is_horizontal else available.height
        if self.length is not None:
            main = min(float(self.length), main)
        extent = max(main - self.indent - self.end_indent, 0.0)
        if self.is_horizontal:
            return (self.indent, 0.0), Size(extent, self.cross_axis_extent)
        return (0.0, self.indent), Size(self.cross_axis_extent, extent)

    def paint(self, image: Image.Image, origin: Sequence[float] = (0.0, 0.0), available=None) -> None:
        if available is None:
            available = Size(*image.size)
        (ox, oy), size = self.layout(available)
        self._painter.paint(image, origin=(origin[0] + ox, origin[1] + oy), size=size)

    def render(self, available: Size | Sequence[float], background: ColorLike | None = None) -> Image.Image:
        available = Size.coerce(available)
        (ox, oy), size = self.layout(available)
        canvas = Size(ox + size.width, oy + size.height)
        image = _blank(canvas, background)
        self.paint(image, available=available)
        return image


@dataclass(frozen=True)
class HandDrawnContainer:
    """A filled box with a sketchy rectangular border drawn over its content.

    ``child`` is called with the image and the content box
    ``(left, top, right, bottom)`` after the background is filled and before
    the border is stroked.
    """

    background_color: ColorLike = "white"
    stroke_color: ColorLike = (0.0, 0.0, 0.0, 0.87)
    stroke_width: float = defaults.STROKE_WIDTH
    irregularity: float = defaults.IRREGULARITY
    padding: EdgeInsets = field(default_factory=lambda: EdgeInsets.all(defaults.CONTAINER_PADDING))
    border_opacity: float = defaults.BORDER_OPACITY
    segments: int = defaults.SEGMENTS
    seed: int = defaults.SEED
    child: ChildPainter | None = None
    _painter: HandDrawnLinePainter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not 0.0 <= self.border_opacity <= 1.0:
            raise ValueError("border_opacity must be within [0, 1].")
        painter = HandDrawnLinePainter(
            color=with_opacity(self.stroke_color, self.border_opacity),
            build_path=_rect_border,
            stroke_width=self.stroke_width,
            irregularity=self.irregularity,
            seed=self.seed,
            segments=self.segments,
        )
        object.__setattr__(self, "_painter", painter)

    @property
    def painter(self) -> HandDrawnLinePainter:
        return self._painter

    def layout(self, available: Size | Sequence[float]) -> tuple[Box, Size]:
        """Return the content box and the outer size of the container."""
        available = Size.coerce(available)
        inner = self.padding.deflate(available)
        box = (
            self.padding.left,
            self.padding.top,
            self.padding.left + inner.width,
            self.padding.top + inner.height,
        )
        return box, available

    def paint(self, image: Image.Image, origin: Sequence[float] = (0.0, 0.0), available=None) -> None:
        if available is None:
            available = Size(*image.size)
        (left, top, right, bottom), size = self.layout(available)
        ox, oy = float(origin[0]), float(origin[1])

        draw = ImageDraw.Draw(image, "RGBA")
        if size.width >= 1 and size.height >= 1:
            draw.rectangle((ox, oy, ox + size.width - 1, oy + size.height - 1), fill=to_rgba8(self.background_color))
        if self.child is not None:
            self.child(image, (ox + left, oy + top, ox + right, oy + bottom))
        if self.border_opacity > 0:
            self._painter.paint(image, origin=(ox, oy), size=size)

    def render(self, available: Size | Sequence[float], background: ColorLike | None = None) -> Image.Image:
        available = Size.coerce(available)
        image = _blank(available, background)
        self.paint(image, available=available)
        return image


__all__ = ["HandDrawnContainer", "HandDrawnDivider", "DIRECTIONS"]
