"""Custom shape from raw offsets: a wobbly diagonal from bottom-left to top-right."""

from __future__ import annotations

import numpy as np

from handdrawn import HandDrawnLinePainter, StrokePath


def diagonal(size, helpers):
    offsets = helpers.smoothed_offsets()
    t = np.linspace(0.0, 1.0, helpers.segments + 1)
    xs = size.width * t
    ys = size.height * (1 - t) + offsets
    return StrokePath(np.column_stack([xs, ys]), closed=False)


def build():
    return [
        HandDrawnLinePainter(color="#1f6feb", build_path=diagonal, stroke_width=2.5, irregularity=6.0),
        HandDrawnLinePainter(color="black", build_path=lambda size, h: h.rect_border(size), irregularity=2.0),
    ]
