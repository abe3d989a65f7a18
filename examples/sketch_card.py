"""Example handdrawn model: a sketchy card with a divider under its heading."""

from __future__ import annotations

from PIL import ImageDraw

from handdrawn import EdgeInsets, HandDrawnContainer, HandDrawnDivider


def _heading(image, box):
    left, top, right, _ = box
    draw = ImageDraw.Draw(image)
    draw.text((left, top), "Sketchy!", fill=(30, 30, 30, 255))
    rule = HandDrawnDivider(color="#555555")
    rule.paint(image, origin=(left, top + 16), available=(right - left, 6))


def build():
    """Compose a bordered card; the CLI paints it onto the canvas."""

    return HandDrawnContainer(
        background_color="#fffdf5",
        stroke_color="black",
        irregularity=3.5,
        padding=EdgeInsets.all(20),
        child=_heading,
    )
