from __future__ import annotations

from pathlib import Path
from typing import Iterable
from xml.sax.saxutils import quoteattr

from handdrawn._color import ColorLike, to_svg_color
from handdrawn.geometry import Size, StrokePath


def svg_document(
    paths: Iterable[StrokePath],
    size: Size,
    color: ColorLike = "black",
    stroke_width: float = 2.0,
    margin: float = 0.0,
) -> str:
    hex_color, opacity = to_svg_color(color)
    width = size.width + 2 * margin
    height = size.height + 2 * margin
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:g}" height="{height:g}" '
            f'viewBox="{-margin:g} {-margin:g} {width:g} {height:g}">'
        ),
        (
            f'  <g fill="none" stroke="{hex_color}" stroke-opacity="{opacity:.3g}" '
            f'stroke-width="{stroke_width:g}" stroke-linecap="round" stroke-linejoin="round">'
        ),
    ]
    for path in paths:
        lines.append(f"    <path d={quoteattr(path.to_svg_d())}/>")
    lines.append("  </g>")
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def write_svg(
    paths: Iterable[StrokePath],
    target: Path,
    size: Size,
    color: ColorLike = "black",
    stroke_width: float = 2.0,
    margin: float = 0.0,
) -> None:
    target = Path(target)
    target.write_text(svg_document(paths, size, color=color, stroke_width=stroke_width, margin=margin))
