from __future__ import annotations

from xml.etree import ElementTree

from handdrawn.geometry import Size
from handdrawn.helpers import HandDrawnHelpers
from handdrawn.io.svg import svg_document, write_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


def test_svg_document_contains_one_path_per_stroke():
    helpers = HandDrawnHelpers(seed=42, segments=6, irregularity=2.0)
    size = Size(120, 40)
    paths = [helpers.rect_border(size), helpers.line_horizontal(size)]
    root = ElementTree.fromstring(svg_document(paths, size, color="#336699", stroke_width=1.5, margin=4))
    assert root.get("viewBox") == "-4 -4 128 48"
    group = root.find(f"{SVG_NS}g")
    assert group.get("stroke") == "#336699"
    assert group.get("stroke-width") == "1.5"
    drawn = group.findall(f"{SVG_NS}path")
    assert len(drawn) == 2
    assert drawn[0].get("d").endswith("Z")
    assert not drawn[1].get("d").endswith("Z")


def test_write_svg(tmp_path):
    helpers = HandDrawnHelpers(seed=1, segments=4, irregularity=0.0)
    target = tmp_path / "line.svg"
    write_svg([helpers.line_horizontal((100, 10))], target, Size(100, 10))
    text = target.read_text()
    assert "M0.000 5.000" in text
    assert "L100.000 5.000" in text
