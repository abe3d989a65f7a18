from __future__ import annotations

import pytest

from handdrawn._color import _normalize_color, to_rgba8, to_svg_color, with_opacity


def test_named_and_hex_colors():
    assert _normalize_color("white") == (1.0, 1.0, 1.0, 1.0)
    assert to_rgba8("#ff000080") == (255, 0, 0, 128)


def test_tuple_colors_scale_from_255():
    assert _normalize_color((255, 0, 0)) == (1.0, 0.0, 0.0, 1.0)
    assert _normalize_color((0.0, 0.5, 1.0, 0.25)) == (0.0, 0.5, 1.0, 0.25)


@pytest.mark.parametrize("color", ["not-a-color", (1, 2), (-1, 0, 0)])
def test_invalid_colors(color):
    with pytest.raises(ValueError):
        _normalize_color(color)


def test_with_opacity_scales_alpha():
    assert with_opacity((0, 0, 0, 0.5), 0.5) == (0.0, 0.0, 0.0, 0.25)
    with pytest.raises(ValueError):
        with_opacity("black", 1.5)


def test_svg_color():
    assert to_svg_color("#00ff00") == ("#00ff00", 1.0)
