from __future__ import annotations

import numpy as np
import pytest

from handdrawn.geometry import Size
from handdrawn.helpers import HandDrawnHelpers
from handdrawn.offsets import GenerationConfig
from handdrawn.validation import InvalidConfiguration


def _helpers(seed=42, segments=24, irregularity=3.0) -> HandDrawnHelpers:
    return HandDrawnHelpers(seed=seed, segments=segments, irregularity=irregularity)


def test_line_horizontal_spans_full_width():
    path = _helpers().line_horizontal(Size(300, 10))
    left, _, right, _ = path.bounds()
    assert not path.closed
    assert len(path) == 25
    assert np.isclose(left, 0.0)
    assert np.isclose(right, 300.0)
    assert path.length() > 0


def test_line_horizontal_endpoints_pinned_exactly():
    path = _helpers(segments=7, irregularity=5.0).line_horizontal(Size(100.1, 10))
    assert tuple(path.start) == (0.0, 5.0)
    assert tuple(path.end) == (100.1, 5.0)


def test_line_horizontal_straight_with_zero_irregularity():
    path = _helpers(seed=42, segments=24, irregularity=0.0).line_horizontal(Size(200, 10))
    assert np.allclose(path.points[:, 1], 5.0)
    assert tuple(path.start) == (0.0, 5.0)
    assert tuple(path.end) == (200.0, 5.0)
    assert np.allclose(np.diff(path.points[:, 0]), 200.0 / 24)


def test_line_vertical_spans_full_height():
    path = _helpers().line_vertical(Size(10, 400))
    _, top, _, bottom = path.bounds()
    assert not path.closed
    assert np.isclose(top, 0.0)
    assert np.isclose(bottom, 400.0)
    assert tuple(path.end) == (5.0, 400.0)


def test_line_vertical_jitters_horizontally():
    path = _helpers(irregularity=4.0).line_vertical((10, 200))
    assert np.all(np.diff(path.points[:, 1]) > 0)
    assert not np.allclose(path.points[:, 0], 5.0)
    assert np.all(np.abs(path.points[:, 0] - 5.0) < 2.0)


def test_rect_border_is_closed_with_four_edges():
    helpers = _helpers(segments=10)
    path = helpers.rect_border(Size(200, 100))
    assert path.closed
    assert len(path) == 4 * 10 + 1
    assert np.allclose(path.start, [0.0, 0.0])
    assert np.allclose(path.end, [0.0, 0.0])


def test_rect_border_bounds_approximate_size():
    path = _helpers(irregularity=2.0).rect_border(Size(250, 150))
    assert abs(path.width - 250) < 5
    assert abs(path.height - 150) < 5


def test_rect_border_edges_follow_their_nominal_lines():
    size = Size(120, 80)
    segments = 6
    path = _helpers(segments=segments, irregularity=0.0).rect_border(size)
    pts = path.points
    top = pts[0 : segments + 1]
    right = pts[segments : 2 * segments + 1]
    bottom = pts[2 * segments : 3 * segments + 1]
    left = pts[3 * segments :]
    assert np.allclose(top[:, 1], 0.0)
    assert np.allclose(right[:, 0], 120.0)
    assert np.allclose(bottom[:, 1], 80.0)
    assert np.allclose(left[:, 0], 0.0)
    assert np.all(np.diff(top[:, 0]) > 0)
    assert np.all(np.diff(bottom[:, 0]) < 0)


def test_rect_border_uses_offsets_in_top_right_bottom_left_order():
    segments = 5
    reference = _helpers(seed=3, segments=segments, irregularity=6.0)
    top, right, bottom, left = (reference.smoothed_offsets() for _ in range(4))

    pts = _helpers(seed=3, segments=segments, irregularity=6.0).rect_border(Size(50, 40)).points
    assert np.allclose(pts[1 : segments + 1, 1], top[1:])
    assert np.allclose(pts[segments + 1 : 2 * segments + 1, 0] - 50, right[1:])
    assert np.allclose(pts[2 * segments + 1 : 3 * segments + 1, 1] - 40, bottom[1:])
    assert np.allclose(pts[3 * segments + 1 :, 0], left[1:])


def test_rect_border_is_deterministic():
    a = _helpers(seed=7).rect_border(Size(100, 100))
    b = _helpers(seed=7).rect_border(Size(100, 100))
    assert np.array_equal(a.points, b.points)
    assert a.bounds() == b.bounds()


def test_rect_border_advances_stream_by_four_sequences():
    h1 = _helpers(seed=42, segments=10)
    h1.rect_border(Size(100, 100))
    after_rect = h1.smoothed_offsets()

    h2 = _helpers(seed=42, segments=10)
    before_rect = h2.smoothed_offsets()
    assert not np.array_equal(after_rect, before_rect)

    h3 = _helpers(seed=42, segments=10)
    for _ in range(4):
        h3.smoothed_offsets()
    assert np.array_equal(after_rect, h3.smoothed_offsets())


def test_lines_are_deterministic():
    size = Size(180, 30)
    assert np.array_equal(_helpers(seed=5).line_horizontal(size).points, _helpers(seed=5).line_horizontal(size).points)
    assert np.array_equal(_helpers(seed=5).line_vertical(size).points, _helpers(seed=5).line_vertical(size).points)


def test_zero_size_gives_coincident_points():
    helpers = _helpers(irregularity=0.0)
    border = helpers.rect_border(Size(0, 0))
    assert np.allclose(border.points, 0.0)
    line = helpers.line_horizontal(Size(0, 0))
    assert np.allclose(line.points, 0.0)


def test_zero_size_with_jitter_does_not_raise():
    helpers = _helpers(irregularity=3.0)
    for build in (helpers.line_horizontal, helpers.line_vertical, helpers.rect_border):
        path = build(Size(0, 0))
        assert np.all(np.isfinite(path.points))


def test_single_segment_shapes():
    helpers = _helpers(segments=1, irregularity=10.0)
    assert np.array_equal(helpers.line_horizontal(Size(10, 4)).points, [[0.0, 2.0], [10.0, 2.0]])
    border = helpers.rect_border(Size(10, 4))
    assert np.array_equal(border.points, [[0, 0], [10, 0], [10, 4], [0, 4], [0, 0]])


def test_invalid_segments_propagate():
    with pytest.raises(InvalidConfiguration):
        HandDrawnHelpers(seed=42, segments=0, irregularity=3.0)


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        _helpers().line_horizontal(Size(-1, 10))


def test_from_config_matches_direct_construction():
    config = GenerationConfig(seed=8, segments=12, irregularity=2.5)
    a = HandDrawnHelpers.from_config(config)
    b = HandDrawnHelpers(seed=8, segments=12, irregularity=2.5)
    assert a.config == config
    assert np.array_equal(a.smoothed_offsets(), b.smoothed_offsets())


def test_build_dispatches_by_name():
    size = Size(60, 20)
    assert np.array_equal(_helpers().build("rect", size).points, _helpers().rect_border(size).points)
    assert np.array_equal(_helpers().build("vertical", size).points, _helpers().line_vertical(size).points)
    with pytest.raises(ValueError):
        _helpers().build("circle", size)


def test_custom_shape_from_raw_offsets():
    helpers = _helpers(segments=16)
    size = Size(100, 50)
    offsets = helpers.smoothed_offsets()
    t = np.linspace(0.0, 1.0, helpers.segments + 1)
    xs = size.width * t
    ys = size.height * (1 - t) + offsets
    assert np.isclose(ys[0], size.height)
    assert np.isclose(ys[-1], 0.0)
    assert np.isclose(xs[-1], size.width)
