"""
Tests for the flattened gore pattern and the top view layout.
"""

import math

import numpy as np
import pytest

from pcm.errors import InvalidParameter
from pcm.pattern import (
    CurveKind,
    PatternPoint,
    generate_gore_panel,
    gore_dimensions,
    pattern_curve,
    top_view_layout,
)


def _curve(points, kind):
    return [p for p in points if p.kind is kind]


@pytest.fixture
def panel():
    return generate_gore_panel(20.0, 1.0, 8, 0.5)


# ============================================================================
# Shape of the output
# ============================================================================

def test_point_count(panel):
    assert len(panel) == 2 * 51 + 1
    assert len(_curve(panel, CurveKind.MAIN_OUTLINE)) == 51
    assert len(_curve(panel, CurveKind.SEAM_OFFSET)) == 51
    assert len(_curve(panel, CurveKind.REFERENCE_LABEL)) == 1


def test_points_are_interleaved_then_reference(panel):
    kinds = [p.kind for p in panel]
    assert kinds[:-1] == [CurveKind.MAIN_OUTLINE, CurveKind.SEAM_OFFSET] * 51
    assert kinds[-1] is CurveKind.REFERENCE_LABEL


def test_reference_point(panel):
    ref = panel[-1]
    assert (ref.x, ref.y) == (0.0, 0.0)
    # pi * 1 ft / 8 cells
    assert ref.label == "Top Width: 0.39"
    assert ref.value == 0.39
    assert all(p.label is None for p in panel[:-1])


def test_coordinates_are_rounded(panel):
    for p in panel:
        assert round(p.x, 2) == p.x
        assert round(p.y, 2) == p.y


def test_same_inputs_same_pattern():
    assert generate_gore_panel(20.0, 1.0, 8, 0.5) == generate_gore_panel(20.0, 1.0, 8, 0.5)


# ============================================================================
# Outline geometry
# ============================================================================

def test_outline_endpoints_and_peak(panel):
    main = _curve(panel, CurveKind.MAIN_OUTLINE)
    height = (20.0 - 1.0) / 2
    assert main[0].y == pytest.approx(0.0, abs=0.005)
    assert main[-1].y == pytest.approx(0.0, abs=0.005)
    ys = [p.y for p in main]
    assert int(np.argmax(ys)) == 25
    assert max(ys) == pytest.approx(height, abs=0.005)


def test_outline_runs_along_bottom_width(panel):
    main = _curve(panel, CurveKind.MAIN_OUTLINE)
    width_bottom = math.pi * 20.0 / 8
    assert main[0].x == 0.0
    assert main[-1].x == pytest.approx(width_bottom, abs=0.005)
    xs = [p.x for p in main]
    assert all(b > a for a, b in zip(xs, xs[1:]))


@pytest.mark.parametrize("seam", [0.25, 0.5, 1.0])
def test_seam_offset_distance(seam):
    points = generate_gore_panel(20.0, 1.0, 8, seam)
    main = _curve(points, CurveKind.MAIN_OUTLINE)
    offset = _curve(points, CurveKind.SEAM_OFFSET)
    for m, s in zip(main, offset):
        assert math.hypot(s.x - m.x, s.y - m.y) == pytest.approx(seam, abs=0.01)


def test_seam_offset_points_outward_at_start(panel):
    main = _curve(panel, CurveKind.MAIN_OUTLINE)
    offset = _curve(panel, CurveKind.SEAM_OFFSET)
    # Rising edge: the left-hand normal points up and back
    assert offset[0].x < main[0].x
    assert offset[0].y > main[0].y
    # Peak: tangent is horizontal, so the offset is straight up
    assert offset[25].x == pytest.approx(main[25].x, abs=0.01)
    assert offset[25].y == pytest.approx(main[25].y + 0.5, abs=0.01)


def test_zero_seam_allowance_collapses_onto_outline():
    points = generate_gore_panel(20.0, 1.0, 8, 0.0)
    main = _curve(points, CurveKind.MAIN_OUTLINE)
    offset = _curve(points, CurveKind.SEAM_OFFSET)
    assert [(p.x, p.y) for p in offset] == [(p.x, p.y) for p in main]


def test_vent_not_smaller_than_main_inverts_bulge():
    points = generate_gore_panel(1.0, 2.0, 8, 0.0)
    main = _curve(points, CurveKind.MAIN_OUTLINE)
    assert min(p.y for p in main) == pytest.approx(-0.5, abs=0.005)


def test_numpy_integer_cell_count():
    assert generate_gore_panel(20.0, 1.0, np.int64(8), 0.5) == generate_gore_panel(20.0, 1.0, 8, 0.5)


# ============================================================================
# Invalid input
# ============================================================================

@pytest.mark.parametrize("cells", [0, -3])
def test_cell_count_below_one(cells):
    with pytest.raises(InvalidParameter):
        generate_gore_panel(20.0, 1.0, cells, 0.5)


@pytest.mark.parametrize("cells", [2.5, True, "8"])
def test_cell_count_must_be_integer(cells):
    with pytest.raises(InvalidParameter):
        generate_gore_panel(20.0, 1.0, cells, 0.5)


@pytest.mark.parametrize("main, vent, seam", [(-20.0, 1.0, 0.5), (20.0, -1.0, 0.5), (20.0, 1.0, -0.5)])
def test_negative_lengths(main, vent, seam):
    with pytest.raises(InvalidParameter):
        generate_gore_panel(main, vent, 8, seam)


# ============================================================================
# Helpers
# ============================================================================

def test_gore_dimensions():
    dims = gore_dimensions(20.0, 1.0, 8)
    assert dims["width_bottom_ft"] == pytest.approx(math.pi * 20.0 / 8)
    assert dims["width_top_ft"] == pytest.approx(math.pi / 8)
    assert dims["height_ft"] == pytest.approx(9.5)


def test_pattern_curve_frame(panel):
    df = pattern_curve(panel, CurveKind.SEAM_OFFSET)
    assert list(df.columns) == ["x", "y"]
    assert len(df) == 51
    assert df.iloc[0]["x"] == panel[1].x


def test_pattern_point_is_immutable():
    p = PatternPoint(1.0, 2.0, CurveKind.MAIN_OUTLINE)
    with pytest.raises(AttributeError):
        p.x = 3.0


def test_top_view_layout():
    layout = top_view_layout(20.0, 1.0, 8)
    seams = layout["seams"]
    assert layout["radius"] == 100.0
    assert layout["vent_radius"] == pytest.approx(5.0)
    assert len(seams) == 8
    assert list(seams["gore"]) == list(range(1, 9))
    first = seams.iloc[0]
    assert first["angle_deg"] == 0.0
    assert (first["x_outer"], first["y_outer"]) == pytest.approx((100.0, 0.0))
    assert (first["x_inner"], first["y_inner"]) == pytest.approx((5.0, 0.0))
    assert (first["x_label"], first["y_label"]) == pytest.approx((80.0, 0.0))
    assert seams.iloc[2]["y_outer"] == pytest.approx(100.0)


def test_top_view_custom_radius():
    layout = top_view_layout(30.0, 3.0, 12, radius=10.0)
    assert layout["vent_radius"] == pytest.approx(1.0)
    assert np.allclose(np.hypot(layout["seams"]["x_outer"], layout["seams"]["y_outer"]), 10.0)


def test_top_view_invalid():
    with pytest.raises(InvalidParameter):
        top_view_layout(20.0, 1.0, 0)
    with pytest.raises(InvalidParameter):
        top_view_layout(0.0, 0.0, 8)
