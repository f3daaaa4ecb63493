"""Tests for the affine transform helpers."""
import math

import pytest

from pcb_canvas.pcb import Matrix, fit_real_to_canvas, rotate_point


def test_identity_leaves_points_alone():
    assert Matrix.identity().apply(3.5, -2.0) == (3.5, -2.0)


def test_compose_applies_rightmost_first():
    """translate(10, 0) after scale(2) maps 1 -> 12, not 22."""
    m = Matrix.compose(Matrix.translate(10, 0), Matrix.scale(2))
    assert m.apply(1, 1) == (12, 2)


def test_scale_factor_reads_horizontal_component():
    m = Matrix.compose(Matrix.translate(5, 5), Matrix.scale(-4, 4))
    assert m.scale_factor == 4


def test_rotate_point_counterclockwise():
    x, y = rotate_point(1, 0, 90)
    assert x == pytest.approx(0, abs=1e-12)
    assert y == pytest.approx(1)


def test_rotate_point_zero_angle_is_exact():
    assert rotate_point(1.25, -3.5, 0) == (1.25, -3.5)


def test_fit_real_to_canvas_centers_and_flips():
    """A 10x10 mm box on a 200x100 canvas fits by height and flips y."""
    m = fit_real_to_canvas(0, 0, 10, 10, 200, 100)

    assert m.scale_factor == pytest.approx(10)
    assert m.apply(5, 5) == pytest.approx((100, 50))
    # Top-left in real space (y max) is top of canvas (y min)
    assert m.apply(0, 10) == pytest.approx((50, 0))


def test_fit_real_to_canvas_respects_padding():
    m = fit_real_to_canvas(-1, -1, 1, 1, 100, 100, padding=10)
    assert m.scale_factor == pytest.approx(40)
    assert m.apply(-1, 1) == pytest.approx((10, 10))


def test_fit_real_to_canvas_degenerate_box_is_finite():
    m = fit_real_to_canvas(2, 2, 2, 2, 100, 100)
    x, y = m.apply(2, 2)
    assert math.isfinite(x) and math.isfinite(y)
    assert (x, y) == pytest.approx((50, 50))
