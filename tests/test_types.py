"""
test_types.py
-------------
Unit tests for the value types and path containers in flatpath.core.types.
"""

import math

import pytest

from flatpath.core import types as fp

P = fp.Point


# ---------------------------------------------------------------------------
# Point / Triangle
# ---------------------------------------------------------------------------

def test_point_arithmetic():
    a = P(1, 2)
    b = P(4, 6)
    assert b - a == P(3, 4)
    assert a + b == P(5, 8)
    assert 2 * a == P(2, 4)
    assert (b - a).length() == pytest.approx(5.0)
    assert a.distance(b) == pytest.approx(5.0)


def test_point_is_immutable():
    p = P(1, 2)
    with pytest.raises(AttributeError):
        p.x = 3


def test_normalized_zero_vector_stays_zero():
    assert P(0, 0).normalized() == P(0, 0)
    n = P(3, 4).normalized()
    assert n.x == pytest.approx(0.6)
    assert n.y == pytest.approx(0.8)


def test_triangle_area_ignores_winding():
    t = fp.Triangle(P(0, 0), P(4, 0), P(0, 3))
    assert t.area() == pytest.approx(6.0)
    assert t.signed_area() == pytest.approx(6.0)
    assert fp.Triangle(P(0, 0), P(0, 3), P(4, 0)).signed_area() == pytest.approx(-6.0)


# ---------------------------------------------------------------------------
# Color / styles
# ---------------------------------------------------------------------------

def test_color_from_argb_divides_each_byte():
    c = fp.Color.from_argb(0x80ff0040)
    assert c.a == pytest.approx(128 / 255)
    assert c.r == pytest.approx(1.0)
    assert c.g == pytest.approx(0.0)
    assert c.b == pytest.approx(64 / 255)


def test_color_with_alpha():
    assert fp.WHITE.with_alpha(0.5) == fp.Color(1.0, 1.0, 1.0, 0.5)


def test_stroke_style_hairline_widths():
    assert fp.StrokeStyle().is_hairline
    assert fp.StrokeStyle(width=0.0).is_hairline
    assert not fp.StrokeStyle(width=3.0).is_hairline
    assert not fp.StrokeStyle(width=0.5).is_hairline


def test_stroke_style_rejects_negative_width():
    with pytest.raises(ValueError):
        fp.StrokeStyle(width=-1.0)


# ---------------------------------------------------------------------------
# EllipseSpec
# ---------------------------------------------------------------------------

def test_ellipse_spec_from_bounds():
    spec = fp.EllipseSpec.from_bounds(P(100, 100), P(300, 200))
    assert spec.rx == 100
    assert spec.ry == 50
    assert spec.center == P(200, 150)
    assert spec.alpha_start == 0.0
    assert spec.alpha_end == pytest.approx(2 * math.pi)


def test_ellipse_point_at():
    spec = fp.EllipseSpec(P(10, 20), 5, 3)
    p = spec.point_at(math.pi / 2)
    assert p.x == pytest.approx(10)
    assert p.y == pytest.approx(23)


# ---------------------------------------------------------------------------
# SubPath / Path
# ---------------------------------------------------------------------------

def test_subpath_close_appends_first_point_once():
    sp = fp.SubPath([P(0, 0), P(10, 0), P(10, 10)])
    sp.close()
    sp.close()
    assert sp.closed
    assert list(sp) == [P(0, 0), P(10, 0), P(10, 10), P(0, 0)]


def test_empty_subpath_cannot_close():
    sp = fp.SubPath()
    sp.close()
    assert not sp.closed
    assert sp.last_point() is None


def test_current_subpath_only_for_open_trailing_subpath():
    path = fp.Path()
    assert path.current_subpath() is None

    sp = fp.SubPath([P(0, 0)])
    path.append(sp)
    assert path.current_subpath() is sp

    path.append(fp.Rect(P(0, 0), P(1, 1)))
    assert path.current_subpath() is None

    closed = fp.SubPath([P(0, 0), P(1, 0), P(1, 1)])
    closed.close()
    path.append(closed)
    assert path.current_subpath() is None
