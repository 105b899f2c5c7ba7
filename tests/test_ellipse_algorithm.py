"""
test_ellipse_algorithm.py
-------------------------
Unit tests for the ellipse sampler and its triangle fan.
"""

import math

import pytest

from flatpath.core import types as fp
from flatpath.operators import ellipse_algorithm

P = fp.Point


# ---------------------------------------------------------------------------
# 1. Sampling
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("rx, ry, center", [
    (10, 10, P(0, 0)),
    (100, 40, P(200, 150)),
    (3, 70, P(-5, 12)),
    (0.8, 0.6, P(1, 1)),
])
def test_full_turn_is_a_closed_ring(rx, ry, center):
    pts = ellipse_algorithm.sample(fp.EllipseSpec(center, rx, ry, 0.0, 2 * math.pi))
    assert len(pts) >= 3
    assert pts[-1].x == pytest.approx(pts[0].x, abs=1e-9)
    assert pts[-1].y == pytest.approx(pts[0].y, abs=1e-9)


def test_points_lie_on_the_ellipse():
    spec = fp.EllipseSpec(P(50, 60), 40, 25)
    for p in ellipse_algorithm.sample(spec):
        u = (p.x - 50) / 40
        v = (p.y - 60) / 25
        assert u * u + v * v == pytest.approx(1.0)


def test_arc_ends_exactly_on_end_angle():
    spec = fp.EllipseSpec(P(0, 0), 20, 20, math.pi, 1.5 * math.pi)
    pts = ellipse_algorithm.sample(spec)
    assert pts[0].x == pytest.approx(-20)
    assert pts[0].y == pytest.approx(0, abs=1e-9)
    assert pts[-1].x == pytest.approx(0, abs=1e-9)
    assert pts[-1].y == pytest.approx(-20)


def test_point_spacing_is_about_one_unit():
    spec = fp.EllipseSpec(P(0, 0), 50, 50)
    pts = ellipse_algorithm.sample(spec)
    gaps = [pts[i - 1].distance(pts[i]) for i in range(1, len(pts) - 1)]
    assert max(gaps) == pytest.approx(1.0, rel=0.01)


def test_point_count_grows_with_radius():
    counts_x = [len(ellipse_algorithm.sample(fp.EllipseSpec(P(0, 0), r, 10))) for r in range(1, 80)]
    counts_y = [len(ellipse_algorithm.sample(fp.EllipseSpec(P(0, 0), 10, r))) for r in range(1, 80)]
    for counts in (counts_x, counts_y):
        assert all(b >= a for a, b in zip(counts, counts[1:]))
    assert counts_x[-1] > counts_x[0]


def test_flat_ellipse_yields_end_points_only():
    spec = fp.EllipseSpec(P(10, 10), 0, 5, 0.0, math.pi)
    pts = ellipse_algorithm.sample(spec)
    assert len(pts) == 2
    assert pts[0] == spec.point_at(0.0)
    assert pts[1] == spec.point_at(math.pi)


def test_reversed_range_yields_nothing():
    assert ellipse_algorithm.sample(fp.EllipseSpec(P(0, 0), 5, 5, 1.0, 0.5)) == []


def test_angular_step_of_zero_perimeter_is_infinite():
    assert ellipse_algorithm.angular_step(0, 0) == math.inf


# ---------------------------------------------------------------------------
# 2. Fan
# ---------------------------------------------------------------------------

def test_fan_has_one_triangle_per_point_pair():
    spec = fp.EllipseSpec(P(5, 5), 30, 20)
    pts = ellipse_algorithm.sample(spec)
    tris = ellipse_algorithm.fan(spec)
    assert len(tris) == len(pts) - 1
    assert all(t.a == spec.center for t in tris)
    assert tris[0].b == pts[0]
    assert tris[-1].c == pts[-1]


def test_fan_covers_the_ellipse_area():
    spec = fp.EllipseSpec(P(0, 0), 50, 30)
    area = sum(t.area() for t in ellipse_algorithm.fan(spec))
    assert area == pytest.approx(math.pi * 50 * 30, rel=1e-3)


def test_fan_of_quarter_arc_is_a_sector():
    spec = fp.EllipseSpec(P(0, 0), 40, 40, 0.0, math.pi / 2)
    area = sum(t.area() for t in ellipse_algorithm.fan(spec))
    assert area == pytest.approx(math.pi * 40 * 40 / 4, rel=1e-3)


def test_fan_of_empty_sample_is_empty():
    assert ellipse_algorithm.fan(fp.EllipseSpec(P(0, 0), 5, 5, 2.0, 1.0)) == []
