# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Arc-corner solver: replaces a sharp corner with a tangent circular fillet.

Given the corner ``prev → vertex → next`` and a radius, the fillet circle
touches both legs. With ``θ`` the angle between the legs:

- the tangent points lie ``r / tan(θ/2)`` from the vertex along each leg
- the center lies ``r / sin(θ/2)`` from the vertex along the bisector

The arc runs from the tangent point on the incoming leg to the one on the
outgoing leg, always the short way round.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..core import types as fp
from ..core.error import DegenerateCornerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CornerArc:
    center: fp.Point
    radius: float
    t1: fp.Point                # tangent point on the incoming leg
    t2: fp.Point                # tangent point on the outgoing leg
    start_angle: float          # radians, center → t1
    sweep: float                # signed radians, negative is clockwise

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep

    @property
    def length(self) -> float:
        return abs(self.sweep) * self.radius


def solve_corner(prev: fp.Point, vertex: fp.Point, next: fp.Point,
                 radius: float) -> CornerArc:
    """
    Compute the fillet circle for the corner at ``vertex``.

    Raises:
        DegenerateCornerError: non-positive radius, a zero-length leg, or
            parallel/anti-parallel legs (``tan(θ/2)`` is 0 or infinite).
    """
    if not radius > 0:
        raise DegenerateCornerError(vertex, f"radius {radius} is not positive")

    # Vectors FROM the vertex toward the neighbouring points
    u1 = prev - vertex
    u2 = next - vertex
    if u1.length() < fp.EPSILON or u2.length() < fp.EPSILON:
        raise DegenerateCornerError(vertex, "zero-length leg")
    u1 = u1.normalized()
    u2 = u2.normalized()

    cross = u1.cross(u2)
    if abs(cross) < fp.COLLINEAR_EPSILON:
        raise DegenerateCornerError(vertex, "legs are collinear")

    dot = max(-1.0, min(1.0, u1.dot(u2)))
    half_angle = math.acos(dot) / 2.0

    dist_to_tangent = radius / math.tan(half_angle)
    dist_to_center = radius / math.sin(half_angle)

    bisector = (u1 + u2).normalized()
    center = vertex + bisector * dist_to_center
    t1 = vertex + u1 * dist_to_tangent
    t2 = vertex + u2 * dist_to_tangent

    start_angle = math.atan2(t1.y - center.y, t1.x - center.x)
    end_angle = math.atan2(t2.y - center.y, t2.x - center.x)
    sweep = end_angle - start_angle

    # The arc turns against the path: a left turn (cross > 0) is swept
    # clockwise, a right turn counter-clockwise.
    if cross > 0:
        if sweep > 0:
            sweep -= fp.TWO_PI
    else:
        if sweep < 0:
            sweep += fp.TWO_PI

    return CornerArc(center, radius, t1, t2, start_angle, sweep)


def segment_count(arc: CornerArc) -> int:
    """About one segment per ARC_SEGMENT_LENGTH units of arc, never fewer than ARC_MIN_SEGMENTS."""
    return max(fp.ARC_MIN_SEGMENTS, round(arc.length / fp.ARC_SEGMENT_LENGTH))


def arc_points(arc: CornerArc) -> list[fp.Point]:
    """Points from ``t1`` to ``t2`` inclusive; the end points are exact."""
    n = segment_count(arc)
    points = [arc.t1]
    for i in range(1, n):
        a = arc.start_angle + arc.sweep * i / n
        points.append(fp.Point(arc.center.x + arc.radius * math.cos(a),
                               arc.center.y + arc.radius * math.sin(a)))
    points.append(arc.t2)
    return points


def round_corner(prev: fp.Point, vertex: fp.Point, next: fp.Point,
                 radius: float) -> list[fp.Point]:
    """
    Points tracing the fillet that replaces the corner at ``vertex``.

    Returns an empty list when the corner is degenerate; the caller decides
    what to draw instead.
    """
    try:
        arc = solve_corner(prev, vertex, next, radius)
    except DegenerateCornerError as exc:
        logger.debug("%s", exc)
        return []
    return arc_points(arc)
