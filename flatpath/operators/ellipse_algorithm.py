# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Ellipse sampler: converts an elliptical arc into points and fan triangles.

Sample density follows the approximate perimeter
``P = 2π·sqrt((rx² + ry²) / 2)``: the angular step is ``2π / P``, which gives
about one point per unit of arc length whatever the ellipse size.
"""

from __future__ import annotations

import logging
import math

from ..core import types as fp

logger = logging.getLogger(__name__)


def approximate_perimeter(rx: float, ry: float) -> float:
    return fp.TWO_PI * math.sqrt((rx * rx + ry * ry) / 2.0)


def angular_step(rx: float, ry: float) -> float:
    """Angle between consecutive samples. Undefined (inf) for a zero perimeter."""
    perimeter = approximate_perimeter(rx, ry)
    if perimeter < fp.EPSILON:
        return math.inf
    return fp.TWO_PI / perimeter


def sample(spec: fp.EllipseSpec) -> list[fp.Point]:
    """
    Sample the arc of ``spec`` from ``alpha_start`` to ``alpha_end``.

    Points are emitted at ``alpha_start + k·Δα`` while inside the range; the
    end angle itself is appended when the last sample falls short of it, so
    a full turn ends on its first point.

    A flat ellipse (``rx == 0`` or ``ry == 0``) yields only the two end
    points of the range. A reversed range yields nothing.
    """
    start, end = spec.alpha_start, spec.alpha_end
    if end < start:
        logger.debug("ellipse range reversed (%g > %g), nothing sampled", start, end)
        return []

    if spec.rx == 0 or spec.ry == 0:
        return [spec.point_at(start), spec.point_at(end)]

    step = angular_step(spec.rx, spec.ry)

    points = []
    k = 0
    alpha = start
    while alpha <= end:
        points.append(spec.point_at(alpha))
        k += 1
        alpha = start + k * step

    last_alpha = start + (k - 1) * step
    if end - last_alpha > fp.ANGLE_EPSILON:
        points.append(spec.point_at(end))

    return points


def fan(spec: fp.EllipseSpec, points: list[fp.Point] | None = None) -> list[fp.Triangle]:
    """
    Triangle fan around the ellipse center: one triangle
    ``(center, p[i-1], p[i])`` per consecutive pair of sampled points.

    Correct for convex closed curves and for sectors; it is not a general
    triangulator.
    """
    if points is None:
        points = sample(spec)
    center = spec.center
    return [fp.Triangle(center, points[i - 1], points[i]) for i in range(1, len(points))]
