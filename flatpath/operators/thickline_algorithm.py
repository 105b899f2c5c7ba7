# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Thick segment expander: turns a segment plus a width into a filled quad.

The quad is built from the unit normal of ``a→b`` scaled to half the width::

    0  a   1
    +--+--+
    |    /|
    |   / |
    |  /  |
    | /   |
    |/    |
    +--+--+
    3  b   2

Drawn as a triangle strip the vertices must go 0, 1, 3, 2 so that the
triangles (0,1,3) and (1,3,2) cover the rectangle instead of a bowtie.
No joins are added between consecutive quads of a polyline.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..core import types as fp
from ..core.error import DegenerateSegmentError

logger = logging.getLogger(__name__)


def half_width_shift(a: fp.Point, b: fp.Point, thickness: float) -> fp.Point:
    """Offset from the center line to one edge of the quad."""
    d = a.distance(b)
    if d < fp.EPSILON:
        raise DegenerateSegmentError(a, b)
    return fp.Point(-thickness * (b.y - a.y) / (d * 2.0),
                    thickness * (b.x - a.x) / (d * 2.0))


def quad_corners(a: fp.Point, b: fp.Point, thickness: float) -> list[fp.Point]:
    """Quad corners in outline order: ``a-Δ, a+Δ, b+Δ, b-Δ``."""
    shift = half_width_shift(a, b, thickness)
    return [a - shift, a + shift, b + shift, b - shift]


def expand(a: fp.Point, b: fp.Point, thickness: float) -> list[fp.Point]:
    """
    Quad corners in triangle-strip order: ``a-Δ, a+Δ, b-Δ, b+Δ``.

    Raises:
        DegenerateSegmentError: ``a`` and ``b`` coincide.
    """
    c0, c1, c2, c3 = quad_corners(a, b, thickness)
    return [c0, c1, c3, c2]


def expand_polyline(points: Sequence[fp.Point], thickness: float) -> list[list[fp.Point]]:
    """Expand every consecutive pair of ``points``; zero-length pairs are skipped."""
    strips = []
    for i in range(1, len(points)):
        try:
            strips.append(expand(points[i - 1], points[i], thickness))
        except DegenerateSegmentError:
            logger.debug("skipping zero-length segment at index %d", i)
    return strips


def strip_triangles(strip: Sequence[fp.Point]) -> list[fp.Triangle]:
    """The two triangles (0,1,2) and (1,2,3) a 4-point strip is drawn with."""
    return [fp.Triangle(strip[i - 2], strip[i - 1], strip[i]) for i in range(2, len(strip))]
