# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Polygon triangulation by ear clipping.

Operates on a simple polygon given as an ordered point list, without the
closing duplicate. Each pass scans the remaining vertices in index order and
clips the first ear it finds; the scan restarts after every clip, so the
worst case is O(n²) point-in-triangle tests per clip.

Winding precondition: a vertex counts as convex when
``orientation(prev, curr, next) < 0``. Only polygons with a negative
Shoelace signed area (clockwise with the y axis pointing up, i.e.
counter-clockwise on a y-down screen) can be triangulated; the opposite
winding finds no ear and the result is empty. The polygon is not reversed
behind the caller's back.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..core import types as fp

logger = logging.getLogger(__name__)


def orientation(p: fp.Point, c: fp.Point, n: fp.Point) -> float:
    """Cross product of the edges ``p→c`` and ``c→n``."""
    return (c.x - p.x) * (n.y - c.y) - (c.y - p.y) * (n.x - c.x)


def is_convex(p: fp.Point, c: fp.Point, n: fp.Point) -> bool:
    return orientation(p, c, n) < 0


def signed_area(polygon: Sequence[fp.Point]) -> float:
    """Shoelace signed area."""
    total = 0.0
    n = len(polygon)
    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        total += a.x * b.y - b.x * a.y
    return total / 2.0


def _edge_sign(p: fp.Point, a: fp.Point, b: fp.Point) -> float:
    return (p.x - b.x) * (a.y - b.y) - (a.x - b.x) * (p.y - b.y)


def point_in_triangle(p: fp.Point, a: fp.Point, b: fp.Point, c: fp.Point) -> bool:
    """True when ``p`` is inside the triangle or on its boundary."""
    d1 = _edge_sign(p, a, b)
    d2 = _edge_sign(p, b, c)
    d3 = _edge_sign(p, c, a)

    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_neg and has_pos)


def _find_ear(polygon: Sequence[fp.Point], indices: list[int]) -> int | None:
    """Position in ``indices`` of the first clippable ear, or None."""
    m = len(indices)
    for k in range(m):
        i_prev = indices[k - 1]
        i_curr = indices[k]
        i_next = indices[(k + 1) % m]
        a, b, c = polygon[i_prev], polygon[i_curr], polygon[i_next]

        if not is_convex(a, b, c):
            continue

        for j in indices:
            if j in (i_prev, i_curr, i_next):
                continue
            if point_in_triangle(polygon[j], a, b, c):
                break
        else:
            return k
    return None


def triangulate(polygon: Sequence[fp.Point]) -> list[fp.Triangle]:
    """
    Triangulate a simple polygon.

    Returns ``n - 2`` triangles covering the polygon, or an empty list when
    the polygon has fewer than 3 points or an ear scan finds no ear. There
    is no partial result. A triangle is returned unchanged.
    """
    n = len(polygon)
    if n < 3:
        return []
    if n == 3:
        return [fp.Triangle(polygon[0], polygon[1], polygon[2])]

    indices = list(range(n))
    triangles = []

    while len(indices) > 3:
        k = _find_ear(polygon, indices)
        if k is None:
            logger.debug("no ear among %d remaining vertices, triangulation failed",
                         len(indices))
            return []

        m = len(indices)
        triangles.append(fp.Triangle(polygon[indices[k - 1]],
                                     polygon[indices[k]],
                                     polygon[indices[(k + 1) % m]]))
        del indices[k]

    triangles.append(fp.Triangle(polygon[indices[0]], polygon[indices[1]], polygon[indices[2]]))
    return triangles
