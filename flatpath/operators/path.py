# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Path construction operators.

Every operator takes the canvas (anything with a ``path`` attribute holding a
``Path``) as its first argument, mirroring how drawing state is threaded
through the painting operators.

Free-form commands follow "pen" semantics: ``line_to``, ``arc_to`` and
``close_path`` with no open sub-path are silently ignored.
"""

from __future__ import annotations

import logging

from ..core import types as fp
from . import arc_corner_algorithm

logger = logging.getLogger(__name__)


def begin_path(ctxt) -> None:
    """Discard every element of the current path."""
    ctxt.path.clear()


def current_subpath(ctxt) -> fp.SubPath | None:
    """The sub-path that ``line_to``/``arc_to``/``close_path`` would extend, if any."""
    return ctxt.path.current_subpath()


# ---------------------------------------------------------------------------
# Closed shapes
# ---------------------------------------------------------------------------

def line(ctxt, pt1: fp.Point, pt2: fp.Point) -> None:
    ctxt.path.append(fp.Line(pt1, pt2))


def rectangle(ctxt, pt1: fp.Point, pt2: fp.Point) -> None:
    ctxt.path.append(fp.Rect(pt1, pt2))


def roundrect(ctxt, pt1: fp.Point, pt2: fp.Point, rx: float, ry: float) -> None:
    ctxt.path.append(fp.RoundRect(pt1, pt2, rx, ry))


def ellipse(ctxt, pt1: fp.Point, pt2: fp.Point,
            alpha_start: float = fp.ELLIPSE_ALPHA_START,
            alpha_end: float = fp.ELLIPSE_ALPHA_END) -> None:
    """Ellipse (or elliptical arc, angles in radians) inscribed in the box ``pt1``–``pt2``."""
    ctxt.path.append(fp.Ellipse(pt1, pt2, alpha_start, alpha_end))


# ---------------------------------------------------------------------------
# Free-form sub-paths
# ---------------------------------------------------------------------------

def move_to(ctxt, p: fp.Point) -> None:
    """
    Start a new sub-path at ``p``.

    If the current sub-path holds nothing but a previous move_to point, that
    point is replaced instead of leaving a lone point behind.
    """
    subpath = current_subpath(ctxt)
    if subpath is not None and len(subpath) == 1:
        subpath[0] = p
        return
    ctxt.path.append(fp.SubPath([p]))


def line_to(ctxt, p: fp.Point) -> None:
    subpath = current_subpath(ctxt)
    if subpath is None:
        return
    subpath.append(p)


def arc_to(ctxt, p1: fp.Point, p2: fp.Point, radius: float) -> None:
    """
    Round the corner ``last point → p1 → p2`` with a fillet of ``radius``.

    The fillet points are appended; the straight run from the last point to
    the first tangent point is implied by consecutive points. A corner that
    cannot be rounded (collinear legs, coincident points, radius <= 0) gets
    a straight line to ``p1`` instead.
    """
    subpath = current_subpath(ctxt)
    if subpath is None or not subpath:
        return

    points = arc_corner_algorithm.round_corner(subpath.last_point(), p1, p2, radius)
    if not points:
        logger.debug("arc_to corner at (%g, %g) not rounded, drawing a line", p1.x, p1.y)
        if not p1.is_close(subpath.last_point()):
            subpath.append(p1)
        return
    subpath.extend(points)


def close_path(ctxt) -> None:
    """Close the current sub-path back to its first point."""
    subpath = current_subpath(ctxt)
    if subpath is None:
        return
    subpath.close()
