# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shape generators: stroke and fill geometry for every path element kind.

``stroke_element`` and ``fill_element`` are the only entry points: each
dispatches on the element kind and submits the resulting batches to a
Surface after setting the style color.

Stroking: a hairline style draws line strips; any other width expands each
segment into its own quad (no joins, no caps). Filling: rectangles are one
filled rect, ellipses a triangle fan, rounded rectangles two overlapping
rects plus four corner fans, free-form sub-paths an ear-clipped polygon.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..core import types as fp
from ..core.display_list_builder import Surface
from . import ellipse_algorithm
from . import thickline_algorithm
from . import triangulate_algorithm

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _draw_thick_line(surface: Surface, a: fp.Point, b: fp.Point, width: float) -> None:
    """Raises DegenerateSegmentError when ``a`` and ``b`` coincide."""
    surface.draw_filled_triangle_strip(thickline_algorithm.expand(a, b, width))


def _draw_thick_lines(surface: Surface, points: Sequence[fp.Point], width: float) -> None:
    for strip in thickline_algorithm.expand_polyline(points, width):
        surface.draw_filled_triangle_strip(strip)


def _stroke_points(surface: Surface, points: Sequence[fp.Point], style: fp.StrokeStyle) -> None:
    if style.is_hairline:
        surface.draw_line_strip(points)
    else:
        _draw_thick_lines(surface, points, style.width)


def rect_outline(pt1: fp.Point, pt2: fp.Point) -> list[fp.Point]:
    """Closed 5-point outline: the four corners and the first one again."""
    return [fp.Point(pt1.x, pt1.y),
            fp.Point(pt2.x, pt1.y),
            fp.Point(pt2.x, pt2.y),
            fp.Point(pt1.x, pt2.y),
            fp.Point(pt1.x, pt1.y)]


# ---------------------------------------------------------------------------
# Line
# ---------------------------------------------------------------------------

def _stroke_line(e: fp.Line, style: fp.StrokeStyle, surface: Surface) -> None:
    if style.is_hairline:
        surface.draw_lines([fp.Segment(e.pt1, e.pt2)])
    else:
        _draw_thick_line(surface, e.pt1, e.pt2, style.width)


# ---------------------------------------------------------------------------
# Rect
# ---------------------------------------------------------------------------

def _stroke_rect(e: fp.Rect, style: fp.StrokeStyle, surface: Surface) -> None:
    outline = rect_outline(e.pt1, e.pt2)
    if style.is_hairline:
        surface.draw_line_strip(outline)
        return
    # each edge on its own: corners get a notch, not a miter
    for i in range(1, len(outline)):
        _draw_thick_lines(surface, outline[i - 1:i + 1], style.width)


def _fill_rect(e: fp.Rect, style: fp.FillStyle, surface: Surface) -> None:
    surface.draw_filled_rect(e.pt1.x, e.pt1.y, e.pt2.x - e.pt1.x, e.pt2.y - e.pt1.y)


# ---------------------------------------------------------------------------
# Ellipse
# ---------------------------------------------------------------------------

def _stroke_ellipse(e: fp.Ellipse, style: fp.StrokeStyle, surface: Surface) -> None:
    _stroke_points(surface, ellipse_algorithm.sample(e.spec()), style)


def _fill_ellipse(e: fp.Ellipse, style: fp.FillStyle, surface: Surface) -> None:
    surface.draw_filled_triangles(ellipse_algorithm.fan(e.spec()))


# ---------------------------------------------------------------------------
# RoundRect
# ---------------------------------------------------------------------------

def clamped_radii(e: fp.RoundRect) -> tuple[float, float]:
    """Corner radii limited to half the box size on each axis."""
    rx = min(e.rx, abs(e.pt2.x - e.pt1.x) / 2.0)
    ry = min(e.ry, abs(e.pt2.y - e.pt1.y) / 2.0)
    return rx, ry


def roundrect_edges(e: fp.RoundRect) -> list[fp.Segment]:
    """The four straight edges, inset by the corner radii, clockwise from the top."""
    p1, p2 = e.pt1, e.pt2
    rx, ry = clamped_radii(e)
    return [fp.Segment(fp.Point(p1.x + rx, p1.y), fp.Point(p2.x - rx, p1.y)),
            fp.Segment(fp.Point(p2.x, p1.y + ry), fp.Point(p2.x, p2.y - ry)),
            fp.Segment(fp.Point(p2.x - rx, p2.y), fp.Point(p1.x + rx, p2.y)),
            fp.Segment(fp.Point(p1.x, p2.y - ry), fp.Point(p1.x, p1.y + ry))]


def roundrect_corners(e: fp.RoundRect) -> list[fp.EllipseSpec]:
    """Quarter ellipses: top-left, top-right, bottom-right, bottom-left."""
    p1, p2 = e.pt1, e.pt2
    rx, ry = clamped_radii(e)
    return [
        fp.EllipseSpec(fp.Point(p1.x + rx, p1.y + ry), rx, ry, *fp.ROUNDRECT_TOP_LEFT),
        fp.EllipseSpec(fp.Point(p2.x - rx, p1.y + ry), rx, ry, *fp.ROUNDRECT_TOP_RIGHT),
        fp.EllipseSpec(fp.Point(p2.x - rx, p2.y - ry), rx, ry, *fp.ROUNDRECT_BOTTOM_RIGHT),
        fp.EllipseSpec(fp.Point(p1.x + rx, p2.y - ry), rx, ry, *fp.ROUNDRECT_BOTTOM_LEFT),
    ]


def _is_square_cornered(e: fp.RoundRect) -> bool:
    rx, ry = clamped_radii(e)
    return rx <= 0 or ry <= 0


def _stroke_roundrect(e: fp.RoundRect, style: fp.StrokeStyle, surface: Surface) -> None:
    if _is_square_cornered(e):
        _stroke_rect(fp.Rect(e.pt1, e.pt2), style, surface)
        return

    edges = roundrect_edges(e)
    arcs = [ellipse_algorithm.sample(spec) for spec in roundrect_corners(e)]

    if style.is_hairline:
        surface.draw_lines(edges)
        for arc in arcs:
            surface.draw_line_strip(arc)
    else:
        for edge in edges:
            _draw_thick_lines(surface, [edge.a, edge.b], style.width)
        for arc in arcs:
            _draw_thick_lines(surface, arc, style.width)


def _fill_roundrect(e: fp.RoundRect, style: fp.FillStyle, surface: Surface) -> None:
    if _is_square_cornered(e):
        _fill_rect(fp.Rect(e.pt1, e.pt2), style, surface)
        return

    # two overlapping rects make a cross; the fans fill the corners
    p1, p2 = e.pt1, e.pt2
    rx, ry = clamped_radii(e)
    surface.draw_filled_rect(p1.x + rx, p1.y, (p2.x - p1.x) - 2.0 * rx, p2.y - p1.y)
    surface.draw_filled_rect(p1.x, p1.y + ry, p2.x - p1.x, (p2.y - p1.y) - 2.0 * ry)

    triangles = []
    for spec in roundrect_corners(e):
        triangles.extend(ellipse_algorithm.fan(spec))
    surface.draw_filled_triangles(triangles)


# ---------------------------------------------------------------------------
# SubPath
# ---------------------------------------------------------------------------

def fill_polygon(subpath: Sequence[fp.Point]) -> list[fp.Point]:
    """Sub-path points without consecutive duplicates or the closing point."""
    polygon = []
    for p in subpath:
        if not polygon or not p.is_close(polygon[-1]):
            polygon.append(p)
    if len(polygon) > 1 and polygon[-1].is_close(polygon[0]):
        polygon.pop()
    return polygon


def _stroke_subpath(e: fp.SubPath, style: fp.StrokeStyle, surface: Surface) -> None:
    if len(e) < 2:
        return
    _stroke_points(surface, e, style)


def _fill_subpath(e: fp.SubPath, style: fp.FillStyle, surface: Surface) -> None:
    polygon = fill_polygon(e)
    if len(polygon) < 3:
        return
    triangles = triangulate_algorithm.triangulate(polygon)
    if not triangles:
        logger.debug("sub-path with %d points not filled (no triangulation)", len(polygon))
        return
    surface.draw_filled_triangles(triangles)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def stroke_element(element: fp.PathElement, style: fp.StrokeStyle, surface: Surface) -> None:
    """
    Stroke one path element onto ``surface``.

    Raises:
        GeometryError: the element cannot be stroked (e.g. a zero-length thick Line).
        TypeError: ``element`` is not a path element.
    """
    surface.set_color(style.color)
    if isinstance(element, fp.Line):
        _stroke_line(element, style, surface)
    elif isinstance(element, fp.Rect):
        _stroke_rect(element, style, surface)
    elif isinstance(element, fp.Ellipse):
        _stroke_ellipse(element, style, surface)
    elif isinstance(element, fp.RoundRect):
        _stroke_roundrect(element, style, surface)
    elif isinstance(element, fp.SubPath):
        _stroke_subpath(element, style, surface)
    else:
        raise TypeError(f"not a path element: {type(element).__name__}")


def fill_element(element: fp.PathElement, style: fp.FillStyle, surface: Surface) -> None:
    """
    Fill one path element onto ``surface``. Lines have no interior and draw nothing.

    Raises:
        TypeError: ``element`` is not a path element.
    """
    surface.set_color(style.color)
    if isinstance(element, fp.Line):
        return
    elif isinstance(element, fp.Rect):
        _fill_rect(element, style, surface)
    elif isinstance(element, fp.Ellipse):
        _fill_ellipse(element, style, surface)
    elif isinstance(element, fp.RoundRect):
        _fill_roundrect(element, style, surface)
    elif isinstance(element, fp.SubPath):
        _fill_subpath(element, style, surface)
    else:
        raise TypeError(f"not a path element: {type(element).__name__}")
