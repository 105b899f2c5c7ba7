# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
FlatPath Types Graphics Classes Module

This module contains the value types consumed and produced by the geometry
algorithms (points, segments, triangles, ellipse parameters), the paint
styles, and the display list elements recorded by the drawing surface.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .constants import (
    ELLIPSE_ALPHA_END, ELLIPSE_ALPHA_START, EPSILON, HAIRLINE_WIDTH
)


# ---------------------------------------------------------------------------
# Geometry primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Point:
        return Point(self.x * s, self.y * s)

    def __rmul__(self, s: float) -> Point:
        return self.__mul__(s)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Point:
        ln = self.length()
        if ln < EPSILON:
            return Point(0.0, 0.0)
        return Point(self.x / ln, self.y / ln)

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        return self.x * other.y - self.y * other.x

    def distance(self, other: Point) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def is_close(self, other: Point, tol: float = EPSILON) -> bool:
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol


@dataclass(frozen=True)
class Segment:
    """Directed segment, an intermediate for stroke expansion."""
    a: Point
    b: Point

    def length(self) -> float:
        return self.a.distance(self.b)


@dataclass(frozen=True)
class Triangle:
    a: Point
    b: Point
    c: Point

    def signed_area(self) -> float:
        return 0.5 * (self.b - self.a).cross(self.c - self.a)

    def area(self) -> float:
        return abs(self.signed_area())

    def points(self) -> tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)


@dataclass(frozen=True)
class EllipseSpec:
    """Elliptical arc: center, radii and angle range in radians."""
    center: Point
    rx: float
    ry: float
    alpha_start: float = ELLIPSE_ALPHA_START
    alpha_end: float = ELLIPSE_ALPHA_END

    @classmethod
    def from_bounds(cls, pt1: Point, pt2: Point,
                    alpha_start: float = ELLIPSE_ALPHA_START,
                    alpha_end: float = ELLIPSE_ALPHA_END) -> EllipseSpec:
        """Derive the ellipse inscribed in the box spanned by ``pt1``/``pt2``."""
        rx = (pt2.x - pt1.x) / 2.0
        ry = (pt2.y - pt1.y) / 2.0
        return cls(Point(pt1.x + rx, pt1.y + ry), rx, ry, alpha_start, alpha_end)

    def point_at(self, alpha: float) -> Point:
        return Point(self.center.x + math.cos(alpha) * self.rx,
                     self.center.y + math.sin(alpha) * self.ry)


# ---------------------------------------------------------------------------
# Paint styles
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Color:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_argb(cls, argb: int) -> Color:
        """Build a color from a packed 0xAARRGGBB integer."""
        return cls(((argb >> 16) & 0xff) / 255.0,
                   ((argb >> 8) & 0xff) / 255.0,
                   (argb & 0xff) / 255.0,
                   ((argb >> 24) & 0xff) / 255.0)

    def with_alpha(self, a: float) -> Color:
        return Color(self.r, self.g, self.b, a)

    def rgba(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass
class StrokeStyle:
    color: Color = BLACK
    width: float = HAIRLINE_WIDTH

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"stroke width must be >= 0, got {self.width}")

    @property
    def is_hairline(self) -> bool:
        # width 0 is the thinnest renderable line, as in PostScript
        return self.width == HAIRLINE_WIDTH or self.width == 0.0


@dataclass
class FillStyle:
    color: Color = BLACK


# ---------------------------------------------------------------------------
# Display list
# ---------------------------------------------------------------------------

class DisplayList(list):
    """
    Ordered list of drawing batches (Clear, Lines, LineStrip, FilledRect,
    FilledTriangles, FilledTriangleStrip) recorded by a DisplayListBuilder
    and replayed by the output devices.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        super().__init__()

        self.width = width
        self.height = height


@dataclass
class Clear:
    color: Color


@dataclass
class Lines:
    color: Color
    segments: list[Segment] = field(default_factory=list)


@dataclass
class LineStrip:
    color: Color
    points: list[Point] = field(default_factory=list)


@dataclass
class FilledRect:
    color: Color
    x: float
    y: float
    w: float
    h: float

    def area(self) -> float:
        return abs(self.w * self.h)


@dataclass
class FilledTriangles:
    color: Color
    triangles: list[Triangle] = field(default_factory=list)


@dataclass
class FilledTriangleStrip:
    """Triangles (0,1,2), (1,2,3), ... over ``points``."""
    color: Color
    points: list[Point] = field(default_factory=list)

    def triangles(self) -> list[Triangle]:
        pts = self.points
        return [Triangle(pts[i - 2], pts[i - 1], pts[i]) for i in range(2, len(pts))]
