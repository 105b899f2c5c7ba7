# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
FlatPath Types Path Element Module

A Path is an ordered list of path elements. Each element kind is a plain
record holding its defining geometry; stroking and filling are done by the
dispatch functions in ``operators.shapes``, never by the elements themselves.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import ELLIPSE_ALPHA_END, ELLIPSE_ALPHA_START
from .graphics import EllipseSpec, Point


@dataclass
class Line:
    pt1: Point
    pt2: Point


@dataclass
class Rect:
    """Axis-aligned rectangle spanned by two corner points."""
    pt1: Point
    pt2: Point


@dataclass
class Ellipse:
    """Elliptical arc inscribed in the box spanned by two corner points."""
    pt1: Point
    pt2: Point
    alpha_start: float = ELLIPSE_ALPHA_START
    alpha_end: float = ELLIPSE_ALPHA_END

    def spec(self) -> EllipseSpec:
        return EllipseSpec.from_bounds(self.pt1, self.pt2, self.alpha_start, self.alpha_end)


@dataclass
class RoundRect:
    pt1: Point
    pt2: Point
    rx: float
    ry: float


class SubPath(list):
    """
    Points of one continuous sub-path, in construction order.

    A sub-path is open until ``close()`` appends its first point again;
    after that it accepts no further points.
    """

    def __init__(self, points=()) -> None:
        super().__init__(points)
        self.closed = False

    def close(self) -> None:
        if self.closed or not self:
            return
        self.append(self[0])
        self.closed = True

    def last_point(self) -> Point | None:
        return self[-1] if self else None

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"SubPath({list.__repr__(self)}, {state})"


PathElement = Line | Rect | Ellipse | RoundRect | SubPath


class Path(list):
    """Ordered list of PathElements; later elements render on top."""

    def __init__(self) -> None:
        super().__init__()

    def current_subpath(self) -> SubPath | None:
        """Return the last element when it is a SubPath still open for drawing."""
        if self and isinstance(self[-1], SubPath) and not self[-1].closed:
            return self[-1]
        return None
