# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Canvas - the caller-facing drawing API.

A Canvas holds the current path, the stroke and fill styles, and the surface
that receives the tessellated geometry. A drawing pass looks like::

    c = Canvas(640, 480)
    c.begin_path()
    c.rectangle(fp.Point(10, 10), fp.Point(50, 50))
    c.fill_style.color = fp.Color.from_argb(0xffe9edc9)
    c.fill()

Without an explicit surface the canvas records into a DisplayList
(``canvas.display_list``) that the output devices can render.
"""

from __future__ import annotations

from .core import types as fp
from .core.display_list_builder import DisplayListBuilder, Surface
from .operators import painting
from .operators import path as fp_path


class Canvas:
    def __init__(self, width: int = fp.DEFAULT_PAGE_WIDTH, height: int = fp.DEFAULT_PAGE_HEIGHT,
                 surface: Surface | None = None) -> None:
        self.width = width
        self.height = height
        self.surface = surface if surface is not None else DisplayListBuilder(fp.DisplayList(width, height))
        self.path = fp.Path()
        self.stroke_style = fp.StrokeStyle()
        self.fill_style = fp.FillStyle()

    @property
    def display_list(self) -> fp.DisplayList | None:
        """Recorded batches when drawing into a DisplayListBuilder, else None."""
        return getattr(self.surface, "display_list", None)

    # path construction
    def begin_path(self) -> None:
        fp_path.begin_path(self)

    def current_subpath(self) -> fp.SubPath | None:
        return fp_path.current_subpath(self)

    def line(self, pt1: fp.Point, pt2: fp.Point) -> None:
        fp_path.line(self, pt1, pt2)

    def rectangle(self, pt1: fp.Point, pt2: fp.Point) -> None:
        fp_path.rectangle(self, pt1, pt2)

    def roundrect(self, pt1: fp.Point, pt2: fp.Point, rx: float, ry: float) -> None:
        fp_path.roundrect(self, pt1, pt2, rx, ry)

    def ellipse(self, pt1: fp.Point, pt2: fp.Point,
                alpha_start: float = fp.ELLIPSE_ALPHA_START,
                alpha_end: float = fp.ELLIPSE_ALPHA_END) -> None:
        fp_path.ellipse(self, pt1, pt2, alpha_start, alpha_end)

    def move_to(self, p: fp.Point) -> None:
        fp_path.move_to(self, p)

    def line_to(self, p: fp.Point) -> None:
        fp_path.line_to(self, p)

    def arc_to(self, p1: fp.Point, p2: fp.Point, radius: float) -> None:
        fp_path.arc_to(self, p1, p2, radius)

    def close_path(self) -> None:
        fp_path.close_path(self)

    # painting
    def clear(self) -> None:
        painting.clear(self)

    def stroke(self) -> int:
        return painting.stroke(self)

    def fill(self) -> int:
        return painting.fill(self)
