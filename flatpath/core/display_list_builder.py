# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
DisplayListBuilder - Recording Drawing Surface

The geometry layer never talks to a rasterizer directly. It submits batches
through the small Surface protocol below: set the current color, then hand
over a line strip, a set of lines, a filled rectangle, a triangle set or a
triangle strip.

DisplayListBuilder implements that protocol by recording every batch, stamped
with the color current at submission time, into a DisplayList. Devices replay
the display list later (see ``devices.common.cairo_renderer``).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol, Sequence

from . import types as fp

logger = logging.getLogger(__name__)


class Surface(Protocol):
    """Drawing primitives the geometry layer submits its output to."""

    def set_color(self, color: fp.Color) -> None: ...

    def clear(self) -> None: ...

    def draw_lines(self, segments: Sequence[fp.Segment]) -> None: ...

    def draw_line_strip(self, points: Sequence[fp.Point]) -> None: ...

    def draw_filled_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def draw_filled_triangles(self, triangles: Sequence[fp.Triangle]) -> None: ...

    def draw_filled_triangle_strip(self, points: Sequence[fp.Point]) -> None: ...


class DisplayListBuilder:
    """
    Surface that records submitted batches into a DisplayList.

    Empty batches are dropped. If ``on_paint_callback`` is set it is called
    with each recorded element, which lets an interactive viewer refresh as
    drawing proceeds.
    """

    def __init__(self, display_list: fp.DisplayList | None = None,
                 on_paint_callback: Callable[[Any], None] | None = None):
        """
        Args:
            display_list: DisplayList instance to append to (a new one if None)
            on_paint_callback: Optional hook invoked after each recorded element
        """
        self.display_list = display_list if display_list is not None else fp.DisplayList()
        self.on_paint_callback = on_paint_callback
        self.color = fp.BLACK

    def set_color(self, color: fp.Color) -> None:
        self.color = color

    def clear(self) -> None:
        # everything recorded so far is painted over
        self.display_list.clear()
        self.add_graphics_operation(fp.Clear(self.color))

    def draw_lines(self, segments: Sequence[fp.Segment]) -> None:
        if segments:
            self.add_graphics_operation(fp.Lines(self.color, list(segments)))

    def draw_line_strip(self, points: Sequence[fp.Point]) -> None:
        if len(points) >= 2:
            self.add_graphics_operation(fp.LineStrip(self.color, list(points)))

    def draw_filled_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.add_graphics_operation(fp.FilledRect(self.color, x, y, w, h))

    def draw_filled_triangles(self, triangles: Sequence[fp.Triangle]) -> None:
        if triangles:
            self.add_graphics_operation(fp.FilledTriangles(self.color, list(triangles)))

    def draw_filled_triangle_strip(self, points: Sequence[fp.Point]) -> None:
        if len(points) >= 3:
            self.add_graphics_operation(fp.FilledTriangleStrip(self.color, list(points)))

    def add_graphics_operation(self, graphics_element: Any) -> None:
        """
        Append a graphics element to the display list and notify the
        paint callback, if any.

        Args:
            graphics_element: Display list element (Clear, LineStrip, ...)
        """
        self.display_list.append(graphics_element)

        if self.on_paint_callback is not None:
            try:
                self.on_paint_callback(graphics_element)
            except Exception:
                # a broken viewer must not stop drawing
                logger.exception("paint callback failed for %s",
                                 type(graphics_element).__name__)
