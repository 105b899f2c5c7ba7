# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shared Cairo Rendering Module

Replays a FlatPath display list onto a Cairo context. Used by every output
device (PNG, SVG, PDF, TIFF).

Architecture:
- render_display_list() is the main entry point for device implementations
- Line batches are stroked at a fixed device width (hairlines)
- Triangle, strip and rect batches are filled; Cairo only rasterizes them
"""

import cairo

from ...core import types as fp


def render_display_list(display_list: fp.DisplayList, cairo_ctx,
                        min_line_width: float = fp.DEVICE_HAIRLINE_WIDTH) -> None:
    """
    Render a display list to a Cairo context.

    Device implementations should:
    1. Create a Cairo surface and context
    2. Set up any device-specific initialization (background color, etc.)
    3. Call this function to render the display list
    4. Finalize output (write to file, display to screen, etc.)

    Args:
        display_list: Recorded drawing batches, in painting order
        cairo_ctx: Cairo context to render to
        min_line_width: Device width used for hairline strokes
    """
    cairo_ctx.set_fill_rule(cairo.FILL_RULE_WINDING)

    for item in display_list:
        if isinstance(item, fp.Clear):
            _set_source(cairo_ctx, item.color)
            cairo_ctx.save()
            cairo_ctx.set_operator(cairo.OPERATOR_SOURCE)
            cairo_ctx.paint()
            cairo_ctx.restore()
            continue

        if isinstance(item, fp.Lines):
            cairo_ctx.new_path()
            for seg in item.segments:
                cairo_ctx.move_to(seg.a.x, seg.a.y)
                cairo_ctx.line_to(seg.b.x, seg.b.y)
            _stroke_hairline(cairo_ctx, item.color, min_line_width)
            continue

        if isinstance(item, fp.LineStrip):
            cairo_ctx.new_path()
            first, *rest = item.points
            cairo_ctx.move_to(first.x, first.y)
            for p in rest:
                cairo_ctx.line_to(p.x, p.y)
            _stroke_hairline(cairo_ctx, item.color, min_line_width)
            continue

        if isinstance(item, fp.FilledRect):
            cairo_ctx.new_path()
            cairo_ctx.rectangle(item.x, item.y, item.w, item.h)
            _set_source(cairo_ctx, item.color)
            cairo_ctx.fill()
            continue

        if isinstance(item, fp.FilledTriangles):
            _fill_triangles(cairo_ctx, item.color, item.triangles)
            continue

        if isinstance(item, fp.FilledTriangleStrip):
            _fill_triangles(cairo_ctx, item.color, item.triangles())
            continue


def _set_source(cairo_ctx, color: fp.Color) -> None:
    cairo_ctx.set_source_rgba(color.r, color.g, color.b, color.a)


def _stroke_hairline(cairo_ctx, color: fp.Color, line_width: float) -> None:
    _set_source(cairo_ctx, color)
    cairo_ctx.set_line_width(line_width)
    cairo_ctx.set_line_cap(cairo.LINE_CAP_BUTT)
    cairo_ctx.set_line_join(cairo.LINE_JOIN_MITER)
    cairo_ctx.stroke()


def _fill_triangles(cairo_ctx, color: fp.Color, triangles) -> None:
    """Fill triangles as one path, all wound the same way so nonzero never cancels."""
    cairo_ctx.new_path()
    for t in triangles:
        a, b, c = t.points()
        if t.signed_area() < 0:
            b, c = c, b
        cairo_ctx.move_to(a.x, a.y)
        cairo_ctx.line_to(b.x, b.y)
        cairo_ctx.line_to(c.x, c.y)
        cairo_ctx.close_path()
    _set_source(cairo_ctx, color)
    cairo_ctx.fill()
