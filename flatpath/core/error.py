# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Error types raised by the geometry layer.

Drawing is best effort: painting catches GeometryError for each path element,
logs it and moves on, so a degenerate element is simply not drawn.
"""

from __future__ import annotations


class FlatPathError(Exception):
    """Base class for all FlatPath errors."""


class GeometryError(FlatPathError, ValueError):
    """Geometry that has no well-defined tessellation."""


class DegenerateSegmentError(GeometryError):
    """Segment with coincident endpoints: its direction is undefined."""

    def __init__(self, a, b) -> None:
        super().__init__(f"degenerate segment: ({a.x}, {a.y}) -> ({b.x}, {b.y})")
        self.a = a
        self.b = b


class DegenerateCornerError(GeometryError):
    """Corner that cannot carry a tangent fillet (collinear legs, zero radius, ...)."""

    def __init__(self, vertex, reason: str) -> None:
        super().__init__(f"degenerate corner at ({vertex.x}, {vertex.y}): {reason}")
        self.vertex = vertex
        self.reason = reason
