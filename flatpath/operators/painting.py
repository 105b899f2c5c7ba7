# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Painting operators.

``stroke`` and ``fill`` visit the path elements in insertion order, so later
elements are drawn on top. A GeometryError raised for one element is logged
and only that element is skipped.
"""

from __future__ import annotations

import logging

from ..core.error import GeometryError
from .shapes import fill_element, stroke_element

logger = logging.getLogger(__name__)


def clear(ctxt) -> None:
    """Paint the whole surface with the current fill color."""
    ctxt.surface.set_color(ctxt.fill_style.color)
    ctxt.surface.clear()


def stroke(ctxt) -> int:
    """
    Stroke every element of the current path with ``ctxt.stroke_style``.

    Returns:
        Number of elements that could not be stroked.
    """
    return _paint(ctxt, stroke_element, ctxt.stroke_style)


def fill(ctxt) -> int:
    """
    Fill every element of the current path with ``ctxt.fill_style``.

    Returns:
        Number of elements that could not be filled.
    """
    return _paint(ctxt, fill_element, ctxt.fill_style)


def _paint(ctxt, paint_element, style) -> int:
    failures = 0
    for index, element in enumerate(ctxt.path):
        try:
            paint_element(element, style, ctxt.surface)
        except GeometryError as exc:
            failures += 1
            logger.warning("%s #%d skipped by %s: %s", type(element).__name__, index,
                           paint_element.__name__, exc)
    return failures
