# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
PNG Output Device

This device renders a display list to a PNG image file using Cairo.
It uses the shared cairo_renderer module for display list rendering.
"""

import logging

import cairo

from ...core import types as fp
from ..common.cairo_renderer import render_display_list
from ..common.cairo_utils import get_antialias_mode, output_path, page_size, paint_background

logger = logging.getLogger(__name__)


def render_surface(display_list: fp.DisplayList, pd: dict) -> cairo.ImageSurface:
    """
    Render the display list into a new ARGB32 image surface.

    Args:
        display_list: Recorded drawing batches
        pd: Page device dictionary (width, height, background, antialias)
    """
    width, height = page_size(pd, display_list)

    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
    cc = cairo.Context(surface)
    cc.identity_matrix()

    paint_background(cc, pd, width, height)

    cc.set_antialias(get_antialias_mode(pd))
    render_display_list(display_list, cc)
    surface.flush()
    return surface


def showpage(display_list: fp.DisplayList, pd: dict) -> str:
    """
    Render the display list to a PNG file.

    Args:
        display_list: Recorded drawing batches
        pd: Page device dictionary (see cli.build_page_device)

    Returns:
        Path of the written file.
    """
    surface = render_surface(display_list, pd)
    output_file = output_path(pd, "png")
    surface.write_to_png(output_file)
    logger.info("wrote %s", output_file)
    return output_file
