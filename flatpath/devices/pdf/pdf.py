# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PDF Output Device

This device renders a display list to a single-page PDF using Cairo's
PDFSurface. One device unit maps to one PDF point.
"""

import logging

import cairo

from ...core import types as fp
from ..common.cairo_renderer import render_display_list
from ..common.cairo_utils import output_path, page_size, paint_background

logger = logging.getLogger(__name__)


def showpage(display_list: fp.DisplayList, pd: dict) -> str:
    """
    Render the display list to a PDF file.

    Args:
        display_list: Recorded drawing batches
        pd: Page device dictionary (see cli.build_page_device)

    Returns:
        Path of the written file.
    """
    width, height = page_size(pd, display_list)
    output_file = output_path(pd, "pdf")

    surface = cairo.PDFSurface(output_file, width, height)
    surface.set_metadata(cairo.PDFMetadata.CREATOR, "FlatPath")
    cc = cairo.Context(surface)

    paint_background(cc, pd, width, height)
    render_display_list(display_list, cc)

    cc.show_page()
    surface.finish()
    logger.info("wrote %s", output_file)
    return output_file
