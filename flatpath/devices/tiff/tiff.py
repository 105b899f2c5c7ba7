# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
TIFF Output Device

Renders a display list with Cairo (through the PNG device's image surface)
and encodes it as TIFF with Pillow.
"""

import logging

from PIL import Image

from ...core import types as fp
from ..common.cairo_utils import output_path, surface_to_array
from ..png.png import render_surface

logger = logging.getLogger(__name__)

# Pillow compression used for TIFF output
TIFF_COMPRESSION = "tiff_lzw"


def to_image(display_list: fp.DisplayList, pd: dict) -> Image.Image:
    """Render the display list to an RGBA Pillow image."""
    surface = render_surface(display_list, pd)
    return Image.fromarray(surface_to_array(surface))


def showpage(display_list: fp.DisplayList, pd: dict) -> str:
    """
    Render the display list to a TIFF file.

    Args:
        display_list: Recorded drawing batches
        pd: Page device dictionary (see cli.build_page_device)

    Returns:
        Path of the written file.
    """
    image = to_image(display_list, pd)
    if pd.get("background", fp.WHITE) is not None:
        image = image.convert("RGB")

    output_file = output_path(pd, "tif")
    image.save(output_file, format="TIFF", compression=TIFF_COMPRESSION)
    logger.info("wrote %s", output_file)
    return output_file
