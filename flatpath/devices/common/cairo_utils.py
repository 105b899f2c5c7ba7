# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared Cairo device utilities."""

from __future__ import annotations

import os
import sys

import cairo
import numpy as np

from ...core import types as fp

# Anti-aliasing mode for Cairo rendering.
# Options: cairo.ANTIALIAS_NONE, ANTIALIAS_FAST, ANTIALIAS_GOOD,
#          ANTIALIAS_BEST, ANTIALIAS_GRAY, ANTIALIAS_SUBPIXEL
ANTIALIAS_MODE = cairo.ANTIALIAS_GRAY

ANTIALIAS_MAP = {
    "none": cairo.ANTIALIAS_NONE,
    "fast": cairo.ANTIALIAS_FAST,
    "good": cairo.ANTIALIAS_GOOD,
    "best": cairo.ANTIALIAS_BEST,
    "gray": cairo.ANTIALIAS_GRAY,
    "subpixel": cairo.ANTIALIAS_SUBPIXEL,
}


def get_antialias_mode(pd: dict) -> int:
    """Cairo antialias constant for the page device's ``antialias`` entry."""
    return ANTIALIAS_MAP.get(pd.get("antialias") or "", ANTIALIAS_MODE)


def page_size(pd: dict, display_list: fp.DisplayList) -> tuple[int, int]:
    """Page size from the page device, falling back to the display list's own size."""
    width = pd.get("width") or display_list.width or fp.DEFAULT_PAGE_WIDTH
    height = pd.get("height") or display_list.height or fp.DEFAULT_PAGE_HEIGHT
    return int(width), int(height)


def output_path(pd: dict, extension: str) -> str:
    """
    Destination file for a device.

    ``output_file`` wins when present; otherwise the file is
    ``<output_dir>/<base_name>.<extension>``, creating the directory.
    """
    if pd.get("output_file"):
        return pd["output_file"]
    output_dir = pd.get("output_dir") or fp.OUTPUT_DIRECTORY
    base_name = pd.get("base_name") or "page"
    os.makedirs(output_dir, exist_ok=True)
    return os.path.join(output_dir, f"{base_name}.{extension}")


def paint_background(cc, pd: dict, width: int, height: int) -> None:
    """Fill the page with ``pd['background']`` (a Color); None leaves it transparent."""
    background = pd.get("background", fp.WHITE)
    if background is None:
        return
    cc.set_source_rgba(background.r, background.g, background.b, background.a)
    cc.rectangle(0, 0, width, height)
    cc.fill()


def surface_to_array(surface: cairo.ImageSurface) -> np.ndarray:
    """
    Copy an ARGB32 image surface into an (H, W, 4) uint8 RGBA array with
    straight (not premultiplied) alpha.
    """
    surface.flush()
    width = surface.get_width()
    height = surface.get_height()
    stride = surface.get_stride()

    buf = np.frombuffer(surface.get_data(), dtype=np.uint8).reshape(height, stride)
    # Cairo stores ARGB32 as native-endian 32-bit words
    channels = [2, 1, 0, 3] if sys.byteorder == "little" else [1, 2, 3, 0]
    raw = buf[:, :width * 4].reshape(height, width, 4).astype(np.float32)
    rgba = raw[..., channels]

    alpha = rgba[..., 3:4]
    with np.errstate(divide="ignore", invalid="ignore"):
        rgb = np.where(alpha > 0, rgba[..., :3] * 255.0 / alpha, 0.0)
    out = np.concatenate([rgb, alpha], axis=-1)
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)
