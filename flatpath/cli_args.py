# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for FlatPath.

Handles command-line argument definition, page size specifications and
output file naming.
"""

from __future__ import annotations

import argparse
import os
import re

from .core import types as fp

__version__ = "0.1.0"

DEVICES = ["png", "svg", "pdf", "tiff"]

# file extensions accepted for each device when inferring it from -o
DEVICE_EXTENSIONS = {
    ".png": "png",
    ".svg": "svg",
    ".pdf": "pdf",
    ".tif": "tiff",
    ".tiff": "tiff",
}


def parse_size(spec: str) -> tuple[int, int]:
    """Parse a ``WIDTHxHEIGHT`` page size such as ``640x480``.

    Raises:
        argparse.ArgumentTypeError: If the specification is malformed.
    """
    m = re.fullmatch(r"\s*(\d+)\s*[xX]\s*(\d+)\s*", spec)
    if not m:
        raise argparse.ArgumentTypeError(f"Invalid size (expected WIDTHxHEIGHT): '{spec}'")
    width, height = int(m.group(1)), int(m.group(2))
    if width < 1 or height < 1:
        raise argparse.ArgumentTypeError(f"Size must be positive: '{spec}'")
    return width, height


def infer_device(outputfile: str | None, device: str | None) -> str:
    """Explicit device first, then the -o extension, then PNG."""
    if device:
        return device
    if outputfile:
        ext = os.path.splitext(outputfile)[1].lower()
        if ext in DEVICE_EXTENSIONS:
            return DEVICE_EXTENSIONS[ext]
    return "png"


def get_output_base_name(outputfile: str | None, scenes: list[str]) -> str:
    """
    Derive output base name from command-line arguments.

    Args:
        outputfile: The -o argument value (or None)
        scenes: Scene names being rendered

    Returns:
        Base name for output files (without extension)
    """
    if outputfile:
        base = os.path.basename(outputfile)
        return os.path.splitext(base)[0]
    if scenes:
        return "-".join(scenes)
    return "page"


def build_argument_parser(available_scenes: list[str]) -> argparse.ArgumentParser:
    """
    Create and configure the FlatPath argument parser.

    Args:
        available_scenes: Names of the registered scenes.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="flatpath",
        description="FlatPath - render vector path scenes through the tessellation engine",
        epilog="With no scene given, the 'demo' scene is rendered.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"FlatPath {__version__}"
    )
    parser.add_argument(
        "scenes", nargs="*", metavar="scene",
        help=f'Scenes to draw, in order ({", ".join(available_scenes)})'
    )
    parser.add_argument(
        "-o", "--output", dest="outputfile", help="Specify output filename"
    )
    parser.add_argument(
        "-d",
        "--device",
        choices=DEVICES,
        help=f'Specify output device ({", ".join(DEVICES)}); inferred from -o when omitted',
    )
    parser.add_argument(
        "--output-dir", dest="output_dir", default=fp.OUTPUT_DIRECTORY,
        help=f"Specify output directory when -o is not given (default: {fp.OUTPUT_DIRECTORY})"
    )
    parser.add_argument(
        "-s", "--size", type=parse_size,
        default=(fp.DEFAULT_PAGE_WIDTH, fp.DEFAULT_PAGE_HEIGHT),
        help=f"Page size as WIDTHxHEIGHT (default: {fp.DEFAULT_PAGE_WIDTH}x{fp.DEFAULT_PAGE_HEIGHT})"
    )
    parser.add_argument(
        "--transparent", action="store_true",
        help="Leave the page background transparent instead of white"
    )
    parser.add_argument(
        "--antialias",
        choices=["none", "fast", "good", "best", "gray", "subpixel"],
        help="Set anti-aliasing mode for Cairo rendering (default: gray)"
    )
    parser.add_argument(
        "--list-scenes", action="store_true",
        help="List the available scenes and exit"
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose (debug) logging"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log errors"
    )

    return parser
