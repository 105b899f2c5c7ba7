#!/usr/bin/env python3
# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
FlatPath - command line front-end

Draws one or more built-in scenes onto a Canvas, which tessellates every
shape into line strips, quads and triangles, then hands the recorded display
list to a Cairo output device.

Usage:
    flatpath
    flatpath demo arc-to -o out.png
    flatpath polygon -d svg --output-dir renders

Author: Scott Bowman
License: AGPL-3.0-or-later
"""

import importlib
import logging
import sys
from typing import Any, Dict, Optional

from .canvas import Canvas
from .cli_args import build_argument_parser, get_output_base_name, infer_device
from .core import types as fp
from .scenes import SCENES, render_scenes

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_page_device(args) -> Dict[str, Any]:
    """
    Page device dictionary handed to the output device.

    Keys: width, height, background (Color or None), antialias,
    output_file, output_dir, base_name.
    """
    width, height = args.size
    return {
        "width": width,
        "height": height,
        "background": None if args.transparent else fp.WHITE,
        "antialias": args.antialias,
        "output_file": args.outputfile,
        "output_dir": args.output_dir,
        "base_name": get_output_base_name(args.outputfile, args.scenes),
    }


def load_device(device_name: str):
    """Import ``flatpath.devices.<name>.<name>``; it must define showpage()."""
    return importlib.import_module(f"flatpath.devices.{device_name}.{device_name}")


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the FlatPath command line.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    parser = build_argument_parser(list(SCENES))
    args = parser.parse_args(argv)

    configure_logging(args.verbose, args.quiet)

    if args.list_scenes:
        for name, fn in SCENES.items():
            summary = (fn.__doc__ or "").strip().splitlines()
            print(f"{name:10s} {summary[0] if summary else ''}")
        return 0

    if not args.scenes:
        args.scenes = ["demo"]

    unknown = [name for name in args.scenes if name not in SCENES]
    if unknown:
        print(f"FlatPath Error: unknown scene(s): {', '.join(unknown)}", file=sys.stderr)
        print(f"Available scenes: {', '.join(SCENES)}", file=sys.stderr)
        return 1

    pd = build_page_device(args)
    canvas = Canvas(pd["width"], pd["height"])
    render_scenes(args.scenes, canvas)
    logger.debug("display list holds %d batches", len(canvas.display_list))

    device_name = infer_device(args.outputfile, args.device)
    try:
        device = load_device(device_name)
    except ImportError as e:
        print(f"FlatPath Error: Failed to import device '{device_name}': {e}", file=sys.stderr)
        if "cairo" in str(e):
            print("Install with: pip install pycairo", file=sys.stderr)
        elif "PIL" in str(e) or "Pillow" in str(e):
            print("Install with: pip install Pillow", file=sys.stderr)
        return 1

    try:
        output_file = device.showpage(canvas.display_list, pd)
    except OSError as e:
        print(f"FlatPath Error: Device '{device_name}' could not write output: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(output_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
