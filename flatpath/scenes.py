# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Built-in scenes rendered by the command line front-end.

A scene is a function drawing onto a Canvas. Scenes run in registration
order when several are requested, each on top of the previous one.
"""

from __future__ import annotations

import math
from typing import Callable

from .canvas import Canvas
from .core import types as fp

P = fp.Point

SCENES: dict[str, Callable[[Canvas], None]] = {}


def scene(name: str):
    def register(fn: Callable[[Canvas], None]) -> Callable[[Canvas], None]:
        SCENES[name] = fn
        return fn
    return register


def _marker(c: Canvas, p: fp.Point, argb: int, size: float = 5.0) -> None:
    c.begin_path()
    c.ellipse(P(p.x - size, p.y - size), P(p.x + size, p.y + size))
    c.fill_style.color = fp.Color.from_argb(argb)
    c.fill()


@scene("demo")
def demo(c: Canvas) -> None:
    """Background, line, square, circle, quarter ellipse and rounded rectangle."""
    c.fill_style.color = fp.Color.from_argb(0xfffefae0)
    c.clear()

    c.begin_path()
    c.line(P(10, 10), P(50, 50))
    c.rectangle(P(10, 10), P(50, 50))
    c.ellipse(P(100, 100), P(300, 300))

    c.fill_style.color = fp.Color.from_argb(0xffe9edc9)
    c.fill()

    c.stroke_style.width = 3.0
    c.stroke_style.color = fp.Color.from_argb(0xffccd5ae)
    c.stroke()

    c.begin_path()
    c.ellipse(P(400, 400), P(500, 500), math.pi, fp.HALF_PI * 3.0)
    c.roundrect(P(100, 400), P(400, 600), 20.0, 20.0)

    c.fill_style.color = fp.Color.from_argb(0xfffaedcd)
    c.fill()

    c.stroke_style.width = 3.0
    c.stroke_style.color = fp.Color.from_argb(0xffd4a373)
    c.stroke()


@scene("arc-to")
def arc_to(c: Canvas) -> None:
    """A rounded corner built with move_to/arc_to/close_path, with its control points marked."""
    p0 = P(50, 120)
    p1 = P(100, 120)
    p2 = P(100, 170)

    c.begin_path()
    c.move_to(p0)
    c.arc_to(p1, p2, 50.0)
    c.close_path()

    c.stroke_style.width = 3.0
    c.stroke_style.color = fp.Color.from_argb(0xffd4a373)
    c.stroke()

    _marker(c, p0, 0x80ff0000)
    _marker(c, p1, 0x800000ff)
    _marker(c, p2, 0x80ff0000)


@scene("polygon")
def polygon(c: Canvas) -> None:
    """A concave filled sub-path with a rounded corner and a hairline outline."""
    c.begin_path()
    c.move_to(P(420, 60))
    c.line_to(P(420, 260))
    c.line_to(P(600, 260))
    c.arc_to(P(600, 60), P(520, 60), 30.0)
    c.line_to(P(520, 60))
    c.line_to(P(520, 160))
    c.close_path()

    c.fill_style.color = fp.Color.from_argb(0xffccd5ae)
    c.fill()

    c.stroke_style.width = 1.0
    c.stroke_style.color = fp.Color.from_argb(0xff606c38)
    c.stroke()


def render_scenes(names: list[str], canvas: Canvas) -> None:
    """
    Draw the named scenes onto ``canvas``.

    Raises:
        KeyError: a name is not a registered scene.
    """
    for name in names:
        SCENES[name](canvas)
