"""
-------
conftest.py
-------
Shared pytest fixtures for the FlatPath tests.
"""

import math

import pytest

from flatpath.canvas import Canvas
from flatpath.core import types as fp
from flatpath.core.display_list_builder import DisplayListBuilder


# -----------------------------------------------------------------------------
# Drawing fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def builder() -> DisplayListBuilder:
    """A recording surface over an empty 200x200 display list."""
    return DisplayListBuilder(fp.DisplayList(200, 200))


@pytest.fixture
def canvas() -> Canvas:
    """A 200x200 canvas recording into its own display list."""
    return Canvas(200, 200)


@pytest.fixture
def red() -> fp.Color:
    return fp.Color(1.0, 0.0, 0.0, 1.0)


# -----------------------------------------------------------------------------
# Geometry fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def regular_polygon():
    """
    Factory for regular n-gons wound the way the triangulator expects
    (negative Shoelace area).
    """
    def make(n: int, radius: float = 10.0, cx: float = 0.0, cy: float = 0.0):
        return [fp.Point(cx + radius * math.cos(-2.0 * math.pi * k / n),
                         cy + radius * math.sin(-2.0 * math.pi * k / n))
                for k in range(n)]
    return make


@pytest.fixture
def l_shape():
    """Concave L-shaped hexagon of area 300, negative winding."""
    return [fp.Point(0, 0), fp.Point(0, 20), fp.Point(20, 20),
            fp.Point(20, 10), fp.Point(10, 10), fp.Point(10, 0)]
