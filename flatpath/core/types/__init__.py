# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
FlatPath Types Package - Public API

All value types, path elements, display list elements and constants are
available through this single namespace to support the import pattern
``from ..core import types as fp``.

**Internal Module Organization:**
- constants.py: numeric constants and defaults
- graphics.py: points, triangles, ellipse parameters, colors, styles,
  display list elements
- elements.py: path element variants and the Path container
"""

from .constants import *
from .graphics import *
from .elements import *
