# FlatPath - A 2D Vector Path Engine
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
FlatPath Types Constants Module

Numeric constants shared by the geometry algorithms, the path accumulator
and the output devices.
"""

import math

TWO_PI = 2.0 * math.pi
HALF_PI = 0.5 * math.pi

# Stroke widths
HAIRLINE_WIDTH = 1.0                        # drawn as a line strip, never expanded
DEVICE_HAIRLINE_WIDTH = 1.0                 # device units used by renderers for hairlines

# Tolerances
EPSILON = 1e-12                             # coincident points / zero-length vectors
COLLINEAR_EPSILON = 1e-8                    # |cross| of unit vectors below this is collinear
ANGLE_EPSILON = 1e-9                        # gap below which an arc end point is already emitted

# Arc corner sampling
ARC_MIN_SEGMENTS = 4                        # floor for tiny fillets
ARC_SEGMENT_LENGTH = 2.0                    # roughly one point every 2 units of arc length

# Ellipse element defaults
ELLIPSE_ALPHA_START = 0.0
ELLIPSE_ALPHA_END = TWO_PI

# Rounded rectangle corner ranges, in drawing order
ROUNDRECT_TOP_LEFT = (math.pi, 3.0 * HALF_PI)
ROUNDRECT_TOP_RIGHT = (3.0 * HALF_PI, TWO_PI)
ROUNDRECT_BOTTOM_RIGHT = (0.0, HALF_PI)
ROUNDRECT_BOTTOM_LEFT = (HALF_PI, math.pi)

# Device defaults
DEFAULT_PAGE_WIDTH = 640
DEFAULT_PAGE_HEIGHT = 640
OUTPUT_DIRECTORY = "fp_output"
