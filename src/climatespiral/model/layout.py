"""
Fixed layout of the climate spiral.

Plot units run from -RANGE to +RANGE on both axes with the origin at the centre.
Screen-like y direction: positive y points down.
"""
from __future__ import annotations

import math

import numpy as np

from climatespiral.model.gradient import Colour
from climatespiral.model.mapping import RANGE

# ------------------------------------------------------------------------------
# Months / directions
# ------------------------------------------------------------------------------
MONTHS: int = 12
MONTH_ANGLE: float = 2 * math.pi / MONTHS  # month spokes 30 degrees apart


def direction_vectors() -> np.ndarray:
    """
    Unit vectors for the 12 month slots, shape (12, 2).

    Slot 0 points to 12 o'clock, the following slots proceed clockwise on screen.
    """
    angles = (np.arange(MONTHS) - 3) * MONTH_ANGLE
    return np.column_stack([np.cos(angles), np.sin(angles)])


DIRECTIONS: np.ndarray = direction_vectors()

# ------------------------------------------------------------------------------
# Reference values (°C)
# ------------------------------------------------------------------------------
REFERENCE_VALUES: tuple[float, ...] = (0.0, 1.0, 1.5)
GRID_STEP: float = 0.5
TICK_STEP: float = 0.25

# ------------------------------------------------------------------------------
# Canvas
# ------------------------------------------------------------------------------
CANVAS_SIZE: int = 800   # square canvas width and height in pixels
MARGIN: float = 0.12     # month labels live in this margin
TICK_SIZE: float = 0.03  # half length of an axis tick, plot units

LABEL_RADIUS: float = RANGE * (1 + MARGIN / 2)  # month labels in the middle of the margin

LABEL_POINT_SIZE: int = 14
YEAR_POINT_SIZE: int = 36

BACKGROUND_COLOUR = Colour(0, 0, 0)
GRID_COLOUR = Colour(102, 102, 102)
AXES_COLOUR = Colour(153, 153, 153)
LABEL_COLOUR = Colour(255, 255, 255)
