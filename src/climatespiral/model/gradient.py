"""Two-sided colour gradient: cool below zero, neutral at zero, warm above."""
from __future__ import annotations

from typing import NamedTuple, TYPE_CHECKING

import numpy as np

from climatespiral.model.mapping import DOMAIN_MIN, DOMAIN_MAX

if TYPE_CHECKING:
    import numpy.typing as npt


class Colour(NamedTuple):
    """RGB colour with 0..255 channels."""
    r: int
    g: int
    b: int

    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


COOL = Colour(0, 0, 255)        # blue  for anomaly < 0
NEUTRAL = Colour(255, 255, 255)  # white for anomaly = 0
WARM = Colour(255, 0, 0)        # red   for anomaly > 0


def lerp_colour(start: Colour, stop: Colour, amount: float) -> Colour:
    """Linear interpolation between two colours, `amount` clamped to [0, 1]."""
    t = min(max(amount, 0.0), 1.0)
    return Colour(*(round(a + (b - a) * t) for a, b in zip(start, stop)))


def colour(celsius: float) -> Colour:
    """Colour for a temperature anomaly in °C."""
    if celsius >= 0:
        return lerp_colour(NEUTRAL, WARM, celsius / DOMAIN_MAX)
    return lerp_colour(NEUTRAL, COOL, celsius / DOMAIN_MIN)


def colours(celsius: npt.ArrayLike) -> npt.NDArray[np.uint8]:
    """
    Vectorised `colour`.

    Returns:
        (N, 3) array of RGB channels.
    """
    values = np.asarray(celsius, dtype=np.float64)
    warm_t = np.clip(values / DOMAIN_MAX, 0.0, 1.0)[:, None]
    cool_t = np.clip(values / DOMAIN_MIN, 0.0, 1.0)[:, None]

    neutral = np.asarray(NEUTRAL, dtype=np.float64)
    rgb = np.where(
        values[:, None] >= 0,
        neutral + (np.asarray(WARM) - neutral) * warm_t,
        neutral + (np.asarray(COOL) - neutral) * cool_t,
    )
    return np.round(rgb).astype(np.uint8)
