"""
Anomaly-to-Radius Mapping
=========================
Converts a temperature anomaly (°C) into a radius in plot units.

All three mappings share the same contract:
    - anomaly <= DOMAIN_MIN  -> radius 0
    - anomaly == DOMAIN_MAX  -> radius MAX_PLOT_RADIUS
    - monotonically non-decreasing in between

so switching the mapping never changes the size of the outer reference circle.
"""
from __future__ import annotations

import logging
import math
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------------------
# Domain / range
# ------------------------------------------------------------------------------
DOMAIN_MIN: float = -1.0  # anomaly at the origin (must be < 0)
DOMAIN_MAX: float = 1.5   # anomaly at the outer edge (must be > 0)

RANGE: float = DOMAIN_MAX - DOMAIN_MIN
RANGE_LOG: float = (math.exp(RANGE) - 1) / RANGE  # log(1 + RANGE * RANGE_LOG) == RANGE

MAX_PLOT_RADIUS: float = RANGE
PLOT_SCALE: float = MAX_PLOT_RADIUS / RANGE


class MappingKind(StrEnum):
    """Radius transform applied to an anomaly."""
    LINEAR = "linear"
    SQRT = "sqrt"
    LOG = "log"

    @classmethod
    def parse(cls, value: MappingKind | str) -> MappingKind:
        """
        Coerce a selector value into a MappingKind.

        Raises:
            ValueError: If the value names none of the three mappings.
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown mapping kind '{value}', expected one of {[k.value for k in cls]}."
            ) from None


def radius(kind: MappingKind, celsius: float) -> float:
    """
    Radius in plot units for a single anomaly.

    Args:
        kind: Which of the three mappings to apply.
        celsius: Temperature anomaly in °C.

    Returns:
        Non-negative radius, 0 at DOMAIN_MIN and MAX_PLOT_RADIUS at DOMAIN_MAX.
    """
    dist = celsius - DOMAIN_MIN
    if dist <= 0:
        return 0.0

    if kind == MappingKind.LINEAR:
        return dist * PLOT_SCALE
    if kind == MappingKind.SQRT:
        return math.sqrt(dist * RANGE) * PLOT_SCALE
    if kind == MappingKind.LOG:
        return math.log(1 + dist * RANGE_LOG) * PLOT_SCALE

    raise ValueError(f"Unknown mapping kind: {kind!r}")


def radii(kind: MappingKind, celsius: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Vectorised `radius` for precomputing a whole series at once."""
    dist = np.asarray(celsius, dtype=np.float64) - DOMAIN_MIN
    dist = np.clip(dist, 0.0, None)

    if kind == MappingKind.LINEAR:
        return dist * PLOT_SCALE
    if kind == MappingKind.SQRT:
        return np.sqrt(dist * RANGE) * PLOT_SCALE
    if kind == MappingKind.LOG:
        return np.log1p(dist * RANGE_LOG) * PLOT_SCALE

    raise ValueError(f"Unknown mapping kind: {kind!r}")


def plot_mappings() -> None:
    """
    Plot the three radius mappings over the anomaly domain.
    """
    celsius = np.linspace(DOMAIN_MIN - 0.25, DOMAIN_MAX, 500)

    plt.rcParams["figure.constrained_layout.use"] = True
    plt.figure(figsize=(7, 5))

    for kind, style in zip(MappingKind, ("k-", "b--", "r-.")):
        plt.plot(celsius, radii(kind, celsius), style, lw=2, label=kind.value)

    plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    plt.minorticks_on()
    plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

    plt.title("Anomaly to radius mappings")
    plt.xlabel("Anomaly (°C)")
    plt.ylabel("Radius (plot units)")
    plt.legend()
    plt.show()


if __name__ == "__main__":
    plot_mappings()
