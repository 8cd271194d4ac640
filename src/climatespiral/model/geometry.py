"""
Spiral Geometry (Precomputation)
================================
Turns the anomaly table into everything the renderer needs, once, at load time.

Why is this file needed?
------------------------
1. Speed: radii, positions and colours for every month and for all three
   mappings are computed up front, so a frame only slices cached arrays and
   switching the mapping costs nothing.
2. Decoupling: the renderer draws from SpiralGeometry and never reads the
   table or calls the mapping functions itself.

Classes:
    TimePoint: One month of the spiral.
    ReferenceCircle: A fixed calibration circle (0, +1.0, +1.5 °C).
    SpiralGeometry: The cached result of `precompute`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, TYPE_CHECKING

import numpy as np

from climatespiral.model.gradient import Colour, colour, colours
from climatespiral.model.layout import MONTHS, DIRECTIONS, REFERENCE_VALUES, GRID_STEP, TICK_STEP
from climatespiral.model.mapping import MappingKind, DOMAIN_MIN, RANGE, radius, radii
from climatespiral.model.series import AnomalyTable

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

TextMeasure = Callable[[str], float]


@dataclass(frozen=True)
class TimePoint:
    year: int
    month: int  # 0..11
    anomaly: float
    radius: dict[MappingKind, float]
    position: dict[MappingKind, tuple[float, float]]
    segment_colour: Colour  # colour of the segment ending at this point


@dataclass(frozen=True)
class ReferenceCircle:
    celsius: float
    radius: dict[MappingKind, float]
    colour: Colour
    label: str
    label_width: float


@dataclass
class SpiralGeometry:
    """
    Immutable-after-load geometry of the whole series.

    `positions[kind]` is (datalen, 2) and `colours` is (datalen, 3); row i
    matches `points[i]`.
    """
    points: list[TimePoint] = field(default_factory=list)
    positions: dict[MappingKind, npt.NDArray[np.float64]] = field(default_factory=dict)
    colours: npt.NDArray[np.uint8] = field(default_factory=lambda: np.empty((0, 3), dtype=np.uint8))
    references: list[ReferenceCircle] = field(default_factory=list)
    grid_radii: dict[MappingKind, list[float]] = field(default_factory=dict)
    tick_radii: dict[MappingKind, list[float]] = field(default_factory=dict)
    month_labels: list[str] = field(default_factory=list)
    first_year: int = 0

    @property
    def datalen(self) -> int:
        return len(self.points)

    def year_label(self, index: int) -> str:
        if not self.points:
            return ""
        return str(self.first_year + index // MONTHS)

    def anomalies(self) -> npt.NDArray[np.float64]:
        return np.array([p.anomaly for p in self.points], dtype=np.float64)


def series_length(table: AnomalyTable) -> int:
    """Months in the table minus the trailing run of missing months."""
    return MONTHS * table.row_count - table.trailing_missing()


def reference_label(celsius: float) -> str:
    return f"{celsius:.1f}°C"


def step_radii(step: float, extra: int = 0) -> dict[MappingKind, list[float]]:
    """
    Radii of the anomalies DOMAIN_MIN + i * step for i in 1..count + extra.

    Used for the square grid (extra=0) and for axis ticks (extra=1, one tick
    beyond the last grid line).
    """
    count = round(RANGE / step)
    celsius = [DOMAIN_MIN + i * step for i in range(1, count + extra + 1)]
    return {kind: [radius(kind, c) for c in celsius] for kind in MappingKind}


def precompute(table: AnomalyTable, measure_text: TextMeasure) -> SpiralGeometry:
    """
    Build the spiral geometry for every month and every mapping.

    Args:
        table: Validated anomaly table.
        measure_text: Width of a label in pixels, supplied by the view.

    Returns:
        SpiralGeometry, empty (datalen 0) for a table without rows.
    """
    datalen = series_length(table)
    logger.info(f"Precomputing spiral geometry for {datalen} months.")

    anomalies = np.array(
        [table.get_num(*divmod(i, MONTHS)) for i in range(datalen)],
        dtype=np.float64,
    )
    months = np.arange(datalen) % MONTHS
    directions = DIRECTIONS[months]

    # Segment i joins point i-1 to point i; the first one starts from 0 °C
    previous = np.concatenate([[0.0], anomalies[:-1]]) if datalen else anomalies
    segment_rgb = colours((previous + anomalies) / 2) if datalen else np.empty((0, 3), dtype=np.uint8)

    radius_by_kind = {kind: radii(kind, anomalies) for kind in MappingKind}
    positions = {kind: radius_by_kind[kind][:, None] * directions for kind in MappingKind}

    first_year = table.year(0) if table.row_count else 0
    points = []
    for i in range(datalen):
        points.append(TimePoint(
            year=first_year + i // MONTHS,
            month=int(months[i]),
            anomaly=float(anomalies[i]),
            radius={kind: float(radius_by_kind[kind][i]) for kind in MappingKind},
            position={kind: (float(positions[kind][i, 0]), float(positions[kind][i, 1])) for kind in MappingKind},
            segment_colour=Colour(*(int(c) for c in segment_rgb[i])),
        ))

    references = []
    for celsius in REFERENCE_VALUES:
        label = reference_label(celsius)
        references.append(ReferenceCircle(
            celsius=celsius,
            radius={kind: radius(kind, celsius) for kind in MappingKind},
            colour=colour(celsius),
            label=label,
            label_width=measure_text(label),
        ))

    return SpiralGeometry(
        points=points,
        positions=positions,
        colours=segment_rgb,
        references=references,
        grid_radii=step_radii(GRID_STEP),
        tick_radii=step_radii(TICK_STEP, extra=1),
        month_labels=list(table.month_labels),
        first_year=first_year,
    )
