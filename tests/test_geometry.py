"""Tests for the spiral geometry precomputation."""

import math

import numpy as np
import pytest

from climatespiral.model.geometry import precompute, series_length, step_radii, reference_label
from climatespiral.model.gradient import colour
from climatespiral.model.layout import DIRECTIONS, REFERENCE_VALUES
from climatespiral.model.mapping import MappingKind, radius, MAX_PLOT_RADIUS
from climatespiral.controller.playback import AnimationController
from climatespiral.model.series import AnomalyTable, MISSING
from climatespiral.model.state import DisplayOptions

from conftest import HEADER, year_row, full_year


def test_trailing_months_trimmed(two_year_trailing_table, measure):
    assert series_length(two_year_trailing_table) == 22
    spiral = precompute(two_year_trailing_table, measure)
    assert spiral.datalen == 22
    assert len(spiral.colours) == 22
    for kind in MappingKind:
        assert spiral.positions[kind].shape == (22, 2)
    last = spiral.points[-1]
    assert (last.year, last.month) == (1881, 9)


def test_full_year(one_year_table, measure):
    spiral = precompute(one_year_table, measure)
    assert spiral.datalen == 12
    assert [p.month for p in spiral.points] == list(range(12))
    assert {p.year for p in spiral.points} == {1880}


def test_gistemp_file(gistemp_file, measure):
    spiral = precompute(AnomalyTable.from_csv(gistemp_file), measure)
    assert spiral.datalen == 29
    assert spiral.year_label(28) == "1882"
    assert spiral.month_labels[4] == "May"


def test_segment_colour_averages_neighbours(measure):
    values = ["0.2", "-0.3"] + ["0.0"] * 10
    spiral = precompute(AnomalyTable.from_rows(HEADER, [year_row(1880, values)]), measure)
    assert spiral.points[1].segment_colour == colour((0.2 + -0.3) / 2)
    # The first segment starts from 0 °C
    assert spiral.points[0].segment_colour == colour(0.1)


def test_positions_follow_directions(one_year_table, measure):
    spiral = precompute(one_year_table, measure)
    for point in spiral.points:
        for kind in MappingKind:
            r = radius(kind, point.anomaly)
            assert point.radius[kind] == pytest.approx(r)
            x, y = point.position[kind]
            assert x == pytest.approx(r * DIRECTIONS[point.month, 0])
            assert y == pytest.approx(r * DIRECTIONS[point.month, 1])
            assert spiral.positions[kind][point.month] == pytest.approx([x, y])


def test_direction_layout():
    assert DIRECTIONS.shape == (12, 2)
    # January at 12 o'clock (screen y down), April at 3 o'clock
    assert DIRECTIONS[0] == pytest.approx([0.0, -1.0])
    assert DIRECTIONS[3] == pytest.approx([1.0, 0.0], abs=1e-12)
    assert np.linalg.norm(DIRECTIONS, axis=1) == pytest.approx(np.ones(12))
    angles = np.arctan2(DIRECTIONS[:, 1], DIRECTIONS[:, 0])
    steps = np.diff(np.unwrap(angles))
    assert steps == pytest.approx(np.full(11, math.pi / 6))


def test_reference_circles(one_year_table, measure):
    spiral = precompute(one_year_table, measure)
    assert [ref.celsius for ref in spiral.references] == list(REFERENCE_VALUES)
    outer = spiral.references[-1]
    assert outer.label == "1.5°C"
    assert outer.label_width == measure("1.5°C")
    for kind in MappingKind:
        assert outer.radius[kind] == pytest.approx(MAX_PLOT_RADIUS)
    assert spiral.references[0].colour == colour(0.0)


def test_reference_label():
    assert reference_label(0) == "0.0°C"
    assert reference_label(1) == "1.0°C"


def test_grid_and_tick_radii():
    grid = step_radii(0.5)
    ticks = step_radii(0.25, extra=1)
    for kind in MappingKind:
        assert len(grid[kind]) == 5
        assert len(ticks[kind]) == 11
        assert grid[kind][-1] == pytest.approx(MAX_PLOT_RADIUS)


def test_empty_table(measure):
    spiral = precompute(AnomalyTable.from_rows(HEADER, []), measure)
    assert spiral.datalen == 0
    assert spiral.colours.shape == (0, 3)
    assert spiral.year_label(0) == ""
    assert len(spiral.references) == len(REFERENCE_VALUES)


def test_final_row_fully_missing(measure):
    table = AnomalyTable.from_rows(HEADER, [full_year(1880), year_row(1881, [MISSING] * 12)])
    assert table.trailing_missing() == 12
    spiral = precompute(table, measure)
    assert spiral.datalen == 12
    assert spiral.points[-1].year == 1880


def test_single_row_fully_missing(measure):
    table = AnomalyTable.from_rows(HEADER, [year_row(1880, [MISSING] * 12)])
    spiral = precompute(table, measure)
    assert spiral.datalen == 0
    controller = AnimationController(spiral.datalen)
    assert not controller.running
    assert not controller.tick()
    assert controller.index == 0


def test_mapping_switch_leaves_geometry_untouched(one_year_table, measure):
    spiral = precompute(one_year_table, measure)
    before = {kind: spiral.positions[kind].copy() for kind in MappingKind}
    options = DisplayOptions()

    for kind in (MappingKind.LOG, MappingKind.SQRT, MappingKind.LINEAR):
        options.set_mapping(kind)
        for k in MappingKind:
            assert np.array_equal(spiral.positions[k], before[k])
            for i, point in enumerate(spiral.points):
                assert point.position[k] == tuple(spiral.positions[k][i])
