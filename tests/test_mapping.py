"""Tests for the anomaly-to-radius mappings."""

import math

import numpy as np
import pytest

from climatespiral.model.mapping import (
    MappingKind, radius, radii, DOMAIN_MIN, DOMAIN_MAX, MAX_PLOT_RADIUS, RANGE_LOG, RANGE,
)


def test_domain_constants():
    assert DOMAIN_MIN == -1.0
    assert DOMAIN_MAX == 1.5
    assert math.log(1 + RANGE * RANGE_LOG) == pytest.approx(RANGE)


@pytest.mark.parametrize("kind", list(MappingKind))
def test_extremes_agree(kind):
    assert radius(kind, DOMAIN_MIN) == 0.0
    assert radius(kind, DOMAIN_MAX) == pytest.approx(MAX_PLOT_RADIUS)


@pytest.mark.parametrize("kind", list(MappingKind))
def test_below_domain_is_zero(kind):
    assert radius(kind, DOMAIN_MIN - 0.5) == 0.0
    assert radius(kind, -50.0) == 0.0


@pytest.mark.parametrize("kind", list(MappingKind))
def test_monotonic_over_domain(kind):
    grid = np.linspace(DOMAIN_MIN, DOMAIN_MAX, 1001)
    values = [radius(kind, c) for c in grid]
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert min(values) >= 0.0


@pytest.mark.parametrize("kind", list(MappingKind))
def test_vectorised_matches_scalar(kind):
    grid = np.linspace(DOMAIN_MIN - 0.3, DOMAIN_MAX, 57)
    expected = [radius(kind, c) for c in grid]
    assert radii(kind, grid) == pytest.approx(expected)


def test_sqrt_expands_small_anomalies():
    c = DOMAIN_MIN + 0.25
    assert radius(MappingKind.SQRT, c) > radius(MappingKind.LINEAR, c)
    assert radius(MappingKind.LOG, c) > radius(MappingKind.LINEAR, c)


def test_parse_accepts_values_and_members():
    assert MappingKind.parse("sqrt") is MappingKind.SQRT
    assert MappingKind.parse(MappingKind.LOG) is MappingKind.LOG


def test_parse_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown mapping kind"):
        MappingKind.parse("cubic")


def test_radius_rejects_unknown_kind():
    with pytest.raises(ValueError):
        radius("cubic", 0.5)


def test_plot_mappings_draws_all_kinds(monkeypatch):
    import matplotlib.pyplot as plt
    from climatespiral.model import mapping

    plt.switch_backend("Agg")
    shown = []
    monkeypatch.setattr(plt, "show", lambda: shown.append(True))

    mapping.plot_mappings()

    axes = plt.gca()
    assert shown == [True]
    assert [line.get_label() for line in axes.get_lines()] == [k.value for k in MappingKind]
    plt.close("all")
