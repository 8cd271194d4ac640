"""Shared test fixtures."""

from __future__ import annotations

import pytest

from climatespiral.model.series import AnomalyTable, MISSING


HEADER = ["Year", "Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec", "J-D", "D-N"]


def year_row(year: int, values: list[str]) -> list[str]:
    return [str(year), *values, "****", "****"]


def full_year(year: int, value: float = 0.1) -> list[str]:
    return year_row(year, [f"{value:.2f}"] * 12)


GISTEMP_CSV = """Land-Ocean: Global Means
Year,Jan,Feb,Mar,Apr,May,Jun,Jul,Aug,Sep,Oct,Nov,Dec,J-D,D-N,DJF,MAM,JJA,SON
1880,-.20,-.25,-.09,-.16,-.09,-.21,-.18,-.10,-.15,-.23,-.22,-.18,-.17,***,***,-.11,-.16,-.20
1881,-.20,-.15,.03,.05,.06,-.19,.00,-.04,-.16,-.22,-.19,-.07,-.09,-.10,-.18,.05,-.08,-.19
1882,.16,.14,.04,-.16,-.14,***,***,***,***,***,***,***,***,***,***,***,***,***
"""


@pytest.fixture
def measure():
    """Text measurement stand-in: 8 px per character."""
    return lambda text: 8.0 * len(text)


@pytest.fixture
def one_year_table() -> AnomalyTable:
    values = [f"{0.05 * m:.2f}" for m in range(12)]
    return AnomalyTable.from_rows(HEADER, [year_row(1880, values)])


@pytest.fixture
def two_year_trailing_table() -> AnomalyTable:
    second = [f"{0.1:.2f}"] * 10 + [MISSING, MISSING]
    return AnomalyTable.from_rows(HEADER, [full_year(1880), year_row(1881, second)])


@pytest.fixture
def gistemp_file(tmp_path):
    path = tmp_path / "global-temp-anomaly.csv"
    path.write_text(GISTEMP_CSV, encoding="utf-8")
    return str(path)
