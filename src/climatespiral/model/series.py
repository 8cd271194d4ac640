"""
Anomaly Table
=============
Tabular source of monthly temperature anomalies.

Expected layout (GISTEMP "Global-mean monthly, seasonal, and annual means"):

    Land-Ocean: Global Means              <- optional title line(s), skipped
    Year,Jan,Feb,...,Dec,J-D,D-N,DJF,...  <- header row
    1880,-.20,-.25,...                    <- one row per year

Cells holding MISSING are months not reported yet.
"""
from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Sequence

from climatespiral.model.layout import MONTHS

logger = logging.getLogger(__name__)

MISSING: str = "***"
YEAR_COLUMN: str = "Year"


class MissingValueError(ValueError):
    """A month other than the trailing run of the series has no value."""


@dataclass
class AnomalyTable:
    """
    Year rows x 12 month columns, kept as the raw strings of the file.

    Only the final row may end with MISSING cells; anything else is rejected
    by `validate`.
    """
    month_labels: list[str]
    years: list[str] = field(default_factory=list)
    cells: list[list[str]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.cells)

    def get_string(self, row: int, month: int) -> str:
        return self.cells[row][month]

    def get_num(self, row: int, month: int) -> float:
        text = self.get_string(row, month)
        try:
            return float(text)
        except ValueError:
            raise ValueError(
                f"Invalid anomaly '{text}' for {self.month_labels[month]} {self.years[row]}."
            ) from None

    def is_missing(self, row: int, month: int) -> bool:
        return self.get_string(row, month) == MISSING

    def year(self, row: int) -> int:
        return int(self.years[row])

    def trailing_missing(self) -> int:
        """Number of MISSING cells at the end of the final row."""
        if not self.cells:
            return 0
        count = 0
        last = self.row_count - 1
        for month in range(MONTHS - 1, -1, -1):
            if not self.is_missing(last, month):
                break
            count += 1
        return count

    def validate(self) -> None:
        """
        Reject missing values that are not part of the trailing run.

        Raises:
            MissingValueError: On the first interior missing month.
        """
        usable = MONTHS * self.row_count - self.trailing_missing()
        for i in range(usable):
            row, month = divmod(i, MONTHS)
            if self.is_missing(row, month):
                raise MissingValueError(
                    f"Missing anomaly for {self.month_labels[month]} {self.years[row]} "
                    f"inside the series; only trailing months may be missing."
                )

    @classmethod
    def from_rows(cls, header: Sequence[str], rows: Sequence[Sequence[str]]) -> AnomalyTable:
        """
        Build a table from a header row and data rows.

        Columns after the 12 months (annual and seasonal means) are ignored.
        """
        if len(header) < MONTHS + 1:
            raise ValueError(f"Header needs a year column and {MONTHS} month columns, got {list(header)}.")

        table = cls(month_labels=[h.strip() for h in header[1:MONTHS + 1]])
        for row in rows:
            if not row or not row[0].strip():
                continue
            if len(row) < MONTHS + 1:
                raise ValueError(f"Row for year '{row[0]}' has fewer than {MONTHS} months.")
            table.years.append(row[0].strip())
            table.cells.append([c.strip() for c in row[1:MONTHS + 1]])

        table.validate()
        return table

    @classmethod
    def from_csv(cls, filepath: str) -> AnomalyTable:
        """
        Load a GISTEMP-style CSV, skipping any lines before the header row.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the header is not found or a cell is malformed.
            MissingValueError: If a month inside the series is missing.
        """
        logger.info(f"Loading anomalies from: {filepath}")
        try:
            with open(filepath, mode='r', encoding='utf-8-sig', newline='') as f:
                rows = list(csv.reader(f))
        except OSError as e:
            logger.error(f"CSV read failed: {e}")
            raise

        for i, row in enumerate(rows):
            if row and row[0].strip() == YEAR_COLUMN:
                table = cls.from_rows(row, rows[i + 1:])
                logger.info(
                    f"Loaded {table.row_count} years, "
                    f"{table.trailing_missing()} trailing month(s) not yet available."
                )
                return table

        raise ValueError(f"No header row starting with '{YEAR_COLUMN}' in {filepath}.")
