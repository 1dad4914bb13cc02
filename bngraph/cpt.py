"""Normalisation of conditional probability tables."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _divide(value: float, total: float) -> float:
    if total != 0:
        return value / total
    if value == 0:
        return math.nan
    return math.copysign(math.inf, value) * math.copysign(1.0, total)


def normalize_cpt(table: Sequence[Sequence[float]]) -> list[list[float]]:
    """Scale each column of a table (given as rows) so that it sums to one.

    Columns summing to zero come out as NaN. A new table is returned.
    """
    rows = [[float(value) for value in row] for row in table]
    if not rows:
        return []
    ncols = len(rows[0])
    if any(len(row) != ncols for row in rows):
        raise ValueError("all rows of the table must have the same length")
    totals = [math.fsum(column) for column in zip(*rows)]
    return [[_divide(value, total) for value, total in zip(row, totals)] for row in rows]