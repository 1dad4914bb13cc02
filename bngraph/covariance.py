"""Means and covariance matrices of numeric columns."""

from __future__ import annotations

import math
from collections.abc import Sequence

Matrix = list[list[float]]


def _rows(data: Sequence[Sequence[float]]) -> int:
    if not data:
        raise ValueError("at least one column is needed")
    nrows = len(data[0])
    if any(len(column) != nrows for column in data):
        raise ValueError("all columns must have the same length")
    if nrows < 2:
        raise ValueError("at least two observations are needed")
    return nrows


def _cov(x: Sequence[float], mx: float, y: Sequence[float], my: float, n: int) -> float:
    return math.fsum((a - mx) * (b - my) for a, b in zip(x, y)) / (n - 1)


def covmat(
    data: Sequence[Sequence[float]], mean: Sequence[float], first: int = 0
) -> Matrix:
    """Sample covariance matrix of the columns in ``data``.

    Only columns from ``first`` onwards are filled; the other entries are zero.
    """
    nrows = _rows(data)
    ncols = len(data)
    mat = [[0.0] * ncols for _ in range(ncols)]
    for i in range(first, ncols):
        for j in range(i, ncols):
            mat[i][j] = mat[j][i] = _cov(data[i], mean[i], data[j], mean[j], nrows)
    return mat


def update_covmat(
    data: Sequence[Sequence[float]],
    mean: Sequence[float],
    update: int,
    mat: Sequence[Sequence[float]],
) -> Matrix:
    """Return a copy of ``mat`` with the row and column of ``update`` recomputed."""
    nrows = _rows(data)
    ncols = len(data)
    if len(mat) != ncols or any(len(row) != ncols for row in mat):
        raise ValueError("the covariance matrix does not match the data")
    result = [[float(value) for value in row] for row in mat]
    for j in range(ncols):
        result[j][update] = result[update][j] = _cov(
            data[update], mean[update], data[j], mean[j], nrows
        )
    return result


def variance(data: Sequence[float], mean: float) -> float:
    """Sum of squared deviations from ``mean`` (not divided by the sample size)."""
    return math.fsum((value - mean) * (value - mean) for value in data)


def mean(data: Sequence[float]) -> float:
    """Arithmetic mean."""
    data = list(data)
    if not data:
        raise ValueError("the mean of no observations is undefined")
    return math.fsum(data) / len(data)


def meanvec(data: Sequence[Sequence[float]]) -> list[float]:
    """Mean of each column."""
    return [mean(column) for column in data]