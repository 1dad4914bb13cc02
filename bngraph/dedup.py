"""Removal of nearly collinear numeric columns."""

from __future__ import annotations

import math
import sys
from collections.abc import Mapping, Sequence

_TOL = math.sqrt(sys.float_info.epsilon)


def dedup(
    data: Mapping[str, Sequence[float]], threshold: float
) -> dict[str, Sequence[float]]:
    """Drop every column whose absolute correlation with an earlier kept column
    exceeds ``threshold``. Column order is preserved.
    """
    names = list(data)
    if not names:
        return {}
    columns = [[float(value) for value in data[name]] for name in names]
    nrows = len(columns[0])
    if any(len(column) != nrows for column in columns):
        raise ValueError("all columns must have the same length")
    if nrows == 0:
        raise ValueError("the data frame has no observations")

    means = [math.fsum(column) / nrows for column in columns]
    sds = [
        math.sqrt(math.fsum((v - m) * (v - m) for v in column) / nrows)
        for column, m in zip(columns, means)
    ]

    drop = [False] * len(names)
    for j in range(len(names) - 1):
        if drop[j]:
            continue
        for k in range(j + 1, len(names)):
            if drop[k]:
                continue
            if sds[j] < _TOL or sds[k] < _TOL:
                correlation = 0.0
            else:
                cov = math.fsum(
                    (a - means[j]) * (b - means[k])
                    for a, b in zip(columns[j], columns[k])
                ) / nrows
                correlation = cov / (sds[j] * sds[k])
            if abs(correlation) > threshold:
                drop[k] = True

    return {name: data[name] for name, dropped in zip(names, drop) if not dropped}