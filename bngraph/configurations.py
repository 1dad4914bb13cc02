"""Configurations of discrete variables and helpers on value vectors."""

from __future__ import annotations

import itertools
import operator
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence

from bngraph.dataframe import Factor

INT_MAX = 2**31 - 1


def fast_config(
    columns: Sequence[Sequence[int | None]],
    levels: Sequence[int],
    offset: int = 0,
) -> tuple[list[int | None], int]:
    """Assign each row a code for the combination of its 1-based level codes.

    Codes follow column-major indexing, starting from ``offset``; rows with a
    missing value get ``None``. Returns the codes and the number of possible
    configurations.
    """
    columns = [list(column) for column in columns]
    levels = list(levels)
    if not columns:
        raise ValueError("at least one column is needed")
    if len(levels) != len(columns):
        raise ValueError("there must be one number of levels for each column")
    nrows = len(columns[0])
    if any(len(column) != nrows for column in columns):
        raise ValueError("all columns must have the same length")

    cumlevels = list(itertools.accumulate([1, *levels[:-1]], operator.mul))
    total = cumlevels[-1] * levels[-1]
    if total >= INT_MAX:
        raise ValueError("attempting to create a factor with more than INT_MAX levels.")

    configs: list[int | None] = []
    for row in zip(*columns):
        if any(value is None for value in row):
            configs.append(None)
        else:
            configs.append(
                sum((value - 1) * step for value, step in zip(row, cumlevels)) + offset
            )
    return configs, total


def unique(values: Iterable[Hashable]) -> list:
    """Distinct values in order of first appearance."""
    return list(dict.fromkeys(values))


def dupe(values: Iterable[Hashable]) -> list[bool]:
    """Flag every value that occurs more than once."""
    values = list(values)
    counts = Counter(values)
    return [counts[value] > 1 for value in values]


def int_to_factor(values: Iterable[int | None], nlevels: int | None = None) -> Factor:
    """Turn integers into a factor.

    Without ``nlevels`` the levels are the distinct values in order of first
    appearance; with it they are ``0 .. nlevels - 1``. Values outside the
    levels become missing.
    """
    values = list(values)
    if nlevels is None:
        levels = [value for value in unique(values) if value is not None]
    else:
        levels = list(range(nlevels))
    position = {level: i + 1 for i, level in enumerate(levels)}
    codes = [None if value is None else position.get(value) for value in values]
    return Factor(codes, tuple(str(level) for level in levels))


def configurations(
    parents: Sequence[Factor], factor: bool = False, all_levels: bool = False
) -> list[int | None] | Factor:
    """Configurations of a set of factors.

    As a factor (``factor``), with every possible configuration as a level
    (``all_levels``) or only those observed; otherwise as 1-based integers.
    """
    configs, total = fast_config(
        [parent.codes for parent in parents],
        [parent.nlevels() for parent in parents],
        0,
    )
    if factor:
        return int_to_factor(configs, total if all_levels else None)
    return [None if value is None else value + 1 for value in configs]