"""Degrees of freedom adjusted for structural zeros."""

from __future__ import annotations

from collections.abc import Sequence


def df_adjust(ni: Sequence[int], nj: Sequence[int]) -> float:
    """Degrees of freedom counting only levels with positive marginal totals."""
    alx = max(sum(1 for count in ni if count > 0), 1)
    aly = max(sum(1 for count in nj if count > 0), 1)
    return float((alx - 1) * (aly - 1))


def cdf_adjust(ni: Sequence[Sequence[int]], nj: Sequence[Sequence[int]]) -> float:
    """Adjusted degrees of freedom summed over the strata of a conditioning set.

    ``ni[i][k]`` and ``nj[j][k]`` are the marginal counts of level ``i`` of x
    and level ``j`` of y in stratum ``k``.
    """
    ni = [list(row) for row in ni]
    nj = [list(row) for row in nj]
    strata = {len(row) for row in ni + nj}
    if len(strata) > 1:
        raise ValueError("all marginal tables must have the same number of strata")
    llz = strata.pop() if strata else 0
    return float(
        sum(
            df_adjust([row[k] for row in ni], [row[k] for row in nj])
            for k in range(llz)
        )
    )