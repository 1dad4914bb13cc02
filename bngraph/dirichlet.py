"""Dirichlet posterior (marginal likelihood) terms behind the BDe and K2 scores."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from bngraph.dataframe import Factor


def _kept(size: int, experimental: Iterable[int] | None) -> list[int]:
    """Positions of the observational data, leaving out the experimental ones."""
    if experimental is None:
        return list(range(size))
    excluded = set(experimental)
    if any(not 0 <= position < size for position in excluded):
        raise ValueError("experimental positions must index the observations")
    return [i for i in range(size) if i not in excluded]


def _codes(variable: Factor) -> list[int]:
    if any(code is None for code in variable.codes):
        raise ValueError("missing values are not allowed")
    return list(variable.codes)


def _check_iss(iss: float | None) -> None:
    if iss is not None and iss <= 0:
        raise ValueError("the imaginary sample size must be positive")


def dpost(
    x: Factor, iss: float | None = None, experimental: Sequence[int] | None = None
) -> float:
    """Log marginal likelihood of a factor with no parents.

    Without ``iss`` all hyperparameters are 1 (K2); otherwise they are
    ``iss / nlevels`` (BDe). ``experimental`` lists zero-based positions of
    observations to leave out.
    """
    _check_iss(iss)
    codes = _codes(x)
    llx = x.nlevels()
    if iss is None:
        imaginary, alpha = float(llx), 1.0
    else:
        imaginary, alpha = float(iss), iss / llx

    counts = [0] * llx
    kept = _kept(len(codes), experimental)
    for i in kept:
        counts[codes[i] - 1] += 1

    res = math.fsum(math.lgamma(count + alpha) - math.lgamma(alpha) for count in counts)
    return res + math.lgamma(imaginary) - math.lgamma(imaginary + len(kept))


def cdpost(
    x: Factor,
    y: Factor,
    iss: float | None = None,
    experimental: Sequence[int] | None = None,
) -> float:
    """Log marginal likelihood of ``x`` given the parent configurations ``y``.

    Hyperparameters are 1 without ``iss`` (K2), otherwise ``iss`` divided by
    the number of cells of the joint table (BDe).
    """
    _check_iss(iss)
    xcodes, ycodes = _codes(x), _codes(y)
    if len(xcodes) != len(ycodes):
        raise ValueError("x and y must have the same length")
    llx, lly = x.nlevels(), y.nlevels()
    cells = llx * lly
    if iss is None:
        imaginary, alpha = float(cells), 1.0
    else:
        imaginary, alpha = float(iss), iss / cells

    n = [[0] * lly for _ in range(llx)]
    nj = [0] * lly
    for i in _kept(len(xcodes), experimental):
        n[xcodes[i] - 1][ycodes[i] - 1] += 1
        nj[ycodes[i] - 1] += 1

    per_column = imaginary / lly
    terms = [
        math.lgamma(count + alpha) - math.lgamma(alpha) for row in n for count in row
    ]
    terms.extend(
        math.lgamma(per_column) - math.lgamma(count + per_column) for count in nj
    )
    return math.fsum(terms)