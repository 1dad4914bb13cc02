"""Arc strength and direction from bootstrapped networks."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from bngraph.amat import arcs_to_amat

Arc = tuple[str, str]
Matrix = list[list[float]]

_TOL = math.sqrt(sys.float_info.epsilon)


@dataclass(frozen=True)
class ArcStrength:
    """Strength and direction confidence of one ordered pair of nodes."""

    from_node: str
    to_node: str
    strength: float
    direction: float


def _check_prob(prob: Sequence[Sequence[float]], n: int) -> None:
    if len(prob) != n or any(len(row) != n for row in prob):
        raise ValueError("the probability matrix must be square and match the nodes")


def _clamp(value: float) -> float:
    """Snap values within floating point noise of 0 or 1 onto the boundary."""
    value = 0.0 if value < _TOL else value
    return 1.0 if value > 1 - _TOL else value


def bootstrap_strength_counters(
    prob: Sequence[Sequence[float]],
    weight: float,
    arcs: Iterable[Arc],
    nodes: Sequence[str],
) -> Matrix:
    """Add the arcs of one network to the arc counters.

    A directed arc adds ``weight`` to its cell; an undirected arc adds half of
    it to each of its two cells. A new matrix is returned.
    """
    n = len(nodes)
    _check_prob(prob, n)
    amat = arcs_to_amat(arcs, nodes)
    result = [[float(value) for value in row] for row in prob]

    for i, row in enumerate(amat):
        for j, value in enumerate(row):
            if value != 1:
                continue
            if amat[j][i] == 1:
                result[i][j] += 0.5 * weight
            else:
                result[i][j] += weight

    return result


def bootstrap_arc_coefficients(
    prob: Sequence[Sequence[float]], nodes: Sequence[str]
) -> list[ArcStrength]:
    """Compute strength and direction for every ordered pair of distinct nodes."""
    n = len(nodes)
    _check_prob(prob, n)

    result: list[ArcStrength] = []
    for i, source in enumerate(nodes):
        for j, dest in enumerate(nodes):
            if i == j:
                continue
            strength = prob[i][j] + prob[j][i]
            direction = 0.0 if strength == 0 else prob[i][j] / strength
            result.append(
                ArcStrength(source, dest, _clamp(strength), _clamp(direction))
            )
    return result


def bootstrap_reduce(frames: Iterable[Sequence[ArcStrength]]) -> list[ArcStrength]:
    """Average several arc strength tables sharing the same arcs in the same order."""
    frames = [list(frame) for frame in frames]
    if not frames:
        raise ValueError("at least one arc strength table is needed")
    size = len(frames[0])
    if any(len(frame) != size for frame in frames):
        raise ValueError("all arc strength tables must have the same length")

    reps = len(frames)
    return [
        ArcStrength(
            rows[0].from_node,
            rows[0].to_node,
            math.fsum(row.strength for row in rows) / reps,
            math.fsum(row.direction for row in rows) / reps,
        )
        for rows in zip(*frames)
    ]