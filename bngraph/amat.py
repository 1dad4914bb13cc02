"""Conversions between arc sets and adjacency matrices, plus path queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Arc = tuple[str, str]
Matrix = list[list[int]]


def _node_index(nodes: Sequence[str]) -> dict[str, int]:
    """Map each label to the position of its first occurrence."""
    index: dict[str, int] = {}
    for position, label in enumerate(nodes):
        index.setdefault(label, position)
    return index


def _check_square(amat: Sequence[Sequence[int]], size: int | None = None) -> int:
    n = len(amat)
    if any(len(row) != n for row in amat):
        raise ValueError("the adjacency matrix must be square")
    if size is not None and n != size:
        raise ValueError(
            f"the adjacency matrix has {n} rows but there are {size} nodes"
        )
    return n


def arcs_to_amat(arcs: Iterable[Arc], nodes: Sequence[str]) -> Matrix:
    """Build the adjacency matrix of an arc set; amat[i][j] == 1 means i -> j."""
    index = _node_index(nodes)
    amat = [[0] * len(nodes) for _ in nodes]
    for source, dest in arcs:
        try:
            amat[index[source]][index[dest]] = 1
        except KeyError as exc:
            raise ValueError(f"unknown node {exc.args[0]!r} in the arc set") from None
    return amat


def amat_to_arcs(amat: Sequence[Sequence[int]], nodes: Sequence[str]) -> list[Arc]:
    """List the arcs of an adjacency matrix, row by row."""
    _check_square(amat, len(nodes))
    return [
        (nodes[i], nodes[j])
        for i, row in enumerate(amat)
        for j, value in enumerate(row)
        if value == 1
    ]


def arcs_rbind(
    first: Iterable[Arc], second: Iterable[Arc], reverse_second: bool
) -> list[Arc]:
    """Stack two arc sets, optionally reversing the arcs of the second one."""
    result = [(source, dest) for source, dest in first]
    if reverse_second:
        result.extend((dest, source) for source, dest in second)
    else:
        result.extend((source, dest) for source, dest in second)
    return result


def _successors(
    amat: Sequence[Sequence[int]], node: int, directed_only: bool
) -> Iterator[int]:
    for other, value in enumerate(amat[node]):
        if value and not (directed_only and amat[other][node]):
            yield other


def _reachable(
    amat: Sequence[Sequence[int]], start: int, target: int, directed_only: bool
) -> bool:
    n = _check_square(amat)
    for position in (start, target):
        if not 0 <= position < n:
            raise ValueError(f"node index {position} is out of range")
    seen: set[int] = set()
    queue = deque(_successors(amat, start, directed_only))
    while queue:
        node = queue.popleft()
        if node == target:
            return True
        if node in seen:
            continue
        seen.add(node)
        queue.extend(
            other
            for other in _successors(amat, node, directed_only)
            if other not in seen
        )
    return False


def has_path(amat: Sequence[Sequence[int]], start: int, target: int) -> bool:
    """Whether target can be reached from start following any arc.

    Undirected arcs (present in both directions) can be walked either way.
    """
    return _reachable(amat, start, target, directed_only=False)


def directed_path(amat: Sequence[Sequence[int]], start: int, target: int) -> bool:
    """Whether target can be reached from start following directed arcs only."""
    return _reachable(amat, start, target, directed_only=True)


def inv_uptri3(x: int, n: int) -> tuple[int, int]:
    """Row and column of the x-th cell of the strict upper triangle of an n x n matrix.

    Cells are numbered row by row, left to right.
    """
    if n < 2 or not 0 <= x < n * (n - 1) // 2:
        raise ValueError(f"index {x} is outside the upper triangle of size {n}")
    bound = n - 1
    for row in range(n):
        if x < bound:
            return row, n - (bound - x)
        bound += n - (row + 2)
    raise ValueError(f"index {x} is outside the upper triangle of size {n}")