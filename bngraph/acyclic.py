"""Acyclicity check for partially directed graphs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from bngraph.amat import arcs_to_amat, has_path

Arc = tuple[str, str]


def _result(
    nodes: Sequence[str], good: list[bool], remaining: int, return_nodes: bool
) -> bool | list[str]:
    if remaining < 3:
        return [] if return_nodes else True
    if return_nodes:
        return [label for label, ok in zip(nodes, good) if not ok]
    return False


def is_pdag_acyclic(
    arcs: Iterable[Arc],
    nodes: Sequence[str],
    return_nodes: bool = False,
    directed: bool = False,
) -> bool | list[str]:
    """Check whether a partially directed graph is acyclic.

    Nodes that cannot lie on a cycle (roots, leaves and ends of removable
    undirected arcs) are peeled off repeatedly. With ``directed`` only cycles
    made of directed arcs count. Returns a boolean, or with ``return_nodes``
    the nodes that may be part of a cycle (empty when acyclic).
    """
    amat = arcs_to_amat(arcs, nodes)
    n = len(nodes)

    if directed:
        for i, row in enumerate(amat):
            for j, value in enumerate(row):
                if value == 1 and amat[j][i] == 1:
                    amat[i][j] = amat[j][i] = 0

    good = [False] * n
    rowsums = [0] * n
    colsums = [0] * n
    cross = [0] * n
    remaining = previous = n
    z = 0

    while True:
        for i in range(n):
            if good[i]:
                continue

            rowsums[i] = sum(amat[i])
            colsums[i] = sum(row[i] for row in amat)
            cross[i] = sum(amat[i][j] * amat[j][i] for j in range(n))

            while True:
                if (
                    rowsums[i] == 0
                    or colsums[i] == 0
                    or (cross[i] == 1 and rowsums[i] == 1 and colsums[i] == 1)
                ):
                    for j in range(n):
                        amat[i][j] = amat[j][i] = 0
                    rowsums[i] = colsums[i] = cross[i] = 0
                    good[i] = True
                    remaining -= 1
                    break

                if cross[i] != 1:
                    break

                j = next(
                    (j for j in range(i) if amat[i][j] * amat[j][i] == 1), None
                )
                if j is None:
                    break

                if (colsums[i] == 1 and colsums[j] == 1) or (
                    rowsums[i] == 1 and rowsums[j] == 1
                ):
                    amat[i][j] = amat[j][i] = 0
                    cross[i] = 0
                    rowsums[i] -= 1
                    colsums[i] -= 1
                    rowsums[j] -= 1
                    colsums[j] -= 1
                    # the undirected arc may have been all that kept the node.
                    if rowsums[i] == 0 or colsums[i] == 0:
                        continue
                break

        if remaining < 3:
            return _result(nodes, good, remaining, return_nodes)

        if previous == remaining:
            arc = next(
                (
                    (i, j)
                    for i in range(n)
                    for j in range(i)
                    if amat[i][j] * amat[j][i] == 1
                ),
                None,
            )
            if arc is None:
                # cycles made only of directed arcs are never false positives.
                return _result(nodes, good, remaining, return_nodes)

            i, j = arc
            amat[i][j] = amat[j][i] = 0
            if has_path(amat, i, j) or has_path(amat, j, i):
                return _result(nodes, good, remaining, return_nodes)

            # the arc is not on any cycle: drop it and scan again.
            z += 1
            continue

        previous = remaining
        z += 1
        if z >= n:
            return _result(nodes, good, remaining, return_nodes)