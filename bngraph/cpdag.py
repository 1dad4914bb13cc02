"""Equivalence classes of DAGs: v-structures, CPDAGs and consistent extensions."""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Sequence

from bngraph.amat import amat_to_arcs, arcs_to_amat, directed_path

Arc = tuple[str, str]
VStructure = tuple[str, str, str]
Matrix = list[list[int]]

ABSENT = 0
PRESENT = 1
FIXED = 2


def _fix_all_directed(a: Matrix) -> None:
    n = len(a)
    for i in range(n):
        for j in range(n):
            if a[i][j] == PRESENT and a[j][i] == ABSENT:
                a[i][j] = FIXED
            if a[i][j] == ABSENT and a[j][i] == PRESENT:
                a[j][i] = FIXED


def _scan_graph(a: Matrix) -> list[bool]:
    """Flag the nodes with at least two parents (the colliders)."""
    n = len(a)
    collider = [False] * n
    for j in range(n):
        parents = 0
        for i in range(n):
            if i == j:
                continue
            if a[i][j] == PRESENT and a[j][i] == ABSENT:
                parents += 1
            if parents >= 2:
                collider[j] = True
                break
    return collider


def _mark_vstructures(a: Matrix, collider: list[bool]) -> None:
    n = len(a)
    # arcs into non-colliders are not part of any v-structure.
    for j in range(n):
        if not collider[j]:
            for i in range(n):
                if a[i][j] == PRESENT:
                    a[j][i] = PRESENT

    for j in range(n):
        if not collider[j]:
            continue
        for i in range(n):
            if i == j or a[i][j] != PRESENT:
                continue
            if a[j][i] == ABSENT:
                a[i][j] = FIXED
            elif a[j][i] == PRESENT and collider[i]:
                a[i][j] = a[j][i] = FIXED
                warnings.warn(
                    "conflicting v-structures, the PDAG spans more than one "
                    "equivalence class.",
                    stacklevel=3,
                )


def _unmark_shielded(a: Matrix, collider: list[bool]) -> None:
    n = len(a)
    for i in range(n):
        if not collider[i]:
            continue
        for j in range(n):
            if a[j][i] != FIXED:
                continue
            unshielded = any(
                a[k][i] == FIXED
                and j != k
                and a[j][k] == ABSENT
                and a[k][j] == ABSENT
                for k in range(n)
            )
            if not unshielded:
                a[j][i] = a[i][j] = PRESENT


def _prevent_cycles(a: Matrix) -> bool:
    n = len(a)
    changed = False
    for j in range(n):
        for i in range(j + 1, n):
            if a[i][j] != PRESENT or a[j][i] != PRESENT:
                continue
            if directed_path(a, i, j):
                a[i][j], a[j][i] = FIXED, ABSENT
                changed = True
            elif directed_path(a, j, i):
                a[i][j], a[j][i] = ABSENT, FIXED
                changed = True
    return changed


def _prevent_additional_vstructures(a: Matrix) -> bool:
    n = len(a)
    has_parent = [False] * n
    has_neighbour = [False] * n

    for j in range(n):
        for i in range(n):
            if a[i][j] != ABSENT:
                if a[j][i] == PRESENT:
                    has_neighbour[j] = True
                else:
                    has_parent[j] = True
            if has_parent[j] and has_neighbour[j]:
                break

    for j in range(n):
        if not (has_parent[j] and has_neighbour[j]):
            continue
        # turn every neighbour into a child to avoid new v-structures.
        for i in range(n):
            if a[i][j] != ABSENT and a[j][i] == PRESENT:
                if has_parent[i]:
                    a[i][j] = a[j][i] = FIXED
                else:
                    a[i][j], a[j][i] = ABSENT, FIXED
        return True

    return False


def _amat_to_vstructs(
    a: Matrix, nodes: Sequence[str], collider: list[bool]
) -> list[VStructure]:
    n = len(a)
    result: list[VStructure] = []
    for i in range(n):
        if not collider[i]:
            continue
        parents = [j for j in range(n) if a[j][i] != 0]
        for position, j in enumerate(parents):
            for k in parents[position + 1:]:
                result.append((nodes[j], nodes[i], nodes[k]))
    return result


def vstructures(
    arcs: Iterable[Arc],
    nodes: Sequence[str],
    return_arcs: bool = False,
    moral: bool = False,
) -> list[Arc] | list[VStructure]:
    """Find the v-structures of a graph.

    Shielded colliders are kept only with ``moral``. Returns either the arcs
    that belong to v-structures or the v-structures as (X, Z, Y) triples with
    Z the collider.
    """
    a = arcs_to_amat(arcs, nodes)
    collider = _scan_graph(a)
    _mark_vstructures(a, collider)
    if not moral:
        _unmark_shielded(a, collider)

    for row in a:
        row[:] = [1 if value == FIXED else 0 for value in row]

    if return_arcs:
        return amat_to_arcs(a, nodes)
    return _amat_to_vstructs(a, nodes, collider)


def cpdag(
    arcs: Iterable[Arc],
    nodes: Sequence[str],
    moral: bool = False,
    fix: bool = False,
) -> Matrix:
    """Compute the adjacency matrix of the completed PDAG of a graph.

    With ``fix`` every directed arc keeps its direction; otherwise only arcs
    in v-structures do, and ``moral`` drops shielded colliders.
    """
    a = arcs_to_amat(arcs, nodes)
    collider = _scan_graph(a)

    if fix:
        _fix_all_directed(a)
    else:
        _mark_vstructures(a, collider)
        if moral:
            _unmark_shielded(a, collider)

    for _ in range(len(a) * len(a)):
        changed = _prevent_cycles(a)
        changed = _prevent_additional_vstructures(a) or changed
        if not changed:
            break

    return [[1 if value > 1 else value for value in row] for row in a]


def _sink_neighbours(a: Matrix, node: int, matched: list[bool]) -> list[int] | None:
    """Neighbours via undirected arcs, or None if the node has a child."""
    neighbours: list[int] = []
    for j, done in enumerate(matched):
        if done:
            continue
        if a[j][node] == 0 and a[node][j] == 1:
            return None
        if a[j][node] == 1 and a[node][j] == 1:
            neighbours.append(j)
    return neighbours


def _all_adjacent(a: Matrix, neighbours: list[int]) -> bool:
    return all(
        a[x][y] != 0 or a[y][x] != 0
        for position, x in enumerate(neighbours)
        for y in neighbours[position + 1:]
    )


def pdag_extension(arcs: Iterable[Arc], nodes: Sequence[str]) -> list[Arc]:
    """Direct the undirected arcs of a PDAG into a consistent DAG extension."""
    a = arcs_to_amat(arcs, nodes)
    n = len(nodes)
    matched = [False] * n
    left = n

    for _ in range(n):
        changed = False
        for i in range(n):
            if matched[i]:
                continue
            neighbours = _sink_neighbours(a, i, matched)
            if neighbours is None or not _all_adjacent(a, neighbours):
                continue
            for j in neighbours:
                a[i][j] = 0
            changed = True
            matched[i] = True
            left -= 1
        if not changed or left == 0:
            break

    return amat_to_arcs(a, nodes)