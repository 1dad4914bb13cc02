"""Cached neighbourhood information for the nodes of a graph."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum


class _Role(IntEnum):
    NONE = 0
    BLANKET = 1
    NEIGHBOUR = 2
    PARENT = 3
    CHILD = 4


@dataclass(frozen=True)
class NodeStructure:
    """Markov blanket, neighbours, parents and children of one node."""

    mb: tuple[str, ...]
    nbr: tuple[str, ...]
    parents: tuple[str, ...]
    children: tuple[str, ...]


def _node_structure(
    cur: int, nodes: Sequence[str], amat: Sequence[Sequence[int]]
) -> NodeStructure:
    roles = [_Role.NONE] * len(nodes)

    for i, _ in enumerate(nodes):
        if amat[cur][i] == 1:
            if amat[i][cur] == 0:
                roles[i] = _Role.CHILD
                # other parents of this child belong to the markov blanket.
                for j, _ in enumerate(nodes):
                    if (
                        j != cur
                        and amat[j][i] == 1
                        and amat[i][j] == 0
                        and roles[j] <= _Role.BLANKET
                    ):
                        roles[j] = _Role.BLANKET
            else:
                roles[i] = _Role.NEIGHBOUR
        elif amat[i][cur] == 1:
            roles[i] = _Role.PARENT

    def pick(predicate) -> tuple[str, ...]:
        return tuple(label for label, role in zip(nodes, roles) if predicate(role))

    return NodeStructure(
        mb=pick(lambda r: r >= _Role.BLANKET),
        nbr=pick(lambda r: r >= _Role.NEIGHBOUR),
        parents=pick(lambda r: r == _Role.PARENT),
        children=pick(lambda r: r == _Role.CHILD),
    )


def _check(nodes: Sequence[str], amat: Sequence[Sequence[int]]) -> None:
    if len(amat) != len(nodes) or any(len(row) != len(nodes) for row in amat):
        raise ValueError("the adjacency matrix must be square and match the nodes")


def cache_structure(
    nodes: Sequence[str], amat: Sequence[Sequence[int]]
) -> dict[str, NodeStructure]:
    """Compute the cached structure of every node."""
    _check(nodes, amat)
    return {label: _node_structure(i, nodes, amat) for i, label in enumerate(nodes)}


def cache_partial_structure(
    nodes: Sequence[str], target: str, amat: Sequence[Sequence[int]]
) -> NodeStructure:
    """Compute the cached structure of a single node."""
    _check(nodes, amat)
    try:
        position = list(nodes).index(target)
    except ValueError:
        raise ValueError(f"unknown node {target!r}") from None
    return _node_structure(position, nodes, amat)