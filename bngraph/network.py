"""Whole-network helpers: neighbourhood sets, equality and consistency checks."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

Arc = tuple[str, str]


def _field(entry: Any, name: str) -> Any:
    """Read a field from either a mapping or an object with attributes."""
    if isinstance(entry, Mapping):
        return entry[name]
    return getattr(entry, name)


def nbr_to_arcs(nbr: Mapping[str, Any]) -> list[Arc]:
    """Turn per-node neighbourhood sets into an arc set.

    Each node maps to an entry whose ``nbr`` field lists its neighbours; every
    neighbour yields one arc from the node to that neighbour.
    """
    return [
        (node, other) for node, entry in nbr.items() for other in _field(entry, "nbr")
    ]


def all_equal(target: Mapping[str, Any], current: Mapping[str, Any]) -> bool | str:
    """Compare two networks, ignoring the ordering of nodes and arcs.

    Returns ``True`` when they match, otherwise a message describing the
    first difference found.
    """
    tnodes = list(target["nodes"])
    cnodes = list(current["nodes"])

    if len(tnodes) != len(cnodes):
        return "Different number of nodes"
    if set(tnodes) != set(cnodes):
        return "Different node sets"

    tarcs = [tuple(arc) for arc in target["arcs"]]
    carcs = [tuple(arc) for arc in current["arcs"]]

    if len(tarcs) != len(carcs):
        return "Different number of directed/undirected arcs"
    if Counter(tarcs) != Counter(carcs):
        return "Different arc sets"

    return True


def _pair(i: int, j: int) -> tuple[int, int]:
    return (i, j) if i <= j else (j, i)


def bn_recovery(
    bn: Mapping[str, Any],
    strict: bool = False,
    mb: bool = False,
    filter: int = 1,
) -> Mapping[str, Any]:
    """Check neighbourhood sets (or Markov blankets) for symmetry.

    If every relation is symmetric the input is returned unchanged. Otherwise
    a ``ValueError`` is raised when ``strict`` is true; if not, a repaired
    structure is returned in which two nodes are related when they were listed
    by at least ``filter`` of the two (1 keeps the union, 2 the intersection).
    """
    nodes = list(bn)
    index = {label: position for position, label in enumerate(nodes)}
    counts: Counter[tuple[int, int]] = Counter()

    for i, label in enumerate(nodes):
        entry = bn[label]
        members: Iterable[str] = entry if mb else _field(entry, "nbr")
        for member in members:
            k = index.get(member)
            if k is not None:
                counts[_pair(i, k)] += 1

    if all(count in (0, 2) for count in counts.values()):
        return bn

    what = "markov blankets" if mb else "neighbourhood sets"
    if strict:
        raise ValueError(f"{what} are not symmetric.")

    fixed: dict[str, Any] = {}
    for i, label in enumerate(nodes):
        kept = [
            other
            for j, other in reversed(list(enumerate(nodes)))
            if j != i and counts[_pair(i, j)] >= filter
        ]
        if mb:
            fixed[label] = kept
        else:
            fixed[label] = {"mb": _field(bn[label], "mb"), "nbr": kept}

    return fixed