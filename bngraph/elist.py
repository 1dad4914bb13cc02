"""Conversions between arc sets and edge lists."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

Arc = tuple[str, str]


def arcs_to_elist(
    arcs: Sequence[Arc],
    nodes: Sequence[str],
    weights: Sequence[float] | None = None,
    numeric_ids: bool = False,
    sublist: bool = False,
    parents: bool = False,
) -> dict[str, Any]:
    """Build an edge list keyed by node.

    Each node maps to its children (or its parents when ``parents`` is true),
    given as labels or, with ``numeric_ids``, as zero-based node positions.
    With ``sublist`` each entry is a dictionary holding ``"edges"`` (and
    ``"weight"`` when weights are given); otherwise weighted entries map each
    edge to its weight and unweighted entries are plain lists.
    """
    index: dict[str, int] = {}
    for position, label in enumerate(nodes):
        index.setdefault(label, position)

    arcs = list(arcs)
    if weights is not None:
        weights = list(weights)
        if len(weights) != len(arcs):
            raise ValueError("there must be exactly one weight for each arc")

    for arc in arcs:
        for label in arc:
            if label not in index:
                raise ValueError(f"unknown node {label!r} in the arc set")

    key_end, other_end = (1, 0) if parents else (0, 1)
    edges: dict[str, list] = {label: [] for label in nodes}
    edge_weights: dict[str, list[float]] = {label: [] for label in nodes}

    for position, arc in enumerate(arcs):
        owner = nodes[index[arc[key_end]]]
        other = arc[other_end]
        edges[owner].append(index[other] if numeric_ids else other)
        if weights is not None:
            edge_weights[owner].append(weights[position])

    result: dict[str, Any] = {}
    for label in nodes:
        if weights is None:
            result[label] = {"edges": edges[label]} if sublist else edges[label]
        elif sublist:
            result[label] = {"edges": edges[label], "weight": edge_weights[label]}
        else:
            result[label] = dict(zip(edges[label], edge_weights[label]))
    return result


def elist_to_arcs(elist: Mapping[str, Iterable[str]]) -> list[Arc]:
    """Flatten an edge list into an arc set."""
    return [(source, dest) for source, adjacent in elist.items() for dest in adjacent]