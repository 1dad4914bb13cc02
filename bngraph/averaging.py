"""Acyclic averaging of networks from arc strengths."""

from __future__ import annotations

import warnings
from collections.abc import Sequence

from bngraph.amat import amat_to_arcs, has_path

Arc = tuple[str, str]


def smart_network_averaging(
    arcs: Sequence[Arc], nodes: Sequence[str], weights: Sequence[float]
) -> list[Arc]:
    """Add arcs in increasing order of weight, skipping those that close a cycle.

    A warning is issued for every arc that is skipped. The input weights are
    left untouched.
    """
    arcs = list(arcs)
    weights = list(weights)
    if len(weights) != len(arcs):
        raise ValueError("there must be exactly one weight for each arc")

    index: dict[str, int] = {}
    for position, label in enumerate(nodes):
        index.setdefault(label, position)

    amat = [[0] * len(nodes) for _ in nodes]

    order = sorted(range(len(arcs)), key=weights.__getitem__)
    for position in order:
        source_label, dest_label = arcs[position]
        try:
            source, dest = index[source_label], index[dest_label]
        except KeyError as exc:
            raise ValueError(f"unknown node {exc.args[0]!r} in the arc set") from None

        # look for a path back from dest to source, ignoring the direct arc.
        probe = [row[:] for row in amat]
        probe[dest][source] = 0
        if has_path(probe, dest, source):
            warnings.warn(
                f"arc {source_label} -> {dest_label} would introduce cycles "
                "in the graph, ignoring.",
                stacklevel=2,
            )
        else:
            amat[source][dest] = 1

    return amat_to_arcs(amat, nodes)