"""Checks of arc sets against the conditional Gaussian model assumptions."""

from __future__ import annotations

import warnings
from collections.abc import Mapping, Sequence
from typing import Any

from bngraph.dataframe import Factor

Arc = tuple[str, str]


def _column(data: Any, nodes: Sequence[str], label: str) -> Any:
    if isinstance(data, Mapping):
        return data[label]
    return data[list(nodes).index(label)]


def arcs_cg_assumptions(
    arcs: Sequence[Arc], nodes: Sequence[str], data: Any
) -> list[Arc]:
    """Drop or reject arcs from a continuous node to a discrete one.

    Discrete variables are ``Factor`` columns; everything else is continuous.
    A directed offending arc raises ``ValueError``; the offending direction of
    an undirected arc is dropped with a warning.
    """
    arcs = [tuple(arc) for arc in arcs]
    known = set(nodes)
    for arc in arcs:
        for label in arc:
            if label not in known:
                raise ValueError(f"unknown node {label!r} in the arc set")

    present = set(arcs)
    discrete: dict[str, bool] = {}

    def is_discrete(label: str) -> bool:
        if label not in discrete:
            discrete[label] = isinstance(_column(data, nodes, label), Factor)
        return discrete[label]

    result: list[Arc] = []
    for source, dest in arcs:
        if is_discrete(source) or not is_discrete(dest):
            result.append((source, dest))
            continue
        if (dest, source) not in present:
            raise ValueError(
                f"arc {source} -> {dest} violates the assumptions of the model."
            )
        warnings.warn(
            f"the direction {source} -> {dest} of {source} - {dest} violates "
            "the assumptions of the model and will be ignored.",
            stacklevel=2,
        )
    return result