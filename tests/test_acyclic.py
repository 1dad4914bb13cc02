import pytest

from bngraph.acyclic import is_pdag_acyclic

NODES = ["a", "b", "c", "d"]


def test_chain_is_acyclic():
    arcs = [("a", "b"), ("b", "c"), ("c", "d")]
    assert is_pdag_acyclic(arcs, NODES) is True


def test_chain_returns_no_nodes():
    arcs = [("a", "b"), ("b", "c")]
    assert is_pdag_acyclic(arcs, NODES, return_nodes=True) == []


def test_directed_cycle_detected():
    arcs = [("a", "b"), ("b", "c"), ("c", "a")]
    assert is_pdag_acyclic(arcs, NODES) is False


def test_directed_cycle_nodes_exclude_leaf():
    arcs = [("a", "b"), ("b", "c"), ("c", "a"), ("c", "d")]
    assert is_pdag_acyclic(arcs, NODES, return_nodes=True) == ["a", "b", "c"]


def _undirected_triangle():
    pairs = [("a", "b"), ("b", "c"), ("c", "a")]
    return pairs + [(dest, source) for source, dest in pairs]


def test_undirected_triangle_ignored_when_directed_only():
    assert is_pdag_acyclic(_undirected_triangle(), NODES, directed=True) is True


def test_undirected_triangle_counts_otherwise():
    result = is_pdag_acyclic(_undirected_triangle(), NODES, return_nodes=True)
    assert result == ["a", "b", "c"]


def test_single_undirected_arc_with_child_is_acyclic():
    arcs = [("a", "b"), ("b", "a"), ("b", "c")]
    assert is_pdag_acyclic(arcs, NODES) is True


def test_empty_graph():
    assert is_pdag_acyclic([], NODES) is True


@pytest.mark.parametrize(
    "arcs",
    [
        [("a", "b"), ("b", "c"), ("c", "a")],
        [("a", "b"), ("b", "c")],
        [("a", "b"), ("b", "a"), ("b", "c"), ("c", "d"), ("d", "b")],
    ],
)
def test_boolean_and_node_answers_agree(arcs):
    flag = is_pdag_acyclic(arcs, NODES)
    bad = is_pdag_acyclic(arcs, NODES, return_nodes=True)
    assert flag == (bad == [])
    assert set(bad) <= set(NODES)


def test_unknown_node_raises():
    with pytest.raises(ValueError):
        is_pdag_acyclic([("a", "z")], NODES)