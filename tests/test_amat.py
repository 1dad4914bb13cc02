import pytest

from bngraph.amat import (
    amat_to_arcs,
    arcs_rbind,
    arcs_to_amat,
    directed_path,
    has_path,
    inv_uptri3,
)

NODES = ["A", "B", "C", "D"]
ARCS = [("A", "B"), ("B", "C"), ("D", "C")]


def test_arcs_to_amat_entries():
    amat = arcs_to_amat(ARCS, NODES)
    assert len(amat) == 4
    assert all(len(row) == 4 for row in amat)
    assert amat[0][1] == 1
    assert amat[1][2] == 1
    assert amat[3][2] == 1
    assert sum(map(sum, amat)) == 3


def test_arcs_to_amat_empty():
    amat = arcs_to_amat([], NODES)
    assert sum(map(sum, amat)) == 0
    assert amat_to_arcs(amat, NODES) == []


def test_arcs_to_amat_unknown_node():
    with pytest.raises(ValueError):
        arcs_to_amat([("A", "Z")], NODES)


def test_round_trip_orders_by_row():
    shuffled = [("D", "C"), ("B", "C"), ("A", "B")]
    result = amat_to_arcs(arcs_to_amat(shuffled, NODES), NODES)
    assert set(result) == set(shuffled)
    assert result == sorted(shuffled, key=lambda a: (NODES.index(a[0]), NODES.index(a[1])))


def test_amat_to_arcs_size_mismatch():
    with pytest.raises(ValueError):
        amat_to_arcs([[0, 1], [0, 0]], NODES)


def test_arcs_rbind_plain_and_reversed():
    first = [("A", "B")]
    second = [("C", "D"), ("B", "C")]
    assert arcs_rbind(first, second, False) == first + second
    assert arcs_rbind(first, second, True) == [("A", "B"), ("D", "C"), ("C", "B")]


def test_has_path_follows_direction():
    amat = arcs_to_amat(ARCS, NODES)
    assert has_path(amat, 0, 2)
    assert not has_path(amat, 2, 0)
    assert not has_path(amat, 0, 3)


def test_has_path_uses_undirected_arcs_both_ways():
    amat = arcs_to_amat([("A", "B"), ("B", "A"), ("B", "C")], NODES)
    assert has_path(amat, 1, 0)
    assert has_path(amat, 0, 2)


def test_directed_path_ignores_undirected_arcs():
    amat = arcs_to_amat([("A", "B"), ("B", "A"), ("B", "C")], NODES)
    assert not directed_path(amat, 0, 2)
    assert directed_path(amat, 1, 2)


def test_path_index_out_of_range():
    amat = arcs_to_amat(ARCS, NODES)
    with pytest.raises(ValueError):
        has_path(amat, 0, 7)


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_inv_uptri3_enumerates_upper_triangle(n):
    pairs = [(r, c) for r in range(n) for c in range(r + 1, n)]
    assert [inv_uptri3(k, n) for k in range(len(pairs))] == pairs


def test_inv_uptri3_out_of_range():
    with pytest.raises(ValueError):
        inv_uptri3(3, 3)
    with pytest.raises(ValueError):
        inv_uptri3(-1, 4)