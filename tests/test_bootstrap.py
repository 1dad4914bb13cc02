import pytest

from bngraph.bootstrap import (
    ArcStrength,
    bootstrap_arc_coefficients,
    bootstrap_reduce,
    bootstrap_strength_counters,
)

NODES = ["A", "B", "C"]


def zeros():
    return [[0.0] * 3 for _ in range(3)]


def test_directed_arc_adds_weight():
    prob = bootstrap_strength_counters(zeros(), 2.0, [("A", "B")], NODES)
    assert prob[0][1] == 2.0
    assert prob[1][0] == prob[0][0]


def test_undirected_arc_splits_weight():
    prob = bootstrap_strength_counters(zeros(), 1.0, [("A", "B"), ("B", "A")], NODES)
    assert prob[0][1] == 0.5
    assert prob[1][0] == 0.5


def test_counters_accumulate_and_leave_input_alone():
    start = zeros()
    once = bootstrap_strength_counters(start, 1.0, [("B", "C")], NODES)
    twice = bootstrap_strength_counters(once, 1.0, [("B", "C")], NODES)
    assert twice[1][2] == 2 * once[1][2]
    assert start == zeros()


def test_counters_reject_wrong_shape():
    with pytest.raises(ValueError):
        bootstrap_strength_counters([[0.0]], 1.0, [], NODES)


def test_coefficients_cover_all_ordered_pairs():
    result = bootstrap_arc_coefficients(zeros(), NODES)
    pairs = {(r.from_node, r.to_node) for r in result}
    assert len(result) == len(NODES) * (len(NODES) - 1)
    assert len(pairs) == len(result)
    assert all(a != b for a, b in pairs)


def test_coefficients_are_consistent():
    prob = bootstrap_strength_counters(zeros(), 1.0, [("A", "B")], NODES)
    result = {(r.from_node, r.to_node): r for r in bootstrap_arc_coefficients(prob, NODES)}
    forward, backward = result[("A", "B")], result[("B", "A")]
    assert forward.strength == backward.strength
    assert forward.direction + backward.direction == pytest.approx(1.0)
    assert forward.direction > backward.direction
    assert result[("A", "C")].direction == result[("A", "C")].strength
    assert all(0 <= r.strength <= 1 and 0 <= r.direction <= 1 for r in result.values())


def test_coefficients_clamp_rounding_noise():
    prob = zeros()
    prob[0][1] = 1 - 1e-12
    prob[1][2] = 1e-12
    result = {(r.from_node, r.to_node): r for r in bootstrap_arc_coefficients(prob, NODES)}
    assert result[("A", "B")].strength == 1.0
    assert result[("B", "C")].strength == 0.0


def test_reduce_identical_frames_is_identity():
    frame = bootstrap_arc_coefficients(
        bootstrap_strength_counters(zeros(), 1.0, [("A", "B")], NODES), NODES
    )
    assert bootstrap_reduce([frame, frame, frame]) == frame


def test_reduce_averages():
    one = [ArcStrength("A", "B", 1.0, 1.0)]
    two = [ArcStrength("A", "B", 0.0, 0.0)]
    (result,) = bootstrap_reduce([one, two])
    assert result.strength == 0.5
    assert result.direction == result.strength
    assert (result.from_node, result.to_node) == ("A", "B")


def test_reduce_errors():
    with pytest.raises(ValueError):
        bootstrap_reduce([])
    with pytest.raises(ValueError):
        bootstrap_reduce([[ArcStrength("A", "B", 1.0, 1.0)], []])