import math

import pytest

from bngraph.cpt import normalize_cpt

TABLE = [
    [1.0, 2.0, 0.0],
    [3.0, 2.0, 0.0],
    [4.0, 6.0, 0.0],
]


def test_columns_sum_to_one():
    result = normalize_cpt(TABLE)
    for j in range(2):
        assert math.fsum(row[j] for row in result) == pytest.approx(1.0)


def test_proportions_are_preserved():
    result = normalize_cpt(TABLE)
    assert result[1][0] / result[0][0] == pytest.approx(TABLE[1][0] / TABLE[0][0])
    assert result[2][1] / result[1][1] == pytest.approx(TABLE[2][1] / TABLE[1][1])


def test_zero_column_is_nan():
    result = normalize_cpt(TABLE)
    zero_column = [row[2] for row in result]
    assert len(zero_column) == 3
    assert [math.isnan(value) for value in zero_column] == [True, True, True]
    assert result[0][0] == pytest.approx(1.0 / 8.0)


def test_input_is_untouched_and_errors():
    copy = [row[:] for row in TABLE]
    normalize_cpt(TABLE)
    assert TABLE == copy
    assert normalize_cpt([]) == []
    with pytest.raises(ValueError):
        normalize_cpt([[1.0, 2.0], [1.0]])