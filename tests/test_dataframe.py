import pytest

from bngraph.dataframe import Factor, dataframe_column, qr_matrix


def test_factor_nlevels():
    factor = Factor([1, 2, 1], ("x", "y"))
    assert factor.nlevels() == len(factor.levels)


def test_factor_iteration_yields_labels():
    factor = Factor([2, None, 1], ("x", "y"))
    assert list(factor) == ["y", None, "x"]
    assert len(factor) == 3


def test_factor_rejects_bad_code():
    with pytest.raises(ValueError):
        Factor([3], ("x", "y"))


def test_factor_rejects_zero_code():
    with pytest.raises(ValueError):
        Factor([0], ("x",))


DATA = {"a": [1.0, 2.0, 3.0], "b": [4.0, 5.0, 6.0], "c": [7.0, 8.0, 9.0]}


def test_single_column_dropped_is_same_object():
    assert dataframe_column(DATA, "b", drop=True) is DATA["b"]


def test_single_column_not_dropped_is_listed():
    result = dataframe_column(DATA, "b", drop=False)
    assert result == [DATA["b"]]


def test_several_columns_keep_requested_order():
    result = dataframe_column(DATA, ["c", "a"], drop=True)
    assert result == [DATA["c"], DATA["a"]]


def test_columns_by_position():
    assert dataframe_column(DATA, 2, drop=True) is DATA["c"]
    assert dataframe_column(DATA, [0, 1]) == [DATA["a"], DATA["b"]]


def test_missing_single_dropped_is_none():
    assert dataframe_column(DATA, "z", drop=True) is None


def test_missing_in_list_raises():
    with pytest.raises(KeyError):
        dataframe_column(DATA, ["a", "z"])


def test_no_data_gives_none():
    assert dataframe_column(None, "a", drop=True) is None


def test_qr_matrix_layout():
    matrix = qr_matrix(DATA, ["b", "a"])
    assert len(matrix) == len(DATA["a"])
    assert [row[0] for row in matrix] == [1.0] * len(DATA["a"])
    assert [row[1] for row in matrix] == DATA["b"]
    assert [row[2] for row in matrix] == DATA["a"]


def test_qr_matrix_no_columns_is_intercept_only():
    matrix = qr_matrix(DATA, [])
    assert matrix == [[1.0] for _ in DATA["a"]]


def test_qr_matrix_unknown_column_raises():
    with pytest.raises(KeyError):
        qr_matrix(DATA, ["z"])


def test_qr_matrix_empty_data_raises():
    with pytest.raises(ValueError):
        qr_matrix({}, ["a"])