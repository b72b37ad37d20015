import numpy as np
import pytest

from altomatrix import InvalidDataError, Matrix, from_numpy, to_numpy


def test_from_numpy_matches_array():
    array = np.array([[1.0, -2.0], [0.5, 4.0]])
    matrix = from_numpy(array)
    assert matrix.shape == (2, 2)
    for (i, j), value in np.ndenumerate(array):
        assert matrix.get_at(i, j) == value


def test_from_numpy_rejects_vectors():
    with pytest.raises(InvalidDataError, match="row is not an array"):
        from_numpy(np.array([1.0, 2.0]))


def test_from_numpy_rejects_boolean_arrays():
    with pytest.raises(InvalidDataError):
        from_numpy(np.array([[True, False]]))


def test_from_numpy_rejects_empty_columns():
    with pytest.raises(InvalidDataError):
        from_numpy(np.zeros((2, 0)))


def test_to_numpy():
    matrix = Matrix([[1, 3], [2, 5], [50, 30]]).multiply(2)
    array = to_numpy(matrix)
    assert array.shape == (3, 2)
    assert np.array_equal(array, np.array([[2, 6], [4, 10], [100, 60]]))


def test_to_numpy_returns_independent_array():
    matrix = Matrix([[1.0, 2.0]])
    array = to_numpy(matrix, dtype=float)
    array[0, 0] = 9.0
    assert matrix.get_at(0, 0) == 1.0


def test_to_numpy_empty_matrix():
    assert to_numpy(Matrix([])).shape == (0, 0)


def test_numpy_rows_are_accepted_directly():
    matrix = Matrix([np.array([1.0, 2.0]), np.array([3.0, 4.0])])
    assert matrix.shape == (2, 2)
    assert matrix.get_at(1, 0) == 3.0
    assert Matrix(np.array([[1, 2]])).get_at(0, 1) == 2


def test_numpy_boolean_row_is_rejected():
    with pytest.raises(InvalidDataError, match="values are not all numeric"):
        Matrix([np.array([True, False])])
