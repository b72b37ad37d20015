from fractions import Fraction

import numpy as np
import pytest

from altomatrix.errors import InvalidDataError
from altomatrix.grid import copy_grid, is_numeric, is_row, validate_grid, zeros


def test_is_numeric():
    assert is_numeric(1)
    assert is_numeric(-2.5)
    assert is_numeric(float("nan"))
    assert is_numeric(Fraction(1, 2))
    assert is_numeric(np.float64(1.0))
    assert is_numeric(np.int32(3))
    assert not is_numeric(True)
    assert not is_numeric(np.bool_(True))
    assert not is_numeric("1")
    assert not is_numeric(1j)
    assert not is_numeric(None)


def test_is_row():
    assert is_row([1, 2])
    assert is_row((1, 2))
    assert is_row([])
    assert not is_row("12")
    assert not is_row(b"12")
    assert not is_row(3)
    assert is_row(np.array([1.0, 2.0]))
    assert not is_row(np.array(1.0))


def test_validate_grid_returns_column_count():
    assert validate_grid([[1, 2, 3], [4, 5, 6]]) == 3
    assert validate_grid(((1,),)) == 1
    assert validate_grid([]) == 0


def test_validate_grid_checks_rows_in_order():
    with pytest.raises(InvalidDataError, match="values are not all numeric"):
        validate_grid([[1, "x"], 2])
    with pytest.raises(InvalidDataError, match="row is not an array"):
        validate_grid([[1, 2], 2, [3, "x"]])


def test_first_empty_row_is_reported_as_empty():
    with pytest.raises(InvalidDataError, match="no columns"):
        validate_grid([[], [1]])


def test_zeros():
    assert zeros(2, 3) == [[0, 0, 0], [0, 0, 0]]
    assert zeros(0, 3) == []
    with pytest.raises(InvalidDataError):
        zeros(2, -1)


def test_copy_grid_does_not_alias_rows():
    source = [[1, 2], (3, 4)]
    copied = copy_grid(source)
    assert copied == [[1, 2], [3, 4]]
    assert copied[0] is not source[0]
