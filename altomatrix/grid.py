"""Lightweight helpers operating on row-major grids of numbers.

A *grid* is the raw representation backing :class:`altomatrix.Matrix`: an
ordered sequence of rows, each row an ordered sequence of numbers.  The
helpers here work on plain ``list``/``tuple`` containers so they can be unit
tested without building a matrix, and so that callers holding nested lists
(or ``numpy`` arrays, whose rows are accepted as they are) can validate
data up front.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from typing import Any, List

import numpy as np

from .errors import InvalidDataError

Row = List[Any]
Grid = List[Row]


def is_numeric(value: Any) -> bool:
    """Return ``True`` when *value* is an integer or floating point number.

    ``bool`` is rejected even though it subclasses ``int``; so are ``complex``
    numbers and numeric-looking strings.  Any :class:`numbers.Real` is
    accepted, which covers ``numpy`` scalars and :class:`fractions.Fraction`.
    """

    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_row(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim >= 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def validate_grid(grid: Sequence[Any]) -> int:
    """Check that *grid* is a non-ragged numeric rectangle.

    Rows are inspected in order.  For every row the shape checks (is it a
    row, is it empty, does it match the first row's width) run before its
    values are type-checked, so a shape problem is reported ahead of a type
    problem found later in the same row.  Returns the column count, which is
    ``0`` for a grid without rows.
    """

    if not is_row(grid):
        raise InvalidDataError("data is not an array")
    num_cols = None
    for row in grid:
        if not is_row(row):
            raise InvalidDataError("row is not an array")
        if num_cols is None:
            num_cols = len(row)
        if len(row) == 0:
            raise InvalidDataError("data is empty — no columns")
        if len(row) != num_cols:
            raise InvalidDataError("rows are not all the same size")
        for value in row:
            if not is_numeric(value):
                raise InvalidDataError("values are not all numeric")
    return num_cols or 0


def zeros(num_rows: int, num_cols: int) -> Grid:
    if num_rows < 0 or num_cols < 0:
        raise InvalidDataError("dimensions must not be negative")
    return [[0] * num_cols for _ in range(num_rows)]


def copy_grid(grid: Sequence[Sequence[Any]]) -> Grid:
    return [list(row) for row in grid]
