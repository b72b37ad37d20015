"""Rectangular numeric matrix value type."""

from __future__ import annotations

import numbers
from typing import Any, Callable, Sequence, Tuple

from .errors import IndexOutOfBoundError, InvalidOperationError, NotNumericError
from .grid import Grid, copy_grid, is_numeric, validate_grid, zeros


class Matrix:
    """Row-major grid of numbers with validated shape.

    Two modes of operation coexist on purpose.  Index assignment
    (:meth:`set_at`, :meth:`set_data`, ``m[r, c] = v``) mutates the receiver and
    returns it so calls can be chained.  Arithmetic (:meth:`multiply`,
    :meth:`map`, :meth:`add_matrix`) never touches its operands and always
    returns a freshly allocated matrix.

    Instances are not synchronised; a matrix shared between threads must be
    guarded by the caller around any sequence of writes.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, grid: Sequence[Sequence[Any]]) -> None:
        self._data: Grid = []
        self._num_rows = 0
        self._num_cols = 0
        self.set_data(grid)

    @classmethod
    def zeros(cls, num_rows: int, num_cols: int) -> "Matrix":
        """Return a ``num_rows`` x ``num_cols`` matrix filled with ``0``.

        A zero column count with at least one row is rejected like any other
        grid containing empty rows.
        """

        return cls(zeros(num_rows, num_cols))

    # ------------------------------------------------------------------
    # Shape -------------------------------------------------------------
    # ------------------------------------------------------------------
    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._num_rows, self._num_cols

    def is_same_size(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return False
        return self._num_rows == other.num_rows and self._num_cols == other.num_cols

    # ------------------------------------------------------------------
    # Data access -------------------------------------------------------
    # ------------------------------------------------------------------
    def get_data(self) -> Grid:
        """Return a copy of the grid; editing it does not affect the matrix."""

        return copy_grid(self._data)

    def set_data(self, grid: Sequence[Sequence[Any]]) -> "Matrix":
        """Replace the whole grid after validating it.

        The receiver is left untouched when validation fails.
        """

        num_cols = validate_grid(grid)
        self._data = copy_grid(grid)
        self._num_rows = len(self._data)
        self._num_cols = num_cols
        return self

    def validate_index_boundary(self, row: Any, col: Any) -> bool:
        if not (_is_index(row) and _is_index(col)):
            raise IndexOutOfBoundError("row and column indices must be integers")
        if not (0 <= row < self._num_rows and 0 <= col < self._num_cols):
            raise IndexOutOfBoundError(
                f"index ({row}, {col}) is out of bound for a {self._num_rows}x{self._num_cols} matrix"
            )
        return True

    def get_at(self, row: int, col: int) -> Any:
        self.validate_index_boundary(row, col)
        return self._data[row][col]

    def set_at(self, row: int, col: int, value: Any) -> "Matrix":
        self.validate_index_boundary(row, col)
        if not is_numeric(value):
            raise NotNumericError("value is not numeric")
        self._data[row][col] = value
        return self

    def copy(self) -> "Matrix":
        return Matrix(self._data)

    # ------------------------------------------------------------------
    # Arithmetic --------------------------------------------------------
    # ------------------------------------------------------------------
    def multiply(self, factor: Any) -> "Matrix":
        """Return a new matrix with every value multiplied by ``factor``.

        A product that cannot be represented (an ``int`` too large to mix with
        a ``float``) raises :class:`NotNumericError` instead of ``OverflowError``.
        """

        if not is_numeric(factor):
            raise NotNumericError("value is not numeric")
        try:
            rows = [[value * factor for value in row] for row in self._data]
        except OverflowError as exc:
            raise NotNumericError("result is not representable as a number") from exc
        return Matrix(rows)

    def map(self, fn: Callable[[Any], Any]) -> "Matrix":
        """Apply ``fn`` to every cell in row-major order.

        Either every mapped value is numeric and a new matrix is returned, or
        :class:`NotNumericError` is raised and nothing is produced.
        """

        rows: Grid = []
        for row in self._data:
            mapped = []
            for value in row:
                result = fn(value)
                if not is_numeric(result):
                    raise NotNumericError("value returned by map function is not numeric")
                mapped.append(result)
            rows.append(mapped)
        return Matrix(rows)

    def add_matrix(self, other: "Matrix") -> "Matrix":
        """Return the elementwise sum of two matrices of the same shape.

        Overflowing sums raise :class:`NotNumericError`, like :meth:`multiply`.
        """

        if not self.is_same_size(other):
            raise InvalidOperationError("matrices are not the same size")
        total = Matrix.zeros(self._num_rows, self._num_cols)
        for i in range(self._num_rows):
            for j in range(self._num_cols):
                try:
                    value = self.get_at(i, j) + other.get_at(i, j)
                except OverflowError as exc:
                    raise NotNumericError("result is not representable as a number") from exc
                total.set_at(i, j, value)
        return total

    # ------------------------------------------------------------------
    # Python protocol ---------------------------------------------------
    # ------------------------------------------------------------------
    def __getitem__(self, index: Tuple[int, int]) -> Any:
        row, col = _split_index(index)
        return self.get_at(row, col)

    def __setitem__(self, index: Tuple[int, int], value: Any) -> None:
        row, col = _split_index(index)
        self.set_at(row, col, value)

    def __mul__(self, factor: Any) -> "Matrix":
        if not is_numeric(factor):
            return NotImplemented
        return self.multiply(factor)

    __rmul__ = __mul__

    def __add__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add_matrix(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def __repr__(self) -> str:
        return f"Matrix({self._data!r})"


def _is_index(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _split_index(index: Any) -> Tuple[Any, Any]:
    if not isinstance(index, tuple) or len(index) != 2:
        raise IndexOutOfBoundError("matrix indices take the form m[row, col]")
    return index
