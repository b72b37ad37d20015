"""Conversion between :class:`Matrix` and :mod:`numpy` arrays."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .errors import InvalidDataError
from .matrix import Matrix


def from_numpy(array: Any) -> Matrix:
    """Build a matrix from a two dimensional array-like.

    The array is turned into nested Python lists first, so the usual grid
    validation applies: one dimensional input fails because its rows are
    scalars, and boolean or string arrays fail the numeric check.
    """

    try:
        converted = np.asarray(array)
    except ValueError as exc:
        raise InvalidDataError("rows are not all the same size") from exc
    return Matrix(converted.tolist())


def to_numpy(matrix: Matrix, dtype: Optional[Any] = None) -> np.ndarray:
    if matrix.num_rows == 0:
        return np.empty((0, 0), dtype=dtype if dtype is not None else float)
    return np.array(matrix.get_data(), dtype=dtype)
