"""altomatrix: a small, strictly validated numeric matrix value type.

The package offers a single entity, :class:`Matrix`, together with the
helpers used to validate its backing grid and to exchange data with
:mod:`numpy`.
"""

from .errors import (
    IndexOutOfBoundError,
    InvalidDataError,
    InvalidOperationError,
    MatrixError,
    NotNumericError,
)
from .grid import is_numeric, validate_grid
from .interop import from_numpy, to_numpy
from .matrix import Matrix

__all__ = [
    "Matrix",
    "MatrixError",
    "InvalidDataError",
    "NotNumericError",
    "IndexOutOfBoundError",
    "InvalidOperationError",
    "is_numeric",
    "validate_grid",
    "from_numpy",
    "to_numpy",
]
