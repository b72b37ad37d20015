"""Exception hierarchy raised by :class:`altomatrix.Matrix`."""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for every error raised by the package."""


class InvalidDataError(MatrixError, ValueError):
    """The grid handed to a matrix does not describe a numeric rectangle."""


class NotNumericError(MatrixError, TypeError):
    """A scalar argument or a mapped value is not numeric."""


class IndexOutOfBoundError(MatrixError, IndexError):
    """A row or column index falls outside the matrix."""


class InvalidOperationError(MatrixError, ValueError):
    """The operands of an operation are incompatible."""
