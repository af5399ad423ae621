"""
py-matrix: A Pythonic, zero-dependency vector and matrix library

Immutable containers for numeric samples with descriptive statistics
(sum, average, median, population variance, standard deviation).

Main classes:
    - Vector: eager 1D vector, compressed around its most frequent value
    - LazyVector: 1D vector produced on demand by a generator or factory
    - Matrix: 2D matrix of equal-length row vectors
    - SquareMatrix: Matrix with as many rows as columns
    - MatrixBuilder: accumulates rows, then builds a Matrix

Zero external dependencies - pure Python stdlib only.
"""

import logging

from .errors import (
    PyMatrixError,
    PyMatrixValueError,
    PyMatrixTypeError,
    EmptyInputError,
    ShapeMismatchError,
    InvalidShapeError,
    IndexOutOfRangeError,
    InvalidIndexTypeError,
    QuantityTypeError,
    ImmutableContainerError,
    UnsupportedOperationError,
    DivisionByZeroError,
)
from .typing import QuantityType
from .vector import AbstractVector, Vector
from .lazy import LazyVector, ConsumptionState
from .matrix import Matrix, SquareMatrix
from .builder import MatrixBuilder
from .serialize import MatrixJSONEncoder, dumps, loads_vector, loads_matrix

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
	"AbstractVector",
	"Vector",
	"LazyVector",
	"ConsumptionState",
	"Matrix",
	"SquareMatrix",
	"MatrixBuilder",
	"QuantityType",
	"MatrixJSONEncoder",
	"dumps",
	"loads_vector",
	"loads_matrix",
	"PyMatrixError",
	"PyMatrixValueError",
	"PyMatrixTypeError",
	"EmptyInputError",
	"ShapeMismatchError",
	"InvalidShapeError",
	"IndexOutOfRangeError",
	"InvalidIndexTypeError",
	"QuantityTypeError",
	"ImmutableContainerError",
	"UnsupportedOperationError",
	"DivisionByZeroError",
]
