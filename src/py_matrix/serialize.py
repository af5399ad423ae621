"""
JSON export/import for vectors and matrices.

The export shape is the plain nested list: a flat array for a vector, an
array of row arrays for a matrix.
"""

import json

from .errors import PyMatrixValueError
from .lazy import LazyVector
from .matrix import Matrix
from .matrix import SquareMatrix
from .vector import AbstractVector
from .vector import Vector


class MatrixJSONEncoder(json.JSONEncoder):
    """json.JSONEncoder that understands Vector, LazyVector and Matrix."""

    def default(self, o):
        if isinstance(o, (AbstractVector, Matrix)):
            return o.to_list()
        return super().default(o)


def dumps(obj, **kwargs):
    """json.dumps with MatrixJSONEncoder; extra kwargs go to json.dumps."""
    kwargs.setdefault("cls", MatrixJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads_vector(text, lazy=False):
    """
    Decode a JSON array into a Vector (or a restartable LazyVector).

    Raises
    ------
    PyMatrixValueError
        If the document is not a flat array
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise PyMatrixValueError(f"Expected a JSON array for a vector, got {type(data).__name__}")
    if lazy:
        return LazyVector.create(data)
    return Vector.create(data)


def loads_matrix(text, square=False):
    """
    Decode a JSON array of arrays into a Matrix (or SquareMatrix).

    Raises
    ------
    PyMatrixValueError
        If the document is not an array of arrays
    """
    data = json.loads(text)
    if not isinstance(data, list) or not all(isinstance(row, list) for row in data):
        raise PyMatrixValueError("Expected a JSON array of arrays for a matrix")
    cls = SquareMatrix if square else Matrix
    return cls.create(data)
