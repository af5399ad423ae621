"""JSON export/import"""
import json

import pytest
from py_matrix import (
    LazyVector,
    Matrix,
    MatrixJSONEncoder,
    SquareMatrix,
    Vector,
    dumps,
    loads_matrix,
    loads_vector,
)
from py_matrix.errors import InvalidShapeError, PyMatrixValueError, QuantityTypeError


SAMPLE = [1, 2, 3, 3, 3, 4, 5, 6, 7]
ROWS = [
    [1, 2, 3, 3, 3, 4, 5],
    [2, 2, 2, 3, 4, 4, 5],
]


@pytest.mark.parametrize("cls", [Vector, LazyVector])
def test_vector_dumps(cls):
    assert dumps(cls.create(SAMPLE)) == json.dumps(SAMPLE)


def test_matrix_dumps():
    assert dumps(Matrix(ROWS)) == json.dumps(ROWS)


def test_encoder_with_json_module():
    payload = {"m": Matrix([[1, 2], [3, 4]]), "v": Vector([1.5, 2.5])}
    text = json.dumps(payload, cls=MatrixJSONEncoder)
    assert json.loads(text) == {"m": [[1, 2], [3, 4]], "v": [1.5, 2.5]}


def test_encoder_still_rejects_unknown():
    with pytest.raises(TypeError):
        dumps({"x": object()})


def test_dumps_forwards_kwargs():
    assert dumps(Vector([1, 2]), indent=None, separators=(",", ":")) == "[1,2]"


def test_loads_vector():
    v = loads_vector(json.dumps(SAMPLE))
    assert isinstance(v, Vector)
    assert v.values() == SAMPLE


def test_loads_vector_lazy():
    v = loads_vector(json.dumps(SAMPLE), lazy=True)
    assert isinstance(v, LazyVector)
    assert v.values() == SAMPLE


def test_loads_vector_wrong_shape():
    with pytest.raises(PyMatrixValueError):
        loads_vector('{"a": 1}')


def test_loads_vector_rejects_booleans():
    with pytest.raises(QuantityTypeError):
        loads_vector("[1, true]")


def test_loads_matrix():
    m = loads_matrix(dumps(Matrix(ROWS)))
    assert isinstance(m, Matrix)
    assert m.values() == ROWS


def test_loads_square_matrix():
    assert isinstance(loads_matrix("[[1, 2], [3, 4]]", square=True), SquareMatrix)
    with pytest.raises(InvalidShapeError):
        loads_matrix(json.dumps(ROWS), square=True)


@pytest.mark.parametrize("text", ["[1, 2]", "3", "[[1], 2]"])
def test_loads_matrix_wrong_shape(text):
    with pytest.raises(PyMatrixValueError):
        loads_matrix(text)
