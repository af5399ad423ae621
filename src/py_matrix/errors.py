class PyMatrixError(Exception):
    """Base exception for py-matrix library."""
    pass


class PyMatrixValueError(PyMatrixError, ValueError):
    """Raised for invalid values or mismatched lengths."""
    pass


class PyMatrixTypeError(PyMatrixError, TypeError):
    """Raised for invalid types in API calls."""
    pass


class EmptyInputError(PyMatrixValueError):
    """Raised when a vector or matrix would hold no elements."""
    pass


class ShapeMismatchError(PyMatrixValueError):
    """Raised when matrix rows do not share one length."""
    pass


class InvalidShapeError(PyMatrixValueError):
    """Raised when a square matrix has a different row and column count."""
    pass


class IndexOutOfRangeError(PyMatrixError, IndexError):
    """Raised for positions outside [0, count)."""
    pass


class InvalidIndexTypeError(PyMatrixTypeError):
    """Raised when an index is not an integer."""
    pass


class QuantityTypeError(PyMatrixTypeError):
    """Raised when an element is not an int or float."""
    pass


class ImmutableContainerError(PyMatrixTypeError):
    """Raised on any attempt to set or delete an element."""
    pass


class UnsupportedOperationError(PyMatrixTypeError):
    """Raised for indexed access on a lazy vector."""
    pass


class DivisionByZeroError(PyMatrixError, ZeroDivisionError):
    """Raised when an average or variance is taken over zero elements."""
    pass
