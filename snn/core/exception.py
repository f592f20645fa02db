class MatrixError(Exception):
    """ Base class for errors raised by matrix construction and arithmetic
    """


class ShapeMismatch(MatrixError, ValueError):
    """ Raised when the operands of an elementwise operation do not share the
    same shape
    """


class DimensionMismatch(MatrixError, ValueError):
    """ Raised when the inner dimensions of a matrix product do not agree
    """


class IndexOutOfRange(MatrixError, IndexError):
    """ Raised when an element is accessed outside of the matrix bounds
    """


class InvalidShape(MatrixError, ValueError):
    """ Raised when a matrix is constructed with non-positive or
    inconsistent dimensions
    """
