import numbers

import numpy

from .exception import (
    DimensionMismatch, IndexOutOfRange, InvalidShape, ShapeMismatch)


class Matrix(object):
    """ A dense, two dimensional matrix of double precision values

    The matrix shape is fixed at construction. Arithmetic always returns a
    new matrix and leaves both operands untouched; only item assignment and
    :meth:`randomize` modify a matrix in place.
    """
    def __init__(self, row_count, column_count):
        """ Create a zero-filled matrix

        Parameters
        ----------
        row_count: int
            The number of rows in the matrix. Must be positive.

        column_count: int
            The number of columns in the matrix. Must be positive.

        """
        self._validate_shape(row_count, column_count)
        self._values = numpy.zeros((row_count, column_count),
                                   dtype=numpy.float64)

    @classmethod
    def from_values(cls, values):
        """ Create a matrix by copying a rectangular array of values

        Parameters
        ----------
        values: sequence of sequences, or 2D ndarray
            The rows of the matrix. The shape of the matrix is taken from
            the dimensions of `values`.

        Returns
        -------
        matrix: Matrix
            A new matrix that shares no storage with `values`

        """
        if isinstance(values, numpy.ndarray):
            if values.ndim != 2:
                msg = "Expected a 2D array of values but got {} dimensions"
                raise InvalidShape(msg.format(values.ndim))
            matrix = cls(*values.shape)
            matrix._values[:] = values
            return matrix

        try:
            rows = [list(row) for row in values]
        except TypeError:
            raise InvalidShape("Expected a sequence of rows of values")

        if len(rows) == 0:
            raise InvalidShape("Cannot create a matrix with no rows")

        lengths = set(len(row) for row in rows)
        if len(lengths) != 1:
            msg = "Rows have unequal lengths {}"
            raise InvalidShape(msg.format(sorted(lengths)))

        matrix = cls(len(rows), len(rows[0]))
        matrix._values[:] = numpy.asarray(rows, dtype=numpy.float64)
        return matrix

    @staticmethod
    def _validate_shape(row_count, column_count):
        for name, count in (('row_count', row_count),
                            ('column_count', column_count)):
            if (not isinstance(count, numbers.Integral) or
                    isinstance(count, bool)):
                msg = "`{}` must be an integer but was {}"
                raise InvalidShape(msg.format(name, type(count).__name__))
            if count <= 0:
                msg = "`{}` must be positive but was {}"
                raise InvalidShape(msg.format(name, count))

    @property
    def row_count(self):
        return self._values.shape[0]

    @property
    def column_count(self):
        return self._values.shape[1]

    @property
    def shape(self):
        return self._values.shape

    def __repr__(self):
        return "<Matrix rows=%d, columns=%d>" % self.shape

    def __str__(self):
        return "\n".join(" ".join(str(value) for value in row)
                         for row in self._values.tolist())

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.shape == other.shape and
                bool((self._values == other._values).all()))

    def _check_index(self, index, count, axis):
        if (not isinstance(index, numbers.Integral) or
                isinstance(index, bool)):
            msg = "{} index must be an integer but was {}"
            raise IndexOutOfRange(msg.format(axis, type(index).__name__))
        if not 0 <= index < count:
            msg = "{} index {} is out of range for a matrix of shape {}"
            raise IndexOutOfRange(msg.format(axis, index, self.shape))

    def __getitem__(self, index):
        row, column = index
        self._check_index(row, self.row_count, 'Row')
        self._check_index(column, self.column_count, 'Column')
        return float(self._values[row, column])

    def __setitem__(self, index, value):
        row, column = index
        self._check_index(row, self.row_count, 'Row')
        self._check_index(column, self.column_count, 'Column')
        self._values[row, column] = value

    def get_row(self, row):
        """ Returns a copy of row `row` as a list of floats
        """
        self._check_index(row, self.row_count, 'Row')
        return self._values[row, :].tolist()

    def get_column(self, column):
        """ Returns a copy of column `column` as a list of floats
        """
        self._check_index(column, self.column_count, 'Column')
        return self._values[:, column].tolist()

    def copy(self):
        return Matrix.from_values(self._values)

    def to_array(self):
        """ Returns the values as a new ndarray of shape
        (row_count, column_count)
        """
        return self._values.copy()

    def absolute_mean(self):
        """ The mean of the absolute values of every element
        """
        return float(numpy.abs(self._values).sum() /
                     (self.row_count * self.column_count))

    def randomize(self, min_value, max_value, random_state):
        """ Fill the matrix, in place, with uniform random values

        Parameters
        ----------
        min_value, max_value: float
            Each element is set to
            `min_value + (max_value - min_value) * u` where `u` is drawn
            uniformly from [0, 1).

        random_state: numpy.random.RandomState
            The source of random values. Seed it for reproducible results.

        """
        value_range = max_value - min_value
        samples = random_state.random_sample(self.shape)
        self._values[:] = value_range * samples + min_value

    def transpose(self):
        """ Returns the transpose as a new matrix of shape
        (column_count, row_count)
        """
        return Matrix.from_values(self._values.T)

    def _check_same_shape(self, other, operation):
        if self.shape != other.shape:
            msg = "Cannot {} matrices of shape {} and {}"
            raise ShapeMismatch(msg.format(operation, self.shape,
                                           other.shape))

    def add(self, other):
        """ Elementwise sum with a matrix of the same shape
        """
        self._check_same_shape(other, 'add')
        return Matrix.from_values(self._values + other._values)

    def subtract(self, other):
        """ Elementwise difference with a matrix of the same shape
        """
        self._check_same_shape(other, 'subtract')
        return Matrix.from_values(self._values - other._values)

    def hadamard(self, other):
        """ Elementwise (Hadamard) product with a matrix of the same shape.

        This is not the matrix product; see :meth:`dot` for that.
        """
        self._check_same_shape(other, 'elementwise multiply')
        return Matrix.from_values(self._values * other._values)

    def scale(self, constant):
        """ Multiply every element by the scalar `constant`
        """
        return Matrix.from_values(self._values * float(constant))

    def apply(self, func):
        """ Returns a new matrix with `func` applied to every element
        """
        return Matrix.from_values(func(self._values))

    def dot(self, other):
        """ The matrix product of `self` and `other`

        Parameters
        ----------
        other: Matrix
            A matrix whose row count equals this matrix's column count.

        Returns
        -------
        product: Matrix, shape=(self.row_count, other.column_count)
            product[m, n] is the dot product of row m of `self` with
            column n of `other`.

        """
        if self.column_count != other.row_count:
            msg = ("Cannot multiply a matrix of shape {} by a matrix of "
                   "shape {}: {} columns do not match {} rows")
            raise DimensionMismatch(msg.format(
                self.shape, other.shape, self.column_count, other.row_count))
        return Matrix.from_values(numpy.dot(self._values, other._values))


def multiply_matrices(matrix1, matrix2):
    """ Returns the matrix product `matrix1 . matrix2`
    """
    return matrix1.dot(matrix2)
