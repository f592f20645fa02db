"""
The logistic (sigmoid) activation and its derivative.

Both functions accept either a scalar or a :class:`snn.core.matrix.Matrix`.
Given a matrix, they are applied elementwise and a new matrix is returned.

Note that :func:`sigmoid_derivative` is written in terms of the sigmoid's
*output*: for y = sigmoid(x), dy/dx = y * (1 - y). It must be given values
that have already passed through :func:`sigmoid`.
"""
import numpy

from .matrix import Matrix


def _sigmoid(value):
    return 1.0 / (1.0 + numpy.exp(-value))


def _sigmoid_derivative(value):
    return value * (1.0 - value)


def sigmoid(value):
    """ Squash `value` through the logistic function 1 / (1 + exp(-x))

    Parameters
    ----------
    value: float or Matrix

    Returns
    -------
    squashed: float or Matrix
        A float for a scalar input, otherwise a new matrix of the same shape

    """
    if isinstance(value, Matrix):
        return value.apply(_sigmoid)
    return float(_sigmoid(value))


def sigmoid_derivative(value):
    """ The derivative of the logistic function, y * (1 - y), where `value`
    is the logistic function's output y
    """
    if isinstance(value, Matrix):
        return value.apply(_sigmoid_derivative)
    return float(_sigmoid_derivative(value))
