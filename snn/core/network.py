"""
A two layer feedforward network with sigmoid activations, trained by
plain gradient descent on the squared error.

Input (R^n) => Hidden (R^h) => Output (R^k)

There are no bias terms. A constant input column can be supplied by the
input generator if one is wanted.

For a batch of inputs X (one example per row) the computation chain is:
hidden = sigmoid(X . syn0)
output = sigmoid(hidden . syn1)
"""
import logging

import numpy

from .activation import sigmoid, sigmoid_derivative
from .exception import DimensionMismatch, ShapeMismatch
from .matrix import Matrix, multiply_matrices


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


class TwoLayerNetwork(object):
    """ Owns the two weight matrices, `syn0` (input => hidden) and `syn1`
    (hidden => output).
    """
    def __init__(self, input_size, hidden_neurons, output_size,
                 random_state=None, weight_min=-1.0, weight_max=1.0):
        """
        Parameters
        ----------
        input_size: int
            Number of input units.

        hidden_neurons: int
            Number of hidden units.

        output_size: int
            Number of output units.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.

        weight_min, weight_max: float, default=-1.0, 1.0
            The weights are initialized uniformly in this range.
        """
        self.input_size = input_size
        self.hidden_neurons = hidden_neurons
        self.output_size = output_size

        if random_state is None:
            random_state = numpy.random.RandomState()

        # syn0 draws from `random_state` before syn1.
        self.syn0 = Matrix(input_size, hidden_neurons)
        self.syn0.randomize(weight_min, weight_max, random_state)
        self.syn1 = Matrix(hidden_neurons, output_size)
        self.syn1.randomize(weight_min, weight_max, random_state)

        logger.debug("Initialized weights for %r", self)

    def __repr__(self):
        return "<TwoLayerNetwork input=%d, hidden=%d, output=%d>" % (
            self.input_size, self.hidden_neurons, self.output_size)

    def _check_inputs(self, inputs):
        if inputs.column_count != self.input_size:
            msg = ("Input batch has {} columns but the network expects {} "
                   "inputs")
            raise DimensionMismatch(msg.format(
                inputs.column_count, self.input_size))

    def _check_targets(self, inputs, targets):
        expected_shape = (inputs.row_count, self.output_size)
        if targets.shape != expected_shape:
            msg = "Target batch has shape {} but {} was expected"
            raise ShapeMismatch(msg.format(targets.shape, expected_shape))

    def forward(self, inputs):
        """ Forward propagate a batch of inputs

        Parameters
        ----------
        inputs: Matrix, shape=(batch_size, input_size)

        Returns
        -------
        hidden, output: Matrix, Matrix
            The hidden layer activations, shape (batch_size, hidden_neurons),
            and the output layer activations, shape (batch_size, output_size)
        """
        self._check_inputs(inputs)
        hidden = sigmoid(multiply_matrices(inputs, self.syn0))
        output = sigmoid(multiply_matrices(hidden, self.syn1))
        return hidden, output

    def predict(self, inputs):
        return self.forward(inputs)[1]

    def train_step(self, inputs, targets, alpha):
        """ Run one forward pass, one backward pass and update the weights

        Parameters
        ----------
        inputs: Matrix, shape=(batch_size, input_size)

        targets: Matrix, shape=(batch_size, output_size)
            The "correct" outputs for `inputs`.

        alpha: float
            The learning rate.

        Returns
        -------
        output, squared_error: Matrix, Matrix
            The predictions made before the weights were updated and the
            elementwise squared error, 0.5 * (targets - output)**2
        """
        self._check_inputs(inputs)
        self._check_targets(inputs, targets)

        hidden, output = self.forward(inputs)

        difference = targets.subtract(output)
        squared_error = difference.hadamard(difference).scale(0.5)

        # Error weighted derivative of the output layer.
        output_delta = output.subtract(targets).hadamard(
            sigmoid_derivative(output))

        # Propagate the error back to the hidden layer.
        hidden_error = multiply_matrices(output_delta, self.syn1.transpose())
        hidden_delta = hidden_error.hadamard(sigmoid_derivative(hidden))

        # Update weights.
        self.syn1 = self.syn1.subtract(
            multiply_matrices(hidden.transpose(), output_delta).scale(alpha))
        self.syn0 = self.syn0.subtract(
            multiply_matrices(inputs.transpose(), hidden_delta).scale(alpha))

        return output, squared_error
