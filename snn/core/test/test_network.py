import unittest

import numpy as np

from snn.core.exception import DimensionMismatch, ShapeMismatch
from snn.core.matrix import Matrix
from snn.core.network import TwoLayerNetwork


def _sigmoid(x):
    return 1.0 / (1.0 + np.exp(-x))


def _loss(inputs, targets, syn0, syn1):
    output = _sigmoid(_sigmoid(inputs.dot(syn0)).dot(syn1))
    return 0.5 * ((targets - output)**2).sum()


class TestTwoLayerNetwork(unittest.TestCase):

    def setUp(self):
        self.random_state = np.random.RandomState(1234)

        self.network = TwoLayerNetwork(
            input_size=3, hidden_neurons=5, output_size=2,
            random_state=self.random_state)

        self.inputs = Matrix(7, 3)
        self.inputs.randomize(-1.0, 1.0, self.random_state)

        self.targets = Matrix(7, 2)
        self.targets.randomize(0.0, 1.0, self.random_state)

    def test_weight_shapes(self):
        self.assertEqual(self.network.syn0.shape, (3, 5))
        self.assertEqual(self.network.syn1.shape, (5, 2))

    def test_weights_in_range(self):
        for weights in [self.network.syn0, self.network.syn1]:
            values = weights.to_array()
            self.assertTrue((values >= -1.0).all())
            self.assertTrue((values < 1.0).all())

    def test_seeded_weights(self):
        a = TwoLayerNetwork(3, 5, 2, random_state=np.random.RandomState(9))
        b = TwoLayerNetwork(3, 5, 2, random_state=np.random.RandomState(9))

        self.assertEqual(a.syn0, b.syn0)
        self.assertEqual(a.syn1, b.syn1)

    def test_forward_shapes(self):
        hidden, output = self.network.forward(self.inputs)

        self.assertEqual(hidden.shape, (7, 5))
        self.assertEqual(output.shape, (7, 2))

        values = output.to_array()
        self.assertTrue(((values > 0) & (values < 1)).all())

    def test_forward_matches_numpy(self):
        syn0 = self.network.syn0.to_array()
        syn1 = self.network.syn1.to_array()
        expected = _sigmoid(_sigmoid(self.inputs.to_array().dot(syn0))
                            .dot(syn1))

        output = self.network.predict(self.inputs)

        self.assertLess(np.abs(output.to_array() - expected).max(), 1e-12)

    def test_forward_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatch):
            self.network.forward(Matrix(7, 4))

    def test_train_step_target_mismatch(self):
        syn0 = self.network.syn0.copy()

        with self.assertRaises(ShapeMismatch):
            self.network.train_step(self.inputs, Matrix(7, 3), alpha=0.1)

        with self.assertRaises(ShapeMismatch):
            self.network.train_step(self.inputs, Matrix(6, 2), alpha=0.1)

        # The weights are untouched by a failed step
        self.assertEqual(self.network.syn0, syn0)

    def test_train_step_squared_error(self):
        output_before = self.network.predict(self.inputs)

        output, squared_error = self.network.train_step(
            self.inputs, self.targets, alpha=0.1)

        self.assertEqual(output, output_before)

        difference = self.targets.to_array() - output_before.to_array()
        expected = 0.5 * difference**2

        self.assertEqual(squared_error.shape, (7, 2))
        self.assertLess(
            np.abs(squared_error.to_array() - expected).max(), 1e-15)

    def test_train_step_is_gradient_descent(self):
        """ The update to each weight matrix should be alpha times the
        gradient of 0.5 * sum((targets - output)**2)
        """
        alpha = 0.5
        eps = 1e-6

        inputs = self.inputs.to_array()
        targets = self.targets.to_array()
        syn0 = self.network.syn0.to_array()
        syn1 = self.network.syn1.to_array()

        numeric_grads = []
        for weights in [syn0, syn1]:
            grad = np.zeros_like(weights)
            for index in np.ndindex(*weights.shape):
                original = weights[index]
                weights[index] = original + eps
                loss_plus = _loss(inputs, targets, syn0, syn1)
                weights[index] = original - eps
                loss_minus = _loss(inputs, targets, syn0, syn1)
                weights[index] = original
                grad[index] = (loss_plus - loss_minus) / (2 * eps)
            numeric_grads.append(grad)

        self.network.train_step(self.inputs, self.targets, alpha=alpha)

        step0 = (syn0 - self.network.syn0.to_array()) / alpha
        step1 = (syn1 - self.network.syn1.to_array()) / alpha

        self.assertLess(np.abs(step0 - numeric_grads[0]).max(), 1e-7)
        self.assertLess(np.abs(step1 - numeric_grads[1]).max(), 1e-7)

    def test_train_step_reduces_loss(self):
        inputs = self.inputs.to_array()
        targets = self.targets.to_array()

        loss_before = _loss(inputs, targets, self.network.syn0.to_array(),
                            self.network.syn1.to_array())

        for _ in range(10):
            self.network.train_step(self.inputs, self.targets, alpha=0.1)

        loss_after = _loss(inputs, targets, self.network.syn0.to_array(),
                           self.network.syn1.to_array())

        self.assertLess(loss_after, loss_before)

    def test_repr(self):
        self.assertEqual(repr(self.network),
                         "<TwoLayerNetwork input=3, hidden=5, output=2>")


if __name__ == '__main__':
    unittest.main()
