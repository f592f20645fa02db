import unittest

import numpy as np

from snn.core.matrix import Matrix
from snn.data import addition, fixed, sine


class TestSine(unittest.TestCase):

    def setUp(self):
        self.random_state = np.random.RandomState(1234)

    def test_inputs(self):
        inputs = sine.make_inputs(50, self.random_state)

        self.assertEqual(inputs.shape, (50, sine.INPUT_SIZE))

        values = inputs.to_array()
        self.assertTrue((values >= 0).all())
        self.assertTrue((values < 2 * np.pi).all())

    def test_inputs_seeded(self):
        a = sine.make_inputs(10, np.random.RandomState(5))
        b = sine.make_inputs(10, np.random.RandomState(5))
        self.assertEqual(a, b)

    def test_targets(self):
        inputs = Matrix.from_values([[0], [np.pi / 2], [np.pi],
                                     [3 * np.pi / 2]])

        targets = sine.make_targets(inputs).to_array().ravel()

        self.assertLess(np.abs(targets - [0.5, 1.0, 0.5, 0.0]).max(), 1e-12)


class TestAddition(unittest.TestCase):

    def setUp(self):
        self.random_state = np.random.RandomState(1234)

    def test_inputs(self):
        inputs = addition.make_inputs(500, self.random_state)

        self.assertEqual(inputs.shape, (500, addition.INPUT_SIZE))

        values = inputs.to_array()
        self.assertTrue((values == np.round(values)).all())
        self.assertTrue((values[:, :2] >= 0).all())
        self.assertTrue((values[:, :2] < addition.MAX_VALUE).all())

        # Roughly 40% of the rows are exact sums
        fraction = addition.make_targets(inputs).to_array().mean()
        self.assertGreater(fraction, 0.3)
        self.assertLess(fraction, 0.55)

    def test_targets(self):
        inputs = Matrix.from_values([
            [1, 2, 3],
            [1, 2, 4],
            [50, 50, 100],
            [0, 0, 0],
        ])

        targets = addition.make_targets(inputs)

        self.assertEqual(targets, Matrix.from_values([[1], [0], [1], [1]]))


class TestFixed(unittest.TestCase):

    def test_fixed(self):
        inputs = fixed.make_inputs(50, np.random.RandomState(0))
        targets = fixed.make_targets(inputs)

        self.assertEqual(inputs.shape, (4, fixed.INPUT_SIZE))
        self.assertEqual(targets.shape, (4, fixed.OUTPUT_SIZE))

        values = inputs.to_array()
        expected = np.logical_xor(values[:, 0], values[:, 1])
        self.assertTrue((targets.to_array().ravel() == expected).all())


if __name__ == '__main__':
    unittest.main()
