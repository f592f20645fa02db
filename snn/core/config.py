import numbers


class TrainingConfig(object):
    """ Scalar parameters for a training run. Values are validated once
    at construction and are not meant to change while training.
    """
    def __init__(self,
                 alpha=0.1,
                 iterations=10000,
                 output_frequency=None,
                 random_seed=7,
                 hidden_neurons=50,
                 input_size=1,
                 output_size=1,
                 batch_size=50,
                 test_count=10000,
                 weight_min=-1.0,
                 weight_max=1.0,
                 ):
        """
        Parameters
        ----------
        alpha: float, default=0.1
            The learning rate. The weight gradients are multiplied by this
            before being subtracted from the weights.

        iterations: int, default=10000
            The number of training iterations. There is no early stopping.

        output_frequency: int, default=None
            Predictions and the error are reported every `output_frequency`
            iterations. The default of None reports once, after the last
            iteration.

        random_seed: int, default=7
            Seed for the random state used to initialize the weights and
            sample the training batches.

        hidden_neurons: int, default=50
            The number of units in the hidden layer.

        input_size, output_size: int, default=1
            The number of input and output units. These must match the
            number of columns produced by the input and output generators.

        batch_size: int, default=50
            The number of rows sampled for every iteration.

        test_count: int, default=10000
            The number of examples to evaluate after training. This is
            processed as `test_count // batch_size` batches.

        weight_min, weight_max: float, default=-1.0, 1.0
            The weights are initialized uniformly in this range.

        """
        self.alpha = self._positive_float('alpha', alpha)
        self.iterations = self._positive_int('iterations', iterations)

        if output_frequency is None:
            output_frequency = self.iterations
        self.output_frequency = self._positive_int(
            'output_frequency', output_frequency)

        if (not isinstance(random_seed, numbers.Integral) and
                random_seed is not None):
            msg = "`random_seed` must be an integer or None"
            raise TypeError(msg)
        self.random_seed = random_seed

        self.hidden_neurons = self._positive_int(
            'hidden_neurons', hidden_neurons)
        self.input_size = self._positive_int('input_size', input_size)
        self.output_size = self._positive_int('output_size', output_size)
        self.batch_size = self._positive_int('batch_size', batch_size)
        self.test_count = self._positive_int('test_count', test_count)

        try:
            self.weight_min = float(weight_min)
            self.weight_max = float(weight_max)
        except (ValueError, TypeError):
            msg = "`weight_min` and `weight_max` must be numeric"
            raise ValueError(msg)

        if self.weight_min >= self.weight_max:
            msg = "`weight_min` ({}) must be less than `weight_max` ({})"
            raise ValueError(msg.format(self.weight_min, self.weight_max))

    def __repr__(self):
        fields = ', '.join('{}={!r}'.format(key, value)
                           for key, value in sorted(vars(self).items()))
        return '<TrainingConfig {}>'.format(fields)

    @staticmethod
    def _positive_int(name, value):
        if not isinstance(value, numbers.Integral) or isinstance(value, bool):
            msg = "`{}` must be an integer but was {!r}"
            raise ValueError(msg.format(name, value))
        if value <= 0:
            msg = "`{}` must be positive but was {}"
            raise ValueError(msg.format(name, value))
        return int(value)

    @staticmethod
    def _positive_float(name, value):
        try:
            value = float(value)
        except (ValueError, TypeError):  # TypeError handles None
            msg = "`{}` must be numeric"
            raise ValueError(msg.format(name))
        if value <= 0:
            msg = "`{}` must be positive but was {}"
            raise ValueError(msg.format(name, value))
        return value
