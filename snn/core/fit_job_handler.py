from collections import namedtuple
import logging
import sys

import numpy

from .network import TwoLayerNetwork


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

LINE_FORMAT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
               "%(levelname)-8s %(message)s")
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# Returned by :meth:`FitJobHandler.run`
FitResult = namedtuple(
    'FitResult', ['loss_history', 'mean_absolute_error'])


def setup_logging(filename=None, stdout=True, level=logging.INFO):
    """ Sets up logging formatting, etc

    Parameters
    ----------
    filename: str, default=None
        If given, log records are also written to this file, which is
        overwritten.

    stdout: bool, default=True
        If True, log records are written to standard output.

    level: int, default=logging.INFO
        The root logger level. Use logging.DEBUG to see weight
        initialization details.
    """
    handlers = []

    if filename is not None:
        handlers.append(logging.FileHandler(filename, mode='w'))

    if stdout:
        handlers.append(logging.StreamHandler(sys.stdout))

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        handlers=handlers, format=LINE_FORMAT,
        datefmt=DATE_FORMAT, level=level, force=True)


class FitJobHandler:
    """ Manages the network, the data generators and the training and
    evaluation procedures
    """
    def __init__(self, config, input_generator, output_generator):
        """
        Parameters
        ----------
        config: TrainingConfig
            The learning rate, layer sizes, iteration counts, etc.

        input_generator: callable
            Called as `input_generator(batch_size, random_state)`, returning
            a Matrix of shape (batch_size, config.input_size).

        output_generator: callable
            Called as `output_generator(inputs)`, returning the correct
            outputs for `inputs` as a Matrix of shape
            (inputs.row_count, config.output_size).
        """
        if not callable(input_generator):
            msg = "`input_generator` should be callable"
            raise TypeError(msg)

        if not callable(output_generator):
            msg = "`output_generator` should be callable"
            raise TypeError(msg)

        self.config = config
        self.input_generator = input_generator
        self.output_generator = output_generator

        # The seeded random state is shared by weight
        # initialization and training batch sampling
        self.random_state = numpy.random.RandomState(config.random_seed)

        self.network = TwoLayerNetwork(
            input_size=config.input_size,
            hidden_neurons=config.hidden_neurons,
            output_size=config.output_size,
            random_state=self.random_state,
            weight_min=config.weight_min,
            weight_max=config.weight_max)

        # Initialize the iteration number
        self.iteration = 0

        # (iteration, squared error summary) pairs, one per report
        self.loss_history = []

    def _log_with_iter(self, msg, level='info'):
        """ Write to the logger with the current iteration number prepended
        to the log message
        """
        width = len(str(self.config.iterations))
        full_message = "(Iteration = {:0{}d} / {:d}) {:s}".format(
            self.iteration, width, self.config.iterations, msg)

        if level == 'info':
            logger.info(full_message)
        elif level == 'debug':
            logger.debug(full_message)
        elif level == 'warning':
            logger.warning(full_message)
        elif level == 'error':
            logger.error(full_message)
        else:
            raise ValueError("Unknown log level: {}".format(level))

    def sample(self, random_state):
        """ Draw a batch of inputs and compute the matching targets
        """
        inputs = self.input_generator(self.config.batch_size, random_state)
        targets = self.output_generator(inputs)
        return inputs, targets

    def _report(self, output, targets, squared_error):
        """ Log the predictions for the current batch and the error
        """
        self._log_with_iter("Predicted results after training {} "
                            "iterations.".format(self.iteration))

        for row in range(output.row_count):
            predicted = " ".join(str(v) for v in output.get_row(row))
            actual = " ".join(str(v) for v in targets.get_row(row))
            logger.info("Predicted: %s     Actual: %s", predicted, actual)

        error = squared_error.absolute_mean()
        self._log_with_iter("Average Squared Error: {}".format(error))
        self.loss_history.append((self.iteration, error))

    def fit(self):
        """ Train the network for `config.iterations` iterations

        Returns
        -------
        loss_history: list of (int, float)
            The iteration number and the mean squared error summary for
            every report (every `config.output_frequency` iterations)
        """
        logger.info("Training neural network %r...", self.network)

        frequency = self.config.output_frequency

        for i in range(self.config.iterations):
            self.iteration = i + 1

            inputs, targets = self.sample(self.random_state)

            output, squared_error = self.network.train_step(
                inputs, targets, alpha=self.config.alpha)

            if i % frequency == frequency - 1:
                self._report(output, targets, squared_error)

        logger.info("%d training iterations finished.",
                    self.config.iterations)

        return self.loss_history

    def evaluate(self, random_state=None):
        """ Compute the mean absolute error of the network's predictions on
        freshly sampled batches. The weights are not changed.

        Parameters
        ----------
        random_state: numpy.random.RandomState, default=None
            Used to sample the evaluation batches. The default is a new,
            unseeded random state, independent of the training one.

        Returns
        -------
        mean_absolute_error: float
            The mean of |target - prediction| over every evaluated output
        """
        if random_state is None:
            random_state = numpy.random.RandomState()

        n_batches = max(1, self.config.test_count // self.config.batch_size)

        logger.info("Testing neural network on %d batches...", n_batches)

        total_error = 0.0
        n_values = 0

        for _ in range(n_batches):
            inputs, targets = self.sample(random_state)
            output = self.network.predict(inputs)

            # Raises if the generators disagree with the configured sizes
            difference = targets.subtract(output).to_array()

            total_error += numpy.abs(difference).sum()
            n_values += difference.size

        mean_absolute_error = total_error / n_values

        logger.info("Testing complete.")
        logger.info("The neural network had an average error of %f.",
                    mean_absolute_error)

        return mean_absolute_error

    def run(self, random_state=None):
        """ Train, then evaluate. See :meth:`fit` and :meth:`evaluate`.
        """
        loss_history = self.fit()
        mean_absolute_error = self.evaluate(random_state=random_state)
        return FitResult(loss_history=list(loss_history),
                         mean_absolute_error=mean_absolute_error)
