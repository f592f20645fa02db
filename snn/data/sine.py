import numpy

from snn.core.matrix import Matrix


INPUT_SIZE = 1
OUTPUT_SIZE = 1


def make_inputs(batch_size, random_state):
    """
    Sample angles uniformly from [0, 2*pi).

    Parameters
    ----------
    batch_size: int
        The number of rows to sample.

    random_state: numpy.random.RandomState
        RandomState object for reproducible results.

    Returns
    -------
    inputs: Matrix, shape=(batch_size, 1)
    """
    angles = random_state.random_sample((batch_size, INPUT_SIZE))
    return Matrix.from_values(angles * numpy.pi * 2)


def make_targets(inputs):
    """
    The sine of each input, shifted and scaled into [0, 1] so it is in
    the range of the sigmoid output layer.

    Returns
    -------
    targets: Matrix, shape=(inputs.row_count, 1)
    """
    angles = inputs.to_array()[:, :1]
    return Matrix.from_values(numpy.sin(angles) / 2.0 + 0.5)
