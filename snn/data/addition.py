import numpy

from snn.core.matrix import Matrix


INPUT_SIZE = 3
OUTPUT_SIZE = 1

MAX_VALUE = 100
SPREAD = 50


def make_inputs(batch_size, random_state, max_value=MAX_VALUE,
                spread=SPREAD):
    """
    Make rows of three integers (a, b, c) where c is sometimes a + b.

    Parameters
    ----------
    batch_size: int
        The number of rows to make.

    random_state: numpy.random.RandomState
        RandomState object for reproducible results.

    max_value: int, default=100
        `a` and `b` (and `c`, when drawn independently) are drawn
        from [0, max_value).

    spread: int, default=50
        When `c` almost equals a + b, it is offset by an integer drawn
        from [-spread/2, spread/2).

    Returns
    -------
    inputs: Matrix, shape=(batch_size, 3)

    Note
    ----
    Each row independently has a 30% chance of three unrelated integers,
    a 40% chance that c = a + b, and a 30% chance that c = a + b + offset.
    The inputs are not normalized.
    """
    inputs = Matrix(batch_size, INPUT_SIZE)

    for m in range(batch_size):
        case = random_state.randint(10)
        a = random_state.randint(max_value)
        b = random_state.randint(max_value)

        if case >= 7:
            c = random_state.randint(max_value)
        elif case <= 3:
            c = a + b
        else:
            c = a + b + (random_state.randint(spread) - spread // 2)

        inputs[m, 0] = a
        inputs[m, 1] = b
        inputs[m, 2] = c

    return inputs


def make_targets(inputs):
    """
    1 where the third column is the sum of the first two, otherwise 0.

    Returns
    -------
    targets: Matrix, shape=(inputs.row_count, 1)
    """
    values = inputs.to_array()
    is_sum = values[:, 0] + values[:, 1] == values[:, 2]
    return Matrix.from_values(is_sum.astype(numpy.float64).reshape(-1, 1))
