import logging

from snn import FitJobHandler, TrainingConfig
from snn.core.fit_job_handler import setup_logging
from snn.data import sine


setup_logging(filename='fit-log.txt', level=logging.INFO)


# Configure the network and the training run ##################################

config = TrainingConfig(
    alpha=0.1,
    iterations=10000,
    random_seed=7,
    hidden_neurons=50,
    input_size=sine.INPUT_SIZE,
    output_size=sine.OUTPUT_SIZE,
    batch_size=50,
    test_count=10000,
)

# Train, then test on freshly sampled angles ##################################

handler = FitJobHandler(
    config=config,
    input_generator=sine.make_inputs,
    output_generator=sine.make_targets,
)

result = handler.run()

print("Mean absolute error: {:.5f}".format(result.mean_absolute_error))
