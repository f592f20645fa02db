from snn import FitJobHandler, TrainingConfig
from snn.core.fit_job_handler import setup_logging
from snn.data import addition


setup_logging()


# The inputs are raw integers in [0, 200), so the hidden layer saturates
# quickly. This example mostly shows how the network copes with inputs that
# have not been normalized.

config = TrainingConfig(
    alpha=0.1,
    iterations=10000,
    output_frequency=2500,
    random_seed=7,
    hidden_neurons=50,
    input_size=addition.INPUT_SIZE,
    output_size=addition.OUTPUT_SIZE,
    batch_size=50,
    test_count=10000,
)

handler = FitJobHandler(
    config=config,
    input_generator=addition.make_inputs,
    output_generator=addition.make_targets,
)

result = handler.run()

for iteration, error in result.loss_history:
    print("Iteration {:5d}: average squared error {:.5f}".format(
        iteration, error))

print("Mean absolute error: {:.5f}".format(result.mean_absolute_error))
