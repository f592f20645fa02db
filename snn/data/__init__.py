"""
Toy problems for training the network. Each module provides
`make_inputs(batch_size, random_state)` and `make_targets(inputs)` along
with the `INPUT_SIZE` and `OUTPUT_SIZE` the network must be built with.
"""
