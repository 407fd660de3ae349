"""Entry point: build or load a network, then train, evaluate and save it."""

from __future__ import annotations

import sys

import numpy as np

from mytorch.cli import ParsedArgs, parse_args, usage
from mytorch.dataset import exploit, parse_chess_file, shuffle
from mytorch.network import NeuralNetwork

DEFAULT_CONFIG = (64, 1)
_ACTIVATIONS = ("sigmoid", "tanhf", "relu")
_FAILURE = 84


def process(network: NeuralNetwork, parsing: ParsedArgs) -> None:
    """Load the datasets, train or evaluate the network and save it if asked."""
    inputs: list = []
    outputs: list = []

    if parsing.predict_mode or parsing.train_mode:
        for filename in parsing.chessboard_files:
            print(f"Parsing chessboards file :{filename}...")
            try:
                boards, labels = parse_chess_file(filename, 1, parsing.data_size)
            except OSError:
                print(f"Error opening file: {filename}", file=sys.stderr)
                continue
            inputs.extend(boards)
            outputs.extend(labels)
        print("Parsing done")
        print("Shuffling...")
        shuffle(inputs, outputs)
        print("Shuffling done")

        if parsing.train_mode:
            print("Training...")
            network.train(inputs, outputs)
            print("Training done")
        elif parsing.predict_mode:
            exploit(network, inputs, outputs)

    if parsing.save_file:
        print(f"Saving network to file: {parsing.save_file}")
        network.save_to_file(parsing.save_file)


def find_best(inputs, outputs) -> int:
    """Search hidden layer sizes and learning rates for the best exploit score."""
    best = 0
    step = np.float32(0.001)
    for first in range(16, 64):
        for second in range(16, 64):
            rate = step
            while float(rate) < 0.01:
                network = NeuralNetwork([64, first, second, 3], "sigmoid", float(rate))
                network.train(inputs, outputs)
                shuffle(inputs, outputs)
                count = exploit(network, inputs, outputs)
                if count > best:
                    best = count
                    print(f"new max: {best}")
                    print(f"i: {first}")
                    print(f"j: {second}")
                    print(f"lr: {float(rate):g}")
                rate = np.float32(rate + step)
    return best


def main(argv=None) -> int:
    """Run the command line program; returns the exit status."""
    try:
        parsing = parse_args(argv)
    except ValueError as error:
        print(f"Error : {error}", file=sys.stderr)
        return _FAILURE

    if not parsing.new_network_config and not parsing.load_file:
        print(
            "Error : You must specify either -n (new network) or -l (load network)",
            file=sys.stderr,
        )
        usage()

    config = list(DEFAULT_CONFIG)
    if parsing.new_network_config:
        config = list(parsing.new_network_config)
        print("Creating new network with config: " + "".join(f"{n} " for n in config))

    if parsing.activation_function not in _ACTIVATIONS:
        print("Error : Activation function not supported", file=sys.stderr)
        usage()
    print(f"Using {parsing.activation_function} activation function")

    try:
        network = NeuralNetwork(
            config, parsing.activation_function, parsing.learning_rate
        )
        if parsing.load_file:
            network.load_from_file(parsing.load_file)
        process(network, parsing)
    except (OSError, ValueError) as error:
        print(f"Error : {error}", file=sys.stderr)
        return _FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())