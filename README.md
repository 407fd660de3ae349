# mytorch

A small fully connected neural network, trained by plain backpropagation
one example at a time, that classifies chess positions as checkmate,
draw, or neither. Boards are read from FEN strings in a text dataset and
each of the 64 squares becomes one input value.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
mytorch [-n IN_LAYER (HIDDEN_LAYERS...) OUT_LAYER | -l LOADFILE]
        (-t COUNT | -p COUNT) (-s SAVEFILE)
        (-r LEARNING_RATE) (-m ACTIVATION)
        FILE...
```

- `-n 64 32 3` creates a new network with the given layer sizes; it takes
  every following argument up to the next one starting with `-`.
- `-l FILE` loads a previously saved network.
- `-t COUNT` trains on up to `COUNT` boards from each dataset file.
- `-p COUNT` evaluates the network on up to `COUNT` boards from each
  dataset file and prints how many were classified correctly
  (`exploit: N/TOTAL`).
- `-s FILE` saves the network after training or evaluation.
- `-r RATE` sets the learning rate (default `0.005`).
- `-m NAME` picks the activation function: `sigmoid`, `tanhf` (default)
  or `relu`.
- `-h`, or an unknown option, prints the usage text and exits with status 0.

Either `-n` or `-l` is required; without one of them the usage text is
printed. With `-t` or `-p` at least one dataset file must be given. The
examples from all files are shuffled together before training or
evaluation. Invalid numbers, unreadable network files and similar errors
are reported on standard error and the command exits with status 84; a
dataset file that cannot be opened is reported and skipped.

Examples:

```
mytorch -n 64 32 3 -m sigmoid -t 5000 -s model.txt boards.txt
mytorch -l model.txt -p 1000 boards.txt
```

The same program runs with `python -m mytorch.app`.

## Dataset format

Each example starts with a line containing `RES`, whose second word is
the result (`1/2-1/2` marks a draw). The next line holds the checkmate
flag (`True` or `False`) as its second word; an example with any other
value there is skipped. The line after that holds the FEN of the board as
its second word, and nine further lines are skipped. Each example yields
a 64-value board (piece codes 1–12 divided by 12, empty squares 0) and a
one-hot output `[checkmate, draw, neither]`.

## Saved network format

`NeuralNetwork.save_to_file` writes plain text: the number of layers, the
layer sizes, every weight matrix row by row, the bias vectors, then
`learningRate: ...` and `activationFunction: ...`.
`NeuralNetwork.load_from_file` reads the same format and replaces the
network's layers, weights, biases, learning rate and activation. Biases
are stored and saved but take no part in propagation.

## Library use

```python
from mytorch.network import NeuralNetwork
from mytorch.dataset import parse_chess_file, shuffle, exploit

inputs, outputs = parse_chess_file("boards.txt", 1, 1000)
shuffle(inputs, outputs)
network = NeuralNetwork([64, 32, 3], "sigmoid", 0.005)
network.train(inputs, outputs)
correct = exploit(network, inputs, outputs)
network.save_to_file("model.txt")
```

- `mytorch.network`: `NeuralNetwork` with `propagate_forward`,
  `calculate_cost`, `update_weights`, `back_propagation`, `train`,
  `save_to_file`, `load_from_file`, `debug_prints` and the `output`
  property (the last layer's values after a forward pass); the activation
  functions `relu`, `tanh_activation`, `sigmoid` and their derivatives.
- `mytorch.dataset`: `parse_fen`, `parse_chess_file`, `print_board`,
  `exploit` and `shuffle` (shuffles two lists in place with the same
  permutation, optionally with a given `random.Random`).
- `mytorch.cli`: `parse_args`, `ParsedArgs` and `usage`.
- `mytorch.app`: `main`, `process`, and `find_best`, which searches hidden
  layer sizes and learning rates for the best `exploit` score.

## What it does not do

The package does not play chess, read PGN files or check that positions
are legal; it only learns from boards already labelled in the dataset
format above. Training is single-example, on the CPU, with no batching.