"""A small fully connected neural network trained one example at a time."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import numpy as np

DEFAULT_LEARNING_RATE = 0.005
GRADIENT_THRESHOLD = 1.0


def relu(x):
    """Rectified linear unit."""
    return np.maximum(x, 0)


def relu_derivative(x):
    """Derivative of :func:`relu`: 1 where x is positive, 0 elsewhere."""
    return np.where(np.asarray(x) > 0, 1.0, 0.0)


def tanh_activation(x):
    """Hyperbolic tangent."""
    return np.tanh(x)


def tanh_derivative(x):
    """Derivative of tanh evaluated at the pre-activation value x."""
    t = np.tanh(x)
    return 1 - t * t


def sigmoid(x):
    """Logistic sigmoid."""
    return 1 / (1 + np.exp(-np.asarray(x, dtype=np.float64)))


def sigmoid_derivative(x):
    """Derivative of the sigmoid expressed in terms of its output x."""
    return x * (1 - x)


_ACTIVATIONS: dict[str, tuple[Callable, Callable]] = {
    "tanhf": (tanh_activation, tanh_derivative),
    "sigmoid": (sigmoid, sigmoid_derivative),
    "relu": (relu, relu_derivative),
}


def _activation_pair(name: str) -> tuple[Callable, Callable]:
    try:
        return _ACTIVATIONS[name]
    except KeyError:
        raise ValueError(f"Invalid activation function: {name!r}") from None


def _format(value: float) -> str:
    return f"{float(value):g}"


class NeuralNetwork:
    """Feed-forward network with one weight matrix between consecutive layers.

    Layers are row vectors; the weights between layer ``i`` and ``i + 1`` form a
    ``config[i] x config[i + 1]`` matrix. Biases are kept and persisted but do
    not take part in propagation. The cache vectors, at which the activation
    derivative is evaluated during the weight update, start at zero and are
    never overwritten.
    """

    def __init__(self, config, activation, learning_rate=DEFAULT_LEARNING_RATE):
        self.activation, self.activation_derivative = _activation_pair(activation)
        self.activation_name = activation
        self.learning_rate = float(learning_rate)
        self.config = [int(size) for size in config]
        if len(self.config) < 1 or any(size < 1 for size in self.config):
            raise ValueError("config must hold at least one positive layer size")
        print(f"learning rate: {_format(self.learning_rate)}")

        rng = np.random.default_rng()
        self._allocate_layers()
        self.bias = [np.ones(size, dtype=np.float32) for size in self.config[1:]]
        self.weights = [
            rng.uniform(-1.0, 1.0, size=(rows, cols)).astype(np.float32)
            for rows, cols in zip(self.config, self.config[1:])
        ]
        self.debug_prints()

    def _allocate_layers(self) -> None:
        self.neurons = [np.zeros(size, dtype=np.float32) for size in self.config]
        self.costs = [np.zeros(size, dtype=np.float32) for size in self.config]
        self.caches = [np.zeros(size, dtype=np.float32) for size in self.config]

    def propagate_forward(self, input_vector) -> None:
        """Feed ``input_vector`` through every layer."""
        values = np.asarray(input_vector, dtype=np.float32)
        if values.shape != (self.config[0],):
            raise ValueError(
                f"input must have {self.config[0]} values, got shape {values.shape}"
            )
        self.neurons[0] = values.copy()
        for i, weights in enumerate(self.weights, start=1):
            raw = self.neurons[i - 1] @ weights
            self.neurons[i] = np.asarray(self.activation(raw), dtype=np.float32)

    def calculate_cost(self, expected) -> None:
        """Compute the output error and carry it back through the hidden layers."""
        target = np.asarray(expected, dtype=np.float32)
        if target.shape != (self.config[-1],):
            raise ValueError(
                f"expected output must have {self.config[-1]} values, "
                f"got shape {target.shape}"
            )
        self.costs[-1] = target - self.neurons[-1]
        for i in range(len(self.costs) - 2, 0, -1):
            self.costs[i] = self.costs[i + 1] @ self.weights[i].T

    def update_weights(self) -> None:
        """Apply one clipped gradient step to every weight matrix."""
        for i, weights in enumerate(self.weights):
            delta = self.costs[i + 1].astype(np.float64) * np.asarray(
                self.activation_derivative(self.caches[i + 1].astype(np.float64)),
                dtype=np.float64,
            )
            gradient = self.learning_rate * np.outer(
                self.neurons[i].astype(np.float64), delta
            )
            gradient = np.clip(gradient, -GRADIENT_THRESHOLD, GRADIENT_THRESHOLD)
            self.weights[i] = (weights + gradient).astype(np.float32)

    def back_propagation(self, expected) -> None:
        """Compute the costs for ``expected`` and update the weights."""
        self.calculate_cost(expected)
        self.update_weights()

    def train(self, inputs, outputs) -> None:
        """Run one forward and backward pass for each input/output pair in order."""
        inputs = list(inputs)
        outputs = list(outputs)
        if len(inputs) != len(outputs):
            raise ValueError("inputs and outputs must have the same length")
        print(f"training on dataSet of size :{len(inputs)}")
        for input_vector, expected in zip(inputs, outputs):
            self.propagate_forward(input_vector)
            self.back_propagation(expected)

    def save_to_file(self, filename) -> None:
        """Write the layer sizes, weights, biases and settings as text."""
        lines = [str(len(self.config)), "".join(f"{size} " for size in self.config)]
        for weights in self.weights:
            lines.extend("".join(f"{_format(v)} " for v in row) for row in weights)
            lines.append("")
        lines.extend("".join(f"{_format(v)} " for v in bias) for bias in self.bias)
        lines.append(f"learningRate: {_format(self.learning_rate)}")
        lines.append(f"activationFunction: {self.activation_name}")
        Path(filename).write_text("\n".join(lines) + "\n")

    def load_from_file(self, filename) -> None:
        """Replace this network with the one stored in ``filename``."""
        tokens = iter(Path(filename).read_text().split())

        def take() -> str:
            try:
                return next(tokens)
            except StopIteration:
                raise ValueError(f"{filename}: unexpected end of file") from None

        def take_number(kind: Callable) -> float:
            token = take()
            try:
                return kind(token)
            except ValueError:
                raise ValueError(f"{filename}: bad number {token!r}") from None

        config_size = int(take_number(int))
        config: list[int] = []
        for _ in range(config_size):
            config.append(int(take_number(int)))
            print(" ".join(str(size) for size in config) + " ")
        if not config or any(size < 1 for size in config):
            raise ValueError(f"{filename}: invalid layer sizes {config}")

        weights = [
            np.array(
                [take_number(float) for _ in range(rows * cols)], dtype=np.float32
            ).reshape(rows, cols)
            for rows, cols in zip(config, config[1:])
        ]
        bias = [
            np.array([take_number(float) for _ in range(size)], dtype=np.float32)
            for size in config[1:]
        ]
        take()
        learning_rate = float(take_number(float))
        take()
        activation_name = take()
        print(f"learning rate: {_format(learning_rate)}")
        print(f"activation function: {activation_name}")
        activation, derivative = _activation_pair(activation_name)

        self.config = config
        self.weights = weights
        self.bias = bias
        self.learning_rate = learning_rate
        self.activation_name = activation_name
        self.activation = activation
        self.activation_derivative = derivative
        self._allocate_layers()
        print(f"loaded ={_format(self.activation(0.5))}")
        print(f"sigmoid ={_format(sigmoid(0.5))}")
        print(f"tanhf ={_format(np.tanh(0.5))}")

    def debug_prints(self) -> None:
        """Print the number of neurons, weights and biases."""
        total_neurons = sum(layer.size for layer in self.neurons)
        total_weights = sum(weights.size for weights in self.weights)
        total_bias = sum(bias.size for bias in self.bias)
        print(f"total neurons: {total_neurons}")
        print(f"total weights: {total_weights}")
        print(f"total bias: {total_bias}")

    @property
    def output(self) -> np.ndarray:
        """Values of the last layer after the latest forward pass."""
        return self.neurons[-1]

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.weights)

    def __len__(self) -> int:
        return len(self.config)


__all__: Sequence[str] = [
    "NeuralNetwork",
    "relu",
    "relu_derivative",
    "sigmoid",
    "sigmoid_derivative",
    "tanh_activation",
    "tanh_derivative",
]