"""
evobirds.network
================

Feed-forward neural network with ReLU activations.

A network is described by its topology: the neuron count of every layer,
input layer included. It can be flattened into a single weight vector and
rebuilt from one, which is how the genetic algorithm reads and writes it.
The flat layout is, layer after layer and neuron after neuron,
``bias, weight_0, weight_1, ...``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

import numpy as np


class WeightCountError(ValueError):
    """Raised when a flat weight vector does not match the requested topology."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        if actual < expected:
            detail = "not enough weights were given"
        else:
            detail = "too many weights were given"
        super().__init__(f"{detail}: topology needs {expected}, got {actual}")


@dataclass(frozen=True)
class LayerTopology:
    """Number of neurons in one layer."""

    neurons: int

    def __post_init__(self) -> None:
        if self.neurons <= 0:
            raise ValueError("neurons must be > 0")


def _validate_topology(topology: Sequence[LayerTopology]) -> None:
    if len(topology) < 2:
        raise ValueError(f"topology needs at least 2 layers, got {len(topology)}")


# =============================================================================
# Neuron
# =============================================================================
class Neuron:
    __slots__ = ("bias", "weights")

    def __init__(self, bias: float, weights: Iterable[float] | np.ndarray):
        self.bias: float = float(bias)
        self.weights: np.ndarray = np.array(weights, dtype=np.float64)

    @classmethod
    def random(cls, rng: np.random.Generator, input_size: int) -> Neuron:
        values = rng.uniform(-1.0, 1.0, size=input_size + 1)
        return cls(values[0], values[1:])

    @classmethod
    def from_weights(cls, input_size: int, weights: Iterator[float]) -> Neuron:
        bias = next(weights)
        return cls(bias, [next(weights) for _ in range(input_size)])

    def propagate(self, inputs: np.ndarray) -> float:
        if len(inputs) != len(self.weights):
            raise ValueError(f"Neuron expects {len(self.weights)} inputs, got {len(inputs)}")
        return max(float(np.dot(inputs, self.weights)) + self.bias, 0.0)

    def __repr__(self) -> str:
        return f"Neuron(bias={self.bias:.4f}, inputs={len(self.weights)})"


# =============================================================================
# Layer
# =============================================================================
class Layer:
    __slots__ = ("neurons",)

    def __init__(self, neurons: Sequence[Neuron]):
        if len(neurons) == 0:
            raise ValueError("layer must contain at least one neuron")
        self.neurons: list[Neuron] = list(neurons)

    @classmethod
    def random(cls, rng: np.random.Generator, input_size: int, output_size: int) -> Layer:
        return cls([Neuron.random(rng, input_size) for _ in range(output_size)])

    @classmethod
    def from_weights(cls, input_size: int, output_size: int, weights: Iterator[float]) -> Layer:
        return cls([Neuron.from_weights(input_size, weights) for _ in range(output_size)])

    @property
    def input_size(self) -> int:
        return len(self.neurons[0].weights)

    def propagate(self, inputs: np.ndarray) -> np.ndarray:
        return np.array([neuron.propagate(inputs) for neuron in self.neurons], dtype=np.float64)

    def __len__(self) -> int:
        return len(self.neurons)


# =============================================================================
# Network
# =============================================================================
class Network:
    """Stack of layers propagating an input vector front to back.

    Parameters
    ----------
    layers : Sequence[Layer]
        Weight-bearing layers. The input layer has no weights and is therefore
        not part of this list.
    """

    __slots__ = ("layers",)

    def __init__(self, layers: Sequence[Layer]):
        if len(layers) == 0:
            raise ValueError("network must contain at least one weight-bearing layer")
        self.layers: list[Layer] = list(layers)

    @classmethod
    def random(cls, rng: np.random.Generator, topology: Sequence[LayerTopology]) -> Network:
        """Create a network whose biases and weights are uniform in [-1, 1]."""
        _validate_topology(topology)
        return cls(
            [Layer.random(rng, inp.neurons, out.neurons) for inp, out in zip(topology, topology[1:])]
        )

    @classmethod
    def from_weights(cls, topology: Sequence[LayerTopology], weights: Iterable[float] | np.ndarray) -> Network:
        """Rebuild a network from the flat vector produced by :meth:`weights`.

        Raises
        ------
        WeightCountError
            If ``weights`` holds fewer or more values than ``topology`` needs.
        """
        _validate_topology(topology)
        values = np.asarray(weights if isinstance(weights, np.ndarray) else list(weights), dtype=np.float64).ravel()
        expected = cls.weight_count(topology)
        if values.size != expected:
            raise WeightCountError(expected, int(values.size))

        it = iter(values.tolist())
        layers = [Layer.from_weights(inp.neurons, out.neurons, it) for inp, out in zip(topology, topology[1:])]
        return cls(layers)

    @staticmethod
    def weight_count(topology: Sequence[LayerTopology]) -> int:
        """Number of values (biases included) a network of this topology holds."""
        _validate_topology(topology)
        return sum((inp.neurons + 1) * out.neurons for inp, out in zip(topology, topology[1:]))

    def topology(self) -> list[LayerTopology]:
        return [LayerTopology(self.layers[0].input_size)] + [LayerTopology(len(layer)) for layer in self.layers]

    def weights(self) -> np.ndarray:
        flat: list[float] = []
        for layer in self.layers:
            for neuron in layer.neurons:
                flat.append(neuron.bias)
                flat.extend(neuron.weights.tolist())
        return np.array(flat, dtype=np.float64)

    def propagate(self, inputs: Iterable[float] | np.ndarray) -> np.ndarray:
        values = np.asarray(inputs, dtype=np.float64)
        expected = self.layers[0].input_size
        if values.shape != (expected,):
            raise ValueError(f"Network expects {expected} inputs, got shape {values.shape}")
        for layer in self.layers:
            values = layer.propagate(values)
        return values

    def __repr__(self) -> str:
        widths = "-".join(str(t.neurons) for t in self.topology())
        return f"Network({widths})"
