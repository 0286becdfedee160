from __future__ import annotations

import numpy as np

from evobirds.core.chromosome import Chromosome
from evobirds.network import LayerTopology, Network
from evobirds.sim.eye import Eye


class Brain:
    """Neural network sized for one eye: ``cells`` inputs, ``2*cells`` hidden, 2 outputs.

    The outputs are the requested speed change and rotation change.
    """

    __slots__ = ("network",)

    def __init__(self, network: Network):
        self.network = network

    @staticmethod
    def topology(eye: Eye) -> list[LayerTopology]:
        return [
            LayerTopology(eye.cells),
            LayerTopology(2 * eye.cells),
            LayerTopology(2),
        ]

    @classmethod
    def random(cls, rng: np.random.Generator, eye: Eye) -> Brain:
        return cls(Network.random(rng, cls.topology(eye)))

    @classmethod
    def from_chromosome(cls, chromosome: Chromosome, eye: Eye) -> Brain:
        return cls(Network.from_weights(cls.topology(eye), chromosome.as_array()))

    def as_chromosome(self) -> Chromosome:
        return Chromosome(self.network.weights())

    def propagate(self, vision: np.ndarray) -> np.ndarray:
        return self.network.propagate(vision)
