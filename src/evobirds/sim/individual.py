"""Adapter letting the domain-agnostic genetic algorithm breed birds."""

from __future__ import annotations

import numpy as np

from evobirds.core.chromosome import Chromosome
from evobirds.core.individual import Individual
from evobirds.sim.config import SimulationConfig
from evobirds.sim.entities import Bird


class BirdIndividual(Individual):
    """Genetic view of a bird: its brain weights as chromosome and its satiation as fitness."""

    __slots__ = ("_chromosome", "_fitness")

    def __init__(self, chromosome: Chromosome, fitness: float = 0.0) -> None:
        self._chromosome = chromosome
        self._fitness = float(fitness)

    @classmethod
    def from_bird(cls, bird: Bird) -> BirdIndividual:
        return cls(bird.as_chromosome(), float(bird.satiation))

    def into_bird(self, rng: np.random.Generator, config: SimulationConfig) -> Bird:
        return Bird.from_chromosome(self._chromosome, rng, config)

    def fitness(self) -> float:
        return self._fitness

    def chromosome(self) -> Chromosome:
        return self._chromosome

    @classmethod
    def create(cls, chromosome: Chromosome) -> BirdIndividual:
        return cls(chromosome)
