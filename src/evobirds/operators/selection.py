"""
evobirds.operators.selection
============================

Parent selection strategies. A strategy picks ONE parent per call, so the
genetic algorithm calls it once per parent slot and the same individual
may end up as both parents of a child.

All selection strategies implement the same interface:

    select(self, rng, population) -> Individual
"""

from collections.abc import Sequence

import numpy as np

from evobirds.core.individual import Individual


class SelectionStrategy:
    """Base class for all selection strategies."""

    def select(self, rng: np.random.Generator, population: Sequence[Individual]) -> Individual:  # pragma: no cover
        raise NotImplementedError("SelectionStrategy must implement select().")

    # Common input validation helper
    @staticmethod
    def _validate(population: Sequence[Individual]) -> None:
        if len(population) == 0:
            raise ValueError("population must not be empty")


class RouletteWheelSelection(SelectionStrategy):
    """
    Roulette Wheel (Fitness-Proportionate) Selection.
    Each individual's probability of being selected is proportional to its fitness.
    Fitness values act as unnormalized weights, so they must be non-negative
    and at least one of them must be positive.
    """

    def select(self, rng: np.random.Generator, population: Sequence[Individual]) -> Individual:
        self._validate(population)
        fitness = np.array([ind.fitness() for ind in population], dtype=float)
        if not np.all(np.isfinite(fitness)):
            raise ValueError("fitness values must be finite")
        if np.any(fitness < 0.0):
            raise ValueError("fitness values must be non-negative")
        total_fitness = float(np.sum(fitness))
        if total_fitness <= 0.0:
            raise ValueError("at least one individual must have positive fitness")
        index = rng.choice(len(population), p=fitness / total_fitness)
        return population[int(index)]
