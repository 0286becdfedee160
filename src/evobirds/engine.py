from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar, cast

import numpy as np

from evobirds.core.individual import Individual
from evobirds.core.statistics import Statistics
from evobirds.operators.crossover import CrossoverOperator
from evobirds.operators.mutation import MutationOperator
from evobirds.operators.selection import SelectionStrategy

IndividualT = TypeVar("IndividualT", bound=Individual)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GeneticAlgorithmError(RuntimeError):
    pass


# ---------------------------------------------------------------------------
# GeneticAlgorithm
# ---------------------------------------------------------------------------


class GeneticAlgorithm:
    """One generational replacement: select, crossover, mutate, rebuild.

    The algorithm holds only its operator configuration; every call to
    :meth:`evolve` is independent and draws all randomness from the
    generator it is handed.
    """

    def __init__(
        self,
        selection: SelectionStrategy,
        crossover: CrossoverOperator,
        mutation: MutationOperator,
        logger: logging.Logger | None = None,
    ) -> None:
        self.selection = selection
        self.crossover = crossover
        self.mutation = mutation
        self.logger = logger or logging.getLogger("evobirds.engine")

    # -----------------------------
    # Public API
    # -----------------------------

    def evolve(
        self, rng: np.random.Generator, population: Sequence[IndividualT]
    ) -> tuple[list[IndividualT], Statistics]:
        """Breed a new population of the same size as ``population``.

        Parameters
        ----------
        rng : numpy.random.Generator
            Source of randomness for selection, crossover and mutation.
        population : Sequence[Individual]
            Evaluated individuals of the current generation.

        Returns
        -------
        tuple[list[Individual], Statistics]
            The children, built with ``type(parent).create``, and the fitness
            statistics of the population that was passed in (the evaluated,
            pre-evolution generation).
        """
        if len(population) == 0:
            raise GeneticAlgorithmError("Population is empty; nothing to evolve.")

        stats = Statistics.from_population(population)
        offspring = [self._create_child(rng, population) for _ in range(len(population))]

        self.logger.debug(
            "Evolved %d individuals (parent fitness %s)",
            len(offspring),
            stats,
        )
        return offspring, stats

    # -----------------------------
    # Internal helpers
    # -----------------------------

    def _create_child(self, rng: np.random.Generator, population: Sequence[IndividualT]) -> IndividualT:
        parent_a = self.selection.select(rng, population)
        parent_b = self.selection.select(rng, population)

        child = self.crossover.crossover(rng, parent_a.chromosome(), parent_b.chromosome())
        self.mutation.mutate(rng, child)

        return cast(IndividualT, type(parent_a).create(child))
