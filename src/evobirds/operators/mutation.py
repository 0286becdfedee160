"""
evobirds.operators.mutation
===========================

Mutation operators. They change a child chromosome in place right after
crossover.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from evobirds.core.chromosome import Chromosome


# =============================================================================
# Base class
# =============================================================================
class MutationOperator(ABC):
    """Abstract base class for mutation operators."""

    @abstractmethod
    def mutate(self, rng: np.random.Generator, chromosome: Chromosome) -> None:
        """Modify one or more genes of ``chromosome`` in place."""
        pass


# =============================================================================
# Real-valued mutations
# =============================================================================
class GaussianMutation(MutationOperator):
    """
    Nudges genes by a bounded random amount.

    Each gene gets a fair random sign and, with probability ``chance``, is shifted
    by ``sign * coeff * u`` where ``u`` is uniform in [0, 1). The shift therefore
    stays strictly inside (-coeff, coeff); the distribution is uniform, not normal.

    Parameters:
        chance (float): Probability of changing each gene, in [0, 1].
        coeff (float): Maximum magnitude of a change.
    """

    def __init__(self, chance: float = 0.01, coeff: float = 0.3):
        if not (0.0 <= chance <= 1.0):
            raise ValueError("chance must be in [0,1]")
        self.chance = chance
        self.coeff = coeff

    def mutate(self, rng: np.random.Generator, chromosome: Chromosome) -> None:
        genes = chromosome.genes
        n = len(genes)
        signs = np.where(rng.random(n) < 0.5, -1.0, 1.0)
        mask = rng.random(n) < self.chance
        magnitudes = rng.random(n)
        genes[mask] += signs[mask] * self.coeff * magnitudes[mask]

    def __repr__(self) -> str:
        return f"GaussianMutation(chance={self.chance}, coeff={self.coeff})"
