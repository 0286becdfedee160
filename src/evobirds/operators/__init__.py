"""
evobirds.operators
==================

Pluggable genetic operators used by :class:`evobirds.engine.GeneticAlgorithm`.

Each family is an abstract interface with one concrete implementation; new
variants (tournament selection, single-point crossover, ...) only need to
subclass the matching base class.
"""

from evobirds.operators.crossover import CrossoverOperator, UniformCrossover
from evobirds.operators.mutation import GaussianMutation, MutationOperator
from evobirds.operators.selection import RouletteWheelSelection, SelectionStrategy

__all__ = [
    "CrossoverOperator",
    "GaussianMutation",
    "MutationOperator",
    "RouletteWheelSelection",
    "SelectionStrategy",
    "UniformCrossover",
]
