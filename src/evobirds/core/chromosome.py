"""
evobirds.core.chromosome
========================

Flat real-valued gene container shared by the genetic operators and the
neural networks they evolve.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np


class Chromosome:
    """Ordered sequence of real-valued genes.

    Parameters
    ----------
    genes : Iterable[float] | numpy.ndarray
        Gene values. They are copied into a one-dimensional ``float64`` array.
    """

    __slots__ = ("genes",)

    def __init__(self, genes: Iterable[float] | np.ndarray):
        arr = np.array(genes, dtype=np.float64)
        if arr.ndim != 1:
            raise ValueError(f"Chromosome genes must be one-dimensional, got shape={arr.shape}.")
        self.genes: np.ndarray = arr

    @classmethod
    def random(cls, length: int, rng: np.random.Generator, bounds: tuple[float, float] = (-1.0, 1.0)) -> Chromosome:
        """Create a chromosome with genes drawn uniformly from ``bounds``.

        Parameters
        ----------
        length : int
            Number of genes.
        rng : numpy.random.Generator
            Source of randomness.
        bounds : tuple[float, float], default (-1.0, 1.0)
            Lower and upper bounds for uniform sampling.
        """
        low, high = bounds
        if low >= high:
            raise ValueError(f"Invalid bounds {bounds}: low must be < high.")
        return cls(rng.uniform(low, high, size=length))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Chromosome):
            return False
        return np.array_equal(self.genes, other.genes)

    # genes are mutated in place
    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return self.genes.size

    def __iter__(self) -> Iterator[float]:
        return iter(self.genes.tolist())

    def __getitem__(self, index: int) -> float:
        return float(self.genes[index])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(len={len(self)})"

    def copy(self) -> Chromosome:
        """Create a deep copy of the chromosome."""
        return Chromosome(self.genes)

    def as_array(self) -> np.ndarray:
        """Return the genes as a numpy array (not a copy)."""
        return self.genes
