from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

from evobirds.core.individual import Individual


@dataclass(frozen=True)
class Statistics:
    """Fitness summary of one population snapshot."""

    min_fitness: float
    max_fitness: float
    avg_fitness: float
    size: int

    @classmethod
    def from_population(cls, population: Sequence[Individual]) -> Statistics:
        if len(population) == 0:
            raise ValueError("population must not be empty")
        scores = [float(ind.fitness()) for ind in population]
        lowest = min(scores)
        highest = max(scores)
        # summation rounding can push the mean a hair outside [min, max]
        mean = min(max(sum(scores) / len(scores), lowest), highest)
        return cls(min_fitness=lowest, max_fitness=highest, avg_fitness=mean, size=len(scores))

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"min={self.min_fitness:.2f}, max={self.max_fitness:.2f}, avg={self.avg_fitness:.2f}"
