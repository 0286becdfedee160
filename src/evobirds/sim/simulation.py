"""
evobirds.sim.simulation
=======================

Top-level state machine. Each tick every bird looks, thinks, moves and
eats; once a generation has lived ``generation_length`` ticks the birds
are bred into a new generation.
"""

from __future__ import annotations

import logging

import numpy as np

from evobirds.core.statistics import Statistics
from evobirds.engine import GeneticAlgorithm
from evobirds.operators.crossover import UniformCrossover
from evobirds.operators.mutation import GaussianMutation
from evobirds.operators.selection import RouletteWheelSelection
from evobirds.sim.config import SimulationConfig
from evobirds.sim.entities import World, WorldSnapshot
from evobirds.sim.geometry import forward, wrap_unit
from evobirds.sim.individual import BirdIndividual


class Simulation:
    """Deterministic foraging simulation.

    All randomness comes from the generator passed to :meth:`random`,
    :meth:`step` and :meth:`train`; replaying the same seed and call
    sequence reproduces the run exactly.

    Parameters
    ----------
    world : World
        Initial birds and food.
    config : SimulationConfig
        Fixed tuning constants.
    ga : GeneticAlgorithm | None
        Breeding strategy; defaults to roulette selection, uniform crossover
        and bounded mutation configured from ``config``.
    logger : logging.Logger | None
        Destination of per-generation statistics.
    """

    def __init__(
        self,
        world: World,
        config: SimulationConfig,
        ga: GeneticAlgorithm | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config
        self.logger = logger or logging.getLogger("evobirds.simulation")
        self.ga = ga or GeneticAlgorithm(
            selection=RouletteWheelSelection(),
            crossover=UniformCrossover(),
            mutation=GaussianMutation(config.mutation_chance, config.mutation_coeff),
            logger=self.logger.getChild("ga"),
        )
        self._world = world
        self.age: int = 0
        self.generation: int = 0
        self.history: list[Statistics] = []

    # -----------------------------
    # Public API
    # -----------------------------

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        config: SimulationConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> Simulation:
        config = config or SimulationConfig()
        return cls(World.random(rng, config), config, logger=logger)

    @property
    def world(self) -> World:
        return self._world

    def snapshot(self) -> WorldSnapshot:
        return self._world.snapshot()

    def step(self, rng: np.random.Generator) -> Statistics | None:
        """Advance one tick; return the generation statistics when a generation ends."""
        self._process_brains()
        self._process_movement()
        self._process_collisions(rng)

        self.age += 1
        if self.age > self.config.generation_length:
            return self._evolve(rng)
        return None

    def train(self, rng: np.random.Generator) -> Statistics:
        """Fast-forward to the end of the current generation."""
        while True:
            stats = self.step(rng)
            if stats is not None:
                return stats

    # -----------------------------
    # Internal helpers
    # -----------------------------

    def _process_brains(self) -> None:
        cfg = self.config
        for bird in self._world.birds:
            bird.vision = bird.eye.process_vision(bird.position, bird.rotation, self._world.foods)
            response = bird.brain.propagate(bird.vision)

            speed = float(np.clip(response[0], -cfg.speed_accel, cfg.speed_accel))
            rotation = float(np.clip(response[1], -cfg.rotation_accel, cfg.rotation_accel))

            bird.speed = float(np.clip(bird.speed + speed, cfg.speed_min, cfg.speed_max))
            bird.rotation = bird.rotation + rotation

    def _process_movement(self) -> None:
        for bird in self._world.birds:
            bird.position = wrap_unit(bird.position + forward(bird.rotation) * bird.speed)

    def _process_collisions(self, rng: np.random.Generator) -> None:
        # birds in list order, then foods in list order; a food eaten by an
        # earlier bird has already moved away when later birds are checked
        radius = self.config.collision_radius
        for bird in self._world.birds:
            for food in self._world.foods:
                if float(np.linalg.norm(bird.position - food.position)) <= radius:
                    bird.satiation += 1
                    food.relocate(rng)

    def _evolve(self, rng: np.random.Generator) -> Statistics:
        current_population = [BirdIndividual.from_bird(bird) for bird in self._world.birds]
        evolved_population, stats = self.ga.evolve(rng, current_population)

        self._world.birds = [individual.into_bird(rng, self.config) for individual in evolved_population]
        for food in self._world.foods:
            food.relocate(rng)
        self.age = 0

        self.history.append(stats)
        self.logger.info("Generation %d stats: %s", self.generation, stats)
        self.generation += 1
        return stats
