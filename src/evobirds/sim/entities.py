"""
evobirds.sim.entities
=====================

Birds, food and the world holding them, plus the read-only snapshot views
handed out to presentation layers.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

import numpy as np

from evobirds.core.chromosome import Chromosome
from evobirds.sim.brain import Brain
from evobirds.sim.config import SimulationConfig
from evobirds.sim.eye import Eye
from evobirds.sim.geometry import TAU, wrap_rotation


def random_position(rng: np.random.Generator) -> np.ndarray:
    return rng.random(2)


# =============================================================================
# Food
# =============================================================================
class Food:
    __slots__ = ("position",)

    def __init__(self, position: np.ndarray):
        self.position: np.ndarray = np.asarray(position, dtype=np.float64)

    @classmethod
    def random(cls, rng: np.random.Generator) -> Food:
        return cls(random_position(rng))

    def relocate(self, rng: np.random.Generator) -> None:
        self.position = random_position(rng)

    def __repr__(self) -> str:
        return f"Food(x={self.position[0]:.4f}, y={self.position[1]:.4f})"


# =============================================================================
# Bird
# =============================================================================
class Bird:
    """A foraging bird.

    Parameters
    ----------
    position : numpy.ndarray
        Point in the unit square.
    rotation : float
        Heading in radians; stored wrapped into [0, 2*pi).
    speed : float
        Distance covered per tick.
    eye : Eye
        Vision sensor.
    brain : Brain
        Network turning vision into movement.
    """

    __slots__ = ("position", "_rotation", "speed", "eye", "brain", "satiation", "vision")

    def __init__(self, position: np.ndarray, rotation: float, speed: float, eye: Eye, brain: Brain):
        self.position: np.ndarray = np.asarray(position, dtype=np.float64)
        self._rotation: float = wrap_rotation(rotation)
        self.speed: float = float(speed)
        self.eye = eye
        self.brain = brain
        self.satiation: int = 0
        self.vision: np.ndarray = np.zeros(eye.cells, dtype=np.float64)

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = wrap_rotation(value)

    @classmethod
    def random(cls, rng: np.random.Generator, config: SimulationConfig) -> Bird:
        eye = Eye.from_config(config)
        brain = Brain.random(rng, eye)
        return cls._spawn(rng, config, eye, brain)

    @classmethod
    def from_chromosome(cls, chromosome: Chromosome, rng: np.random.Generator, config: SimulationConfig) -> Bird:
        eye = Eye.from_config(config)
        brain = Brain.from_chromosome(chromosome, eye)
        return cls._spawn(rng, config, eye, brain)

    @classmethod
    def _spawn(cls, rng: np.random.Generator, config: SimulationConfig, eye: Eye, brain: Brain) -> Bird:
        position = random_position(rng)
        rotation = float(rng.uniform(0.0, TAU))
        return cls(position, rotation, config.initial_speed, eye, brain)

    def as_chromosome(self) -> Chromosome:
        return self.brain.as_chromosome()

    def __repr__(self) -> str:
        return (
            f"Bird(x={self.position[0]:.4f}, y={self.position[1]:.4f}, "
            f"rotation={self._rotation:.4f}, speed={self.speed:.4f}, satiation={self.satiation})"
        )


# =============================================================================
# Snapshot views
# =============================================================================
@dataclass(frozen=True)
class BirdView:
    x: float
    y: float
    rotation: float
    speed: float
    satiation: int
    vision: tuple[float, ...]


@dataclass(frozen=True)
class FoodView:
    x: float
    y: float


@dataclass(frozen=True)
class WorldSnapshot:
    birds: tuple[BirdView, ...]
    foods: tuple[FoodView, ...]

    def as_dict(self) -> dict[str, Any]:
        """Plain builtins only, ready for JSON or any rendering layer."""
        return asdict(self)


# =============================================================================
# World
# =============================================================================
class World:
    __slots__ = ("birds", "foods")

    def __init__(self, birds: list[Bird], foods: list[Food]):
        self.birds = birds
        self.foods = foods

    @classmethod
    def random(cls, rng: np.random.Generator, config: SimulationConfig) -> World:
        birds = [Bird.random(rng, config) for _ in range(config.bird_count)]
        foods = [Food.random(rng) for _ in range(config.food_count)]
        return cls(birds, foods)

    def snapshot(self) -> WorldSnapshot:
        birds = tuple(
            BirdView(
                x=float(bird.position[0]),
                y=float(bird.position[1]),
                rotation=bird.rotation,
                speed=bird.speed,
                satiation=bird.satiation,
                vision=tuple(bird.vision.tolist()),
            )
            for bird in self.birds
        )
        foods = tuple(FoodView(x=float(food.position[0]), y=float(food.position[1])) for food in self.foods)
        return WorldSnapshot(birds=birds, foods=foods)

    def __repr__(self) -> str:
        return f"World(birds={len(self.birds)}, foods={len(self.foods)})"
