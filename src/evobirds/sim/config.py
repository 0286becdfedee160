from __future__ import annotations

import math
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Simulation config
# ---------------------------------------------------------------------------


@dataclass
class SimulationConfig:
    # eye geometry
    fov_range: float = 0.25
    fov_angle: float = math.pi + math.pi / 4
    eye_cells: int = 9
    # motion
    speed_min: float = 0.001  # birds never stop completely
    speed_max: float = 0.005
    speed_accel: float = 0.2  # max speed change the brain can request per tick
    rotation_accel: float = math.pi / 2  # max rotation change per tick, radians
    initial_speed: float = 0.002
    collision_radius: float = 0.01
    # evolution
    generation_length: int = 2500
    mutation_chance: float = 0.01
    mutation_coeff: float = 0.3
    # population
    bird_count: int = 40
    food_count: int = 60

    def __post_init__(self) -> None:
        """Validate configuration parameters early to fail fast.

        Rules
        -----
        - fov_range, fov_angle, collision_radius > 0
        - eye_cells >= 1
        - 0 < speed_min <= initial_speed <= speed_max
        - speed_accel, rotation_accel >= 0
        - generation_length >= 1
        - mutation_chance in [0,1], mutation_coeff >= 0
        - bird_count >= 1, food_count >= 0
        """
        if self.fov_range <= 0:
            raise ValueError("fov_range must be > 0")
        if self.fov_angle <= 0:
            raise ValueError("fov_angle must be > 0")
        if self.eye_cells < 1:
            raise ValueError("eye_cells must be >= 1")
        if self.speed_min <= 0:
            raise ValueError("speed_min must be > 0")
        if self.speed_max < self.speed_min:
            raise ValueError("speed_max must be >= speed_min")
        if not (self.speed_min <= self.initial_speed <= self.speed_max):
            raise ValueError("initial_speed must be in [speed_min, speed_max]")
        if self.speed_accel < 0:
            raise ValueError("speed_accel must be >= 0")
        if self.rotation_accel < 0:
            raise ValueError("rotation_accel must be >= 0")
        if self.collision_radius <= 0:
            raise ValueError("collision_radius must be > 0")
        if self.generation_length < 1:
            raise ValueError("generation_length must be >= 1")
        if not (0.0 <= self.mutation_chance <= 1.0):
            raise ValueError("mutation_chance must be in [0,1]")
        if self.mutation_coeff < 0:
            raise ValueError("mutation_coeff must be >= 0")
        if self.bird_count < 1:
            raise ValueError("bird_count must be >= 1")
        if self.food_count < 0:
            raise ValueError("food_count must be >= 0")
