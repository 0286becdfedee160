"""
evobirds.sim.eye
================

Angular vision sensor. The field of view is split into equal angular
cells; every food item inside the view adds energy to the cell it falls
into, the closer the food the more energy.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from evobirds.sim.geometry import bearing, wrap_signed

if TYPE_CHECKING:
    from evobirds.sim.config import SimulationConfig
    from evobirds.sim.entities import Food

FOV_RANGE = 0.25
FOV_ANGLE = math.pi + math.pi / 4
CELLS = 9


class Eye:
    """Fixed-geometry eye.

    Parameters
    ----------
    fov_range : float, default 0.25
        How far the eye can see.
    fov_angle : float, default 5*pi/4
        How wide the eye can see, in radians.
    cells : int, default 9
        Number of photoreceptors; this is also the input width of the brain.
    """

    __slots__ = ("fov_range", "fov_angle", "cells")

    def __init__(self, fov_range: float = FOV_RANGE, fov_angle: float = FOV_ANGLE, cells: int = CELLS):
        if fov_range <= 0:
            raise ValueError("fov_range must be > 0")
        if fov_angle <= 0:
            raise ValueError("fov_angle must be > 0")
        if cells <= 0:
            raise ValueError("cells must be > 0")
        self.fov_range = float(fov_range)
        self.fov_angle = float(fov_angle)
        self.cells = int(cells)

    @classmethod
    def from_config(cls, config: SimulationConfig) -> Eye:
        return cls(config.fov_range, config.fov_angle, config.eye_cells)

    def process_vision(self, position: np.ndarray, rotation: float, foods: Iterable[Food]) -> np.ndarray:
        """Return the activation of each cell for a bird at ``position`` facing ``rotation``."""
        cells = np.zeros(self.cells, dtype=np.float64)
        half_angle = self.fov_angle / 2.0

        for food in foods:
            to_food = food.position - position
            dist = float(np.linalg.norm(to_food))
            if dist >= self.fov_range:
                continue

            angle = wrap_signed(bearing(to_food) - rotation)
            if angle < -half_angle or angle > half_angle:
                continue

            # angle + half_angle is in [0, fov_angle]; exactly fov_angle maps past the last cell
            cell = int((angle + half_angle) / self.fov_angle * self.cells)
            cell = min(cell, self.cells - 1)

            cells[cell] += (self.fov_range - dist) / self.fov_range

        return cells

    def __repr__(self) -> str:
        return f"Eye(fov_range={self.fov_range}, fov_angle={self.fov_angle:.4f}, cells={self.cells})"
