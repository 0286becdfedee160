"""Angle and coordinate helpers for the toroidal unit-square arena.

Rotation 0 faces the +y axis; positive angles turn counter-clockwise.
"""

from __future__ import annotations

import math

import numpy as np

TAU = 2.0 * math.pi


def wrap_rotation(angle: float) -> float:
    """Wrap ``angle`` into [0, 2*pi)."""
    wrapped = math.fmod(angle, TAU)
    if wrapped < 0.0:
        wrapped += TAU
    # adding TAU to a tiny negative value can round up to TAU itself
    return 0.0 if wrapped >= TAU else wrapped


def wrap_signed(angle: float) -> float:
    """Wrap ``angle`` into (-pi, pi]."""
    return angle - TAU * math.ceil((angle - math.pi) / TAU)


def wrap_unit(point: np.ndarray) -> np.ndarray:
    """Wrap each coordinate of ``point`` into [0, 1)."""
    wrapped = np.mod(point, 1.0)
    wrapped[wrapped >= 1.0] = 0.0
    return wrapped


def forward(rotation: float) -> np.ndarray:
    """Unit vector a bird with ``rotation`` is facing."""
    return np.array([-math.sin(rotation), math.cos(rotation)])


def bearing(vector: np.ndarray) -> float:
    """Signed angle from the forward (+y) axis to ``vector``, in (-pi, pi]."""
    return math.atan2(-float(vector[0]), float(vector[1]))
