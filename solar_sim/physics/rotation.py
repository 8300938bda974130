"""Per-body spin, independent of gravity."""

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

TWO_PI = 2.0 * math.pi


@dataclass
class Spin:
    """Constant-rate rotation about a fixed local axis.

    Attributes:
        angular_rate: Radians advanced per step
        axis: Local rotation axis (normalized on creation)
        angle: Accumulated angle in [0, 2*pi)
    """
    angular_rate: float
    axis: Tuple[float, float, float] = (0.0, 1.0, 0.0)
    angle: float = 0.0

    def __post_init__(self):
        axis = np.asarray(self.axis, dtype=np.float64)
        norm = np.linalg.norm(axis)
        if axis.shape != (3,) or norm == 0.0:
            raise ValueError(f"Spin axis must be a non-zero 3-vector, got {self.axis!r}")
        self.axis = tuple(float(c) for c in axis / norm)
        self.angular_rate = float(self.angular_rate)
        self.angle = float(self.angle) % TWO_PI

    def orientation(self) -> np.ndarray:
        """Rotation quaternion (w, x, y, z) as float32."""
        half = 0.5 * self.angle
        s = math.sin(half)
        ax, ay, az = self.axis
        return np.array([math.cos(half), ax * s, ay * s, az * s], dtype=np.float32)


class RotationIntegrator:
    """Advances every spin by its constant rate once per call."""

    def step(self, spins: Iterable[Spin]) -> None:
        for spin in spins:
            spin.angle = (spin.angle + spin.angular_rate) % TWO_PI


def sidereal_rate(period_seconds: float, seconds_per_step: float = 1.0) -> float:
    """Angular rate (radians per step) for a given rotation period."""
    if period_seconds <= 0:
        raise ValueError(f"Rotation period must be positive, got {period_seconds}")
    return TWO_PI * seconds_per_step / period_seconds
