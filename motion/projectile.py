"""
Projectile Definition
=====================
The Projectile dataclass holds the launch parameters and a transient,
recomputable trajectory.

Only (v0, alpha) describe a projectile; the sampled trajectory is a cache
that `calculate` rebuilds from scratch and that is never persisted.

Coordinate system:
  x = downrange (horizontal)
  y = altitude  (vertical, up positive)
"""

import numpy as np
from dataclasses import dataclass, field
from typing import List

from .integrator import Point, sample_trajectory, format_hex_point


@dataclass
class Projectile:
    """
    Launch parameters of a projectile and its last computed trajectory.
    """
    v0: float                    # m/s  launch speed
    alpha: float                 # rad  launch angle above horizontal
    trajectory: List[Point] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_degrees(cls, v0: float, alpha_deg: float) -> "Projectile":
        """Build a projectile from a launch angle given in degrees."""
        return cls(v0=float(v0), alpha=float(np.radians(alpha_deg)))

    @property
    def alpha_deg(self) -> float:
        return float(np.degrees(self.alpha))

    def calculate(self, total_time: float, step: float) -> List[Point]:
        """
        Replace the trajectory with a fresh fixed-step sampling.

        Raises TrajectoryConfigError for a non-positive step or a
        non-finite total_time; the previous trajectory is kept in that case.
        """
        self.trajectory = sample_trajectory(self.v0, self.alpha, total_time, step)
        return self.trajectory

    def hex_lines(self) -> List[str]:
        return [format_hex_point(x, y) for x, y in self.trajectory]

    def print_hex_trajectory(self) -> None:
        for line in self.hex_lines():
            print(line)

    def trajectory_array(self) -> np.ndarray:
        """Trajectory as an (N, 2) integer array of [x, y] rows."""
        if not self.trajectory:
            return np.empty((0, 2), dtype=np.int64)
        return np.array(self.trajectory, dtype=np.int64)
