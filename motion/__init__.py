"""
Projectile Hex Trajectory
=========================
Samples the vacuum trajectory of a projectile launched with speed v0 at
angle α on a fixed time grid, prints the integer points in hexadecimal, and
persists the launch parameters so a restored projectile reproduces the same
trajectory.
"""

from .integrator import (
    GRAVITY, MAX_SAMPLES, TrajectoryConfigError,
    sample_trajectory, truncate_to_int, to_hex, format_hex_point,
)
from .projectile import Projectile
from .persistence import save, load, MotionDataFormatError, DEFAULT_DATA_FILE
from .visualization import plot_trajectory

__version__ = "1.0.0"
__all__ = [
    'Projectile', 'TrajectoryConfigError', 'MotionDataFormatError',
    'GRAVITY', 'MAX_SAMPLES', 'DEFAULT_DATA_FILE',
    'sample_trajectory', 'truncate_to_int', 'to_hex', 'format_hex_point',
    'save', 'load', 'plot_trajectory',
]
