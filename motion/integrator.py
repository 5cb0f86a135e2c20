"""
Fixed-Step Trajectory Sampler
=============================
Samples the closed-form vacuum trajectory of a point projectile

    x(t) = v0 · cos(α) · t
    y(t) = v0 · sin(α) · t − g·t²/2

at t = 0, step, 2·step, … while t ≤ total_time, truncating every coordinate
to a 32-bit integer. Sampling stops at the first point whose height is
negative; that point is not part of the result.

The sample time is advanced by repeated addition (t += step), so the last
sample can land a rounding error below total_time and still be included.
"""

import math
from typing import List, Tuple

import numpy as np


# ── Constants ─────────────────────────────────────────────────────────────
GRAVITY      = 9.81          # m/s²
INT32_MIN    = -2 ** 31
INT32_MAX    = 2 ** 31 - 1
MAX_SAMPLES  = 1_000_000     # upper bound on total_time / step

Point = Tuple[int, int]


class TrajectoryConfigError(ValueError):
    """Raised for a time grid that cannot be sampled (bad step or duration)."""


def truncate_to_int(value: float) -> int:
    """
    Narrow a float to a 32-bit signed integer.

    Truncates toward zero (−0.7 → 0, −1.2 → −1), maps NaN to 0 and
    saturates at the int32 limits instead of overflowing.
    """
    value = float(value)
    if math.isnan(value):
        return 0
    if value >= INT32_MAX:
        return INT32_MAX
    if value <= INT32_MIN:
        return INT32_MIN
    return math.trunc(value)


def to_hex(value: int) -> str:
    """Lowercase hex of a 32-bit integer, two's complement for negatives."""
    return format(value & 0xFFFFFFFF, 'x')


def format_hex_point(x: int, y: int) -> str:
    return f"x: {to_hex(x)}, y: {to_hex(y)}"


def validate_time_grid(total_time: float, step: float) -> None:
    """Reject grids that would never terminate or would run unbounded."""
    if not math.isfinite(step) or step <= 0:
        raise TrajectoryConfigError(f"step must be a positive finite number, got {step!r}")
    if not math.isfinite(total_time):
        raise TrajectoryConfigError(f"total_time must be finite, got {total_time!r}")
    if total_time / step > MAX_SAMPLES:
        raise TrajectoryConfigError(
            f"total_time / step = {total_time / step:.3g} exceeds the "
            f"{MAX_SAMPLES} sample limit"
        )


def sample_trajectory(v0: float, alpha: float, total_time: float,
                      step: float) -> List[Point]:
    """
    Sample integer (x, y) positions along the trajectory.

    Parameters
    ----------
    v0 : launch speed (m/s)
    alpha : launch angle in radians
    total_time : last admissible sample time (s)
    step : time increment between samples (s), must be > 0

    Returns
    -------
    points : list of (x, y) integer pairs, in time order
    """
    validate_time_grid(total_time, step)

    vx = v0 * np.cos(alpha)
    vy = v0 * np.sin(alpha)

    points: List[Point] = []
    t = 0.0
    while t <= total_time:
        x = truncate_to_int(vx * t)
        y = truncate_to_int(vy * t - (GRAVITY * t * t) / 2)
        if y < 0:
            break
        points.append((x, y))
        t += step

    return points
