"""
Launch Parameter Persistence
============================
Saves and restores the launch parameters of a Projectile.

File format: a NumPy ``.npy`` file (magic string, versioned header, raw
data) holding one float64 array of shape (2,):

    [v0, alpha_radians]

The angle is stored in radians exactly as held by the object, so a restored
projectile samples a bit-identical trajectory. The trajectory itself is not
stored; a loaded projectile starts with an empty one.
"""

import os
from typing import Union

import numpy as np

from .log import get_logger
from .projectile import Projectile


DEFAULT_DATA_FILE = "motion_data.ser"
RECORD_SHAPE = (2,)
RECORD_DTYPE = np.dtype('<f8')

PathLike = Union[str, os.PathLike]

logger = get_logger(__name__)


class MotionDataFormatError(ValueError):
    """Raised when a file does not hold a valid launch-parameter record."""


def save(projectile: Projectile, path: PathLike = DEFAULT_DATA_FILE) -> None:
    """
    Write (v0, alpha) to ``path``, replacing any existing file.

    Raises OSError if the file cannot be opened or written.
    """
    record = np.array([projectile.v0, projectile.alpha], dtype=RECORD_DTYPE)
    # File object, not a str path: np.save would otherwise append ".npy".
    with open(path, 'wb') as fh:
        np.save(fh, record, allow_pickle=False)
    logger.debug("saved v0=%r alpha=%r to %s", projectile.v0, projectile.alpha, path)


def load(path: PathLike = DEFAULT_DATA_FILE) -> Projectile:
    """
    Read a record written by `save` and build a fresh Projectile.

    Raises OSError if the file cannot be opened or read, and
    MotionDataFormatError if its content is not a valid record.
    """
    with open(path, 'rb') as fh:
        try:
            record = np.load(fh, allow_pickle=False)
        except (ValueError, EOFError) as exc:
            raise MotionDataFormatError(f"{path}: not a motion data file ({exc})") from exc

    if not isinstance(record, np.ndarray):
        raise MotionDataFormatError(f"{path}: expected a single array record")
    if record.shape != RECORD_SHAPE or record.dtype != RECORD_DTYPE:
        raise MotionDataFormatError(
            f"{path}: expected float64 array of shape {RECORD_SHAPE}, "
            f"got {record.dtype} array of shape {record.shape}"
        )

    v0, alpha = (float(v) for v in record)
    logger.debug("loaded v0=%r alpha=%r from %s", v0, alpha, path)
    return Projectile(v0=v0, alpha=alpha)
