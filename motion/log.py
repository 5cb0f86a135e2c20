import logging
import os
from typing import Optional


DEFAULT_LEVEL = logging.WARNING


def _level_from_env() -> int:
    """Numeric level for $LOG_LEVEL; unknown names fall back to WARNING."""
    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "WARNING").upper())
    return level if isinstance(level, int) else DEFAULT_LEVEL


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger with a single stderr handler; level comes from $LOG_LEVEL."""
    logger = logging.getLogger(name or "motion")
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(_level_from_env())
    return logger
