"""
Logging setup shared by all modules of the package.

Modules log through ``logging.getLogger(__name__)``; records propagate to the
package root logger, which gets a single stream handler on first use.
"""
import logging
from typing import Union

_ROOT_LOGGER_NAME = "minihpo"
_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_root_logger() -> logging.Logger:
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(h)
        logger.setLevel(logging.INFO)
    return logger


def set_verbosity(level: Union[int, str]) -> None:
    """
    Sets the level of the package logger.

    A study built later with an explicit ``StudyConfig.log_level`` overrides
    this level; with the default ``log_level=None`` it is kept.

    Args:
        level: A ``logging`` level constant or its name (e.g. ``"WARNING"``).
    """
    if isinstance(level, str):
        level = level.upper()
    get_root_logger().setLevel(level)


def get_verbosity() -> int:
    return get_root_logger().getEffectiveLevel()
