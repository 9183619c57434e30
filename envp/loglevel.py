"""
ABOUTME: Log level selection from an environment variable
ABOUTME: Maps none/fatal/panic/error/warn/info/debug/trace onto logging thresholds
"""

import logging
from typing import Optional

from .config import EnvReader, get_default_reader

TRACE = 5
NONE = logging.CRITICAL + 10

logging.addLevelName(TRACE, "TRACE")

# Thresholds are cumulative: each name enables its own level and everything more severe.
LOG_LEVELS = {
    "none": NONE,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}


def set_log_level_from_env(
    key: str,
    logger: Optional[logging.Logger] = None,
    reader: Optional[EnvReader] = None,
) -> Optional[int]:
    """
    Read a log level name from the environment and apply it to a logger.

    The name defaults to "info" when the variable is absent. Unknown names are
    reported with a warning and leave the current level untouched.

    Parameters:
        key (str): Environment variable holding the level name.
        logger (logging.Logger, optional): Logger to configure. Defaults to the root logger.
        reader (EnvReader, optional): Reader used to resolve the key. Defaults to the process environment reader.

    Returns:
        Optional[int]: The level that was applied, or None if it was left unchanged.
    """
    reader = reader if reader is not None else get_default_reader()
    target = logger if logger is not None else logging.getLogger()

    name = reader.get_string(key, "info")
    level = LOG_LEVELS.get(name)
    if level is None:
        reader.logger.warning(
            f"loglevel of value={name} does not exist. Leaving default."
        )
        return None

    target.setLevel(level)
    return level
