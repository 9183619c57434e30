"""
ABOUTME: Environment configuration loader with typed accessors and .env file hydration
ABOUTME: Provides validated getters, password-safe logging and log level selection
"""

from .config import (
    EnvReader,
    get_env_bool,
    get_env_float,
    get_env_int,
    get_env_password,
    get_env_string,
    get_env_string_from,
    redact,
)
from .envfiles import env_file_candidates, load_env_from_env_files
from .exceptions import (
    ConfigError,
    NotAllowedError,
    ParseError,
    RangeError,
    ValidationError,
)
from .loglevel import LOG_LEVELS, set_log_level_from_env
from .sources import DictEnvSource, EnvSource, OsEnvSource

__version__ = "0.1.0"
__all__ = [
    "EnvReader",
    "EnvSource",
    "OsEnvSource",
    "DictEnvSource",
    "get_env_string",
    "get_env_password",
    "get_env_string_from",
    "get_env_float",
    "get_env_int",
    "get_env_bool",
    "redact",
    "load_env_from_env_files",
    "env_file_candidates",
    "set_log_level_from_env",
    "LOG_LEVELS",
    "ConfigError",
    "ValidationError",
    "ParseError",
    "RangeError",
    "NotAllowedError",
]
