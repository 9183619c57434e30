"""
ABOUTME: Environment variable configuration utilities
ABOUTME: Provides type-safe loading, validation and logging of configuration from environment variables
"""

import logging
import math
from typing import Optional, Sequence

from .exceptions import NotAllowedError, ParseError, RangeError, ValidationError
from .sources import EnvSource, OsEnvSource

LOGGER_NAME = "envp"

_TRUE_VALUES = ("1", "t", "true")
_FALSE_VALUES = ("0", "f", "false")


def redact(value: str) -> str:
    """Mask a secret for logging, keeping only its last two characters when it is long enough."""
    masked = "****"
    if len(value) > 3:
        masked += value[-2:]
    return masked


def _check_number_text(raw: str, kind: str, key: Optional[str]) -> None:
    # int() and float() accept padding, digit separators and non-ASCII digits; env values must not carry them
    if not raw.isascii() or raw != raw.strip() or "_" in raw:
        raise ParseError(
            f"invalid syntax for {kind}: {raw!r}", key=key, raw_value=raw
        )


def parse_int(raw: str, key: Optional[str] = None) -> int:
    """Parse a base-10 integer."""
    _check_number_text(raw, "int", key)
    try:
        return int(raw)
    except ValueError as e:
        raise ParseError(
            f"invalid syntax for int: {raw!r}", key=key, raw_value=raw
        ) from e


def parse_float(raw: str, key: Optional[str] = None) -> float:
    """Parse a 64-bit floating point number."""
    _check_number_text(raw, "float", key)
    try:
        return float(raw)
    except ValueError as e:
        raise ParseError(
            f"invalid syntax for float: {raw!r}", key=key, raw_value=raw
        ) from e


def parse_bool(raw: str, key: Optional[str] = None) -> bool:
    """Parse one of true/false/1/0/t/f, ignoring case."""
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ParseError(f"invalid syntax for bool: {raw!r}", key=key, raw_value=raw)


def check_range(value, min_value, max_value, key: Optional[str] = None, raw=None):
    """
    Validate that ``value`` lies within the inclusive range ``[min_value, max_value]``.

    NaN never satisfies the range.

    Returns:
        The value unchanged when it is in range.

    Raises:
        RangeError: If the value is outside the range.
    """
    if isinstance(value, float) and math.isnan(value):
        in_range = False
    else:
        in_range = min_value <= value <= max_value
    if not in_range:
        raise RangeError(
            f"Outside of range: {min_value} <= {value} <= {max_value}",
            key=key,
            raw_value=raw if raw is not None else value,
        )
    return value


def check_allowed(value: str, allowed_values: Sequence[str], key: Optional[str] = None) -> str:
    """Validate exact, case-sensitive membership of ``value`` in ``allowed_values``."""
    allowed = list(allowed_values)
    if value not in allowed:
        raise NotAllowedError(
            f"Read env var value not allowed. Must be one of: {allowed}",
            key=key,
            raw_value=value,
        )
    return value


class EnvReader:
    """
    Resolves typed configuration values from an environment source.

    Absent keys fall back to the supplied default with a warning. Present but
    invalid values are fatal: a CRITICAL record is logged and SystemExit(1) is
    raised. The source is never written to.
    """

    def __init__(
        self,
        source: Optional[EnvSource] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Parameters:
            source (EnvSource, optional): Where values are looked up. Defaults to the process environment.
            logger (logging.Logger, optional): Where resolved values are reported. Defaults to the ``envp`` logger.
        """
        self.source = source if source is not None else OsEnvSource()
        self.logger = logger if logger is not None else logging.getLogger(LOGGER_NAME)

    def _fallback(self, key: str, default):
        self.logger.warning(f"${key}={default!r} (env var not found, using fallback)")
        return default

    def _fatal(self, err: ValidationError):
        self.logger.critical(f"${err.key}={err.raw_value!r} | Error: {err}")
        raise SystemExit(1) from err

    def get_string(self, key: str, default: str) -> str:
        """Get a string env var or fallback, logging the value."""
        value = self.source.lookup(key)
        if value is None:
            return self._fallback(key, default)
        self.logger.info(f"${key}={value!r}")
        return value

    def get_password(self, key: str, default: str) -> str:
        """Like get_string, but only logs a redacted form such as ``****12``."""
        value = self.source.lookup(key)
        if value is None:
            return self._fallback(key, default)
        self.logger.info(f"${key}={redact(value)!r}")
        return value

    def get_string_from(
        self, key: str, default: str, allowed_values: Sequence[str]
    ) -> str:
        """Get a string env var that must be one of ``allowed_values``."""
        value = self.source.lookup(key)
        if value is None:
            return self._fallback(key, default)
        try:
            check_allowed(value, allowed_values, key=key)
        except ValidationError as e:
            self._fatal(e)
        self.logger.info(f"${key}={value!r}")
        return value

    def get_float(
        self, key: str, default: float, min_value: float, max_value: float
    ) -> float:
        """Get a float env var within the inclusive ``[min_value, max_value]``."""
        raw = self.source.lookup(key)
        if raw is None:
            return self._fallback(key, default)
        try:
            result = check_range(
                parse_float(raw, key=key), min_value, max_value, key=key, raw=raw
            )
        except ValidationError as e:
            self._fatal(e)
        self.logger.info(f"${key}={result!r}")
        return result

    def get_int(self, key: str, default: int, min_value: int, max_value: int) -> int:
        """Get an int env var within the inclusive ``[min_value, max_value]``."""
        raw = self.source.lookup(key)
        if raw is None:
            return self._fallback(key, default)
        try:
            result = check_range(
                parse_int(raw, key=key), min_value, max_value, key=key, raw=raw
            )
        except ValidationError as e:
            self._fatal(e)
        self.logger.info(f"${key}={result!r}")
        return result

    def get_bool(self, key: str, default: bool) -> bool:
        raw = self.source.lookup(key)
        if raw is None:
            return self._fallback(key, default)
        try:
            result = parse_bool(raw, key=key)
        except ValidationError as e:
            self._fatal(e)
        self.logger.info(f"${key}={result!r}")
        return result


_default_reader = EnvReader()


def get_default_reader() -> EnvReader:
    """Return the reader backing the module-level accessors."""
    return _default_reader


def get_env_string(key: str, default: str) -> str:
    """Get env var or fallback, and log the returned value."""
    return _default_reader.get_string(key, default)


def get_env_password(key: str, default: str) -> str:
    """Get env var or fallback, logging only a redacted value."""
    return _default_reader.get_password(key, default)


def get_env_string_from(
    key: str, default: str, allowed_values: Sequence[str]
) -> str:
    """Get env var or fallback, exiting if the value is not allowed."""
    return _default_reader.get_string_from(key, default, allowed_values)


def get_env_float(
    key: str, default: float, min_value: float, max_value: float
) -> float:
    """Get float env var or fallback, exiting if it does not parse or is out of range."""
    return _default_reader.get_float(key, default, min_value, max_value)


def get_env_int(key: str, default: int, min_value: int, max_value: int) -> int:
    """Get int env var or fallback, exiting if it does not parse or is out of range."""
    return _default_reader.get_int(key, default, min_value, max_value)


def get_env_bool(key: str, default: bool) -> bool:
    """Get bool env var or fallback, exiting if it does not parse."""
    return _default_reader.get_bool(key, default)
