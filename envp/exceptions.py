"""
ABOUTME: Custom exception classes for environment configuration loading
ABOUTME: Provides specific error types for parse, range and allowed-value failures
"""

from typing import Optional


class ConfigError(Exception):
    """Configuration validation error."""

    pass


class ValidationError(ConfigError):
    """An environment variable is present but its value is invalid."""

    def __init__(self, message: str = "", key: Optional[str] = None, raw_value=None):
        super().__init__(message)
        self.key = key
        self.raw_value = raw_value


class ParseError(ValidationError):
    """Value could not be parsed into the requested type."""

    pass


class RangeError(ValidationError):
    """Parsed value lies outside the allowed range."""

    pass


class NotAllowedError(ValidationError):
    """Value is not one of the allowed values."""

    pass
