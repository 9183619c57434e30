"""
ABOUTME: Lookup sources for configuration values
ABOUTME: Wraps the process environment or a plain dict behind a common read-only interface
"""

import os
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional


class EnvSource(ABC):
    """Read-only key/value source that accessors resolve keys against."""

    @abstractmethod
    def lookup(self, key: str) -> Optional[str]:
        """
        Return the raw text stored under ``key``.

        Returns:
            Optional[str]: The value, or None when the key is not set. An empty string is a set value.
        """
        pass

    def __contains__(self, key: str) -> bool:
        return self.lookup(key) is not None


class OsEnvSource(EnvSource):
    """Source backed by the live process environment."""

    def lookup(self, key: str) -> Optional[str]:
        return os.environ.get(key)


class DictEnvSource(EnvSource):
    """Source backed by an in-memory mapping, mostly for tests and embedding."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = dict(values or {})

    def lookup(self, key: str) -> Optional[str]:
        return self._values.get(key)
