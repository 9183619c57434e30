"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides isolated environments, temp directories and readers for all tests
"""

import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from envp import DictEnvSource, EnvReader

TEST_KEYS = (
    "ENVP_TEST_A",
    "ENVP_TEST_B",
    "ENVP_TEST_C",
    "ENVP_TEST_LOG_LEVEL",
    "ENVP_ENV",
    "LOG_LEVEL",
)


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def clean_env():
    """Snapshot os.environ, drop the keys tests use, and restore everything afterwards."""
    with patch.dict(os.environ, {}, clear=False):
        for key in TEST_KEYS:
            os.environ.pop(key, None)
        yield os.environ


@pytest.fixture
def test_env_vars():
    """Provide test environment variables."""
    return {
        "APP_NAME": "envp-demo",
        "DB_PASSWORD": "hunter2secret",
        "MODE": "prod",
        "RATIO": "3.14",
        "WORKERS": "10",
        "DEBUG": "TRUE",
    }


@pytest.fixture
def test_logger():
    """Provide a dedicated logger so level changes never leak into other tests."""
    logger = logging.getLogger("envp.tests")
    original = logger.level
    yield logger
    logger.setLevel(original)


@pytest.fixture
def reader(test_env_vars, test_logger):
    """Provide an EnvReader over an in-memory source."""
    return EnvReader(DictEnvSource(test_env_vars), test_logger)


@pytest.fixture
def write_env_file(temp_dir):
    """Write a .env-style file into the temp directory."""

    def write(name, content):
        path = temp_dir / name
        path.write_text(content)
        return path

    return write
