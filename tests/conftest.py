"""Pytest configuration and shared fixtures for InputGuard tests."""

import os
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from inputguard.config.loader import ENV_VAR_MAP, configure
from inputguard.models.config import ValidationSettings


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[ValidationSettings]:
    """Pin process-wide settings to the defaults for every test.

    INPUTGUARD_* variables from the developer's shell are removed so they
    cannot leak into limit-sensitive assertions.
    """
    for env_var in ENV_VAR_MAP.values():
        monkeypatch.delenv(env_var, raising=False)
    settings = ValidationSettings()
    configure(settings)
    yield settings
    configure(None)


@pytest.fixture
def isolated_env() -> Generator[dict[str, str]]:
    """Provide isolated environment variables for testing.

    Yields:
        Dictionary of original environment variables

    Cleanup:
        Restores original environment after test
    """
    original_env = os.environ.copy()
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)
