"""Shared fixtures for CLI command tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_payload(temp_dir: Path) -> Callable[..., Path]:
    """Return a factory that writes a JSON payload file and returns its path."""

    def _write(data: Any, name: str = "payload.json") -> Path:
        path = temp_dir / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
