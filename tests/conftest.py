"""Pytest configuration and fixtures.

This module provides common fixtures used across all tests.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from kwatch.core import config as settings_module
from kwatch.core.logging import setup_logging

# Setup logging for tests
setup_logging()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test in an empty working directory without CONFIG_FILE.

    The settings singleton is cleared and logging is reset so handlers
    write to the current test's stdout.

    Args:
        tmp_path: pytest tmp_path fixture
        monkeypatch: pytest monkeypatch fixture

    Returns:
        The working directory
    """
    monkeypatch.delenv("CONFIG_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(settings_module, "_settings", None)
    monkeypatch.chdir(tmp_path)
    setup_logging()
    return tmp_path


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Factory to write config files.

    Accepts either a dict (dumped as YAML) or raw bytes/str content.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Function to create config files
    """

    def _write(content: dict | str | bytes, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        if isinstance(content, dict):
            path.write_text(yaml.safe_dump(content), encoding="utf-8")
        elif isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
        return path

    return _write
