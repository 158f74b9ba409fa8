"""
Pytest configuration and shared fixtures for versioncmp tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from versioncmp.logging import SilentLogger, set_global_logger
from versioncmp.versioning import CompareRules


class CaptureLogger:
    """Logger that records messages instead of printing them."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str, str]] = []

    def verbose(self, prefix: str, message: str) -> None:
        self.messages.append(("verbose", prefix, message))

    def debug(self, prefix: str, message: str) -> None:
        self.messages.append(("debug", prefix, message))

    def prefixed(self, prefix: str) -> list[str]:
        return [message for _, p, message in self.messages if p == prefix]


@pytest.fixture(autouse=True)
def reset_global_logger():
    """Make sure no test leaks a configured global logger."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def default_rules() -> CompareRules:
    """Provide the default compare rules (no nightly, no meta comparison)."""
    return CompareRules()


@pytest.fixture
def capture_logger() -> CaptureLogger:
    """Provide a logger that records every message."""
    return CaptureLogger()


@pytest.fixture
def create_yaml_file(tmp_path: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("rules.yaml", {"compare_meta": True})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
