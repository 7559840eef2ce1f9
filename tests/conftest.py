"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def flow_config():
    """Deterministic runtime config independent of the caller's environment."""
    from core.config import FlowConfig

    return FlowConfig(cluster=".env", instance="default", log_level="INFO")
