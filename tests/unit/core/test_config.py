"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import FlowConfig
from core.errors import ColumnTapConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to the env cluster and default instance."""
    monkeypatch.delenv("COLUMNTAP_CLUSTER", raising=False)
    monkeypatch.delenv("COLUMNTAP_INSTANCE", raising=False)
    monkeypatch.delenv("COLUMNTAP_LOG_LEVEL", raising=False)

    config = FlowConfig.from_env()

    assert (config.cluster, config.instance, config.log_level) == (".env", "default", "INFO")


def test_from_env_reads_cluster_and_instance(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should read cluster and instance from the environment."""
    monkeypatch.setenv("COLUMNTAP_CLUSTER", "zk1:2181")
    monkeypatch.setenv("COLUMNTAP_INSTANCE", "prod")

    config = FlowConfig.from_env()

    assert (config.cluster, config.instance) == ("zk1:2181", "prod")


def test_from_env_normalizes_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Log level should be accepted case-insensitively."""
    monkeypatch.setenv("COLUMNTAP_LOG_LEVEL", "debug")

    config = FlowConfig.from_env()

    assert config.log_level == "DEBUG"


def test_from_env_raises_for_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for an unknown log level."""
    monkeypatch.setenv("COLUMNTAP_LOG_LEVEL", "chatty")

    with pytest.raises(ColumnTapConfigError):
        FlowConfig.from_env()


def test_from_env_raises_for_instance_with_slash(monkeypatch: pytest.MonkeyPatch) -> None:
    """Instance names must be a single URI path segment."""
    monkeypatch.setenv("COLUMNTAP_INSTANCE", "a/b")

    with pytest.raises(ColumnTapConfigError):
        FlowConfig.from_env()
