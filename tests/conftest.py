"""Pytest configuration and fixtures for localdb tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from localdb.infrastructure.config import Config, StorageConfig
from localdb.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def db_path(temp_dir: Path) -> Path:
    """Provide a database document path that does not exist yet."""
    return temp_dir / "test_localdb.db"


@pytest.fixture
def test_config() -> Config:
    """Provide a test configuration with fsync disabled."""
    return Config(
        storage=StorageConfig(
            sync_mode="none",  # Faster for tests
        ),
    )


@pytest.fixture
def strict_config() -> Config:
    """Provide a configuration that refuses to recover corrupt documents."""
    return Config(
        storage=StorageConfig(
            recovery_policy="strict",
            sync_mode="none",
        ),
    )


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
