"""Pytest configuration and fixtures for customer_db tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from customer_db.adapters.outbound import MemorySnapshotSink
from customer_db.application import CustomerDatabase
from customer_db.domain.services import CustomerTable
from customer_db.infrastructure.config import Config, FilesConfig
from customer_db.infrastructure.container import Container
from customer_db.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_dir: Path) -> Config:
    """Provide a test configuration with files in a temporary directory."""
    return Config(
        files=FilesConfig(
            input_path=temp_dir / "input.txt",
            commands_path=temp_dir / "commands.txt",
            output_path=temp_dir / "output.txt",
        ),
    )


@pytest.fixture
def container() -> Generator[Container, None, None]:
    """Provide a fresh DI container for each test."""
    c = Container()
    yield c
    c.clear()


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def table() -> CustomerTable:
    """Provide an empty customer table."""
    return CustomerTable()


@pytest.fixture
def sink() -> MemorySnapshotSink:
    """Provide an in-memory snapshot sink."""
    return MemorySnapshotSink()


@pytest.fixture
def database(
    table: CustomerTable,
    sink: MemorySnapshotSink,
    metrics_registry: MetricsRegistry,
) -> Generator[CustomerDatabase, None, None]:
    """Provide a started database writing to the in-memory sink."""
    db = CustomerDatabase(table=table, sink=sink, metrics=metrics_registry)
    db.start()
    yield db
    if db.is_started:
        db.stop()


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
