"""Pytest configuration and fixtures for tabledb tests."""

from __future__ import annotations

import pytest
from prometheus_client import CollectorRegistry

from tabledb.adapters.inbound.query_parser import QueryParser
from tabledb.domain.entities import Database
from tabledb.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def parser() -> QueryParser:
    """Provide a quote-aware parser."""
    return QueryParser()


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def users_db() -> Database:
    """Provide the sample users table (Alice 30, Bob 45, Charlie 25), indexed on age."""
    db = Database()
    users = db.create_table("users")
    users.insert({"name": "Alice", "age": 30})
    users.insert({"name": "Bob", "age": 45})
    users.insert({"name": "Charlie", "age": 25})
    users.create_index("age")
    return db


@pytest.fixture
def mixed_db() -> Database:
    """Provide a table whose ``code`` column mixes Integers, Texts and gaps."""
    db = Database()
    items = db.create_table("items")
    items.insert({"sku": "a", "code": 10})
    items.insert({"sku": "b", "code": "10"})
    items.insert({"sku": "c", "code": -3})
    items.insert({"sku": "d"})
    items.insert({"sku": "e", "code": "zeta"})
    items.insert({"sku": "f", "code": 10})
    items.insert({"sku": "g", "code": 2**63 - 1})
    items.insert({"sku": "h", "code": "Alpha"})
    items.insert({"sku": "i", "code": -(2**63)})
    return db


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
