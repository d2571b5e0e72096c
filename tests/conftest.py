"""
Pytest configuration and fixtures.
"""
from datetime import datetime, timezone

import pytest

from procurex_auth.database.store import InMemoryStore
from procurex_auth.modules.bootstrap.service import BootstrapService
from procurex_auth.modules.permissions.service import build_catalog
from procurex_auth.modules.roles.service import build_system_roles


@pytest.fixture
def fixed_now():
    return datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def seeded_store(store, fixed_now):
    """Store after a successful bootstrap."""
    BootstrapService(store).run(now=fixed_now)
    return store


@pytest.fixture
def catalog():
    return build_catalog()


@pytest.fixture
def roles(catalog, fixed_now):
    return build_system_roles(catalog, now=fixed_now)
