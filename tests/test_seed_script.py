"""
Tests for the seed entry point.
"""
from unittest.mock import patch

from procurex_auth.database.store import InMemoryStore
from procurex_auth.scripts import seed_demo_data


def test_seeds_then_noop():
    store = InMemoryStore()
    with patch.object(seed_demo_data, "get_store", return_value=store):
        assert seed_demo_data.main([]) == 0
        first = store.raw("users")
        assert seed_demo_data.main([]) == 0
    assert store.raw("users") == first
    assert len(store.get("users")) == 9


def test_reset_reseeds():
    store = InMemoryStore()
    store.set("tenants", [{"id": "stale"}])
    store.set("users", [{"id": "stale"}])
    store.set("roles", [{"id": "stale"}])
    with patch.object(seed_demo_data, "get_store", return_value=store):
        assert seed_demo_data.main(["--reset"]) == 0
    assert len(store.get("tenants")) == 3


def test_failure_exit_code():
    with patch.object(seed_demo_data, "get_store", side_effect=RuntimeError("no store")):
        assert seed_demo_data.main([]) == 1
