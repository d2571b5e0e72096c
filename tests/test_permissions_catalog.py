"""
Tests for building the permission catalog from the config table.
"""
import pytest
from hypothesis import given, strategies as st

from procurex_auth.config.permissions_config import ACTIONS, DEFAULT_PERMISSIONS
from procurex_auth.core.exceptions import ConfigError
from procurex_auth.modules.permissions.service import build_catalog


@st.composite
def permission_config(draw):
    """Generate a valid config table with distinct (resource, action) pairs."""
    resources = draw(st.lists(
        st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=12),
        min_size=1, max_size=6, unique=True,
    ))
    pairs = draw(st.lists(
        st.tuples(st.sampled_from(resources), st.sampled_from(ACTIONS)),
        min_size=1, max_size=20, unique=True,
    ))
    return {f"{resource.upper()}_{action.upper()}_{i}": f"{resource}:{action}"
            for i, (resource, action) in enumerate(pairs)}


class TestBuildCatalog:
    def test_default_catalog_covers_config(self, catalog):
        assert len(catalog) == len(DEFAULT_PERMISSIONS) == 25

    def test_permission_fields(self, catalog):
        by_id = {p.id: p for p in catalog}
        perm = by_id["perm_SUPPLIER_READ"]
        assert perm.resource == "supplier"
        assert perm.action == "read"
        assert perm.name == "supplier read"
        assert perm.description == "Permission to read supplier"

    def test_repeated_builds_are_identical(self):
        assert build_catalog() == build_catalog()

    def test_splits_on_first_separator(self):
        # everything after the first ':' is the action, so "read:extra" is rejected
        with pytest.raises(ConfigError, match="'read:extra'"):
            build_catalog({"ODD": "report:read:extra"})

    def test_missing_separator(self):
        with pytest.raises(ConfigError, match="separator"):
            build_catalog({"BROKEN": "supplierread"})

    def test_unknown_action(self):
        with pytest.raises(ConfigError, match="unknown action"):
            build_catalog({"SUPPLIER_EXPORT": "supplier:export"})

    def test_empty_resource(self):
        with pytest.raises(ConfigError):
            build_catalog({"NOTHING": ":read"})

    def test_duplicate_pair(self):
        with pytest.raises(ConfigError, match="duplicates"):
            build_catalog({"A": "order:read", "B": "order:read"})

    def test_permissions_are_immutable(self, catalog):
        with pytest.raises(Exception):
            catalog[0].resource = "other"

    @given(permission_config())
    def test_size_and_unique_ids(self, config):
        result = build_catalog(config)
        assert len(result) == len(config)
        assert len({p.id for p in result}) == len(result)
        assert {p.id for p in result} == {f"perm_{key}" for key in config}
