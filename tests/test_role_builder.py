"""
Tests for deriving the built-in roles from a permission catalog.
"""
from types import SimpleNamespace

import pytest
from hypothesis import given, strategies as st

from procurex_auth.config.permissions_config import ACTIONS
from procurex_auth.core.exceptions import ConfigError, RoleResolutionError
from procurex_auth.modules.permissions.service import build_catalog
from procurex_auth.modules.roles.service import (
    build_system_roles,
    find_role,
    has_permission,
    has_role,
    is_tenant_management,
    snapshot_role,
)

RESOURCES = ["supplier", "product", "order", "user", "tenant", "subtenant", "invoice"]


@st.composite
def catalog_config(draw):
    pairs = draw(st.lists(
        st.tuples(st.sampled_from(RESOURCES), st.sampled_from(ACTIONS)),
        min_size=1, max_size=35, unique=True,
    ))
    return {f"K{i}": f"{resource}:{action}" for i, (resource, action) in enumerate(pairs)}


def pairs(role):
    return role.permission_pairs()


class TestBuildSystemRoles:
    def test_role_order_and_shape(self, roles, fixed_now):
        assert [r.name for r in roles] == ["super_admin", "tenant_admin", "user", "viewer"]
        assert [r.id for r in roles] == ["role_super_admin", "role_tenant_admin", "role_user", "role_viewer"]
        for role in roles:
            assert role.tenant_id == "system"
            assert role.is_system_role is True
            assert role.created_at == fixed_now

    def test_super_admin_has_whole_catalog(self, catalog, roles):
        assert len(roles[0].permissions) == len(catalog)

    def test_tenant_admin_excludes_tenant_management(self, roles):
        tenant_admin = find_role(roles, "tenant_admin")
        assert len(tenant_admin.permissions) == 20
        assert not any(p.resource == "tenant" for p in tenant_admin.permissions)
        assert ("user", "manage") in pairs(tenant_admin)

    def test_standard_user(self, roles):
        user = find_role(roles, "user")
        assert pairs(user) == {
            (resource, action)
            for resource in ("supplier", "product", "order")
            for action in ("read", "create", "update")
        }

    def test_viewer(self, roles):
        viewer = find_role(roles, "viewer")
        assert pairs(viewer) == {("supplier", "read"), ("product", "read"), ("order", "read")}

    def test_roles_share_catalog_instances(self, catalog, roles):
        catalog_ids = {id(p) for p in catalog}
        for role in roles:
            assert all(id(p) in catalog_ids for p in role.permissions)

    def test_deterministic(self, catalog, fixed_now):
        assert build_system_roles(catalog, now=fixed_now) == build_system_roles(catalog, now=fixed_now)

    def test_empty_catalog_rejected(self):
        with pytest.raises(ConfigError):
            build_system_roles([])

    def test_roles_without_matching_permissions_are_kept(self, caplog):
        roles = build_system_roles(build_catalog({"TENANT_READ": "tenant:read"}))
        assert [len(r.permissions) for r in roles] == [1, 0, 0, 0]
        assert "No permissions found for role tenant_admin" in caplog.text

    def test_tenant_marker_is_substring_and_case_sensitive(self):
        [sub, upper] = build_catalog({"A": "subtenant:read", "B": "Tenant:read"})
        assert is_tenant_management(sub)
        assert not is_tenant_management(upper)

    @given(catalog_config())
    def test_nesting(self, config):
        catalog = build_catalog(config)
        super_admin, tenant_admin, user, viewer = build_system_roles(catalog)
        tenant_pairs = {p.pair for p in catalog if is_tenant_management(p)}

        assert pairs(viewer) <= pairs(user)
        assert pairs(user) <= pairs(tenant_admin) | tenant_pairs
        assert pairs(tenant_admin) <= pairs(super_admin)
        assert pairs(super_admin) == {p.pair for p in catalog}
        assert not pairs(tenant_admin) & tenant_pairs


class TestRoleLookup:
    def test_find_role_missing(self, roles):
        with pytest.raises(RoleResolutionError) as exc:
            find_role(roles, "auditor")
        assert exc.value.role_name == "auditor"

    def test_snapshot_is_independent(self, roles):
        viewer = find_role(roles, "viewer")
        copy = snapshot_role(viewer)
        viewer.permissions.clear()
        assert len(copy.permissions) == 3


class TestAccessChecks:
    def test_super_admin_allowed_anything(self, roles):
        user = SimpleNamespace(role=find_role(roles, "super_admin"))
        assert has_permission(user, "anything", "read")

    def test_viewer(self, roles):
        user = SimpleNamespace(role=find_role(roles, "viewer"))
        assert has_permission(user, "order", "read")
        assert not has_permission(user, "order", "create")
        assert has_role(user, "viewer")
        assert not has_role(user, "user")

    def test_no_user(self):
        assert not has_permission(None, "order", "read")
        assert not has_role(None, "viewer")
