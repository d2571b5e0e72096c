import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional

from procurex_auth.config.permissions_config import (
    OPERATIONAL_RESOURCES,
    ROLE_DEFINITIONS,
    SYSTEM_ROLES,
    SYSTEM_TENANT_ID,
    TENANT_RESOURCE_MARKER,
)
from procurex_auth.core.exceptions import ConfigError, RoleResolutionError
from procurex_auth.modules.permissions.schemas import Permission
from procurex_auth.modules.roles.schemas import Role

logger = logging.getLogger(__name__)

PermissionPredicate = Callable[[Permission], bool]


def grants_everything(definition: dict) -> PermissionPredicate:
    return lambda permission: True


def is_tenant_management(permission: Permission) -> bool:
    """Plain substring test on the resource tag, case-sensitive"""
    return TENANT_RESOURCE_MARKER in permission.resource


def grants_outside_tenant_management(definition: dict) -> PermissionPredicate:
    return lambda permission: not is_tenant_management(permission)


def grants_operational(definition: dict) -> PermissionPredicate:
    actions = set(definition["actions"])
    return lambda permission: (
        permission.resource in OPERATIONAL_RESOURCES and permission.action in actions
    )


GRANTS: Dict[str, Callable[[dict], PermissionPredicate]] = {
    "all": grants_everything,
    "outside_tenant_management": grants_outside_tenant_management,
    "operational": grants_operational,
}


def build_system_roles(catalog: List[Permission], now: Optional[datetime] = None) -> List[Role]:
    """
    Derive the built-in roles from the catalog, in display order:
    super_admin, tenant_admin, user, viewer.
    Roles reference the catalog's Permission instances, they do not copy them.
    """
    if not catalog:
        raise ConfigError("Cannot build system roles from an empty permission catalog")

    created_at = now or datetime.now(timezone.utc)
    roles = []
    for definition in ROLE_DEFINITIONS:
        try:
            predicate = GRANTS[definition["grant"]](definition)
        except KeyError as e:
            raise ConfigError(f"Role {definition.get('name')!r} has an invalid grant: {e}") from e

        permissions = [p for p in catalog if predicate(p)]
        if not permissions:
            logger.warning(f"No permissions found for role {definition['name']}")

        roles.append(Role(
            id=definition["id"],
            name=definition["name"],
            permissions=permissions,
            tenant_id=SYSTEM_TENANT_ID,
            is_system_role=True,
            created_at=created_at,
        ))
        logger.debug(f"Built role {definition['name']} with {len(permissions)} permissions")

    return roles


def find_role(roles: Iterable[Role], name: str) -> Role:
    for role in roles:
        if role.name == name:
            return role
    raise RoleResolutionError(name)


def snapshot_role(role: Role) -> Role:
    """Owned copy for embedding into a user; later edits to the source role do not reach it"""
    return role.model_copy(deep=True)


def has_permission(user, resource: str, action: str) -> bool:
    role = getattr(user, "role", None) if user is not None else None
    if role is None:
        return False

    # Super admin has all permissions
    if role.name == SYSTEM_ROLES["SUPER_ADMIN"]:
        return True

    return any(p.resource == resource and p.action == action for p in role.permissions)


def has_role(user, role_name: str) -> bool:
    role = getattr(user, "role", None) if user is not None else None
    if role is None:
        return False
    return role.name == role_name
