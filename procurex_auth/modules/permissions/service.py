import logging
from typing import List, Mapping, Optional

from procurex_auth.config.permissions_config import ACTIONS, DEFAULT_PERMISSIONS
from procurex_auth.core.exceptions import ConfigError
from procurex_auth.modules.permissions.schemas import Permission

logger = logging.getLogger(__name__)


def parse_permission(key: str, spec: str) -> Permission:
    """Build one permission from a "resource:action" entry"""
    resource, separator, action = spec.partition(":")
    if not separator:
        raise ConfigError(f"Permission {key!r} has no ':' separator: {spec!r}")
    if not resource:
        raise ConfigError(f"Permission {key!r} has an empty resource: {spec!r}")
    if action not in ACTIONS:
        raise ConfigError(f"Permission {key!r} has unknown action {action!r}; allowed: {ACTIONS}")

    return Permission(
        id=f"perm_{key}",
        name=f"{resource} {action}",
        resource=resource,
        action=action,
        description=f"Permission to {action} {resource}",
    )


def build_catalog(config: Optional[Mapping[str, str]] = None) -> List[Permission]:
    """
    Returns every permission described by the config table, in config order.
    Ids are derived from the config keys, so repeated builds are identical.
    """
    if config is None:
        config = DEFAULT_PERMISSIONS

    catalog = []
    seen = {}
    for key, spec in config.items():
        permission = parse_permission(key, spec)
        if permission.pair in seen:
            raise ConfigError(
                f"Permission {key!r} duplicates {seen[permission.pair]!r} ({spec})"
            )
        seen[permission.pair] = key
        catalog.append(permission)

    logger.debug(f"Built permission catalog with {len(catalog)} entries")
    return catalog
