"""
One-time seeding of permissions, roles, tenants and users into an empty store.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from procurex_auth.database.store import KeyValueStore
from procurex_auth.modules.bootstrap.schemas import BootstrapResult
from procurex_auth.modules.permissions.service import build_catalog
from procurex_auth.modules.roles.service import build_system_roles
from procurex_auth.modules.tenants.service import seed_tenants
from procurex_auth.modules.users.service import provision_users

logger = logging.getLogger(__name__)

SEEDED_KEYS = ("tenants", "users", "roles")

# Check-and-seed must not interleave within a process
_lock = threading.Lock()


class BootstrapService:
    def __init__(self, store: KeyValueStore, permissions_config: Optional[Mapping[str, str]] = None):
        self.store = store
        self.permissions_config = permissions_config

    def is_seeded(self) -> bool:
        return all(self.store.get(key) for key in SEEDED_KEYS)

    def run(self, now: Optional[datetime] = None) -> BootstrapResult:
        with _lock:
            if self.is_seeded():
                logger.info("Data already exists, skipping initialization")
                return BootstrapResult(seeded=False)

            logger.info("Initializing multi-tenant data...")
            timestamp = now or datetime.now(timezone.utc)

            # Everything is built before the first write
            catalog = build_catalog(self.permissions_config)
            roles = build_system_roles(catalog, now=timestamp)
            tenants = seed_tenants(now=timestamp)
            users = provision_users(tenants, roles, now=timestamp)

            self._write_all({
                "tenants": [t.to_record() for t in tenants],
                "users": [u.to_record() for u in users],
                "roles": [r.to_record() for r in roles],
            })

            logger.info(
                f"Seeding completed: {len(catalog)} permissions, {len(roles)} roles, "
                f"{len(tenants)} tenants, {len(users)} users"
            )
            return BootstrapResult(
                seeded=True,
                permission_count=len(catalog),
                role_count=len(roles),
                tenant_count=len(tenants),
                user_count=len(users),
            )

    def _write_all(self, collections: Dict[str, List[Any]]) -> None:
        """Write every collection or restore the keys already written"""
        previous = {key: self.store.get(key) for key in collections}
        written = []
        try:
            for key, records in collections.items():
                self.store.set(key, records)
                written.append(key)
        except Exception:
            logger.error(f"Seeding failed after writing {written}, restoring previous state")
            for key in written:
                try:
                    self.store.set(key, previous[key] or [])
                except Exception as e:
                    logger.error(f"Could not restore {key}: {e}")
            raise


def bootstrap(store: KeyValueStore) -> BootstrapResult:
    return BootstrapService(store).run()
