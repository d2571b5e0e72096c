"""
Seed Demo Data Script
This script populates the configured store with permissions, roles, tenants and users.
Run once against an empty store; later runs are no-ops unless --reset is given.
"""

import argparse
import logging
import sys

from procurex_auth.config.settings import settings
from procurex_auth.database.store import KeyValueStore, get_store
from procurex_auth.modules.bootstrap.service import SEEDED_KEYS, BootstrapService

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def reset_store(store: KeyValueStore):
    """Empty the seeded collections so the next bootstrap starts fresh"""
    logger.info("Resetting seeded collections...")
    for key in SEEDED_KEYS:
        store.set(key, [])
    logger.info(f"Reset {len(SEEDED_KEYS)} collections")


def main(argv=None):
    """Main function to seed the demo data"""
    parser = argparse.ArgumentParser(description="Seed permissions, roles, tenants and users")
    parser.add_argument("--reset", action="store_true", help="empty the seeded collections first")
    args = parser.parse_args(argv)

    try:
        store = get_store()
        logger.info(f"Starting seeding ({settings.store_backend} store)...")

        if args.reset:
            reset_store(store)

        result = BootstrapService(store).run()
        if not result.seeded:
            logger.info("Store already seeded, nothing to do")
            return 0

        logger.info("Seeding completed successfully!")
        logger.info(
            f"Total: {result.permission_count} permissions, {result.role_count} roles, "
            f"{result.tenant_count} tenants, {result.user_count} users"
        )
        return 0

    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
