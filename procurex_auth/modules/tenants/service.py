import logging
import re
from datetime import datetime, timezone
from typing import List, Optional

from procurex_auth.config.permissions_config import SYSTEM_ROLES
from procurex_auth.config.seed_data import DEMO_TENANTS
from procurex_auth.core.exceptions import DuplicateTenantError, TenantNotFoundError
from procurex_auth.database.store import KeyValueStore
from procurex_auth.modules.tenants.schemas import (
    DefaultCredential,
    Tenant,
    TenantCreate,
    TenantOnboardingResponse,
    TenantStatus,
)
from procurex_auth.modules.users.schemas import UserCreate
from procurex_auth.modules.users.service import UserService

logger = logging.getLogger(__name__)


def seed_tenants(now: Optional[datetime] = None) -> List[Tenant]:
    """The demo organizations, in fixture order"""
    timestamp = now or datetime.now(timezone.utc)
    return [
        Tenant(**fields, created_at=timestamp, updated_at=timestamp)
        for fields in DEMO_TENANTS
    ]


class TenantService:
    def __init__(self, store: KeyValueStore):
        self.store = store
        self.users = UserService(store)

    def list_tenants(self) -> List[Tenant]:
        return [Tenant.from_record(r) for r in self.store.get("tenants") or []]

    def get_tenant(self, tenant_id: str) -> Tenant:
        for tenant in self.list_tenants():
            if tenant.id == tenant_id:
                return tenant
        raise TenantNotFoundError(tenant_id)

    def onboard_tenant(
        self,
        tenant_data: TenantCreate,
        role_names: List[str],
        now: Optional[datetime] = None,
    ) -> TenantOnboardingResponse:
        """
        Register a tenant and create its default accounts.
        An admin account is created when tenant_admin is selected, a standard
        account when user is selected; both start with the derived default password.
        Either everything is stored or nothing is.
        """
        tenant_id = f"tenant_{re.sub(r'[^a-z0-9]+', '_', tenant_data.name.lower()).strip('_')}"
        tenants = self.list_tenants()
        if any(t.id == tenant_id for t in tenants):
            raise DuplicateTenantError(tenant_id)

        timestamp = now or datetime.now(timezone.utc)
        tenant = Tenant(
            id=tenant_id,
            **tenant_data.model_dump(exclude={"email"}),
            email=str(tenant_data.email) if tenant_data.email else f"contact@{tenant_data.domain}",
            status=TenantStatus.ACTIVE,
            created_at=timestamp,
            updated_at=timestamp,
        )

        previous_tenants = self.store.get("tenants")
        previous_users = self.store.get("users")
        self.store.set("tenants", [t.to_record() for t in tenants + [tenant]])

        credentials = []
        try:
            if SYSTEM_ROLES["TENANT_ADMIN"] in role_names:
                admin_email = str(tenant_data.email) if tenant_data.email else f"admin@{tenant.domain}"
                admin = self.users.create_user(tenant, UserCreate(
                    email=admin_email,
                    first_name="Admin",
                    last_name=tenant.company_name,
                    role_name=SYSTEM_ROLES["TENANT_ADMIN"],
                ), now=timestamp)
                credentials.append(DefaultCredential(
                    email=admin.email, password=admin.password, role=admin.role.name
                ))

            if SYSTEM_ROLES["USER"] in role_names:
                email_domain = str(tenant_data.email).split("@")[1] if tenant_data.email else tenant.domain
                standard = self.users.create_user(tenant, UserCreate(
                    email=f"user@{email_domain}",
                    first_name="User",
                    last_name=tenant.company_name,
                    role_name=SYSTEM_ROLES["USER"],
                ), now=timestamp)
                credentials.append(DefaultCredential(
                    email=standard.email, password=standard.password, role=standard.role.name
                ))
        except Exception:
            logger.error(f"Onboarding of {tenant_id} failed, restoring previous state")
            self.store.set("tenants", previous_tenants or [])
            self.store.set("users", previous_users or [])
            raise

        logger.info(f"Onboarded tenant {tenant_id} with {len(credentials)} default account(s)")
        return TenantOnboardingResponse(tenant=tenant, credentials=credentials)
