import logging
import re
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from procurex_auth.config.permissions_config import SYSTEM_TENANT_ID
from procurex_auth.config.seed_data import DEMO_USERS
from procurex_auth.core.exceptions import (
    AuthenticationError,
    ConfigError,
    DuplicateUserError,
    TenantNotFoundError,
    UserNotFoundError,
    WeakPasswordError,
)
from procurex_auth.database.store import KeyValueStore
from procurex_auth.modules.passwords.service import derive_user_default_password, ensure_strength
from procurex_auth.modules.roles.schemas import Role
from procurex_auth.modules.roles.service import find_role, snapshot_role
from procurex_auth.modules.tenants.schemas import Tenant
from procurex_auth.modules.users.schemas import PasswordChange, User, UserCreate, UserStatus

logger = logging.getLogger(__name__)

# Shown to system-scope accounts in place of a tenant record
SYSTEM_TENANT_VIEW = {
    "id": SYSTEM_TENANT_ID,
    "name": "system",
    "domain": "procurex.com",
    "company_name": "ProcureX System",
    "status": "active",
}


def provision_users(tenants: List[Tenant], roles: List[Role], now: Optional[datetime] = None) -> List[User]:
    """
    Build the demo accounts, each bound to one tenant (or the system scope) and
    holding a snapshot of its system role.
    """
    timestamp = now or datetime.now(timezone.utc)
    tenant_ids = {t.id for t in tenants}
    seen_emails = set()
    users = []

    for account in DEMO_USERS:
        tenant_id = account["tenant_id"]
        if tenant_id != SYSTEM_TENANT_ID and tenant_id not in tenant_ids:
            raise ConfigError(f"Demo user {account['id']} references unknown tenant {tenant_id!r}")

        scoped_email = (tenant_id, account["email"].lower())
        if scoped_email in seen_emails:
            raise ConfigError(f"Duplicate demo email {account['email']} in {tenant_id}")
        seen_emails.add(scoped_email)

        role = find_role(roles, account["role"])
        users.append(User(
            id=account["id"],
            tenant_id=tenant_id,
            email=account["email"],
            first_name=account["first_name"],
            last_name=account["last_name"],
            password=account["password"],
            role=snapshot_role(role),
            status=UserStatus.ACTIVE,
            created_at=timestamp,
            updated_at=timestamp,
        ))

    return users


def _slug(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", value.lower()).strip("_")


class UserService:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def list_users(self, tenant_id: Optional[str] = None) -> List[User]:
        users = [User.from_record(r) for r in self.store.get("users") or []]
        if tenant_id is not None:
            users = [u for u in users if u.tenant_id == tenant_id]
        return users

    def get_user(self, user_id: str) -> User:
        for user in self.list_users():
            if user.id == user_id:
                return user
        raise UserNotFoundError(user_id)

    def _save_users(self, users: List[User]) -> None:
        self.store.set("users", [u.to_record() for u in users])

    def _find_tenant(self, tenant_id: str) -> Optional[Tenant]:
        for record in self.store.get("tenants") or []:
            tenant = Tenant.from_record(record)
            if tenant.id == tenant_id:
                return tenant
        return None

    def authenticate(self, email: str, password: str) -> Tuple[User, dict]:
        """
        Check credentials and account state, record the login.
        Returns the user and the tenant record it belongs to (a system view for system accounts).
        """
        users = self.list_users()
        # the same address may belong to accounts in several tenants
        user = next(
            (u for u in users if u.email.lower() == email.lower() and u.password == password),
            None,
        )
        if user is None:
            logger.info(f"Rejected login for {email}")
            raise AuthenticationError("Invalid credentials")

        if user.tenant_id == SYSTEM_TENANT_ID:
            tenant = dict(SYSTEM_TENANT_VIEW)
        else:
            found = self._find_tenant(user.tenant_id)
            tenant = found.model_dump(mode="json") if found else None

        if not tenant or tenant["status"] != "active":
            raise AuthenticationError("Account is not active")
        if not user.is_active:
            raise AuthenticationError("Account is not active")

        user.last_login_at = datetime.now(timezone.utc)
        self._save_users(users)
        logger.info(f"User {user.id} logged in")
        return user, tenant

    def create_user(self, tenant: Tenant, data: UserCreate, now: Optional[datetime] = None) -> User:
        """Add an account to a tenant; its initial password is the derived default"""
        if self._find_tenant(tenant.id) is None:
            raise TenantNotFoundError(tenant.id)

        users = self.list_users()
        email = str(data.email)
        if any(u.tenant_id == tenant.id and u.email.lower() == email.lower() for u in users):
            raise DuplicateUserError(email, tenant.id)

        roles = [Role.from_record(r) for r in self.store.get("roles") or []]
        role = find_role(roles, data.role_name)

        timestamp = now or datetime.now(timezone.utc)
        user = User(
            id=f"user_{_slug(email)}_{tenant.id}",
            tenant_id=tenant.id,
            email=email,
            first_name=data.first_name,
            last_name=data.last_name,
            password=derive_user_default_password(data, tenant),
            role=snapshot_role(role),
            status=data.status,
            created_at=timestamp,
            updated_at=timestamp,
        )
        users.append(user)
        self._save_users(users)
        logger.info(f"Created user {user.id} with role {role.name}")
        return user

    def change_password(self, user_id: str, change: PasswordChange) -> User:
        users = self.list_users()
        user = next((u for u in users if u.id == user_id), None)
        if user is None:
            raise UserNotFoundError(user_id)

        if user.password != change.current_password:
            raise AuthenticationError("Current password is incorrect")
        if change.new_password != change.confirm_password:
            raise WeakPasswordError("Passwords do not match")
        ensure_strength(change.new_password)

        user.password = change.new_password
        user.updated_at = datetime.now(timezone.utc)
        self._save_users(users)
        logger.info(f"Password changed for user {user.id}")
        return user
