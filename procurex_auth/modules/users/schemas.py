from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from procurex_auth.core.schemas import StoredModel
from procurex_auth.modules.roles.schemas import Role


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class User(StoredModel):
    model_config = ConfigDict(use_enum_values=True)

    id: str
    tenant_id: str
    email: str
    first_name: str
    last_name: str
    password: str  # plaintext in existing deployments; see DESIGN.md
    role: Role  # snapshot taken at assignment time
    status: UserStatus
    last_login_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE


class UserCreate(BaseModel):
    email: EmailStr
    first_name: str
    last_name: str
    role_name: str
    status: UserStatus = UserStatus.ACTIVE


class PasswordChange(BaseModel):
    current_password: str
    new_password: str
    confirm_password: str
