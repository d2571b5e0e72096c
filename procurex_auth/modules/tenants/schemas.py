from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from procurex_auth.core.schemas import StoredModel


class TenantStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    CANCELLED = "cancelled"


class SubscriptionPlan(str, Enum):
    BASIC = "basic"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


class Tenant(StoredModel):
    model_config = ConfigDict(use_enum_values=True)

    id: str
    name: str
    domain: str
    company_name: str
    address: str
    city: str
    country: str
    postal_code: str
    phone: str
    email: str
    logo: Optional[str] = None
    status: TenantStatus
    subscription_plan: SubscriptionPlan
    max_users: int
    max_suppliers: int
    max_products: int
    created_at: datetime
    updated_at: datetime

    @property
    def is_active(self) -> bool:
        return self.status == TenantStatus.ACTIVE


class TenantCreate(BaseModel):
    name: str
    domain: str
    company_name: str
    address: str = ""
    city: str = ""
    country: str = ""
    postal_code: str = ""
    phone: str = ""
    email: Optional[EmailStr] = None
    logo: Optional[str] = None
    subscription_plan: SubscriptionPlan = SubscriptionPlan.BASIC
    max_users: int = 5
    max_suppliers: int = 50
    max_products: int = 200


class DefaultCredential(BaseModel):
    email: str
    password: str
    role: str


class TenantOnboardingResponse(BaseModel):
    tenant: Tenant
    credentials: List[DefaultCredential]
