from pydantic import BaseModel


class BootstrapResult(BaseModel):
    seeded: bool
    permission_count: int = 0
    role_count: int = 0
    tenant_count: int = 0
    user_count: int = 0
