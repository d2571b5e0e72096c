from datetime import datetime
from typing import List

from procurex_auth.core.schemas import StoredModel
from procurex_auth.modules.permissions.schemas import Permission


class Role(StoredModel):
    id: str
    name: str
    permissions: List[Permission]
    tenant_id: str
    is_system_role: bool
    created_at: datetime

    def permission_pairs(self) -> set:
        return {p.pair for p in self.permissions}
