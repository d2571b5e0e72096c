from enum import Enum

from pydantic import ConfigDict

from procurex_auth.core.schemas import StoredModel


class PermissionAction(str, Enum):
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    MANAGE = "manage"


class Permission(StoredModel):
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    id: str
    name: str
    resource: str
    action: PermissionAction
    description: str

    @property
    def pair(self) -> tuple:
        return (self.resource, self.action)
