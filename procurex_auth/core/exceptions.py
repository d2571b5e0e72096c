"""
Error taxonomy for the authorization core.
Bootstrap errors are terminal for the process; password and credential errors are
recoverable by the caller (re-prompt, pick other parameters).
"""


class AuthzError(Exception):
    """Base class for every error raised by procurex_auth"""


class ConfigError(AuthzError):
    """Malformed permission table or seed data"""


class RoleResolutionError(AuthzError):
    """A role name was referenced that the role builder did not produce"""

    def __init__(self, role_name: str):
        self.role_name = role_name
        super().__init__(f"Role not found: {role_name}")


class InvalidLengthError(AuthzError):
    """Password generation requested below the minimum length"""

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(f"Password length {length} is below the minimum of {minimum}")


class WeakPasswordError(AuthzError):
    """Password does not satisfy the strength policy"""


class TenantNotFoundError(AuthzError):
    def __init__(self, tenant_id: str):
        self.tenant_id = tenant_id
        super().__init__(f"Tenant not found: {tenant_id}")


class UserNotFoundError(AuthzError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class DuplicateUserError(AuthzError):
    def __init__(self, email: str, tenant_id: str):
        self.email = email
        self.tenant_id = tenant_id
        super().__init__(f"User already exists: {email} in {tenant_id}")


class AuthenticationError(AuthzError):
    """Credentials rejected or account not active"""


class StoreError(AuthzError):
    """The key-value store could not be read or written"""


class DuplicateTenantError(AuthzError):
    def __init__(self, tenant_id: str):
        self.tenant_id = tenant_id
        super().__init__(f"Tenant already exists: {tenant_id}")
