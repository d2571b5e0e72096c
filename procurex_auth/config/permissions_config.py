"""
Permissions and Roles Configuration
This config defines the permission table and the built-in system roles.
Used by the bootstrap orchestrator and the seed script to populate a fresh store.
"""

# Scope identifier for cross-tenant records (built-in roles, the super admin)
SYSTEM_TENANT_ID = "system"

# Closed set of actions a permission may carry
ACTIONS = ["read", "create", "update", "delete", "manage"]

# Built-in role names
SYSTEM_ROLES = {
    "SUPER_ADMIN": "super_admin",
    "TENANT_ADMIN": "tenant_admin",
    "USER": "user",
    "VIEWER": "viewer",
}

# Permission table: key -> "resource:action"
DEFAULT_PERMISSIONS = {
    # Supplier permissions
    "SUPPLIER_CREATE": "supplier:create",
    "SUPPLIER_READ": "supplier:read",
    "SUPPLIER_UPDATE": "supplier:update",
    "SUPPLIER_DELETE": "supplier:delete",
    "SUPPLIER_MANAGE": "supplier:manage",

    # Product permissions
    "PRODUCT_CREATE": "product:create",
    "PRODUCT_READ": "product:read",
    "PRODUCT_UPDATE": "product:update",
    "PRODUCT_DELETE": "product:delete",
    "PRODUCT_MANAGE": "product:manage",

    # Order permissions
    "ORDER_CREATE": "order:create",
    "ORDER_READ": "order:read",
    "ORDER_UPDATE": "order:update",
    "ORDER_DELETE": "order:delete",
    "ORDER_MANAGE": "order:manage",

    # User management permissions
    "USER_CREATE": "user:create",
    "USER_READ": "user:read",
    "USER_UPDATE": "user:update",
    "USER_DELETE": "user:delete",
    "USER_MANAGE": "user:manage",

    # Tenant management permissions (super admin only)
    "TENANT_CREATE": "tenant:create",
    "TENANT_READ": "tenant:read",
    "TENANT_UPDATE": "tenant:update",
    "TENANT_DELETE": "tenant:delete",
    "TENANT_MANAGE": "tenant:manage",
}

# Resources day-to-day accounts work with
OPERATIONAL_RESOURCES = ["supplier", "product", "order"]

# Resource substring that marks tenant management permissions
TENANT_RESOURCE_MARKER = "tenant"

# Role definitions, in display order.
# "grant" names a predicate in modules/roles/service.py; "actions" narrows it where relevant.
ROLE_DEFINITIONS = [
    {
        "id": "role_super_admin",
        "name": SYSTEM_ROLES["SUPER_ADMIN"],
        "grant": "all",
        "description": "Full access across every tenant",
    },
    {
        "id": "role_tenant_admin",
        "name": SYSTEM_ROLES["TENANT_ADMIN"],
        "grant": "outside_tenant_management",
        "description": "Full access inside a tenant, no tenant management",
    },
    {
        "id": "role_user",
        "name": SYSTEM_ROLES["USER"],
        "grant": "operational",
        "actions": ["read", "create", "update"],
        "description": "Day-to-day work on suppliers, products and orders",
    },
    {
        "id": "role_viewer",
        "name": SYSTEM_ROLES["VIEWER"],
        "grant": "operational",
        "actions": ["read"],
        "description": "Read-only access to suppliers, products and orders",
    },
]
