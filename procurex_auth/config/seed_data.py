"""
Demo seed data
Literal tenants and accounts written by the bootstrap orchestrator into an empty store.
Values match existing deployments so seeded stores stay interchangeable.
"""

from procurex_auth.config.permissions_config import SYSTEM_ROLES, SYSTEM_TENANT_ID

DEMO_TENANTS = [
    {
        "id": "tenant_company1",
        "name": "company1",
        "domain": "company1.procurex.com",
        "company_name": "Company One SARL",
        "address": "123 Rue de la Paix",
        "city": "Paris",
        "country": "France",
        "postal_code": "75001",
        "phone": "+33 1 23 45 67 89",
        "email": "contact@company1.com",
        "status": "active",
        "subscription_plan": "premium",
        "max_users": 10,
        "max_suppliers": 100,
        "max_products": 500,
    },
    {
        "id": "tenant_company2",
        "name": "company2",
        "domain": "company2.procurex.com",
        "company_name": "Company Two SARL",
        "address": "456 Avenue des Champs",
        "city": "Lyon",
        "country": "France",
        "postal_code": "69001",
        "phone": "+33 4 56 78 90 12",
        "email": "contact@company2.com",
        "status": "active",
        "subscription_plan": "basic",
        "max_users": 5,
        "max_suppliers": 50,
        "max_products": 200,
    },
    {
        "id": "tenant_enterprise",
        "name": "enterprise",
        "domain": "enterprise.procurex.com",
        "company_name": "Enterprise Solutions SARL",
        "address": "789 Boulevard de l'Innovation",
        "city": "Marseille",
        "country": "France",
        "postal_code": "13001",
        "phone": "+33 4 91 23 45 67",
        "email": "contact@enterprise.com",
        "status": "active",
        "subscription_plan": "enterprise",
        "max_users": 50,
        "max_suppliers": 500,
        "max_products": 2000,
    },
]

# Plaintext demo passwords: storage hardening belongs to the credential store, not here
DEMO_USERS = [
    {
        "id": "user_super_admin",
        "tenant_id": SYSTEM_TENANT_ID,
        "email": "superadmin@procurex.com",
        "first_name": "Super",
        "last_name": "Administrator",
        "password": "SuperAdmin123!",
        "role": SYSTEM_ROLES["SUPER_ADMIN"],
    },
    # Company 1
    {
        "id": "user_admin_company1",
        "tenant_id": "tenant_company1",
        "email": "admin@company1.com",
        "first_name": "Admin",
        "last_name": "Company One",
        "password": "CompanyOne123!",
        "role": SYSTEM_ROLES["TENANT_ADMIN"],
    },
    {
        "id": "user_standard_company1",
        "tenant_id": "tenant_company1",
        "email": "user@company1.com",
        "first_name": "User",
        "last_name": "Standard",
        "password": "CompanyOne123!",
        "role": SYSTEM_ROLES["USER"],
    },
    {
        "id": "user_viewer_company1",
        "tenant_id": "tenant_company1",
        "email": "viewer@company1.com",
        "first_name": "Viewer",
        "last_name": "Only",
        "password": "CompanyOne123!",
        "role": SYSTEM_ROLES["VIEWER"],
    },
    # Company 2
    {
        "id": "user_admin_company2",
        "tenant_id": "tenant_company2",
        "email": "admin@company2.com",
        "first_name": "Admin",
        "last_name": "Company Two",
        "password": "CompanyTwo123!",
        "role": SYSTEM_ROLES["TENANT_ADMIN"],
    },
    {
        "id": "user_standard_company2",
        "tenant_id": "tenant_company2",
        "email": "user@company2.com",
        "first_name": "User",
        "last_name": "Standard",
        "password": "CompanyTwo123!",
        "role": SYSTEM_ROLES["USER"],
    },
    {
        "id": "user_viewer_company2",
        "tenant_id": "tenant_company2",
        "email": "viewer@company2.com",
        "first_name": "Viewer",
        "last_name": "Only",
        "password": "CompanyTwo123!",
        "role": SYSTEM_ROLES["VIEWER"],
    },
    # Enterprise
    {
        "id": "user_admin_enterprise",
        "tenant_id": "tenant_enterprise",
        "email": "admin@enterprise.com",
        "first_name": "Admin",
        "last_name": "Enterprise",
        "password": "Enterprise123!",
        "role": SYSTEM_ROLES["TENANT_ADMIN"],
    },
    {
        "id": "user_manager_enterprise",
        "tenant_id": "tenant_enterprise",
        "email": "manager@enterprise.com",
        "first_name": "Manager",
        "last_name": "Enterprise",
        "password": "Enterprise123!",
        "role": SYSTEM_ROLES["USER"],
    },
]
