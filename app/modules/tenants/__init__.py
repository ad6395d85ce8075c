# app/modules/tenants/__init__.py
"""
Tenants module - business accounts

- signup / login: self-service registration and credential check
- AdminLogin, getUser, updateUser, DeleteUser: administrator account management
- updatepassword, updateFirm: profile maintenance by the tenant
"""

from .router import router as tenants_router
from .service import TenantService
from .repository import TenantRepository

__all__ = [
    "tenants_router",
    "TenantService",
    "TenantRepository"
]
