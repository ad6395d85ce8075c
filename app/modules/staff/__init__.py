# app/modules/staff/__init__.py
"""
Staff module - billing staff accounts of a tenant and per-staff sales
"""

from .router import router as staff_router
from .service import StaffService
from .repository import StaffRepository

__all__ = [
    "staff_router",
    "StaffService",
    "StaffRepository"
]
