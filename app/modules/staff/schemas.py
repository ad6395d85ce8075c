# app/modules/staff/schemas.py
from pydantic import BaseModel

from app.shared.schemas.common import Scalar

# ==================== REQUEST SCHEMAS ====================

class StaffCreateRequest(BaseModel):
    """Billing staff member of a tenant"""
    StaffUserName: Scalar = None
    Password: Scalar = None
    Mobile: Scalar = None
    Address: Scalar = None
    fLoginID: Scalar = None

class StaffUpdateRequest(StaffCreateRequest):
    SID: Scalar = None

class StaffDeleteRequest(BaseModel):
    fLoginID: Scalar = None
    SID: Scalar = None
