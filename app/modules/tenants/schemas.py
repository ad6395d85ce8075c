# app/modules/tenants/schemas.py
from pydantic import BaseModel, Field
from typing import Optional, Union

from app.shared.schemas.common import MessageResponse, Scalar

# ==================== REQUEST SCHEMAS ====================

class SignupRequest(BaseModel):
    """Self-service registration of a business (tenant login)"""
    password: Scalar = None
    phoneNumber: Scalar = None
    businessName: Scalar = None
    Address: Scalar = None
    GSTIN: Scalar = None
    BillMobile: Scalar = Field(None, description="Phone printed on bills")
    BillFormat: Scalar = Field(None, description="Bill print layout")

class TenantAccountRequest(BaseModel):
    """Tenant account as managed by the administrator, feature flags included"""
    businessName: Scalar = None
    phoneNumber: Scalar = None
    password: Scalar = None
    IsEnable: Scalar = None
    ValidityDate: Scalar = None
    Address: Scalar = None
    BillMobile: Scalar = None
    EnableStaff: Scalar = None
    BillFormat: Scalar = None
    GSTIN: Scalar = None
    EnableWhatsApp: Scalar = None
    WhatsAppAPI: Scalar = None
    EnablePoints: Scalar = None
    UPI: Scalar = None
    Details: Scalar = None
    RateTag: Scalar = None
    StateCode: Scalar = None
    EnableAccounts: Scalar = None
    OnlyRateTag: Scalar = None

class TenantUpdateRequest(TenantAccountRequest):
    LoginID: Scalar = None

class TenantDeleteRequest(BaseModel):
    LoginID: Scalar = None

class PasswordChangeRequest(BaseModel):
    LoginID: Scalar = None
    OldPassword: Scalar = None
    NewPassword: Scalar = None

class FirmUpdateRequest(BaseModel):
    """Business profile fields a tenant edits for itself"""
    LoginID: Scalar = None
    BusinessName: Scalar = None
    Address: Scalar = None
    GSTIN: Scalar = None
    BillMobile: Scalar = None
    BillFormat: Scalar = None
    UPI: Scalar = None
    StateCode: Scalar = None

# ==================== RESPONSE SCHEMAS ====================

class SignupResponse(MessageResponse):
    loginId: Optional[Union[int, float]] = None
