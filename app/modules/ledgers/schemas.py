# app/modules/ledgers/schemas.py
from pydantic import BaseModel, Field
from typing import Optional, Union

from app.shared.schemas.common import MessageResponse, Scalar

# ==================== LEDGERS ====================

class LedgerCreateRequest(BaseModel):
    """Customer or supplier (party) of a tenant"""
    Name: Scalar = None
    Mobile: Scalar = None
    Address: Scalar = None
    GSTIN: Scalar = None
    CustomerDetails: Scalar = Field(None, description="Ledger kind as stored by the frontend (customer / party)")
    fLoginID: Scalar = None
    StateCode: Scalar = None

class LedgerUpdateRequest(LedgerCreateRequest):
    LID: Scalar = None

class LedgerDeleteRequest(BaseModel):
    fLoginID: Scalar = None
    LID: Scalar = None

class LedgerCreatedResponse(MessageResponse):
    ledgerId: Optional[Union[int, float]] = None

# ==================== ACCOUNTS ====================

class AccountEntryRequest(BaseModel):
    """Debit/credit entry against a ledger, optionally tied to a bill"""
    fLedgerID: Scalar = None
    Debit: Scalar = None
    Credit: Scalar = None
    Narration: Scalar = None
    fBillNumber: Scalar = None
    fLoginID: Scalar = None
    DateTime: Scalar = None

class AccountDeleteRequest(BaseModel):
    fBillNumber: Scalar = None
    fLoginID: Scalar = None
