# app/modules/billing/schemas.py
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from app.shared.schemas.common import MessageResponse, Scalar

# ==================== REQUEST SCHEMAS ====================

class BillLineRequest(BaseModel):
    """One sold line of a bill. BillDate is stamped by the server."""
    ProductName: Scalar = None
    MRP: Scalar = None
    Price: Scalar = None
    Qty: Scalar = None
    Total: Scalar = None
    Customer: Scalar = None
    Phone: Scalar = None
    fProductID: Scalar = None
    fLoginID: Scalar = None
    BillNumber: Scalar = None
    Tax: Scalar = None
    Taxable: Scalar = None
    IGSTAmount: Scalar = None
    StaffName: Scalar = None
    selectedCustomerID: Scalar = Field(None, description="Ledger id of the customer; blank means walk-in")
    PointsParsent: Scalar = Field(None, description="Loyalty points percentage applied to the line")
    SGST: Scalar = None
    CGST: Scalar = None

class BillDeleteRequest(BaseModel):
    fLoginID: Scalar = None
    BillNumber: Scalar = None

# ==================== RESPONSE SCHEMAS ====================

class BillDeleteResponse(MessageResponse):
    affectedRows: Optional[int] = None

class BillLookupResponse(BaseModel):
    success: bool = True
    bill: List[List[Dict[str, Any]]]
    items: List[Dict[str, Any]]
    customer: Dict[str, Any]
