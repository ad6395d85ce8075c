# app/modules/purchases/schemas.py
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from app.shared.schemas.common import MessageResponse, Scalar

# ==================== REQUEST SCHEMAS ====================

class PurchaseCreateRequest(BaseModel):
    """One purchased line from a supplier (party ledger fLID)"""
    PurchaseDate: Scalar = None
    fLID: Scalar = Field(None, description="Supplier ledger")
    productID: Scalar = None
    qty: Scalar = None
    buyPrice: Scalar = None
    description: Scalar = None
    fLoginID: Scalar = None
    BillNo: Scalar = Field(None, description="Supplier bill number")
    ProductName: Scalar = None
    TotalSum: Scalar = None
    Tax: Scalar = None
    Taxable: Scalar = None
    IGSTAmount: Scalar = None
    SGST: Scalar = None
    CGST: Scalar = None

class PurchaseUpdateRequest(BaseModel):
    PurchaseDate: Scalar = None
    fLID: Scalar = None
    ProductID: Scalar = None
    QTY: Scalar = None
    BuyPrice: Scalar = None
    Description: Scalar = None
    fLoginID: Scalar = None
    PID: Scalar = None

class PurchaseDeleteRequest(BaseModel):
    fLoginID: Scalar = None
    PID: Scalar = None

class PurchaseBillRequest(BaseModel):
    fLoginID: Scalar = None
    fromDate: Optional[str] = None
    toDate: Optional[str] = None

# ==================== RESPONSE SCHEMAS ====================

class PurchaseDeleteResponse(MessageResponse):
    affectedRows: Optional[int] = None

class PurchaseBillResponse(BaseModel):
    data: List[Dict[str, Any]]
