# app/modules/points/schemas.py
from pydantic import BaseModel

from app.shared.schemas.common import Scalar

# ==================== REQUEST SCHEMAS ====================

class PointsAwardRequest(BaseModel):
    """Points credited to a customer ledger for a bill"""
    fLoginID: Scalar = None
    BillNumber: Scalar = None
    Points: Scalar = None
    fLedgerID: Scalar = None

class PointsRedeemRequest(BaseModel):
    """Points spent by a customer ledger"""
    fLoginID: Scalar = None
    Points: Scalar = None
    fLedgerID: Scalar = None
    Narration: Scalar = None
