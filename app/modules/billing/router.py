# app/modules/billing/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from app.config.database import get_db
from app.shared.schemas.common import MessageResponse, ProductHistoryRequest
from .service import BillingService
from .schemas import BillDeleteRequest, BillDeleteResponse, BillLineRequest, BillLookupResponse

router = APIRouter(tags=["Billing"])

# ==================== WRITES ====================

@router.post("/BillSave", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def save_bill(
    line: BillLineRequest,
    db: Session = Depends(get_db)
):
    """
    Save one bill line. BillDate is the current business-timezone time.
    """
    service = BillingService(db)
    return service.save_bill_line(line)


@router.delete("/deleteBill", response_model=BillDeleteResponse)
def delete_bill(
    request: BillDeleteRequest,
    db: Session = Depends(get_db)
):
    service = BillingService(db)
    return service.delete_bill(request)

# ==================== QUERIES ====================

@router.get("/getBillNumber", response_model=List[List[Dict[str, Any]]])
def get_bill_number(
    userId: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = BillingService(db)
    return service.get_bill_number(userId)


@router.get("/allBillItems", response_model=List[Dict[str, Any]])
def all_bill_items(
    userId: Optional[str] = None,
    fromDate: Optional[str] = None,
    toDate: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = BillingService(db)
    return service.get_billing_items(userId, fromDate, toDate)


@router.get("/getbills", response_model=List[Dict[str, Any]])
def get_bills(
    userId: Optional[str] = None,
    fromDate: Optional[str] = None,
    toDate: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = BillingService(db)
    return service.get_bills(userId, fromDate, toDate)


@router.get("/getsolidItems", response_model=List[Dict[str, Any]])
def get_sold_items(
    userId: Optional[str] = None,
    fromDate: Optional[str] = None,
    toDate: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = BillingService(db)
    return service.get_sold_items(userId, fromDate, toDate)


@router.get("/getsBillToBilling", response_model=BillLookupResponse)
def get_bill_to_billing(
    fLoginID: Optional[str] = None,
    billNumber: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = BillingService(db)
    return service.get_bill_for_billing(fLoginID, billNumber)


@router.post("/getProductBillHistory", response_model=List[Dict[str, Any]])
def get_product_bill_history(
    request: ProductHistoryRequest,
    db: Session = Depends(get_db)
):
    service = BillingService(db)
    return service.get_product_bill_history(request)
