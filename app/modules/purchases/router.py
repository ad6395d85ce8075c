# app/modules/purchases/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from app.config.database import get_db
from app.shared.schemas.common import MessageResponse, ProductHistoryRequest
from .service import PurchaseService
from .schemas import (
    PurchaseBillRequest, PurchaseBillResponse, PurchaseCreateRequest,
    PurchaseDeleteRequest, PurchaseDeleteResponse, PurchaseUpdateRequest
)

router = APIRouter(tags=["Purchases"])

# ==================== WRITES ====================

@router.post("/insertpurchase", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def insert_purchase(
    purchase: PurchaseCreateRequest,
    db: Session = Depends(get_db)
):
    service = PurchaseService(db)
    return service.create_purchase(purchase)


@router.put("/updatePurchase", response_model=MessageResponse)
def update_purchase(
    purchase: PurchaseUpdateRequest,
    db: Session = Depends(get_db)
):
    service = PurchaseService(db)
    return service.update_purchase(purchase)


@router.delete("/deletepurchase", response_model=PurchaseDeleteResponse)
def delete_purchase(
    request: PurchaseDeleteRequest,
    db: Session = Depends(get_db)
):
    service = PurchaseService(db)
    return service.delete_purchase(request)

# ==================== QUERIES ====================

@router.post("/getPurchaseBill", response_model=PurchaseBillResponse)
def get_purchase_bill(
    request: PurchaseBillRequest,
    db: Session = Depends(get_db)
):
    service = PurchaseService(db)
    return service.get_purchase_bill(request)


@router.post("/getPurchaseDetails", response_model=List[Dict[str, Any]])
def get_purchase_details(
    request: ProductHistoryRequest,
    db: Session = Depends(get_db)
):
    service = PurchaseService(db)
    return service.get_purchase_details(request)


@router.get("/getPurchaseByDate", response_model=List[Dict[str, Any]])
def get_purchase_by_date(
    userId: Optional[str] = None,
    fromDate: Optional[str] = None,
    toDate: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = PurchaseService(db)
    return service.get_purchase_by_date(userId, fromDate, toDate)


@router.get("/getPurchaseItem", response_model=List[Dict[str, Any]])
def get_purchase_item(
    userId: Optional[str] = None,
    fromDate: Optional[str] = None,
    toDate: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = PurchaseService(db)
    return service.get_purchase_items(userId, fromDate, toDate)


@router.get("/PartyPurchase", response_model=List[Dict[str, Any]])
def party_purchase(
    userId: Optional[str] = None,
    fromDate: Optional[str] = None,
    toDate: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = PurchaseService(db)
    return service.get_party_purchase(userId, fromDate, toDate)


@router.get("/getItemsWisePurchase", response_model=List[Dict[str, Any]])
def get_items_wise_purchase(
    userId: Optional[str] = None,
    fromDate: Optional[str] = None,
    toDate: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = PurchaseService(db)
    return service.get_items_wise_purchase(userId, fromDate, toDate)
