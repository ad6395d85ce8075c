# app/modules/ledgers/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from app.config.database import get_db
from app.shared.schemas.common import DataResponse, MessageResponse
from .service import LedgerService
from .schemas import (
    AccountDeleteRequest, AccountEntryRequest, LedgerCreateRequest,
    LedgerCreatedResponse, LedgerDeleteRequest, LedgerUpdateRequest
)

router = APIRouter(tags=["Ledgers & Accounts"])

# ==================== LEDGER WRITES ====================

@router.post("/insertledger", response_model=LedgerCreatedResponse, status_code=status.HTTP_201_CREATED)
def insert_ledger(
    ledger: LedgerCreateRequest,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.create_ledger(ledger)


@router.put("/updateledger", response_model=MessageResponse)
def update_ledger(
    ledger: LedgerUpdateRequest,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.update_ledger(ledger)


@router.delete("/deleteledger", response_model=MessageResponse)
def delete_ledger(
    request: LedgerDeleteRequest,
    db: Session = Depends(get_db)
):
    """Delete a ledger; refused with 409 while bills still reference it"""
    service = LedgerService(db)
    return service.delete_ledger(request)

# ==================== ACCOUNTS ====================

@router.post("/insertaccount", response_model=MessageResponse)
def insert_account(
    entry: AccountEntryRequest,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.create_account_entry(entry)


@router.delete("/deleteaccount", response_model=MessageResponse)
def delete_account(
    request: AccountDeleteRequest,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.delete_account_entries(request)


@router.get("/getAccountsHistory", response_model=List[Dict[str, Any]])
def get_accounts_history(
    fLoginID: Optional[str] = None,
    fromDate: Optional[str] = None,
    toDate: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.get_accounts_history(fLoginID, fromDate, toDate)

# ==================== QUERIES ====================

@router.get("/getledgeritems", response_model=List[Dict[str, Any]])
def get_ledger_items(
    userId: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.get_ledger_items(userId)


@router.get("/getNameLIDtofID", response_model=List[Dict[str, Any]])
def get_name_lid_to_fid(
    userId: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.get_name_lid_to_fid(userId)


@router.get("/getpartylist", response_model=List[Dict[str, Any]])
def get_party_list(
    fLoginID: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.get_parties(fLoginID)


@router.get("/getCustomerlist", response_model=List[Dict[str, Any]])
def get_customer_list(
    fLoginID: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.get_customers(fLoginID)


@router.get("/allCustomers", response_model=List[Dict[str, Any]])
def all_customers(
    userId: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.all_customers(userId)


@router.get("/getLedgerSummary", response_model=List[Dict[str, Any]])
def get_ledger_summary(
    fLoginID: Optional[str] = None,
    LID: Optional[str] = None,
    fromDate: Optional[str] = None,
    toDate: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.get_ledger_summary(fLoginID, LID, fromDate, toDate)


@router.get("/getAllLedgerName", response_model=DataResponse)
def get_all_ledger_names(
    fLoginID: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.get_all_ledger_names(fLoginID)


@router.get("/getBalanceSheet", response_model=DataResponse)
def get_balance_sheet(
    fLoginID: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = LedgerService(db)
    return service.get_balance_sheet(fLoginID)
