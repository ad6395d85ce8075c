# app/modules/tenants/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional

from app.config.database import get_db
from app.shared.schemas.common import DataResponse, MessageResponse
from .service import TenantService
from .schemas import (
    FirmUpdateRequest, PasswordChangeRequest, SignupRequest, SignupResponse,
    TenantAccountRequest, TenantDeleteRequest, TenantUpdateRequest
)

router = APIRouter(tags=["Tenants"])

# ==================== SIGNUP / LOGIN ====================

@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(
    signup: SignupRequest,
    db: Session = Depends(get_db)
):
    service = TenantService(db)
    return service.signup(signup)


@router.get("/login", response_model=Dict[str, Any])
def login(
    phoneNumber: Optional[str] = None,
    password: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Check credentials. Returns the tenant row (settings and feature flags)
    on success, 401 otherwise.
    """
    service = TenantService(db)
    return service.login(phoneNumber, password)

# ==================== ADMINISTRATION ====================

@router.post("/AdminLogin", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    account: TenantAccountRequest,
    db: Session = Depends(get_db)
):
    """Administrator creates a tenant account with its feature flags"""
    service = TenantService(db)
    return service.create_account(account)


@router.get("/getUser", response_model=DataResponse)
def list_accounts(
    db: Session = Depends(get_db)
):
    service = TenantService(db)
    return service.list_accounts()


@router.post("/updateUser", response_model=MessageResponse)
def update_account(
    account: TenantUpdateRequest,
    db: Session = Depends(get_db)
):
    service = TenantService(db)
    return service.update_account(account)


@router.delete("/DeleteUser", response_model=MessageResponse)
def delete_account(
    request: TenantDeleteRequest,
    db: Session = Depends(get_db)
):
    service = TenantService(db)
    return service.delete_account(request)

# ==================== PROFILE ====================

@router.post("/updatepassword", response_model=MessageResponse)
def update_password(
    request: PasswordChangeRequest,
    db: Session = Depends(get_db)
):
    service = TenantService(db)
    return service.change_password(request)


@router.put("/updateFirm", response_model=MessageResponse)
def update_firm(
    firm: FirmUpdateRequest,
    db: Session = Depends(get_db)
):
    service = TenantService(db)
    return service.update_firm(firm)
