# app/modules/staff/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from app.config.database import get_db
from app.shared.schemas.common import MessageResponse
from .service import StaffService
from .schemas import StaffCreateRequest, StaffDeleteRequest, StaffUpdateRequest

router = APIRouter(tags=["Staff"])


@router.post("/insertStaff", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def insert_staff(
    staff: StaffCreateRequest,
    db: Session = Depends(get_db)
):
    service = StaffService(db)
    return service.create_staff(staff)


@router.put("/updateStaff", response_model=MessageResponse)
def update_staff(
    staff: StaffUpdateRequest,
    db: Session = Depends(get_db)
):
    service = StaffService(db)
    return service.update_staff(staff)


@router.delete("/deleteStaff", response_model=MessageResponse)
def delete_staff(
    request: StaffDeleteRequest,
    db: Session = Depends(get_db)
):
    service = StaffService(db)
    return service.delete_staff(request)


@router.get("/getStaff", response_model=List[Dict[str, Any]])
def get_staff(
    userId: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = StaffService(db)
    return service.get_staff(userId)


@router.get("/StaffNameToBilling", response_model=List[Dict[str, Any]])
def staff_name_to_billing(
    userId: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Staff names offered on the billing screen"""
    service = StaffService(db)
    return service.get_staff_names(userId)


@router.get("/getStaffSale", response_model=List[Dict[str, Any]])
def get_staff_sale(
    userId: Optional[str] = None,
    fromDate: Optional[str] = None,
    toDate: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = StaffService(db)
    return service.get_staff_sales(userId, fromDate, toDate)
