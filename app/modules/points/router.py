# app/modules/points/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from app.config.database import get_db
from app.shared.schemas.common import MessageResponse
from .service import PointsService
from .schemas import PointsAwardRequest, PointsRedeemRequest

router = APIRouter(tags=["Loyalty Points"])


@router.post("/Points", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def award_points(
    request: PointsAwardRequest,
    db: Session = Depends(get_db)
):
    service = PointsService(db)
    return service.award_points(request)


@router.post("/getEarnedPoints", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def redeem_points(
    request: PointsRedeemRequest,
    db: Session = Depends(get_db)
):
    """Record points spent by a customer (stamped with the business-timezone date)"""
    service = PointsService(db)
    return service.redeem_points(request)


@router.get("/getCustomerPoints", response_model=List[Dict[str, Any]])
def get_customer_points(
    userId: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = PointsService(db)
    return service.get_customer_points(userId)


@router.get("/getCustomerPointView", response_model=List[Dict[str, Any]])
def get_customer_point_view(
    fLoginID: Optional[str] = None,
    fLedgerID: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = PointsService(db)
    return service.get_customer_point_view(fLoginID, fLedgerID)


@router.get("/getPointsEarned", response_model=List[Dict[str, Any]])
def get_points_earned(
    fLoginID: Optional[str] = None,
    fLedgerID: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = PointsService(db)
    return service.get_points_earned(fLoginID, fLedgerID)


@router.get("/getSingleCustomerPoints", response_model=List[Dict[str, Any]])
def get_single_customer_points(
    fLoginID: Optional[str] = None,
    fLedgerID: Optional[str] = None,
    db: Session = Depends(get_db)
):
    service = PointsService(db)
    return service.get_single_customer_points(fLoginID, fLedgerID)
