# app/modules/points/__init__.py
"""
Loyalty points module - points awarded per bill and redeemed per customer ledger
"""

from .router import router as points_router
from .service import PointsService
from .repository import PointsRepository

__all__ = [
    "points_router",
    "PointsService",
    "PointsRepository"
]
