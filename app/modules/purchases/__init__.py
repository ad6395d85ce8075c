# app/modules/purchases/__init__.py
"""
Purchases module - stock bought from supplier ledgers and purchase reports
"""

from .router import router as purchases_router
from .service import PurchaseService
from .repository import PurchaseRepository

__all__ = [
    "purchases_router",
    "PurchaseService",
    "PurchaseRepository"
]
