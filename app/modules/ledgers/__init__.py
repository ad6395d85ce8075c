# app/modules/ledgers/__init__.py
"""
Ledgers module - customers, suppliers (parties) and their account entries
"""

from .router import router as ledgers_router
from .service import LedgerService
from .repository import LedgerRepository

__all__ = [
    "ledgers_router",
    "LedgerService",
    "LedgerRepository"
]
