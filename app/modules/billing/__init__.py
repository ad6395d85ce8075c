# app/modules/billing/__init__.py
"""
Billing module - sale bills

- BillSave: one line per call, stamped with the business-timezone date
- deleteBill: removes a whole bill of a tenant
- getBillNumber, allBillItems, getbills, getsolidItems: numbering and reports
- getsBillToBilling: reload a bill (header, items, customer)
"""

from .router import router as billing_router
from .service import BillingService
from .repository import BillingRepository

__all__ = [
    "billing_router",
    "BillingService",
    "BillingRepository"
]
