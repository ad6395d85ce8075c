# app/modules/purchases/service.py
import logging
from typing import Any, Callable, Dict, Optional

from fastapi import status
from sqlalchemy.orm import Session

from app.shared.database.procedures import RowSet
from app.shared.schemas.common import ProductHistoryRequest
from app.shared.services.transactional_write import Expect, TransactionalWrite, run_query
from app.shared.utils.validation import require_fields
from .repository import PurchaseRepository
from .schemas import (
    PurchaseBillRequest, PurchaseCreateRequest, PurchaseDeleteRequest, PurchaseUpdateRequest
)

logger = logging.getLogger(__name__)

PURCHASE_REQUIRED_FIELDS = (
    "PurchaseDate", "fLID", "productID", "qty", "buyPrice", "fLoginID", "BillNo",
    "ProductName", "TotalSum", "Tax", "Taxable", "IGSTAmount", "SGST", "CGST",
)


class PurchaseService:
    """Supplier purchases: stock in, corrections and purchase reports"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = PurchaseRepository(db)

    # ==================== WRITES ====================

    def create_purchase(self, purchase: PurchaseCreateRequest) -> Dict[str, Any]:
        require_fields(
            {name: getattr(purchase, name) for name in PURCHASE_REQUIRED_FIELDS},
            "All fields are required"
        )
        write = TransactionalWrite(self.db, action="save purchase", failure_message="Failed to save purchase data")
        write.run(lambda: self.repository.insert_purchase(purchase))

        logger.info(f"✅ Purchase saved: bill {purchase.BillNo}, product {purchase.productID}, qty {purchase.qty}")
        return {"success": True, "message": "Purchase data saved successfully"}

    def update_purchase(self, purchase: PurchaseUpdateRequest) -> Dict[str, Any]:
        require_fields({"PID": purchase.PID, "fLoginID": purchase.fLoginID}, "Missing required parameters")
        write = TransactionalWrite(self.db, action="update purchase", failure_message="Failed to update purchase")
        write.run(lambda: self.repository.update_purchase(purchase))
        return {"success": True, "message": "Purchase updated successfully"}

    def delete_purchase(self, request: PurchaseDeleteRequest) -> Dict[str, Any]:
        require_fields({"fLoginID": request.fLoginID, "PID": request.PID}, "Missing required parameters")
        write = TransactionalWrite(
            self.db,
            action="delete purchase",
            expect=Expect.SUCCESS,
            rejected_message="Purchase not found or unauthorized",
            rejected_status=status.HTTP_404_NOT_FOUND,
            failure_message="Database operation failed"
        )
        normalized = write.run(lambda: self.repository.delete_purchase(request.PID, request.fLoginID))

        logger.info(f"🗑️ Purchase {request.PID} deleted for login {request.fLoginID}")
        return {
            "success": True,
            "message": normalized.message or "Purchase deleted successfully",
            "affectedRows": normalized.affected_count,
        }

    # ==================== QUERIES ====================

    def get_purchase_bill(self, request: PurchaseBillRequest) -> Dict[str, Any]:
        require_fields(
            {"fLoginID": request.fLoginID, "fromDate": request.fromDate, "toDate": request.toDate},
            "fLoginID, fromDate and toDate are required"
        )
        data = run_query(
            lambda: self.repository.get_purchase_bill(request.fLoginID, request.fromDate, request.toDate),
            "Failed to fetch purchase summary"
        )
        return {"data": data}

    def get_purchase_by_date(self, user_id: Optional[str], from_date: Optional[str], to_date: Optional[str]):
        return self._dated_report(self.repository.get_purchase_by_date, user_id, from_date, to_date,
                                  "Failed to fetch purchase data")

    def get_purchase_items(self, user_id: Optional[str], from_date: Optional[str], to_date: Optional[str]):
        return self._dated_report(self.repository.get_purchase_items, user_id, from_date, to_date,
                                  "Failed to fetch purchase data")

    def get_party_purchase(self, user_id: Optional[str], from_date: Optional[str], to_date: Optional[str]):
        return self._dated_report(self.repository.get_party_purchase, user_id, from_date, to_date,
                                  "Failed to fetch Party Purchase")

    def get_items_wise_purchase(self, user_id: Optional[str], from_date: Optional[str], to_date: Optional[str]):
        return run_query(
            lambda: self.repository.get_items_wise_purchase(user_id or None, from_date or None, to_date or None),
            "Server error while fetching purchase items"
        )

    def get_purchase_details(self, request: ProductHistoryRequest):
        require_fields(
            {"p_fProductID": request.p_fProductID, "p_fLoginID": request.p_fLoginID},
            "Missing product ID or login ID"
        )
        return run_query(
            lambda: self.repository.get_product_purchase_history(request.p_fLoginID, request.p_fProductID),
            "Internal server error"
        )

    def _dated_report(
        self,
        query: Callable[[str, Optional[str], Optional[str]], RowSet],
        user_id: Optional[str],
        from_date: Optional[str],
        to_date: Optional[str],
        failure_message: str
    ) -> RowSet:
        require_fields({"userId": user_id}, "Missing userId")
        return run_query(lambda: query(user_id, from_date or None, to_date or None), failure_message)
