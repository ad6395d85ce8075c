# app/modules/billing/service.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import status
from sqlalchemy.orm import Session

from app.core.exceptions import NotFound
from app.shared.schemas.common import ProductHistoryRequest
from app.shared.services.transactional_write import Expect, TransactionalWrite, run_query
from app.shared.utils.timezone import business_now
from app.shared.utils.validation import blank_to_none, require_fields
from .repository import BillingRepository
from .schemas import BillDeleteRequest, BillLineRequest

logger = logging.getLogger(__name__)


class BillingService:
    """Bill lines, bill numbering, bill reports and bill deletion"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = BillingRepository(db)

    # ==================== WRITES ====================

    def save_bill_line(self, line: BillLineRequest) -> Dict[str, Any]:
        require_fields(
            {
                "ProductName": line.ProductName,
                "MRP": line.MRP,
                "Price": line.Price,
                "Qty": line.Qty,
                "Total": line.Total,
                "fLoginID": line.fLoginID,
                "fProductID": line.fProductID,
                "PointsParsent": line.PointsParsent,
            },
            "All required fields must be provided.",
            allow_empty=True
        )
        bill_date = business_now()
        customer_id = blank_to_none(line.selectedCustomerID) or None

        write = TransactionalWrite(
            self.db,
            action="save bill",
            failure_message="Failed to save product data"
        )
        write.run(lambda: self.repository.insert_bill_line(bill_date, line, customer_id))

        logger.info(f"✅ Bill line saved: bill {line.BillNumber}, product {line.fProductID}, login {line.fLoginID}")
        return {"success": True, "message": "Bill saved successfully"}

    def delete_bill(self, request: BillDeleteRequest) -> Dict[str, Any]:
        require_fields(
            {"fLoginID": request.fLoginID, "BillNumber": request.BillNumber},
            "Missing required parameters"
        )
        write = TransactionalWrite(
            self.db,
            action="delete bill",
            expect=Expect.SUCCESS,
            rejected_message="Bill not found or unauthorized",
            rejected_status=status.HTTP_404_NOT_FOUND,
            failure_message="Database operation failed"
        )
        normalized = write.run(lambda: self.repository.delete_bill(request.fLoginID, request.BillNumber))

        logger.info(f"🗑️ Bill {request.BillNumber} deleted for login {request.fLoginID}")
        return {
            "success": True,
            "message": "Bill deleted successfully",
            "affectedRows": normalized.affected_count,
        }

    # ==================== QUERIES ====================

    def get_bill_number(self, user_id: Optional[str]) -> List[List[Dict[str, Any]]]:
        result = run_query(lambda: self.repository.get_bill_number(user_id), "Error fetching bill number")
        return result.row_sets

    def get_billing_items(self, user_id: Optional[str], from_date: Optional[str], to_date: Optional[str]):
        return run_query(
            lambda: self.repository.get_billing_items(user_id or None, from_date or None, to_date or None),
            "Server error while fetching billing items"
        )

    def get_bills(self, user_id: Optional[str], from_date: Optional[str], to_date: Optional[str]):
        return run_query(
            lambda: self.repository.get_bills(user_id or None, from_date or None, to_date or None),
            "Server error while fetching bills"
        )

    def get_sold_items(self, user_id: Optional[str], from_date: Optional[str], to_date: Optional[str]):
        return run_query(
            lambda: self.repository.get_sold_items(user_id or None, from_date or None, to_date or None),
            "Server error while fetching sold items"
        )

    def get_bill_for_billing(self, login_id: Optional[str], bill_number: Optional[str]) -> Dict[str, Any]:
        """Reload a saved bill into the billing screen"""
        require_fields(
            {"billNumber": bill_number, "fLoginID": login_id},
            "Missing billNumber or fLoginID parameters"
        )
        result = run_query(
            lambda: self.repository.get_one_bill(login_id, bill_number),
            "Server error while fetching bill"
        )
        if result.first_row() is None:
            raise NotFound("Bill not found")

        sets = result.row_sets
        return {
            "success": True,
            "bill": sets,
            "items": sets[1] if len(sets) > 1 else [],
            "customer": sets[2][0] if len(sets) > 2 and sets[2] else {},
        }

    def get_product_bill_history(self, request: ProductHistoryRequest):
        require_fields(
            {"p_fProductID": request.p_fProductID, "p_fLoginID": request.p_fLoginID},
            "Missing product ID or login ID"
        )
        return run_query(
            lambda: self.repository.get_product_bill_history(request.p_fLoginID, request.p_fProductID),
            "Internal server error"
        )
