# app/modules/billing/repository.py
from typing import Any, Optional

from app.shared.database.procedures import ProcedureRepository, ProcedureResult, RowSet
from .schemas import BillLineRequest


class BillingRepository(ProcedureRepository):

    # ==================== WRITES ====================

    def insert_bill_line(self, bill_date: str, line: BillLineRequest, customer_id: Optional[Any]) -> ProcedureResult:
        return self.call(
            "insertBill",
            bill_date,
            line.ProductName,
            line.MRP,
            line.Price,
            line.Qty,
            line.Total,
            line.Customer,
            line.Phone,
            line.fProductID,
            line.fLoginID,
            line.BillNumber,
            line.Tax,
            line.Taxable,
            line.IGSTAmount,
            line.StaffName,
            customer_id,
            line.PointsParsent,
            line.SGST,
            line.CGST
        )

    def delete_bill(self, login_id: Any, bill_number: Any) -> ProcedureResult:
        return self.call("deleteBill", login_id, bill_number)

    # ==================== QUERIES ====================

    def get_bill_number(self, login_id: Optional[str]) -> ProcedureResult:
        return self.call("getBillNumber", login_id)

    def get_billing_items(self, login_id: Optional[str], from_date: Optional[str], to_date: Optional[str]) -> RowSet:
        return self.rows("getBillingItems", login_id, from_date, to_date)

    def get_bills(self, login_id: Optional[str], from_date: Optional[str], to_date: Optional[str]) -> RowSet:
        return self.rows("getBills", login_id, from_date, to_date)

    def get_sold_items(self, login_id: Optional[str], from_date: Optional[str], to_date: Optional[str]) -> RowSet:
        return self.rows("getSoldItems", login_id, from_date, to_date)

    def get_one_bill(self, login_id: str, bill_number: str) -> ProcedureResult:
        """Header, items and customer of one bill as three result sets"""
        return self.call("getOneBillItems", login_id, bill_number)

    def get_product_bill_history(self, login_id: Any, product_id: Any) -> RowSet:
        return self.rows("getProductBillHistory", login_id, product_id)
