# app/modules/purchases/repository.py
from typing import Any, Optional

from app.shared.database.procedures import ProcedureRepository, ProcedureResult, RowSet
from .schemas import PurchaseCreateRequest, PurchaseUpdateRequest


class PurchaseRepository(ProcedureRepository):

    # ==================== WRITES ====================

    def insert_purchase(self, purchase: PurchaseCreateRequest) -> ProcedureResult:
        return self.call(
            "insertPurchase",
            purchase.PurchaseDate,
            purchase.productID,
            purchase.qty,
            purchase.buyPrice,
            purchase.description,
            purchase.fLoginID,
            purchase.fLID,
            purchase.BillNo,
            purchase.ProductName,
            purchase.TotalSum,
            purchase.Tax,
            purchase.Taxable,
            purchase.IGSTAmount,
            purchase.SGST,
            purchase.CGST
        )

    def update_purchase(self, purchase: PurchaseUpdateRequest) -> ProcedureResult:
        return self.call(
            "UpdatePurchase",
            purchase.PurchaseDate,
            purchase.fLID,
            purchase.ProductID,
            purchase.QTY,
            purchase.BuyPrice,
            purchase.Description,
            purchase.fLoginID,
            purchase.PID
        )

    def delete_purchase(self, purchase_id: Any, login_id: Any) -> ProcedureResult:
        return self.call("DeletePurchase", purchase_id, login_id)

    # ==================== QUERIES ====================

    def get_purchase_bill(self, login_id: Any, from_date: str, to_date: str) -> RowSet:
        return self.rows("getPurchaseBill", login_id, from_date, to_date)

    def get_purchase_by_date(self, login_id: str, from_date: Optional[str], to_date: Optional[str]) -> RowSet:
        return self.rows("getPurchaseByDate", login_id, from_date, to_date)

    def get_purchase_items(self, login_id: str, from_date: Optional[str], to_date: Optional[str]) -> RowSet:
        return self.rows("getPurchaseItem", login_id, from_date, to_date)

    def get_party_purchase(self, login_id: str, from_date: Optional[str], to_date: Optional[str]) -> RowSet:
        return self.rows("getPartyPurchase", login_id, from_date, to_date)

    def get_items_wise_purchase(self, login_id: Optional[str], from_date: Optional[str], to_date: Optional[str]) -> RowSet:
        return self.rows("getItemsWisePurchase", login_id, from_date, to_date)

    def get_product_purchase_history(self, login_id: Any, product_id: Any) -> RowSet:
        return self.rows("getProductPurchaseHistory", login_id, product_id)
