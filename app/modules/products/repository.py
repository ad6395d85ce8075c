# app/modules/products/repository.py
from decimal import Decimal
from typing import Any, Optional

from app.shared.database.models import Product
from app.shared.database.procedures import ProcedureRepository, ProcedureResult, RowSet


class ProductRepository(ProcedureRepository):
    """
    Catalog procedures. Parameter order follows the procedure signatures.
    """

    # ==================== WRITES ====================

    def insert_product(
        self,
        name: str,
        mrp: Decimal,
        price: Decimal,
        image_name: str,
        login_id: int,
        barcode: Optional[str],
        tax: Any,
        points: Any
    ) -> ProcedureResult:
        return self.call("insertProduct", name, mrp, price, image_name, login_id, barcode, tax, points)

    def update_product(
        self,
        product_id: int,
        mrp: Decimal,
        price: Decimal,
        image_name: str,
        login_id: int,
        barcode: Optional[str],
        tax: Any,
        points: Any
    ) -> ProcedureResult:
        return self.call("updateProduct", product_id, mrp, price, image_name, login_id, barcode, tax, points)

    def delete_product(self, product_id: int) -> ProcedureResult:
        return self.call("deleteProduct", product_id)

    def get_image_name(self, product_id: int) -> Optional[str]:
        """Current asset reference of a product (read inside the update transaction)"""
        return self.db.query(Product.image_name)\
            .filter(Product.id == product_id)\
            .scalar()

    # ==================== QUERIES ====================

    def list_products(self, login_id: Optional[str]) -> RowSet:
        return self.rows("selectProduct", login_id)

    def get_by_barcode(self, login_id: str, barcode: str) -> ProcedureResult:
        return self.call("getProductByBarCode", login_id, barcode)

    def get_stocks(self, login_id: str) -> RowSet:
        return self.rows("getStocks", login_id)

    def get_rate_tags(self, login_id: Optional[str]) -> RowSet:
        return self.rows("getRateTag", login_id)

    def get_rate_tag_stock(self, product_id: Optional[str], login_id: Optional[str]) -> RowSet:
        return self.rows("getRateTagStock", product_id, login_id)

    def get_barcode_rate_tag(self, login_id: Optional[str], barcode: Optional[str]) -> RowSet:
        return self.rows("getBarcodetoRateTag", login_id, barcode)
