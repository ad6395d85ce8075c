# app/modules/products/service.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import UploadFile, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.core.exceptions import NotFound
from app.shared.services.asset_storage import AssetStorage
from app.shared.services.transactional_write import Expect, TransactionalWrite, run_query
from app.shared.services.upload_coordinator import AssetPlan, UploadCoordinator
from app.shared.utils.validation import optional_text, parse_amount, parse_int, require_fields
from .repository import ProductRepository
from .schemas import ProductForm

logger = logging.getLogger(__name__)

DUPLICATE_BARCODE_MESSAGE = "Barcode must be unique. This barcode is already in use."
PRODUCT_REFERENCED_MESSAGE = "This product is used in Sale/Purchase records and cannot be deleted."


class ProductService:
    """
    Catalog entries: save/update with image lifecycle, delete, listings and rate tags
    """

    def __init__(self, db: Session, storage: AssetStorage):
        self.db = db
        self.storage = storage
        self.repository = ProductRepository(db)
        self.coordinator = UploadCoordinator(storage, settings.fallback_image_name)

    # ==================== SAVE ====================

    async def save_product(self, form: ProductForm, image: Optional[UploadFile]) -> Dict[str, Any]:
        """
        Create a catalog entry.

        Image precedence: uploaded file > requested default image > fallback image.
        A file uploaded for a save that does not commit is deleted again.
        """
        require_fields(
            {
                "productName": form.product_name,
                "mrp": form.mrp,
                "price": form.price,
                "FLoginId": form.login_id,
            },
            "Product details are required"
        )
        mrp = parse_amount(form.mrp, "mrp")
        price = parse_amount(form.price, "price")
        login_id = parse_int(form.login_id, "FLoginId")

        uploaded = await self._store_image(image)
        plan = self.coordinator.resolve_for_create(uploaded, form.use_default_image, form.default_image_name)

        write = TransactionalWrite(
            self.db,
            action="save product",
            expect=Expect.IDENTIFIER,
            duplicate_message=DUPLICATE_BARCODE_MESSAGE,
            failure_message="Something went wrong while saving the product.",
            plan=plan,
            coordinator=self.coordinator
        )
        normalized = await run_in_threadpool(write.run, lambda: self.repository.insert_product(
            form.product_name,
            mrp,
            price,
            plan.reference,
            login_id,
            optional_text(form.barcode),
            form.tax,
            form.points
        ))

        logger.info(f"✅ Product {normalized.identifier} saved for login {login_id} with image {plan.reference}")
        return {
            "success": True,
            "message": normalized.message or "Product saved successfully",
            "productId": normalized.identifier,
        }

    # ==================== UPDATE ====================

    async def update_product(self, product_id: int, form: ProductForm, image: Optional[UploadFile]) -> Dict[str, Any]:
        """
        Update a catalog entry, replacing its image when a new file or a default
        image is requested. The previous image is deleted only after commit.
        """
        require_fields(
            {"mrp": form.mrp, "price": form.price, "FLoginId": form.login_id},
            "Missing required product information"
        )
        mrp = parse_amount(form.mrp, "mrp")
        price = parse_amount(form.price, "price")
        login_id = parse_int(form.login_id, "FLoginId")

        uploaded = await self._store_image(image)

        # Until the current image is known, a failure only has the new upload to reclaim
        write = TransactionalWrite(
            self.db,
            action="update product",
            expect=Expect.SUCCESS,
            rejected_message="Update failed.",
            duplicate_message=DUPLICATE_BARCODE_MESSAGE,
            failure_message="Internal server error",
            plan=AssetPlan(reference=uploaded or "", uploaded=uploaded),
            coordinator=self.coordinator
        )

        def invoke():
            previous = self.repository.get_image_name(product_id)
            write.plan = self.coordinator.resolve_for_update(
                previous, uploaded, form.use_default_image, form.default_image_name
            )
            return self.repository.update_product(
                product_id,
                mrp,
                price,
                write.plan.reference,
                login_id,
                optional_text(form.barcode),
                form.tax,
                form.points
            )

        normalized = await run_in_threadpool(write.run, invoke)

        logger.info(f"✅ Product {product_id} updated (image changed: {write.plan.changing})")
        return {
            "success": True,
            "message": normalized.message or "Product updated successfully",
        }

    # ==================== DELETE ====================

    def delete_product(self, product_id: int) -> Dict[str, Any]:
        write = TransactionalWrite(
            self.db,
            action="delete product",
            expect=Expect.SUCCESS,
            rejected_message="Product not found",
            rejected_status=status.HTTP_404_NOT_FOUND,
            referenced_message=PRODUCT_REFERENCED_MESSAGE,
            failure_message="Server error. Try again later."
        )
        write.run(lambda: self.repository.delete_product(product_id))
        return {"success": True, "message": "Product deleted successfully"}

    # ==================== QUERIES ====================

    def list_products(self, user_id: Optional[str]) -> List[Dict[str, Any]]:
        rows = run_query(
            lambda: self.repository.list_products(user_id or None),
            "Server error,Try again, Please refresh"
        )
        base_url = settings.public_base_url.rstrip("/")
        return [
            {
                **row,
                "imageUrl": f"{base_url}/uploads/{row['ImageName']}" if row.get("ImageName") else None,
            }
            for row in rows
        ]

    def get_product_by_barcode(self, login_id: Optional[str], barcode: Optional[str]) -> Dict[str, Any]:
        require_fields({"BarCode": barcode, "fLoginID": login_id}, "Missing BarCode or fLoginID parameters")
        result = run_query(
            lambda: self.repository.get_by_barcode(login_id, barcode),
            "Server error while fetching Barcode"
        )
        if result.first_row() is None:
            raise NotFound("Barcode is not valid")

        sets = result.row_sets
        return {
            "success": True,
            "productObj": sets,
            "items": sets[1] if len(sets) > 1 else [],
            "customer": sets[2][0] if len(sets) > 2 and sets[2] else {},
        }

    def get_stocks(self, user_id: Optional[str]) -> List[Dict[str, Any]]:
        require_fields({"userId": user_id}, "Missing userId")
        return run_query(lambda: self.repository.get_stocks(user_id), "Failed to fetch stocks data")

    def get_rate_tags(self, login_id: Optional[str]) -> Dict[str, Any]:
        data = run_query(lambda: self.repository.get_rate_tags(login_id), "Failed to retrieve rate tags")
        return {"success": True, "data": data}

    def get_rate_tag_stock(self, product_id: Optional[str], login_id: Optional[str]) -> Dict[str, Any]:
        data = run_query(
            lambda: self.repository.get_rate_tag_stock(product_id, login_id),
            "Failed to retrieve rate tags"
        )
        return {"success": True, "data": data}

    def get_barcode_rate_tag(self, barcode: Optional[str], login_id: Optional[str]) -> Dict[str, Any]:
        rows = run_query(
            lambda: self.repository.get_barcode_rate_tag(login_id, barcode),
            "Failed to retrieve rate tags"
        )
        if len(rows) == 1 and rows[0].get("status") == "Error":
            return {"success": False, "message": rows[0].get("message")}
        if rows:
            return {"success": True, "data": rows}
        return {"success": False, "message": "No data found for this barcode."}

    # ==================== HELPERS ====================

    async def _store_image(self, image: Optional[UploadFile]) -> Optional[str]:
        if image is None or not image.filename:
            return None
        return await self.storage.save_catalog_upload(image)
