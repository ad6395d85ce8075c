# app/modules/products/router.py
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from app.config.database import get_db
from app.shared.services.asset_storage import AssetStorage, get_asset_storage
from .service import ProductService
from .schemas import (
    BarcodeLookupResponse, DataResponse, MessageResponse, ProductForm, ProductSaveResponse
)

router = APIRouter(tags=["Products"])


def product_form(
    product_name: Optional[str] = Form(None, alias="productName"),
    price: Optional[str] = Form(None),
    mrp: Optional[str] = Form(None),
    login_id: Optional[str] = Form(None, alias="FLoginId"),
    barcode: Optional[str] = Form(None, alias="Barcode"),
    tax: Optional[str] = Form(None, alias="Tax"),
    points: Optional[str] = Form(None, alias="Points"),
    use_default_image: bool = Form(False, alias="useDefaultImage"),
    default_image_name: Optional[str] = Form(None, alias="defaultImageName")
) -> ProductForm:
    return ProductForm(
        product_name=product_name,
        price=price,
        mrp=mrp,
        login_id=login_id,
        barcode=barcode,
        tax=tax,
        points=points,
        use_default_image=use_default_image,
        default_image_name=default_image_name
    )

# ==================== WRITES ====================

@router.post("/productSave", response_model=ProductSaveResponse, status_code=status.HTTP_201_CREATED)
async def save_product(
    form: ProductForm = Depends(product_form),
    image: Optional[UploadFile] = File(None, description="Product image"),
    db: Session = Depends(get_db),
    storage: AssetStorage = Depends(get_asset_storage)
):
    """
    Create a product. The stored image is the upload, else the requested
    default image, else the shared fallback image.
    """
    service = ProductService(db, storage)
    return await service.save_product(form, image)


@router.put("/product/{product_id}", response_model=MessageResponse)
async def update_product(
    product_id: int,
    form: ProductForm = Depends(product_form),
    image: Optional[UploadFile] = File(None, description="Replacement image"),
    db: Session = Depends(get_db),
    storage: AssetStorage = Depends(get_asset_storage)
):
    service = ProductService(db, storage)
    return await service.update_product(product_id, form, image)


@router.delete("/deleteproduct/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    storage: AssetStorage = Depends(get_asset_storage)
):
    service = ProductService(db, storage)
    return service.delete_product(product_id)

# ==================== QUERIES ====================

@router.get("/showproducts", response_model=List[Dict[str, Any]])
def show_products(
    userId: Optional[str] = None,
    db: Session = Depends(get_db),
    storage: AssetStorage = Depends(get_asset_storage)
):
    service = ProductService(db, storage)
    return service.list_products(userId)


@router.get("/getProductByBarCode", response_model=BarcodeLookupResponse)
def get_product_by_barcode(
    fLoginID: Optional[str] = None,
    BarCode: Optional[str] = None,
    db: Session = Depends(get_db),
    storage: AssetStorage = Depends(get_asset_storage)
):
    service = ProductService(db, storage)
    return service.get_product_by_barcode(fLoginID, BarCode)


@router.get("/getStocks", response_model=List[Dict[str, Any]])
def get_stocks(
    userId: Optional[str] = None,
    db: Session = Depends(get_db),
    storage: AssetStorage = Depends(get_asset_storage)
):
    service = ProductService(db, storage)
    return service.get_stocks(userId)


@router.get("/getRateTag", response_model=DataResponse)
def get_rate_tags(
    fLoginID: Optional[str] = None,
    db: Session = Depends(get_db),
    storage: AssetStorage = Depends(get_asset_storage)
):
    service = ProductService(db, storage)
    return service.get_rate_tags(fLoginID)


@router.get("/getRateTagStock", response_model=DataResponse)
def get_rate_tag_stock(
    fProductID: Optional[str] = None,
    fLoginID: Optional[str] = None,
    db: Session = Depends(get_db),
    storage: AssetStorage = Depends(get_asset_storage)
):
    service = ProductService(db, storage)
    return service.get_rate_tag_stock(fProductID, fLoginID)


@router.get("/getBarcodeRateTag", response_model=DataResponse)
def get_barcode_rate_tag(
    Barcode: Optional[str] = None,
    fLoginID: Optional[str] = None,
    db: Session = Depends(get_db),
    storage: AssetStorage = Depends(get_asset_storage)
):
    service = ProductService(db, storage)
    return service.get_barcode_rate_tag(Barcode, fLoginID)
