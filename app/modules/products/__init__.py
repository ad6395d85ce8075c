# app/modules/products/__init__.py
"""
Products module - catalog entries and their images

- productSave / product/{id}: writes with image lifecycle (upload, default, fallback)
- deleteproduct/{id}: delete, refused while sales or purchases reference the product
- showproducts, getProductByBarCode, getStocks, rate tag lookups

Architecture:
- router.py: FastAPI endpoints
- service.py: business logic and transactions
- repository.py: stored procedure calls
- schemas.py: Pydantic request/response models
"""

from .router import router as products_router
from .service import ProductService
from .repository import ProductRepository

__all__ = [
    "products_router",
    "ProductService",
    "ProductRepository"
]
