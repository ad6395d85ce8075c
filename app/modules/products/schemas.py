# app/modules/products/schemas.py
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union

from app.shared.schemas.common import DataResponse, MessageResponse

# ==================== REQUEST SCHEMAS ====================

class ProductForm(BaseModel):
    """Multipart fields of productSave / product update (values arrive as text)"""
    product_name: Optional[str] = Field(None, description="Display name")
    price: Optional[str] = Field(None, description="Sale price")
    mrp: Optional[str] = Field(None, description="List price (MRP)")
    login_id: Optional[str] = Field(None, description="Owning tenant (FLoginId)")
    barcode: Optional[str] = Field(None, description="Unique business code")
    tax: Optional[str] = None
    points: Optional[str] = Field(None, description="Loyalty points percentage")
    use_default_image: bool = False
    default_image_name: Optional[str] = None

# ==================== RESPONSE SCHEMAS ====================

class ProductSaveResponse(MessageResponse):
    productId: Union[int, float]

class BarcodeLookupResponse(BaseModel):
    success: bool = True
    productObj: List[List[Dict[str, Any]]]
    items: List[Dict[str, Any]]
    customer: Dict[str, Any]
