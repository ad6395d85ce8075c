# app/shared/schemas/common.py
from pydantic import BaseModel
from typing import Any, Dict, List, Optional, Union

# JSON bodies arrive with numbers and numeric strings interchangeably
Scalar = Optional[Union[int, float, str]]

Rows = List[Dict[str, Any]]

# ===== RESPONSE SCHEMAS =====

class MessageResponse(BaseModel):
    success: bool = True
    message: str

class DataResponse(BaseModel):
    success: bool
    data: Optional[Rows] = None
    message: Optional[str] = None

# ===== REQUEST SCHEMAS =====

class ProductHistoryRequest(BaseModel):
    """Body of the per-product sale/purchase history lookups"""
    p_fProductID: Scalar = None
    p_fLoginID: Scalar = None
