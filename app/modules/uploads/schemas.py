# app/modules/uploads/schemas.py
from pydantic import BaseModel
from typing import Any

# ==================== RESPONSE SCHEMAS ====================

class UploadedImage(BaseModel):
    filename: str
    originalName: str
    size: int
    url: str
    loginID: Any

class ImageUploadResponse(BaseModel):
    success: bool = True
    message: str
    data: UploadedImage
