# app/modules/uploads/router.py
from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import FileResponse
from typing import Optional

from app.shared.schemas.common import MessageResponse
from app.shared.services.asset_storage import AssetStorage, get_asset_storage
from .service import ProfileImageService
from .schemas import ImageUploadResponse

router = APIRouter(tags=["Profile Images"])

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


@router.post("/upload-image", response_model=ImageUploadResponse)
async def upload_image(
    image: Optional[UploadFile] = File(None, description="PNG image, 5MB max"),
    LoginID: Optional[str] = Form(None),
    storage: AssetStorage = Depends(get_asset_storage)
):
    """Store the tenant's profile image as `{LoginID}.png`"""
    service = ProfileImageService(storage)
    return await service.upload_image(image, LoginID)


@router.get("/get-image/{login_id}")
def get_image(
    login_id: str,
    storage: AssetStorage = Depends(get_asset_storage)
):
    service = ProfileImageService(storage)
    return FileResponse(service.find_image(login_id), headers=NO_CACHE_HEADERS)


@router.delete("/delete-image/{login_id}", response_model=MessageResponse)
def delete_image(
    login_id: str,
    storage: AssetStorage = Depends(get_asset_storage)
):
    service = ProfileImageService(storage)
    return service.delete_image(login_id)
