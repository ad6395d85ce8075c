# app/modules/uploads/service.py
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from app.config.settings import settings
from app.core.exceptions import AssetCleanupFailure, InvalidRequest, NotFound, PosApiError
from app.shared.services.asset_storage import AssetStorage
from app.shared.utils.validation import optional_text

logger = logging.getLogger(__name__)

PROFILE_IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".webp", ".gif")


class ProfileImageService:
    """
    One profile image per tenant, stored as `{LoginID}{ext}` in the shared
    asset directory. A new upload replaces the previous file of the same name.
    """

    def __init__(self, storage: AssetStorage):
        self.storage = storage

    async def upload_image(self, image: Optional[UploadFile], login_id: Optional[str]) -> Dict[str, Any]:
        if image is None or not image.filename:
            raise InvalidRequest("No file uploaded or invalid file type")
        if image.content_type not in settings.profile_image_types:
            raise InvalidRequest("Only PNG files are allowed!")

        original_name = Path(image.filename).name
        temp_name = f"temp_{int(time.time() * 1000)}_{original_name}"
        try:
            size = await self.storage.save_upload(image, temp_name)
        except (OSError, ValueError) as e:
            logger.error(f"❌ Error storing profile image: {e}")
            raise PosApiError("Failed to upload image", error=str(e))

        if size > settings.max_image_size:
            await run_in_threadpool(self.storage.discard, temp_name)
            raise InvalidRequest("File too large. Maximum size is 5MB.")

        login_id = optional_text(login_id)
        if not login_id:
            await run_in_threadpool(self.storage.discard, temp_name)
            raise InvalidRequest("LoginID is required")

        filename = f"{login_id}{Path(original_name).suffix}"
        try:
            await run_in_threadpool(self.storage.rename, temp_name, filename)
        except ValueError:
            await run_in_threadpool(self.storage.discard, temp_name)
            raise InvalidRequest("Invalid LoginID")
        except OSError as e:
            await run_in_threadpool(self.storage.discard, temp_name)
            logger.error(f"❌ Error renaming profile image {temp_name}: {e}")
            raise PosApiError("Failed to upload image", error=str(e))

        logger.info(f"📁 Profile image for login {login_id} stored as {filename}")
        return {
            "success": True,
            "message": "Image uploaded successfully",
            "data": {
                "filename": filename,
                "originalName": original_name,
                "size": size,
                "url": f"/uploads/{filename}",
                "loginID": login_id,
            },
        }

    def find_image(self, login_id: str) -> Path:
        for extension in PROFILE_IMAGE_EXTENSIONS:
            name = f"{login_id}{extension}"
            if self.storage.exists(name):
                return self.storage.path_for(name)
        raise NotFound("Image not found")

    def delete_image(self, login_id: str) -> Dict[str, Any]:
        name = f"{login_id}.png"
        if not self.storage.exists(name):
            raise NotFound("Image not found")
        try:
            self.storage.remove(name)
        except FileNotFoundError:
            raise NotFound("Image not found")
        except AssetCleanupFailure as e:
            logger.error(f"❌ {e}")
            raise PosApiError("Failed to delete image", error=str(e))

        logger.info(f"🗑️ Profile image of login {login_id} deleted")
        return {"success": True, "message": "Image deleted successfully"}
