# app/modules/uploads/__init__.py
"""
Uploads module - tenant profile images (no database access)
"""

from .router import router as uploads_router
from .service import ProfileImageService

__all__ = [
    "uploads_router",
    "ProfileImageService"
]
