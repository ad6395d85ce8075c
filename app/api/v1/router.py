# app/api/v1/router.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.config.settings import settings
from app.core.exceptions import PosApiError

# ✅ MODULES
from app.modules.products import products_router
from app.modules.billing import billing_router
from app.modules.points import points_router
from app.modules.purchases import purchases_router
from app.modules.ledgers import ledgers_router
from app.modules.staff import staff_router
from app.modules.tenants import tenants_router
from app.modules.uploads import uploads_router

logger = logging.getLogger(__name__)

# Mounted at the root: the billing frontend calls these paths unprefixed
api_router = APIRouter()

# ==================== MODULE ROUTES ====================

api_router.include_router(products_router)
api_router.include_router(billing_router)
api_router.include_router(points_router)
api_router.include_router(purchases_router)
api_router.include_router(ledgers_router)
api_router.include_router(staff_router)
api_router.include_router(tenants_router)
api_router.include_router(uploads_router)

# ==================== ROOT ENDPOINTS ====================

@api_router.get("/")
async def api_root():
    return {
        "message": settings.app_name,
        "version": settings.version,
        "status": "running",
        "docs": "/docs" if settings.debug else "Disabled in production",
        "modules": ["products", "billing", "points", "purchases", "ledgers", "staff", "tenants", "uploads"],
    }


@api_router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Liveness plus a round trip to MySQL"""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"❌ Health check failed: {e}")
        raise PosApiError("Database unavailable", error=str(e), status_code=503)
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
        "database": "mysql_connected",
    }


@api_router.get("/test")
async def test_endpoint():
    return {"message": "working"}
