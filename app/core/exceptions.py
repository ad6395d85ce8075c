# app/core/exceptions.py
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PosApiError(Exception):
    """
    Base error for every failure that should reach the client as the
    `{success: false, message, error?}` envelope.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        *,
        error: Optional[str] = None,
        status_code: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error = error
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra or {}

    def to_content(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"success": False, "message": self.message}
        if self.error:
            content["error"] = self.error
        content.update(self.extra)
        return content


class InvalidRequest(PosApiError):
    """Missing/empty required field or malformed value. Raised before any resource is acquired."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(PosApiError):
    status_code = status.HTTP_404_NOT_FOUND


class OperationRejected(PosApiError):
    """The procedure ran but reported failure (status != 1 and no affected rows)."""
    status_code = status.HTTP_400_BAD_REQUEST


class ConstraintViolation(PosApiError):
    """Duplicate unique key or foreign-key referenced row."""
    status_code = status.HTTP_409_CONFLICT


class ExtractionFailed(PosApiError):
    """A create reported success but no identifier could be extracted from its result."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class RemoteProcedureFailure(PosApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class AssetCleanupFailure(OSError):
    """A compensating filesystem action failed. Only ever logged."""


# ==================== HANDLERS ====================

async def pos_api_error_handler(request: Request, exc: PosApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [".".join(str(part) for part in err.get("loc", ())[1:]) for err in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Invalid request data",
            "error": ", ".join(f for f in fields if f) or None,
        }
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Something went wrong!", "error": str(exc)}
    )


def setup_exception_handlers(app: FastAPI):
    """Register the JSON error envelope for every error class"""
    app.add_exception_handler(PosApiError, pos_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
