# app/shared/services/transactional_write.py
import logging
from enum import Enum
from typing import Callable, Optional, TypeVar

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from pymysql.err import MySQLError

from app.core.exceptions import (
    ConstraintViolation, OperationRejected, PosApiError, RemoteProcedureFailure
)
from app.shared.database.procedures import ConstraintKind, ProcedureResult, constraint_kind
from .result_normalizer import NormalizedResult, normalize_result
from .upload_coordinator import AssetPlan, UploadCoordinator

logger = logging.getLogger(__name__)


class Expect(str, Enum):
    """What a write must report back for it to be committed"""
    IDENTIFIER = "identifier"
    SUCCESS = "success"
    NOTHING = "nothing"


class TransactionalWrite:
    """
    One insert/update/delete procedure call inside one transaction.

    invoke -> normalize -> commit -> post-commit asset cleanup, or on any
    failure: rollback -> discard this request's upload -> translated error.
    The session itself is released by `get_db`.
    """

    def __init__(
        self,
        db: Session,
        *,
        action: str,
        expect: Expect = Expect.NOTHING,
        rejected_message: str = "Operation failed",
        rejected_status: int = status.HTTP_400_BAD_REQUEST,
        duplicate_message: Optional[str] = None,
        referenced_message: Optional[str] = None,
        failure_message: Optional[str] = None,
        plan: Optional[AssetPlan] = None,
        coordinator: Optional[UploadCoordinator] = None
    ):
        self.db = db
        self.action = action
        self.expect = expect
        self.rejected_message = rejected_message
        self.rejected_status = rejected_status
        self.duplicate_message = duplicate_message
        self.referenced_message = referenced_message
        self.failure_message = failure_message or f"Failed to {action}"
        self.plan = plan
        self.coordinator = coordinator

    def run(self, invoke: Callable[[], ProcedureResult]) -> NormalizedResult:
        try:
            result = invoke()
            normalized = normalize_result(result, require_identifier=self.expect == Expect.IDENTIFIER)
            if self.expect == Expect.SUCCESS and not normalized.succeeded:
                raise OperationRejected(
                    normalized.message or self.rejected_message,
                    status_code=self.rejected_status
                )
            self.db.commit()
        except Exception as e:
            self._rollback()
            if self.plan is not None and self.coordinator is not None:
                self.coordinator.after_rollback(self.plan)
            translated = self._translate(e)
            if translated is e:
                raise
            raise translated from e

        if self.plan is not None and self.coordinator is not None:
            self.coordinator.after_commit(self.plan)
        return normalized

    def _rollback(self) -> None:
        try:
            self.db.rollback()
        except SQLAlchemyError as rollback_error:
            logger.error(f"❌ Rollback error during {self.action}: {rollback_error}")

    def _translate(self, e: Exception) -> PosApiError:
        if isinstance(e, PosApiError):
            if e.status_code >= 500:
                logger.error(f"❌ {self.action} failed: {e.message} ({e.error})")
            return e

        kind = constraint_kind(e)
        if kind == ConstraintKind.DUPLICATE_ENTRY and self.duplicate_message:
            logger.info(f"{self.action}: duplicate entry rejected")
            return ConstraintViolation(self.duplicate_message)
        if kind == ConstraintKind.ROW_REFERENCED and self.referenced_message:
            logger.info(f"{self.action}: referenced row cannot be changed")
            return ConstraintViolation(self.referenced_message)

        if isinstance(e, (MySQLError, SQLAlchemyError)):
            logger.error(f"❌ Database error during {self.action}: {e}")
        else:
            logger.exception(f"❌ Unexpected error during {self.action}")
        return RemoteProcedureFailure(self.failure_message, error=str(e))


T = TypeVar("T")


def run_query(query: Callable[[], T], failure_message: str) -> T:
    """Read-side counterpart: no transaction to close, only DB error translation"""
    try:
        return query()
    except (MySQLError, SQLAlchemyError) as e:
        logger.error(f"❌ {failure_message}: {e}")
        raise RemoteProcedureFailure(failure_message, error=str(e)) from e
