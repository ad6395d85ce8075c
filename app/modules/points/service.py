# app/modules/points/service.py
import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.shared.services.transactional_write import TransactionalWrite, run_query
from app.shared.utils.timezone import business_now
from app.shared.utils.validation import require_fields
from .repository import PointsRepository
from .schemas import PointsAwardRequest, PointsRedeemRequest

logger = logging.getLogger(__name__)


class PointsService:
    """Customer loyalty points: award per bill, redeem, balances and history"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = PointsRepository(db)

    def award_points(self, request: PointsAwardRequest) -> Dict[str, Any]:
        require_fields(
            {"BillNumber": request.BillNumber, "fLoginID": request.fLoginID},
            "All fields are required",
            allow_empty=True
        )
        bill_date = business_now()
        write = TransactionalWrite(self.db, action="save points", failure_message="Failed to save bill data")
        write.run(lambda: self.repository.insert_points(
            bill_date, request.BillNumber, request.Points, request.fLoginID, request.fLedgerID
        ))
        logger.info(f"✅ {request.Points} points recorded for ledger {request.fLedgerID} on bill {request.BillNumber}")
        return {"success": True, "message": "Bill data saved successfully"}

    def redeem_points(self, request: PointsRedeemRequest) -> Dict[str, Any]:
        require_fields({"fLoginID": request.fLoginID}, "All fields are required", allow_empty=True)
        bill_date = business_now()
        write = TransactionalWrite(self.db, action="redeem points", failure_message="Failed to redeem points")
        write.run(lambda: self.repository.redeem_points(
            bill_date, request.Points, request.fLedgerID, request.fLoginID, request.Narration
        ))
        logger.info(f"✅ {request.Points} points redeemed by ledger {request.fLedgerID}")
        return {"success": True, "message": "Points redeemed successfully"}

    # ==================== QUERIES ====================

    def get_customer_points(self, user_id: Optional[str]):
        return run_query(lambda: self.repository.get_customer_points(user_id), "Error fetching points")

    def get_customer_point_view(self, login_id: Optional[str], ledger_id: Optional[str]):
        return run_query(
            lambda: self.repository.get_customer_point_view(login_id, ledger_id),
            "Error fetching point details"
        )

    def get_points_earned(self, login_id: Optional[str], ledger_id: Optional[str]):
        return run_query(
            lambda: self.repository.get_points_earned(login_id, ledger_id),
            "Error fetching point details"
        )

    def get_single_customer_points(self, login_id: Optional[str], ledger_id: Optional[str]):
        require_fields({"fLoginID": login_id, "fLedgerID": ledger_id}, "fLoginID and fLedgerID are required")
        return run_query(
            lambda: self.repository.get_single_customer_points(login_id, ledger_id),
            "Failed to fetch customer points"
        )
