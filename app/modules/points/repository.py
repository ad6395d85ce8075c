# app/modules/points/repository.py
from typing import Any, Optional

from app.shared.database.procedures import ProcedureRepository, ProcedureResult, RowSet


class PointsRepository(ProcedureRepository):

    # ==================== WRITES ====================

    def insert_points(self, bill_date: str, bill_number: Any, points: Any, login_id: Any, ledger_id: Any) -> ProcedureResult:
        return self.call("InsertPoints", bill_date, bill_number, points, login_id, ledger_id)

    def redeem_points(self, bill_date: str, points: Any, ledger_id: Any, login_id: Any, narration: Any) -> ProcedureResult:
        # Procedure name is historical: it records points leaving the balance
        return self.call("getEarnedPoints", bill_date, points, ledger_id, login_id, narration)

    # ==================== QUERIES ====================

    def get_customer_points(self, login_id: Optional[str]) -> RowSet:
        return self.rows("getCustomerPoints", login_id)

    def get_customer_point_view(self, login_id: Optional[str], ledger_id: Optional[str]) -> RowSet:
        return self.rows("getCustomerPointView", login_id, ledger_id)

    def get_points_earned(self, login_id: Optional[str], ledger_id: Optional[str]) -> RowSet:
        return self.rows("getPointsEarned", login_id, ledger_id)

    def get_single_customer_points(self, login_id: str, ledger_id: str) -> RowSet:
        return self.rows("getSingleCusomterPoints", login_id, ledger_id)
