# app/modules/staff/repository.py
from typing import Any, Optional

from app.shared.database.procedures import ProcedureRepository, ProcedureResult, RowSet
from .schemas import StaffCreateRequest, StaffUpdateRequest


class StaffRepository(ProcedureRepository):

    def insert_staff(self, staff: StaffCreateRequest) -> ProcedureResult:
        return self.call(
            "insertStaff", staff.StaffUserName, staff.Password, staff.Mobile, staff.Address, staff.fLoginID
        )

    def update_staff(self, staff: StaffUpdateRequest) -> ProcedureResult:
        return self.call(
            "UpdateStaff",
            staff.StaffUserName,
            staff.Password,
            staff.Mobile,
            staff.Address,
            staff.fLoginID,
            staff.SID
        )

    def delete_staff(self, staff_id: Any, login_id: Any) -> ProcedureResult:
        return self.call("DeleteStaff", staff_id, login_id)

    def get_staff(self, login_id: str) -> RowSet:
        return self.rows("getStaff", login_id)

    def get_staff_names(self, login_id: str) -> RowSet:
        return self.rows("StaffNameToBilling", login_id)

    def get_staff_sales(self, login_id: str, from_date: Optional[str], to_date: Optional[str]) -> RowSet:
        return self.rows("getStaffSale", login_id, from_date, to_date)
