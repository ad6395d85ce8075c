# app/modules/staff/service.py
import logging
from typing import Any, Dict, Optional

from fastapi import status
from sqlalchemy.orm import Session

from app.shared.services.transactional_write import Expect, TransactionalWrite, run_query
from app.shared.utils.validation import require_fields
from .repository import StaffRepository
from .schemas import StaffCreateRequest, StaffDeleteRequest, StaffUpdateRequest

logger = logging.getLogger(__name__)


class StaffService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = StaffRepository(db)

    def create_staff(self, staff: StaffCreateRequest) -> Dict[str, Any]:
        require_fields(
            {"StaffUserName": staff.StaffUserName, "Password": staff.Password, "fLoginID": staff.fLoginID},
            "All fields are required"
        )
        write = TransactionalWrite(self.db, action="save staff", failure_message="Failed to save Staff data")
        write.run(lambda: self.repository.insert_staff(staff))
        logger.info(f"✅ Staff {staff.StaffUserName} created for login {staff.fLoginID}")
        return {"success": True, "message": "Staff data saved successfully"}

    def update_staff(self, staff: StaffUpdateRequest) -> Dict[str, Any]:
        require_fields(
            {
                "StaffUserName": staff.StaffUserName,
                "Password": staff.Password,
                "SID": staff.SID,
                "fLoginID": staff.fLoginID,
            },
            "Missing required fields"
        )
        write = TransactionalWrite(self.db, action="update staff", failure_message="Failed to update staff")
        write.run(lambda: self.repository.update_staff(staff))
        return {"success": True, "message": "Staff updated successfully"}

    def delete_staff(self, request: StaffDeleteRequest) -> Dict[str, Any]:
        require_fields(
            {"fLoginID": request.fLoginID, "SID": request.SID},
            "Missing required parameters: fLoginID and SID are required."
        )
        write = TransactionalWrite(
            self.db,
            action="delete staff",
            expect=Expect.SUCCESS,
            rejected_message="Staff not found or deletion unauthorized",
            rejected_status=status.HTTP_404_NOT_FOUND,
            failure_message="Server error while deleting staff"
        )
        write.run(lambda: self.repository.delete_staff(request.SID, request.fLoginID))
        logger.info(f"🗑️ Staff {request.SID} deleted for login {request.fLoginID}")
        return {"success": True, "message": "Staff deleted successfully"}

    # ==================== QUERIES ====================

    def get_staff(self, user_id: Optional[str]):
        require_fields({"userId": user_id}, "Missing userId")
        return run_query(lambda: self.repository.get_staff(user_id), "Failed to fetch staff data")

    def get_staff_names(self, user_id: Optional[str]):
        require_fields({"userId": user_id}, "Missing userId")
        return run_query(lambda: self.repository.get_staff_names(user_id), "Failed to fetch StaffNameToBilling data")

    def get_staff_sales(self, user_id: Optional[str], from_date: Optional[str], to_date: Optional[str]):
        require_fields({"userId": user_id}, "Missing userId")
        return run_query(
            lambda: self.repository.get_staff_sales(user_id, from_date or None, to_date or None),
            "Failed to fetch StaffSale data"
        )
