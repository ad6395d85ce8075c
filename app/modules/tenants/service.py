# app/modules/tenants/service.py
import logging
from typing import Any, Dict, Optional

from fastapi import status
from sqlalchemy.orm import Session

from app.core.exceptions import OperationRejected
from app.shared.services.result_normalizer import refusal_message
from app.shared.services.transactional_write import TransactionalWrite, run_query
from app.shared.utils.validation import require_fields
from .repository import TenantRepository
from .schemas import (
    FirmUpdateRequest, PasswordChangeRequest, SignupRequest,
    TenantAccountRequest, TenantDeleteRequest, TenantUpdateRequest
)

logger = logging.getLogger(__name__)

DUPLICATE_PHONE_MESSAGE = "Phone number already exists for another user. Please use a different number."


class TenantService:
    """
    Business accounts (tenants): signup, login, administration and profile.

    Credentials are checked by the `checkLogin` procedure; no token is issued.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = TenantRepository(db)

    # ==================== SIGNUP / LOGIN ====================

    def signup(self, signup: SignupRequest) -> Dict[str, Any]:
        require_fields(
            {"password": signup.password, "phoneNumber": signup.phoneNumber, "businessName": signup.businessName},
            "All fields are required"
        )
        write = TransactionalWrite(
            self.db,
            action="create account",
            duplicate_message="Phone number already exists. Please try logging in.",
            failure_message="Failed to create account"
        )
        normalized = write.run(lambda: self.repository.insert_login(signup))

        logger.info(f"✅ Account created for {signup.businessName}")
        return {"success": True, "message": "Created successfully", "loginId": normalized.identifier}

    def login(self, phone_number: Optional[str], password: Optional[str]) -> Dict[str, Any]:
        require_fields(
            {"phoneNumber": phone_number, "password": password},
            "Phone number and password are required"
        )
        rows = run_query(
            lambda: self.repository.check_login(phone_number, password),
            "Database error. Please try again."
        )
        if not rows:
            logger.info("Login rejected: invalid credentials")
            raise OperationRejected("Invalid login credentials", status_code=status.HTTP_401_UNAUTHORIZED)
        return rows[0]

    # ==================== ADMINISTRATION ====================

    def create_account(self, account: TenantAccountRequest) -> Dict[str, Any]:
        require_fields(
            {
                "password": account.password,
                "phoneNumber": account.phoneNumber,
                "businessName": account.businessName,
                "BillFormat": account.BillFormat,
            },
            "Password, phoneNumber, and businessName are required"
        )
        write = TransactionalWrite(
            self.db,
            action="create account",
            duplicate_message=DUPLICATE_PHONE_MESSAGE,
            failure_message="Failed to create account"
        )
        write.run(lambda: self.repository.create_account(account))
        logger.info(f"✅ Account created by administrator for {account.businessName}")
        return {"success": True, "message": "Created successfully"}

    def update_account(self, account: TenantUpdateRequest) -> Dict[str, Any]:
        require_fields({"LoginID": account.LoginID}, "LoginID is required")
        write = TransactionalWrite(
            self.db,
            action="update user",
            duplicate_message=DUPLICATE_PHONE_MESSAGE,
            failure_message="Failed to update user"
        )
        write.run(lambda: self.repository.update_account(account))
        return {"success": True, "message": "User updated successfully"}

    def delete_account(self, request: TenantDeleteRequest) -> Dict[str, Any]:
        require_fields({"LoginID": request.LoginID}, "Missing required parameter: LoginID")
        write = TransactionalWrite(self.db, action="delete user", failure_message="Internal Server Error")
        write.run(lambda: self.repository.delete_account(request.LoginID))
        logger.info(f"🗑️ Account {request.LoginID} deleted")
        return {"success": True, "message": f"User with LoginID {request.LoginID} deleted successfully"}

    def list_accounts(self) -> Dict[str, Any]:
        data = run_query(self.repository.list_accounts, "Failed to retrieve logins")
        return {"success": True, "data": data}

    # ==================== PROFILE ====================

    def change_password(self, request: PasswordChangeRequest) -> Dict[str, Any]:
        require_fields(
            {"LoginID": request.LoginID, "OldPassword": request.OldPassword, "NewPassword": request.NewPassword},
            "LoginID, OldPassword and NewPassword are required"
        )

        def invoke():
            result = self.repository.update_password(request.LoginID, request.OldPassword, request.NewPassword)
            refusal = refusal_message(result, "Failed to update password.")
            if refusal:
                raise OperationRejected(refusal)
            return result

        write = TransactionalWrite(self.db, action="update password", failure_message="Failed to update password.")
        write.run(invoke)
        return {"success": True, "message": "Password updated successfully."}

    def update_firm(self, firm: FirmUpdateRequest) -> Dict[str, Any]:
        require_fields(
            {"LoginID": firm.LoginID, "BusinessName": firm.BusinessName},
            "LoginID and BusinessName are required"
        )
        write = TransactionalWrite(self.db, action="update profile", failure_message="Failed to update profile")
        write.run(lambda: self.repository.update_firm(firm))
        return {"success": True, "message": "Profile updated successfully"}
