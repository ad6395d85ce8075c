# app/modules/tenants/repository.py
from typing import Any, Optional

from app.shared.database.procedures import ProcedureRepository, ProcedureResult, RowSet
from .schemas import FirmUpdateRequest, SignupRequest, TenantAccountRequest, TenantUpdateRequest

# Parameter order of Admin / UpdateUsers after LoginID
ACCOUNT_FIELDS = (
    "businessName", "phoneNumber", "password", "IsEnable", "ValidityDate", "Address",
    "BillMobile", "EnableStaff", "BillFormat", "GSTIN", "EnableWhatsApp", "WhatsAppAPI",
    "EnablePoints", "UPI", "Details", "RateTag", "StateCode", "EnableAccounts", "OnlyRateTag",
)


class TenantRepository(ProcedureRepository):

    # ==================== ACCOUNTS ====================

    def insert_login(self, signup: SignupRequest) -> ProcedureResult:
        return self.call(
            "insertLogin",
            signup.businessName,
            signup.phoneNumber,
            signup.password,
            signup.Address,
            signup.GSTIN,
            signup.BillMobile,
            signup.BillFormat
        )

    def check_login(self, phone_number: str, password: str) -> RowSet:
        return self.rows("checkLogin", phone_number, password)

    def create_account(self, account: TenantAccountRequest) -> ProcedureResult:
        return self.call("Admin", *(getattr(account, name) for name in ACCOUNT_FIELDS))

    def update_account(self, account: TenantUpdateRequest) -> ProcedureResult:
        return self.call("UpdateUsers", account.LoginID, *(getattr(account, name) for name in ACCOUNT_FIELDS))

    def delete_account(self, login_id: Any) -> ProcedureResult:
        return self.call("DeleteUser", login_id)

    def list_accounts(self) -> RowSet:
        return self.rows("getUser")

    # ==================== PROFILE ====================

    def update_password(self, login_id: Any, old_password: Any, new_password: Any) -> ProcedureResult:
        return self.call("UpdatePassword", login_id, old_password, new_password)

    def update_firm(self, firm: FirmUpdateRequest) -> ProcedureResult:
        return self.call(
            "UpdateFirm",
            firm.LoginID,
            firm.BusinessName,
            firm.Address,
            firm.GSTIN,
            firm.BillMobile,
            firm.BillFormat,
            firm.UPI,
            firm.StateCode
        )
