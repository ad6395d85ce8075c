# app/modules/ledgers/service.py
import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import OperationRejected
from app.shared.database.procedures import ProcedureResult
from app.shared.services.result_normalizer import refusal_message
from app.shared.services.transactional_write import TransactionalWrite, run_query
from app.shared.utils.validation import blank_to_none, require_fields
from .repository import LedgerRepository
from .schemas import (
    AccountDeleteRequest, AccountEntryRequest, LedgerCreateRequest,
    LedgerDeleteRequest, LedgerUpdateRequest
)

logger = logging.getLogger(__name__)

LEDGER_REFERENCED_MESSAGE = "Cannot delete ledger: it is referenced in a bill"


class LedgerService:
    """
    Customer/supplier ledgers and the account entries posted against them
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = LedgerRepository(db)

    # ==================== LEDGERS ====================

    def create_ledger(self, ledger: LedgerCreateRequest) -> Dict[str, Any]:
        require_fields(
            {
                "Name": ledger.Name,
                "Mobile": ledger.Mobile,
                "fLoginID": ledger.fLoginID,
                "CustomerDetails": ledger.CustomerDetails,
            },
            "All required fields must be filled."
        )
        write = TransactionalWrite(self.db, action="save ledger", failure_message="Failed to save Ledger data")
        normalized = write.run(lambda: self.repository.insert_ledger(ledger))

        logger.info(f"✅ Ledger {ledger.Name} saved for login {ledger.fLoginID}")
        response: Dict[str, Any] = {"success": True, "message": "Ledger data saved successfully"}
        if normalized.identifier:
            response["ledgerId"] = normalized.identifier
        return response

    def update_ledger(self, ledger: LedgerUpdateRequest) -> Dict[str, Any]:
        require_fields(
            {
                "Name": ledger.Name,
                "Mobile": ledger.Mobile,
                "LID": ledger.LID,
                "fLoginID": ledger.fLoginID,
                "CustomerDetails": ledger.CustomerDetails,
            },
            "Missing required fields"
        )
        write = TransactionalWrite(self.db, action="update ledger", failure_message="Failed to update ledger")
        write.run(lambda: self.repository.update_ledger(ledger))
        return {"success": True, "message": "Ledger updated successfully"}

    def delete_ledger(self, request: LedgerDeleteRequest) -> Dict[str, Any]:
        """
        A status row other than 1 is a refusal (400). No status row at all
        means the delete went through.
        """
        require_fields({"fLoginID": request.fLoginID, "LID": request.LID}, "Missing required parameters")

        def invoke() -> ProcedureResult:
            result = self.repository.delete_ledger(request.LID, request.fLoginID)
            refusal = refusal_message(result, "Ledger deletion failed")
            if refusal:
                raise OperationRejected(refusal)
            return result

        write = TransactionalWrite(
            self.db,
            action="delete ledger",
            referenced_message=LEDGER_REFERENCED_MESSAGE,
            failure_message="Database operation failed"
        )
        normalized = write.run(invoke)

        logger.info(f"🗑️ Ledger {request.LID} deleted for login {request.fLoginID}")
        return {"success": True, "message": normalized.message or "Ledger deleted successfully"}

    # ==================== ACCOUNTS ====================

    def create_account_entry(self, entry: AccountEntryRequest) -> Dict[str, Any]:
        bill_number = blank_to_none(entry.fBillNumber)
        write = TransactionalWrite(self.db, action="insert account", failure_message="Failed to insert account.")
        write.run(lambda: self.repository.insert_account(entry, bill_number))
        return {"success": True, "message": "Account inserted successfully."}

    def delete_account_entries(self, request: AccountDeleteRequest) -> Dict[str, Any]:
        write = TransactionalWrite(self.db, action="delete account", failure_message="Failed to delete account.")
        write.run(lambda: self.repository.delete_accounts(request.fBillNumber, request.fLoginID))
        return {"success": True, "message": "Account deleted successfully."}

    # ==================== QUERIES ====================

    def get_ledger_items(self, user_id: Optional[str]):
        require_fields({"userId": user_id}, "Missing userId")
        return run_query(lambda: self.repository.get_ledger_items(user_id), "Failed to fetch ledger data")

    def get_name_lid_to_fid(self, user_id: Optional[str]):
        require_fields({"userId": user_id}, "Missing userId")
        return run_query(lambda: self.repository.get_name_lid_to_fid(user_id), "Failed to fetch NameLIDtofID data")

    def get_parties(self, login_id: Optional[str]):
        require_fields({"fLoginID": login_id}, "Missing fLoginID")
        return run_query(lambda: self.repository.get_parties(login_id), "Server error,Try again, Please refresh")

    def get_customers(self, login_id: Optional[str]):
        require_fields({"fLoginID": login_id}, "Missing fLoginID")
        return run_query(lambda: self.repository.get_customers(login_id), "Server error Try again, Please refresh")

    def all_customers(self, user_id: Optional[str]):
        return run_query(
            lambda: self.repository.all_customers(user_id or None),
            "Server error while fetching customers"
        )

    def get_ledger_summary(self, login_id: Optional[str], ledger_id: Optional[str],
                           from_date: Optional[str], to_date: Optional[str]):
        require_fields(
            {"fLoginID": login_id, "LID": ledger_id, "fromDate": from_date, "toDate": to_date},
            "Missing parameters"
        )
        return run_query(
            lambda: self.repository.get_ledger_summary(login_id, ledger_id, from_date, to_date),
            "Server error,Try again, Please refresh"
        )

    def get_all_ledger_names(self, login_id: Optional[str]) -> Dict[str, Any]:
        data = run_query(lambda: self.repository.get_all_ledger_names(login_id), "Failed to retrieve Ledger Names")
        return {"success": True, "data": data}

    def get_balance_sheet(self, login_id: Optional[str]) -> Dict[str, Any]:
        data = run_query(lambda: self.repository.get_balance_sheet(login_id), "Failed to retrieve BalanceSheet")
        return {"success": True, "data": data}

    def get_accounts_history(self, login_id: Optional[str], from_date: Optional[str], to_date: Optional[str]):
        return run_query(
            lambda: self.repository.get_accounts_history(login_id or None, from_date or None, to_date or None),
            "Server error while fetching Accounts History"
        )
