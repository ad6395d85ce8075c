# app/modules/ledgers/repository.py
from typing import Any, Optional

from app.shared.database.procedures import ProcedureRepository, ProcedureResult, RowSet
from .schemas import AccountEntryRequest, LedgerCreateRequest, LedgerUpdateRequest


class LedgerRepository(ProcedureRepository):

    # ==================== LEDGER WRITES ====================

    def insert_ledger(self, ledger: LedgerCreateRequest) -> ProcedureResult:
        return self.call(
            "insertLedger",
            ledger.Name,
            ledger.Mobile,
            ledger.Address,
            ledger.GSTIN,
            ledger.fLoginID,
            ledger.CustomerDetails,
            ledger.StateCode
        )

    def update_ledger(self, ledger: LedgerUpdateRequest) -> ProcedureResult:
        return self.call(
            "UpdateLedger",
            ledger.Name,
            ledger.Mobile,
            ledger.Address,
            ledger.GSTIN,
            ledger.LID,
            ledger.fLoginID,
            ledger.CustomerDetails,
            ledger.StateCode
        )

    def delete_ledger(self, ledger_id: Any, login_id: Any) -> ProcedureResult:
        return self.call("DeleteLedger", ledger_id, login_id)

    # ==================== ACCOUNT WRITES ====================

    def insert_account(self, entry: AccountEntryRequest, bill_number: Optional[Any]) -> ProcedureResult:
        return self.call(
            "InsertAccounts",
            entry.fLedgerID,
            entry.Debit,
            entry.Credit,
            entry.Narration,
            bill_number,
            entry.fLoginID,
            entry.DateTime
        )

    def delete_accounts(self, bill_number: Any, login_id: Any) -> ProcedureResult:
        return self.call("DeleteAccounts", bill_number, login_id)

    # ==================== QUERIES ====================

    def get_ledger_items(self, login_id: str) -> RowSet:
        return self.rows("getLedgerItem", login_id)

    def get_name_lid_to_fid(self, login_id: str) -> RowSet:
        return self.rows("getNameLIDtofID", login_id)

    def get_parties(self, login_id: str) -> RowSet:
        return self.rows("getParty", login_id)

    def get_customers(self, login_id: str) -> RowSet:
        return self.rows("getCustomer", login_id)

    def all_customers(self, login_id: Optional[str]) -> RowSet:
        return self.rows("allCustomers", login_id)

    def get_ledger_summary(self, login_id: str, ledger_id: str, from_date: str, to_date: str) -> RowSet:
        return self.rows("getLedgerSummary", login_id, ledger_id, from_date, to_date)

    def get_all_ledger_names(self, login_id: Optional[str]) -> RowSet:
        return self.rows("getAllLedgerName", login_id)

    def get_balance_sheet(self, login_id: Optional[str]) -> RowSet:
        return self.rows("getBalanceSheet", login_id)

    def get_accounts_history(self, login_id: Optional[str], from_date: Optional[str], to_date: Optional[str]) -> RowSet:
        return self.rows("getAccountsHistory", login_id, from_date, to_date)
