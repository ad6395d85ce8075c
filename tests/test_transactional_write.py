from __future__ import annotations

import unittest
from unittest.mock import Mock, call

import pymysql

from app.core.exceptions import (
    ConstraintViolation,
    ExtractionFailed,
    OperationRejected,
    RemoteProcedureFailure,
)
from app.shared.database.procedures import classify_result
from app.shared.services.transactional_write import Expect, TransactionalWrite, run_query
from app.shared.services.upload_coordinator import AssetPlan


class TransactionalWriteTests(unittest.TestCase):
    def setUp(self) -> None:
        # One parent mock so the relative order of session and coordinator calls is recorded
        self.recorder = Mock()
        self.db = self.recorder.db
        self.coordinator = self.recorder.coordinator
        self.plan = AssetPlan(reference='171.png', uploaded='171.png', previous='old.png', changing=True)

    def write(self, **kwargs) -> TransactionalWrite:
        return TransactionalWrite(
            self.db,
            action='update product',
            plan=self.plan,
            coordinator=self.coordinator,
            **kwargs
        )

    def test_commit_happens_before_the_old_asset_is_deleted(self) -> None:
        normalized = self.write(expect=Expect.SUCCESS).run(lambda: classify_result([{'status': 1}]))

        self.assertTrue(normalized.succeeded)
        self.assertEqual(self.recorder.mock_calls, [call.db.commit(), call.coordinator.after_commit(self.plan)])

    def test_rejected_write_rolls_back_and_discards_the_upload(self) -> None:
        with self.assertRaises(OperationRejected) as ctx:
            self.write(expect=Expect.SUCCESS, rejected_message='Update failed.').run(
                lambda: classify_result([{'status': 0, 'affectedRows': 0}])
            )

        self.assertEqual(ctx.exception.message, 'Update failed.')
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(self.recorder.mock_calls, [call.db.rollback(), call.coordinator.after_rollback(self.plan)])

    def test_procedure_message_wins_over_the_default(self) -> None:
        with self.assertRaises(OperationRejected) as ctx:
            self.write(expect=Expect.SUCCESS).run(lambda: classify_result([{'status': 0, 'message': 'Locked'}]))
        self.assertEqual(ctx.exception.message, 'Locked')

    def test_duplicate_entry_becomes_a_conflict(self) -> None:
        def invoke():
            raise pymysql.err.IntegrityError(1062, "Duplicate entry '890' for key 'Barcode'")

        with self.assertRaises(ConstraintViolation) as ctx:
            self.write(duplicate_message='Barcode must be unique.').run(invoke)

        self.assertEqual(ctx.exception.status_code, 409)
        self.db.commit.assert_not_called()
        self.db.rollback.assert_called_once_with()
        self.coordinator.after_rollback.assert_called_once_with(self.plan)

    def test_duplicate_without_a_message_is_a_server_failure(self) -> None:
        def invoke():
            raise pymysql.err.IntegrityError(1062, 'Duplicate entry')

        with self.assertRaises(RemoteProcedureFailure) as ctx:
            self.write(failure_message='Internal server error').run(invoke)
        self.assertEqual(ctx.exception.message, 'Internal server error')
        self.assertIn('Duplicate entry', ctx.exception.error)

    def test_missing_identifier_rolls_back(self) -> None:
        with self.assertRaises(ExtractionFailed):
            self.write(expect=Expect.IDENTIFIER).run(lambda: classify_result([[{'message': 'saved'}]]))

        self.db.commit.assert_not_called()
        self.db.rollback.assert_called_once_with()
        self.coordinator.after_rollback.assert_called_once_with(self.plan)

    def test_plan_replaced_during_invoke_is_the_one_reconciled(self) -> None:
        write = self.write(expect=Expect.SUCCESS)
        resolved = AssetPlan(reference='171.png', uploaded='171.png', previous='current.png', changing=True)

        def invoke():
            write.plan = resolved
            return classify_result({'affectedRows': 1, 'insertId': 0})

        write.run(invoke)
        self.coordinator.after_commit.assert_called_once_with(resolved)

    def test_failed_rollback_still_reports_the_original_error(self) -> None:
        from sqlalchemy.exc import OperationalError

        self.db.rollback.side_effect = OperationalError('ROLLBACK', {}, Exception('gone'))
        with self.assertRaises(OperationRejected):
            self.write(expect=Expect.SUCCESS).run(lambda: classify_result([{'status': 0}]))
        self.coordinator.after_rollback.assert_called_once_with(self.plan)


class RunQueryTests(unittest.TestCase):
    def test_database_errors_are_translated(self) -> None:
        def query():
            raise pymysql.err.OperationalError(1305, 'PROCEDURE billing.getStocks does not exist')

        with self.assertRaises(RemoteProcedureFailure) as ctx:
            run_query(query, 'Failed to fetch stocks data')
        self.assertEqual(ctx.exception.message, 'Failed to fetch stocks data')
        self.assertEqual(ctx.exception.status_code, 500)

    def test_value_passes_through(self) -> None:
        self.assertEqual(run_query(lambda: [{'a': 1}], 'unused'), [{'a': 1}])


if __name__ == '__main__':
    unittest.main()
