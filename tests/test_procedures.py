from __future__ import annotations

import unittest
from types import SimpleNamespace

import pymysql
from sqlalchemy.exc import IntegrityError as SAIntegrityError

from app.shared.database.procedures import (
    ConstraintKind,
    ResultKind,
    call_procedure,
    constraint_kind,
)


class FakeCursor:
    """DictCursor stand-in: each entry is either a result set or the final OK packet"""

    def __init__(self, results):
        self._results = results
        self._index = 0
        self.executed = None
        self.closed = False

    def execute(self, sql, params):
        self.executed = (sql, params)

    @property
    def _current(self):
        return self._results[self._index]

    @property
    def description(self):
        return (('col',),) if 'rows' in self._current else None

    @property
    def rowcount(self):
        return self._current.get('rowcount', -1)

    @property
    def lastrowid(self):
        return self._current.get('lastrowid')

    def fetchall(self):
        return self._current['rows']

    def nextset(self):
        if self._index + 1 < len(self._results):
            self._index += 1
            return True
        return None

    def close(self):
        self.closed = True


def session_with(cursor: FakeCursor):
    dbapi_connection = SimpleNamespace(cursor=lambda cursor_class: cursor)
    return SimpleNamespace(connection=lambda: SimpleNamespace(connection=dbapi_connection))


class CallProcedureTests(unittest.TestCase):
    def test_result_sets_are_drained_and_ok_packet_kept_as_header(self) -> None:
        cursor = FakeCursor([
            {'rows': [{'product_id': 4}]},
            {'rows': [{'line': 1}, {'line': 2}]},
            {'rowcount': 1, 'lastrowid': 0},
        ])
        result = call_procedure(session_with(cursor), 'insertProduct', ('Tea', 10))

        self.assertEqual(cursor.executed, ('CALL insertProduct(%s, %s)', ('Tea', 10)))
        self.assertTrue(cursor.closed)
        self.assertEqual(result.kind, ResultKind.ROW_SET_LIST)
        self.assertEqual(result.row_sets, [[{'product_id': 4}], [{'line': 1}, {'line': 2}]])
        self.assertEqual(result.header, {'affectedRows': 1, 'insertId': 0})

    def test_ok_packet_only(self) -> None:
        cursor = FakeCursor([{'rowcount': 1, 'lastrowid': 7}])
        result = call_procedure(session_with(cursor), 'getUser')

        self.assertEqual(cursor.executed, ('CALL getUser()', ()))
        self.assertEqual(result.kind, ResultKind.ROW)
        self.assertEqual(result.first_row(), {'affectedRows': 1, 'insertId': 7})

    def test_negative_rowcount_is_reported_as_zero(self) -> None:
        cursor = FakeCursor([{'rowcount': -1, 'lastrowid': None}])
        result = call_procedure(session_with(cursor), 'DeleteUser', (3,))
        self.assertEqual(result.first_row(), {'affectedRows': 0, 'insertId': 0})

    def test_procedure_name_must_be_an_identifier(self) -> None:
        cursor = FakeCursor([{'rowcount': 0}])
        with self.assertRaises(ValueError):
            call_procedure(session_with(cursor), 'getUser(); DROP TABLE products', ())
        self.assertIsNone(cursor.executed)


class ConstraintKindTests(unittest.TestCase):
    def test_driver_errors(self) -> None:
        duplicate = pymysql.err.IntegrityError(1062, "Duplicate entry '123' for key 'Barcode'")
        referenced = pymysql.err.IntegrityError(1451, 'Cannot delete or update a parent row')
        self.assertEqual(constraint_kind(duplicate), ConstraintKind.DUPLICATE_ENTRY)
        self.assertEqual(constraint_kind(referenced), ConstraintKind.ROW_REFERENCED)
        self.assertEqual(constraint_kind(pymysql.err.IntegrityError(1217, 'x')), ConstraintKind.ROW_REFERENCED)

    def test_sqlalchemy_wrapped_error(self) -> None:
        wrapped = SAIntegrityError('CALL deleteProduct(%s)', (1,), pymysql.err.IntegrityError(1451, 'x'))
        self.assertEqual(constraint_kind(wrapped), ConstraintKind.ROW_REFERENCED)

    def test_other_errors(self) -> None:
        self.assertIsNone(constraint_kind(pymysql.err.OperationalError(2013, 'Lost connection')))
        self.assertIsNone(constraint_kind(RuntimeError('boom')))


if __name__ == '__main__':
    unittest.main()
