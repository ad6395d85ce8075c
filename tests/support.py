"""Shared fakes for the HTTP tests: a recording session and a client over a temp asset directory"""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any, List

from fastapi.testclient import TestClient

from app.config.database import get_db
from app.main import app
from app.shared.database.procedures import classify_result
from app.shared.services.asset_storage import AssetStorage, get_asset_storage

CALL_PROCEDURE = 'app.shared.database.procedures.call_procedure'

OK_PACKET = {'affectedRows': 1, 'insertId': 0}


class FakeSession:
    """Stands in for the SQLAlchemy session; records the transaction calls in order"""

    def __init__(self) -> None:
        self.events: List[str] = []

    def commit(self) -> None:
        self.events.append('commit')

    def rollback(self) -> None:
        self.events.append('rollback')

    def close(self) -> None:
        self.events.append('close')


def row_sets(*sets: Any, header: Any = None):
    """Driver-shaped result: result sets followed by the OK packet"""
    return classify_result([*sets, header if header is not None else OK_PACKET])


def ok_packet(affected_rows: int = 1, insert_id: int = 0):
    return classify_result({'affectedRows': affected_rows, 'insertId': insert_id})


def procedure_calls(mock_call) -> List[tuple]:
    """(name, params) of every patched call_procedure invocation"""
    return [(call.args[1], tuple(call.args[2])) for call in mock_call.call_args_list]


class ApiTestCase:
    """Mixin for unittest.TestCase: wires the fake session and a temp upload directory into the app"""

    def setUp(self) -> None:
        self.session = FakeSession()
        self._tmp = tempfile.TemporaryDirectory()
        self.upload_dir = Path(self._tmp.name)
        self.storage = AssetStorage(self._tmp.name)

        def override_db():
            try:
                yield self.session
            finally:
                self.session.close()

        app.dependency_overrides[get_db] = override_db
        app.dependency_overrides[get_asset_storage] = lambda: self.storage
        self.client = TestClient(app, raise_server_exceptions=False)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self._tmp.cleanup()

    def stored_files(self) -> List[str]:
        return sorted(path.name for path in self.upload_dir.iterdir())
