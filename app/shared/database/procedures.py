# app/shared/database/procedures.py
"""
Stored procedure call boundary.

Every procedure is invoked as ``CALL name(%s, ...)`` with positional
parameters. The driver hands back any number of result sets followed by an
OK packet; this module drains them and classifies the outcome into
``ProcedureResult`` so nothing above this layer has to probe nested lists.

Shapes:
    Row         -> a single field/value mapping (OK packet only)
    RowSet      -> a list of rows
    RowSetList  -> a list of row sets (optionally followed by the OK packet)
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from pymysql.cursors import DictCursor
from sqlalchemy.orm import Session

Row = Dict[str, Any]
RowSet = List[Row]
RowSetList = List[RowSet]
RawProcedureResult = Union[Row, RowSet, RowSetList]

_PROCEDURE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# MySQL server error numbers
ER_DUP_ENTRY = 1062
ER_ROW_IS_REFERENCED = 1217
ER_ROW_IS_REFERENCED_2 = 1451


class ResultKind(str, Enum):
    ROW = "row"
    ROW_SET = "row_set"
    ROW_SET_LIST = "row_set_list"
    EMPTY = "empty"


class ConstraintKind(str, Enum):
    DUPLICATE_ENTRY = "duplicate_entry"
    ROW_REFERENCED = "row_referenced"


@dataclass(frozen=True)
class ProcedureResult:
    """Tagged union over the shapes a procedure call can come back in"""
    kind: ResultKind
    value: Any = None
    header: Optional[Row] = field(default=None)

    @property
    def row_sets(self) -> RowSetList:
        if self.kind == ResultKind.ROW_SET_LIST:
            return self.value
        if self.kind == ResultKind.ROW_SET:
            return [self.value]
        return []

    def first_row_set(self) -> RowSet:
        sets = self.row_sets
        return sets[0] if sets else []

    def first_row(self) -> Optional[Row]:
        if self.kind == ResultKind.ROW:
            return self.value
        rows = self.first_row_set()
        return rows[0] if rows else None


def classify_result(raw: Any) -> ProcedureResult:
    """Classify a raw driver value into a ProcedureResult"""
    if isinstance(raw, ProcedureResult):
        return raw
    if raw is None:
        return ProcedureResult(ResultKind.EMPTY)
    if isinstance(raw, dict):
        return ProcedureResult(ResultKind.ROW, dict(raw))
    if isinstance(raw, (list, tuple)):
        items = list(raw)
        if not items:
            return ProcedureResult(ResultKind.ROW_SET, [])
        if isinstance(items[0], (list, tuple)):
            row_sets = [list(item) for item in items if isinstance(item, (list, tuple))]
            trailing = items[-1] if isinstance(items[-1], dict) else None
            return ProcedureResult(ResultKind.ROW_SET_LIST, row_sets, header=trailing)
        if all(isinstance(item, dict) for item in items):
            return ProcedureResult(ResultKind.ROW_SET, items)
    raise TypeError(f"Unsupported procedure result shape: {type(raw).__name__}")


def constraint_kind(exc: BaseException) -> Optional[ConstraintKind]:
    """Map a driver error (or a SQLAlchemy wrapper around one) to a constraint kind"""
    original = getattr(exc, "orig", None) or exc
    args = getattr(original, "args", ())
    code = args[0] if args and isinstance(args[0], int) else None
    if code == ER_DUP_ENTRY:
        return ConstraintKind.DUPLICATE_ENTRY
    if code in (ER_ROW_IS_REFERENCED, ER_ROW_IS_REFERENCED_2):
        return ConstraintKind.ROW_REFERENCED
    return None


def call_procedure(db: Session, name: str, params: Sequence[Any] = ()) -> ProcedureResult:
    """Execute a stored procedure inside the session's current transaction"""
    if not _PROCEDURE_NAME.match(name):
        raise ValueError(f"Invalid procedure name: {name!r}")

    placeholders = ", ".join(["%s"] * len(params))
    dbapi_connection = db.connection().connection
    cursor = dbapi_connection.cursor(DictCursor)
    try:
        cursor.execute(f"CALL {name}({placeholders})", tuple(params))

        row_sets: RowSetList = []
        header: Row = {"affectedRows": 0, "insertId": 0}
        while True:
            if cursor.description is not None:
                row_sets.append([dict(row) for row in cursor.fetchall()])
            else:
                header = {
                    "affectedRows": max(cursor.rowcount or 0, 0),
                    "insertId": cursor.lastrowid or 0,
                }
            if not cursor.nextset():
                break
    finally:
        cursor.close()

    if row_sets:
        return classify_result([*row_sets, header])
    return classify_result(header)


class ProcedureRepository:
    """Base repository: owns the session, subclasses own procedure names and parameter order"""

    def __init__(self, db: Session):
        self.db = db

    def call(self, name: str, *params: Any) -> ProcedureResult:
        return call_procedure(self.db, name, params)

    def rows(self, name: str, *params: Any) -> RowSet:
        """First result set of a read procedure"""
        return self.call(name, *params).first_row_set()
