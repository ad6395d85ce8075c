# app/shared/services/result_normalizer.py
"""
Reduce a stored procedure outcome to one canonical record.

Procedures report their outcome in different ways: an identifier column on a
SELECTed row, a ``status`` flag (``1`` / ``"1"`` means success, anything else
means failure), an ``affectedRows`` count, or only the OK packet of the call.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from app.core.exceptions import ExtractionFailed
from app.shared.database.procedures import ProcedureResult, RawProcedureResult, Row, classify_result

IDENTIFIER_FIELDS = ("product_id", "insertId", "id")


@dataclass(frozen=True)
class NormalizedResult:
    identifier: Optional[Union[int, float]] = None
    affected_count: Optional[int] = None
    status_flag: Optional[Union[int, str]] = None
    message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        if self.status_flag is not None and as_number(self.status_flag) == 1:
            return True
        return bool(self.affected_count and self.affected_count > 0)


def as_number(value: Any) -> Optional[Union[int, float]]:
    """Numeric coercion used for identifiers and flags; None when not numeric"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = Decimal(str(value))
    elif isinstance(value, (str, bytes)):
        text = value.decode() if isinstance(value, bytes) else value
        text = text.strip()
        if not text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None
    if not number.is_finite():
        return None
    return int(number) if number == number.to_integral_value() else float(number)


def _extract_identifier(row: Optional[Row], header: Optional[Row]) -> Optional[Union[int, float]]:
    if row:
        candidates = [row.get(name) for name in IDENTIFIER_FIELDS]
        candidates.append(next(iter(row.values()), None))
        for candidate in candidates:
            number = as_number(candidate)
            if number is not None:
                return number
    if header:
        insert_id = as_number(header.get("insertId"))
        if insert_id:
            return insert_id
    return None


def _extract_affected(row: Optional[Row], header: Optional[Row]) -> Optional[int]:
    # A returned row decides the outcome; the OK packet only speaks for calls without one
    source = row if row else header
    if source and "affectedRows" in source:
        number = as_number(source.get("affectedRows"))
        if number is not None:
            return int(number)
    return None


def normalize_result(
    result: Union[ProcedureResult, RawProcedureResult, None],
    require_identifier: bool = False
) -> NormalizedResult:
    """
    Build the canonical ``{identifier, affected_count, status_flag, message}``
    record from a procedure result.

    The primary row is the row itself, the first row of a row set, or the
    first row of the first row set. Identifier candidates are checked in
    priority order ``product_id > insertId > id > first value``.

    Raises:
        ExtractionFailed: ``require_identifier`` is set and no identifier was found.
    """
    classified = classify_result(result)
    row = classified.first_row()
    header = classified.header

    message = row.get("message") if row else None
    normalized = NormalizedResult(
        identifier=_extract_identifier(row, header),
        affected_count=_extract_affected(row, header),
        status_flag=row.get("status") if row else None,
        message=str(message) if message is not None else None,
    )

    if require_identifier and normalized.identifier is None:
        raise ExtractionFailed(
            "Could not retrieve valid identifier from database",
            error=f"result keys: {sorted(row.keys()) if row else None}"
        )
    return normalized


def refusal_message(result: Union[ProcedureResult, RawProcedureResult, None], default: str) -> Optional[str]:
    """
    For procedures that only SELECT a status row on some paths: the message of
    a returned status row other than 1, or None when nothing was refused.
    """
    rows = classify_result(result).first_row_set()
    if not rows or "status" not in rows[0]:
        return None
    row = rows[0]
    if as_number(row.get("status")) == 1:
        return None
    return str(row.get("error") or row.get("message") or default)
