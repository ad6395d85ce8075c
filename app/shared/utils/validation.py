from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from app.core.exceptions import InvalidRequest


def is_missing(value: Any, allow_empty: bool = False) -> bool:
    """None is always missing; blank strings are missing unless allow_empty"""
    if value is None:
        return True
    if not allow_empty and isinstance(value, str) and value.strip() == "":
        return True
    return False


def require_fields(values: Mapping[str, Any], message: str, allow_empty: bool = False) -> None:
    """Fail fast with a 400 before any session or file is touched"""
    missing = [name for name, value in values.items() if is_missing(value, allow_empty)]
    if missing:
        raise InvalidRequest(message, extra={"missing": missing})


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def parse_amount(value: Any, field_name: str) -> Decimal:
    """Non-negative decimal from a form/JSON value"""
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidRequest(f"{field_name} must be a number")
    if not amount.is_finite() or amount < 0:
        raise InvalidRequest(f"{field_name} must be a non-negative number")
    return amount


def parse_int(value: Any, field_name: str) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidRequest(f"{field_name} must be an integer")


def optional_text(value: Optional[str]) -> Optional[str]:
    """Strip a text value; blank becomes None (e.g. Barcode)"""
    if value is None:
        return None
    value = value.strip()
    return value or None
