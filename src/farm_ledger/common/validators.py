from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.constants import MAX_KEY_LENGTH, MAX_NAME_LENGTH, WAGE_DECIMAL_PLACES
from ..core.exceptions import ValidationError


def _require_fits(value: str, field_name: str, max_length: int) -> None:
    if len(value) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")


def require_non_empty(value: Any, field_name: str, *, max_length: int = MAX_NAME_LENGTH) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    value = value.strip()
    _require_fits(value, field_name, max_length)
    return value


def require_present(value: Any, field_name: str, *, max_length: int = MAX_KEY_LENGTH) -> str:
    """Like require_non_empty, but hands the value back untouched."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    _require_fits(value, field_name, max_length)
    return value


def require_non_negative_amount(value: Any, field_name: str) -> Decimal:
    """Coerce a money amount into a Decimal.

    Accepts int, float, Decimal and numeric strings (form/JSON payloads send
    both). Rejects booleans, NaN/infinity, negatives and anything with more
    than two decimal places. Negative zero comes back as plain zero.
    """

    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise ValidationError(f"{field_name} must be a number")

    try:
        amount = Decimal(repr(value)) if isinstance(value, float) else Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a number") from None

    if not amount.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    if amount < 0:
        raise ValidationError(f"{field_name} must not be negative")
    if amount.as_tuple().exponent < -WAGE_DECIMAL_PLACES:
        raise ValidationError(f"{field_name} allows at most {WAGE_DECIMAL_PLACES} decimal places")
    return amount.copy_abs()


def require_id_list(value: Any, field_name: str) -> list[str]:
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"{field_name} must be a list")

    ids: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ValidationError(f"{field_name} contains an invalid id")
        _require_fits(item, field_name, MAX_KEY_LENGTH)
        ids.append(item)
    return ids
