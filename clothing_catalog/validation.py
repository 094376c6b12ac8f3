# clothing_catalog/validation.py
"""
Rules a draft must pass before it is sent to the collection service.

Rules run in a fixed order and stop at the first failure, so a rejected draft
always carries exactly one reason.
"""
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Union, Dict, Any

from pydantic import BaseModel

from .errors import ValidationError
from .models import DraftFields

MAX_NAME_LENGTH = 100
MAX_QUANTITY = 999_999_999
_QUANTITY_DIGITS = len(str(MAX_QUANTITY))
DATE_FORMAT = "%d/%m/%Y"
_DATE_SHAPE = re.compile(r"^\d{2}/\d{2}/\d{4}$")

NAME_TOO_LONG = "Product name must not exceed 100 characters"
BAD_QUANTITY = "Quantity must be a positive integer"
BAD_DATE = "Invalid date format. Use DD/MM/YYYY"
FUTURE_DATE = "Import date cannot be in the future"
CODE_REQUIRED = "Product code is required"
NAME_REQUIRED = "Product name is required"
CATEGORY_REQUIRED = "Category is required"


class ValidationResult(BaseModel):
    ok: bool
    reason: Optional[str] = None

    @classmethod
    def accepted(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def rejected(cls, reason: str) -> "ValidationResult":
        return cls(ok=False, reason=reason)

    def __bool__(self) -> bool:
        return self.ok


def parse_quantity(value: Union[int, str, float, None]) -> Optional[int]:
    """Return the quantity as a positive int, or None if it isn't one.

    Numeric text is accepted ("5", " 12 ", "3.0"); anything with a fractional
    part, non-numeric text, booleans, values below 1 and values above
    MAX_QUANTITY are not.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = Decimal(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    if not number.is_finite():
        return None
    # checked on the exponent so "1e1000000" never becomes a real int
    if number.adjusted() >= _QUANTITY_DIGITS:
        return None
    if number != number.to_integral_value() or number < 1:
        return None
    return int(number)


def parse_import_date(text: str) -> Optional[date]:
    # strict DD/MM/YYYY: the shape check rejects 1/2/2024 and 01-02-2024,
    # strptime rejects days that don't exist in the month
    if not isinstance(text, str) or not _DATE_SHAPE.match(text):
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return None


def validate(fields: DraftFields, today: Optional[date] = None) -> ValidationResult:
    if len(fields.name) > MAX_NAME_LENGTH:
        return ValidationResult.rejected(NAME_TOO_LONG)

    if parse_quantity(fields.quantity) is None:
        return ValidationResult.rejected(BAD_QUANTITY)

    imported = parse_import_date(fields.import_date)
    if imported is None:
        return ValidationResult.rejected(BAD_DATE)

    if today is None:
        today = date.today()
    if imported > today:
        return ValidationResult.rejected(FUTURE_DATE)

    if not fields.code.strip():
        return ValidationResult.rejected(CODE_REQUIRED)
    if not fields.name.strip():
        return ValidationResult.rejected(NAME_REQUIRED)
    if str(fields.category_id).strip() == "":
        return ValidationResult.rejected(CATEGORY_REQUIRED)

    return ValidationResult.accepted()


def ensure_valid(fields: DraftFields, today: Optional[date] = None) -> None:
    """Raise ValidationError carrying the first failed rule's reason."""
    result = validate(fields, today=today)
    if not result:
        raise ValidationError(result.reason)


def cleaned_payload(fields: DraftFields) -> Dict[str, Any]:
    """Wire body for an accepted draft, with quantity and numeric ids as ints."""
    payload = fields.to_payload()
    payload["quantity"] = parse_quantity(fields.quantity)
    category_id = payload["categoryId"]
    if isinstance(category_id, str) and category_id.strip().isdigit():
        payload["categoryId"] = int(category_id)
    return payload
