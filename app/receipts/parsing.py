# app/receipts/parsing.py
import re
from datetime import date, time
from decimal import Decimal

from app.errors import ReceiptValidationError

# ASCII only: str patterns would otherwise accept any unicode digit
AMOUNT_RE = re.compile(r"^[0-9]+\.[0-9]{2}$", re.ASCII)
DATE_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$", re.ASCII)
TIME_RE = re.compile(r"^([0-9]{2}):([0-9]{2})$", re.ASCII)

def parse_amount(value: str, field: str) -> Decimal:
    """Two-decimal monetary string -> exact Decimal."""
    if not isinstance(value, str) or not AMOUNT_RE.fullmatch(value):
        raise ReceiptValidationError(field, f"{value!r} is not an amount like 12.34")
    return Decimal(value)

def to_cents(amount: Decimal) -> int:
    """
    Exact integer cents of a parsed amount. Built from the digit tuple, so
    arbitrarily long amounts never go through context rounding.
    """
    sign, digits, exponent = amount.as_tuple()
    if not isinstance(exponent, int) or exponent < -2:
        raise ValueError(f"{amount!r} has sub-cent precision")
    cents = 0
    for d in digits:
        cents = cents * 10 + d
    cents *= 10 ** (exponent + 2)
    return -cents if sign else cents

def parse_purchase_date(value: str, field: str = "purchaseDate") -> date:
    m = DATE_RE.fullmatch(value) if isinstance(value, str) else None
    if not m:
        raise ReceiptValidationError(field, f"{value!r} is not a YYYY-MM-DD date")
    year, month, day = (int(g) for g in m.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ReceiptValidationError(field, f"{value!r} is not a calendar date ({e})") from e

def parse_purchase_time(value: str, field: str = "purchaseTime") -> time:
    m = TIME_RE.fullmatch(value) if isinstance(value, str) else None
    if not m:
        raise ReceiptValidationError(field, f"{value!r} is not a 24-hour HH:MM time")
    hour, minute = (int(g) for g in m.groups())
    try:
        return time(hour, minute)
    except ValueError as e:
        raise ReceiptValidationError(field, f"{value!r} is not a valid time of day ({e})") from e
