# app/receipts/validator.py
import re
from typing import Sequence

from app.errors import ReceiptValidationError
from app.receipts.models import LineItem, Receipt
from app.receipts.parsing import parse_amount, parse_purchase_date, parse_purchase_time
from app.schemas import ItemIn, ReceiptIn

RETAILER_RE = re.compile(r"^[A-Za-z0-9\s\-&]+$", re.ASCII)
DESCRIPTION_RE = re.compile(r"^[A-Za-z0-9\s\-]+$", re.ASCII)

def _validate_items(items: Sequence[ItemIn]) -> tuple[LineItem, ...]:
    if not items:
        raise ReceiptValidationError("items", "at least one item is required")
    out = []
    for i, item in enumerate(items):
        field = f"items[{i}]"
        desc = item.short_description
        if not DESCRIPTION_RE.fullmatch(desc) or not desc.strip():
            raise ReceiptValidationError(
                f"{field}.shortDescription",
                f"{desc!r} may only contain letters, digits, spaces and hyphens",
            )
        price = parse_amount(item.price, f"{field}.price")
        out.append(LineItem(short_description=desc, price=price))
    return tuple(out)

def validate_receipt(receipt: ReceiptIn) -> Receipt:
    """
    Check a decoded receipt and return its validated, immutable form.
    The first failing rule rejects the whole receipt with a
    ReceiptValidationError naming the field.
    """
    if not RETAILER_RE.fullmatch(receipt.retailer):
        raise ReceiptValidationError(
            "retailer",
            f"{receipt.retailer!r} may only contain letters, digits, spaces, '-' and '&'",
        )
    purchase_date = parse_purchase_date(receipt.purchase_date)
    purchase_time = parse_purchase_time(receipt.purchase_time)
    total = parse_amount(receipt.total, "total")
    items = _validate_items(receipt.items)

    return Receipt(
        retailer=receipt.retailer,
        purchase_date=purchase_date,
        purchase_time=purchase_time,
        total=total,
        items=items,
    )
