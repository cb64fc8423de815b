# app/rules/ruleset.py
import re
from datetime import time

from app.receipts.models import Receipt
from app.receipts.parsing import to_cents

# -----------------------------
# Tunables
# -----------------------------
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START = time(14, 0)   # exclusive
AFTERNOON_END = time(16, 0)     # exclusive

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
CENTS_PER_DOLLAR = 100
QUARTER_CENTS = 25

POINTS_PER_ITEM_PAIR = 5
DESCRIPTION_MULTIPLE = 3
DESCRIPTION_PRICE_DIVISOR = 500   # price * 0.2, in cents

ALNUM_RE = re.compile(r"[A-Za-z0-9]")

# -----------------------------
# Rules
# -----------------------------
def retailer_points(receipt: Receipt) -> int:
    """One point per alphanumeric character in the retailer name."""
    return len(ALNUM_RE.findall(receipt.retailer))

def purchase_points(receipt: Receipt) -> int:
    """6 for an odd day of month, 10 for a purchase strictly between 14:00 and 16:00."""
    points = 0
    if receipt.purchase_date.day % 2 == 1:
        points += ODD_DAY_POINTS
    if AFTERNOON_START < receipt.purchase_time < AFTERNOON_END:
        points += AFTERNOON_POINTS
    return points

def total_points(receipt: Receipt) -> int:
    """50 for a round dollar total, 25 for a multiple of 0.25 (both can apply)."""
    cents = to_cents(receipt.total)
    points = 0
    if cents % CENTS_PER_DOLLAR == 0:
        points += ROUND_DOLLAR_POINTS
    if cents % QUARTER_CENTS == 0:
        points += QUARTER_MULTIPLE_POINTS
    return points

def item_points(receipt: Receipt) -> int:
    """
    5 per pair of items, plus ceil(price * 0.2) for every item whose
    trimmed description length is a non-zero multiple of 3.
    """
    points = (len(receipt.items) // 2) * POINTS_PER_ITEM_PAIR
    for item in receipt.items:
        length = len(item.short_description.strip())
        if length and length % DESCRIPTION_MULTIPLE == 0:
            # ceil(cents / 100 * 1/5) in integers
            points += -(-to_cents(item.price) // DESCRIPTION_PRICE_DIVISOR)
    return points
