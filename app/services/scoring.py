# app/services/scoring.py
from __future__ import annotations

from app.receipts.models import Receipt, ScoreBreakdown
from app.rules.ruleset import item_points, purchase_points, retailer_points, total_points

def score_receipt(receipt: Receipt) -> ScoreBreakdown:
    """
    Returns the per-rule breakdown; `.points` is the receipt's score.
    Every rule reads only the receipt, so evaluation order is irrelevant.
    """
    return ScoreBreakdown(
        retailer=retailer_points(receipt),
        purchase=purchase_points(receipt),
        total=total_points(receipt),
        items=item_points(receipt),
    )
