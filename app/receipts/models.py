# app/receipts/models.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import Tuple

# ----------------------------
# Validated receipt (immutable once accepted)
# ----------------------------
@dataclass(frozen=True)
class LineItem:
    short_description: str
    price: Decimal

@dataclass(frozen=True)
class Receipt:
    retailer: str
    purchase_date: date
    purchase_time: time
    total: Decimal
    items: Tuple[LineItem, ...]

# ----------------------------
# Score result
# ----------------------------
@dataclass(frozen=True)
class ScoreBreakdown:
    retailer: int
    purchase: int
    total: int
    items: int

    @property
    def points(self) -> int:
        return self.retailer + self.purchase + self.total + self.items

    def as_dict(self) -> dict:
        return {
            "retailer": self.retailer,
            "purchase": self.purchase,
            "total": self.total,
            "items": self.items,
            "points": self.points,
        }
