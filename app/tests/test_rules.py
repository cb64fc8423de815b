# tests/test_rules.py
from datetime import date, time
from decimal import Decimal

import pytest

from app.receipts.models import LineItem, Receipt
from app.rules.ruleset import item_points, purchase_points, retailer_points, total_points
from app.services.scoring import score_receipt

def make_receipt(retailer="Target", day=date(2022, 1, 2), at=time(13, 1),
                 total="35.35", items=(("Gum", "3.00"),)):
    return Receipt(
        retailer=retailer,
        purchase_date=day,
        purchase_time=at,
        total=Decimal(total),
        items=tuple(LineItem(d, Decimal(p)) for d, p in items),
    )

def test_retailer_counts_only_alphanumerics():
    assert retailer_points(make_receipt(retailer="Target")) == 6
    assert retailer_points(make_receipt(retailer="M&M Corner Market")) == 14
    assert retailer_points(make_receipt(retailer=" - & ")) == 0

@pytest.mark.parametrize("day,expected", [(1, 6), (2, 0), (31, 6), (30, 0)])
def test_purchase_day_parity(day, expected):
    r = make_receipt(day=date(2022, 1, day), at=time(9, 0))
    assert purchase_points(r) == expected

@pytest.mark.parametrize("at,expected", [
    (time(14, 0), 0),
    (time(14, 1), 10),
    (time(14, 33), 10),
    (time(15, 59), 10),
    (time(16, 0), 0),
    (time(13, 59), 0),
])
def test_purchase_afternoon_window_is_exclusive(at, expected):
    assert purchase_points(make_receipt(at=at)) == expected

def test_purchase_odd_day_and_afternoon_add_up():
    assert purchase_points(make_receipt(day=date(2022, 3, 21), at=time(15, 0))) == 16

@pytest.mark.parametrize("total,expected", [
    ("9.00", 75),
    ("0.00", 75),
    ("0.25", 25),
    ("10.50", 25),
    ("1.75", 25),
    ("35.35", 0),
    ("0.10", 0),
])
def test_total_round_dollar_and_quarter(total, expected):
    assert total_points(make_receipt(total=total)) == expected

def test_items_pairs():
    items = [("Gatorade", "2.25")] * 5   # 8 chars, no description bonus
    assert item_points(make_receipt(items=items)) == 10

def test_items_description_bonus_rounds_up():
    # "Emils Cheese Pizza" is 18 chars: 12.25 * 0.2 = 2.45 -> 3
    assert item_points(make_receipt(items=[("Emils Cheese Pizza", "12.25")])) == 3
    # exact products are not bumped
    assert item_points(make_receipt(items=[("Gum", "5.00")])) == 1
    assert item_points(make_receipt(items=[("Gum", "0.00")])) == 0

def test_items_description_is_trimmed():
    items = [("   Klarbrunn 12-PK 12 FL OZ  ", "12.00")]
    assert item_points(make_receipt(items=items)) == 3

def test_items_blank_description_earns_nothing():
    assert item_points(make_receipt(items=[("   ", "100.00")])) == 0

def test_score_is_sum_of_rules():
    r = make_receipt(retailer="Walgreens", day=date(2022, 1, 3), at=time(14, 30),
                     total="2.50", items=[("Pepsi - 12-oz", "1.25"), ("Dasani", "1.40")])
    breakdown = score_receipt(r)
    assert breakdown.points == (retailer_points(r) + purchase_points(r)
                                + total_points(r) + item_points(r))
    assert breakdown.as_dict()["points"] == breakdown.points
    assert score_receipt(r) == breakdown

def test_target_receipt_scores_28():
    r = make_receipt(
        retailer="Target", day=date(2022, 1, 1), at=time(13, 1), total="35.35",
        items=[
            ("Mountain Dew 12PK", "6.49"),
            ("Emils Cheese Pizza", "12.25"),
            ("Knorr Creamy Chicken", "1.26"),
            ("Doritos Nacho Cheese", "3.35"),
            ("   Klarbrunn 12-PK 12 FL OZ  ", "12.00"),
        ],
    )
    b = score_receipt(r)
    assert (b.retailer, b.purchase, b.total, b.items) == (6, 6, 0, 16)
    assert b.points == 28

def test_corner_market_receipt_scores_109():
    r = make_receipt(
        retailer="M&M Corner Market", day=date(2022, 3, 20), at=time(14, 33), total="9.00",
        items=[("Gatorade", "2.25")] * 4,
    )
    b = score_receipt(r)
    assert (b.retailer, b.purchase, b.total, b.items) == (14, 10, 75, 10)
    assert b.points == 109

def test_mouthwash_and_gum_receipt():
    r = make_receipt(
        retailer="Target", day=date(2022, 1, 1), at=time(13, 1), total="35.35",
        items=[("Mouthwash", "9.00"), ("Gum", "3.00")],
    )
    b = score_receipt(r)
    # pair (5) + Mouthwash ceil(1.8)=2 + Gum ceil(0.6)=1
    assert (b.retailer, b.purchase, b.total, b.items) == (6, 6, 0, 8)
    assert b.points == 20

LONG = "1" + "0" * 29   # 30 digits, past the default 28-digit Decimal context

@pytest.mark.parametrize("cents,expected", [(".00", 75), (".75", 25), (".50", 25), (".10", 0), (".01", 0)])
def test_total_with_long_amount_is_exact(cents, expected):
    assert total_points(make_receipt(total=LONG + cents)) == expected

def test_item_bonus_with_long_price_rounds_up_exactly():
    r = make_receipt(items=[("Gum", "10000000000000000000000000000.01")])
    assert item_points(r) == 2000000000000000000000000001
    r = make_receipt(items=[("Gum", "10000000000000000000000000000.00")])
    assert item_points(r) == 2000000000000000000000000000

def test_score_with_very_long_amounts():
    price = "9" * 60 + ".99"
    r = make_receipt(total="9" * 80 + ".00", items=[("Gum", price)])
    b = score_receipt(r)
    assert b.total == 75
    # (10**62 - 1) cents / 500, rounded up
    assert b.items == -(-(10**62 - 1) // 500)
