import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from core.domain import Campaign, Category, Coupon, Discount, DiscountType, Product
from core.ftypes import Maybe
from core.pricing import (
    apply_rule,
    best_campaign,
    by_category,
    campaign_discount,
    category_titles,
    coupon_discount,
    items_quantity,
    items_total,
)

FOOD = Category("food")
TECH = Category("tech")

APPLE = Product("Apple", 10.0, FOOD)
BREAD = Product("Bread", 2.5, FOOD)
PHONE = Product("Phone", 300.0, TECH)

ITEMS = {APPLE: 3, PHONE: 1, BREAD: 4}


def test_category_equality_by_title():
    assert Category("food") == FOOD
    assert hash(Category("food")) == hash(FOOD)


def test_campaign_forwards_rule_fields():
    campaign = Campaign.of(FOOD, DiscountType.RATE, 2, 15.0)
    assert campaign.rule == Discount(DiscountType.RATE, 2, 15.0)
    assert campaign.discount_type == DiscountType.RATE
    assert campaign.minimum_amount == 2
    assert campaign.discount_amount == 15.0


def test_by_category_filter():
    matched = tuple(filter(by_category(FOOD), ITEMS.items()))
    assert {p for p, _ in matched} == {APPLE, BREAD}


def test_totals_and_quantity():
    assert items_total(ITEMS.items()) == pytest.approx(340.0)
    assert items_quantity(ITEMS.items()) == 8
    assert items_total(()) == 0


def test_category_titles_first_seen_order():
    assert category_titles(ITEMS.items()) == ("food", "tech")


def test_apply_rule():
    assert apply_rule(Discount(DiscountType.RATE, 0, 20.0), 50.0) == pytest.approx(10.0)
    assert apply_rule(Discount(DiscountType.AMOUNT, 0, 20.0), 5.0) == 20.0


def test_campaign_discount_only_matching_category():
    """Еда: 3 * 10 + 4 * 2.5 = 40, 10% = 4"""
    campaign = Campaign.of(FOOD, DiscountType.RATE, 6, 10.0)
    assert campaign_discount(ITEMS, campaign) == pytest.approx(4.0)


def test_campaign_discount_requires_strictly_more_than_minimum():
    campaign = Campaign.of(FOOD, DiscountType.AMOUNT, 7, 5.0)
    assert campaign_discount(ITEMS, campaign) == 0


def test_amount_campaign_not_capped():
    campaign = Campaign.of(TECH, DiscountType.AMOUNT, 0, 1000.0)
    assert campaign_discount(ITEMS, campaign) == 1000.0


def test_best_campaign_keeps_first_on_tie():
    first = Campaign.of(FOOD, DiscountType.AMOUNT, 0, 5.0)
    second = Campaign.of(TECH, DiscountType.AMOUNT, 0, 5.0)
    chosen, value = best_campaign(ITEMS, (first, second))
    assert chosen.get_or_else(None) == first
    assert value == 5.0


def test_best_campaign_empty():
    chosen, value = best_campaign(ITEMS, ())
    assert chosen.is_none()
    assert value == 0


def test_coupon_discount():
    coupon = Maybe.some(Coupon.of(DiscountType.RATE, 100, 10.0))
    assert coupon_discount(100.0, coupon) == pytest.approx(10.0)
    assert coupon_discount(99.99, coupon) == 0
    assert coupon_discount(500.0, Maybe.nothing()) == 0
