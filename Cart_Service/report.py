from functools import reduce
from typing import Dict, List, Tuple

from core.cart import ShoppingCart
from core.domain import Campaign
from core.ftypes import Maybe
from core.pricing import (
    best_campaign,
    by_category,
    by_category_title,
    category_titles,
    Item,
    line_total,
)


# ============ Распределение скидок по позициям ============


def campaign_shares(
    items: Tuple[Item, ...], campaign: Maybe[Campaign], discount: float
) -> Dict[str, float]:
    """
    Доля скидки лучшей кампании на один товар, по названию категории:
    скидка делится поровну между разными товарами её категории
    """

    def share(c: Campaign) -> Dict[str, float]:
        same_category = tuple(filter(by_category(c.category), items))
        if not same_category:
            return {}
        return {c.category.title: discount / len(same_category)}

    return campaign.map(share).get_or_else({})


def coupon_share(cart: ShoppingCart) -> float:
    """Скидка купона поровну на каждый товар корзины"""
    discount = cart.get_coupon_discount()
    products = cart.get_number_of_products()
    if discount == 0 or products == 0:
        return 0.0
    return discount / products


# ============ Отчёты по корзине ============


def cart_lines(cart: ShoppingCart) -> List[dict]:
    """
    Строки корзины, сгруппированные по категориям (порядок первого появления).
    Только данные, форматирование - забота вызывающего кода.
    """
    items = tuple(cart.items.items())
    if not items:
        return []

    per_product_coupon = coupon_share(cart)
    campaign, discount = best_campaign(cart.items, cart.campaigns)
    per_category_campaign = campaign_shares(items, campaign, discount)

    def group(acc: Tuple[Item, ...], title: str):
        return acc + tuple(filter(by_category_title(title), items))

    grouped = reduce(group, category_titles(items), ())

    return [
        {
            "category": product.category.title,
            "product": product.title,
            "quantity": qty,
            "unit_price": product.price,
            "total_price": line_total((product, qty)),
            "campaign_discount": per_category_campaign.get(product.category.title, 0.0),
            "coupon_discount": per_product_coupon,
        }
        for product, qty in grouped
    ]


def cart_summary(cart: ShoppingCart) -> Dict[str, float]:
    """Итоги корзины"""
    return {
        "total_amount": cart.get_total_amount(),
        "campaign_discount": cart.get_campaign_discount(),
        "coupon_discount": cart.get_coupon_discount(),
        "total_amount_after_discounts": cart.get_total_amount_after_discounts(),
        "delivery_cost": cart.get_delivery_cost(),
        "number_of_products": cart.get_number_of_products(),
        "number_of_deliveries": cart.get_number_of_deliveries(),
    }
