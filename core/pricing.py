from functools import reduce
from typing import Callable, Dict, Iterable, Tuple

from .domain import Campaign, Category, Coupon, Discount, DiscountType, Product
from .ftypes import Maybe

Item = Tuple[Product, int]


# ============ Замыкания-фильтры (HOF) ============


def by_category(category: Category) -> Callable[[Item], bool]:
    """Фильтр позиций корзины по категории (сравнение по значению)"""
    return lambda item: item[0].category == category


def by_category_title(title: str) -> Callable[[Item], bool]:
    return lambda item: item[0].category.title == title


# ============ Агрегация ============


def line_total(item: Item) -> float:
    product, qty = item
    return product.price * qty


def items_total(items: Iterable[Item]) -> float:
    """Сумма price * quantity через reduce"""
    return reduce(lambda acc, item: acc + line_total(item), items, 0.0)


def items_quantity(items: Iterable[Item]) -> int:
    return reduce(lambda acc, item: acc + item[1], items, 0)


def category_titles(items: Iterable[Item]) -> Tuple[str, ...]:
    """Уникальные названия категорий в порядке первого появления"""

    def collect(acc: Tuple[str, ...], item: Item) -> Tuple[str, ...]:
        title = item[0].category.title
        return acc if title in acc else acc + (title,)

    return reduce(collect, items, ())


# ============ Скидки (чистые функции) ============


def apply_rule(rule: Discount, base: float) -> float:
    """
    Размер скидки для базы:
    RATE -> процент от base, AMOUNT -> фиксированная сумма (без ограничения сверху)
    """
    if rule.discount_type == DiscountType.RATE:
        return base * (rule.discount_amount / 100)
    return rule.discount_amount


def campaign_discount(items: Dict[Product, int], campaign: Campaign) -> float:
    """
    Скидка одной кампании.
    Работает только если количество товаров категории строго больше minimum_amount.
    """
    matched = tuple(filter(by_category(campaign.category), items.items()))
    if items_quantity(matched) <= campaign.minimum_amount:
        return 0.0
    return apply_rule(campaign.rule, items_total(matched))


def best_campaign(
    items: Dict[Product, int], campaigns: Iterable[Campaign]
) -> Tuple[Maybe[Campaign], float]:
    """
    Лучшая кампания и её скидка (максимум, не сумма).
    При равенстве остаётся первая найденная.
    """

    def pick(acc: Tuple[Maybe[Campaign], float], campaign: Campaign):
        value = campaign_discount(items, campaign)
        return (Maybe.some(campaign), value) if value > acc[1] else acc

    return reduce(pick, campaigns, (Maybe.nothing(), 0.0))


def coupon_discount(after_campaign: float, coupon: Maybe[Coupon]) -> float:
    """
    Скидка купона от суммы после кампании.
    Сумма меньше minimum_amount блокирует купон, равная - проходит.
    """

    def evaluate(c: Coupon) -> float:
        if after_campaign < c.minimum_amount:
            return 0.0
        return apply_rule(c.rule, after_campaign)

    return coupon.map(evaluate).get_or_else(0.0)
