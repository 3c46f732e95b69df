import logging
from typing import Dict, List, Tuple

from .delivery import DeliveryCostStrategy
from .domain import Campaign, Coupon, Product
from .errors import InvalidArgumentError, InvalidStateError
from .ftypes import Maybe
from .pricing import (
    best_campaign,
    category_titles,
    coupon_discount,
    items_total,
)

logger = logging.getLogger(__name__)


class ShoppingCart:
    """
    Корзина на одну сессию расчёта.
    Хранит товары (Product -> quantity), кампании и один купон;
    доставку считает внедрённая стратегия.
    """

    def __init__(self, delivery_cost_calculator: DeliveryCostStrategy):
        self._delivery_cost_calculator = delivery_cost_calculator
        self._items: Dict[Product, int] = {}
        self._campaigns: List[Campaign] = []
        self._coupon: Maybe[Coupon] = Maybe.nothing()

    # ============ Состояние (только чтение) ============

    @property
    def items(self) -> Dict[Product, int]:
        return dict(self._items)

    @property
    def campaigns(self) -> Tuple[Campaign, ...]:
        return tuple(self._campaigns)

    @property
    def coupon(self) -> Maybe[Coupon]:
        return self._coupon

    # ============ Изменение корзины ============

    def add_item(self, product: Product, quantity: int) -> None:
        """Добавляет товар; quantity <= 0 молча игнорируется"""
        if product is None:
            raise InvalidArgumentError("Product is None")

        if quantity <= 0:
            logger.debug("Ignored %s x%d: quantity must be positive", product.title, quantity)
            return

        self._items[product] = self._items.get(product, 0) + quantity
        logger.debug("Added %s x%d (now %d)", product.title, quantity, self._items[product])

    def apply_discounts(self, *campaigns: Campaign) -> None:
        """Кампании накапливаются, без замены и без дедупликации"""
        if any(c is None for c in campaigns):
            raise InvalidArgumentError("Campaign is None")
        self._campaigns.extend(campaigns)
        logger.debug("Applied %d campaign(s), %d total", len(campaigns), len(self._campaigns))

    def apply_coupon(self, coupon: Coupon) -> None:
        """Купон один - последний вызов побеждает"""
        if coupon is None:
            raise InvalidArgumentError("Coupon is None")
        self._coupon = Maybe.some(coupon)
        logger.debug("Applied coupon %s", coupon)

    # ============ Запросы ============

    def get_number_of_products(self) -> int:
        return len(self._items)

    def get_number_of_deliveries(self) -> int:
        """Число различных категорий (по названию)"""
        if self._items is None:
            raise InvalidStateError("ShoppingCart items are None")
        return len(category_titles(self._items.items()))

    def get_total_amount(self) -> float:
        return items_total(self._items.items())

    def get_best_campaign(self) -> Maybe[Campaign]:
        campaign, _ = best_campaign(self._items, self._campaigns)
        return campaign

    def get_campaign_discount(self) -> float:
        """Максимальная (не суммарная) скидка среди кампаний"""
        _, discount = best_campaign(self._items, self._campaigns)
        return discount

    def get_coupon_discount(self) -> float:
        after_campaign = self.get_total_amount() - self.get_campaign_discount()
        return coupon_discount(after_campaign, self._coupon)

    def get_total_amount_after_discounts(self) -> float:
        """Может уйти в минус - скидки AMOUNT не ограничиваются суммой"""
        return (
            self.get_total_amount()
            - self.get_campaign_discount()
            - self.get_coupon_discount()
        )

    def get_delivery_cost(self) -> float:
        return self._delivery_cost_calculator.calculate_for(self)
