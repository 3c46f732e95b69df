from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Category:
    title: str


@dataclass(frozen=True)
class Product:
    title: str
    price: float
    category: Category


class DiscountType(Enum):
    RATE = "rate"  # проценты 0..100
    AMOUNT = "amount"  # фиксированная сумма


@dataclass(frozen=True)
class Discount:
    """Общее правило скидки для кампаний и купонов"""

    discount_type: DiscountType
    minimum_amount: int
    discount_amount: float


@dataclass(frozen=True)
class Campaign:
    """Скидка на товары одной категории"""

    category: Category
    rule: Discount

    @staticmethod
    def of(
        category: Category,
        discount_type: DiscountType,
        minimum_amount: int,
        discount_amount: float,
    ) -> "Campaign":
        return Campaign(category, Discount(discount_type, minimum_amount, discount_amount))

    @property
    def discount_type(self) -> DiscountType:
        return self.rule.discount_type

    @property
    def minimum_amount(self) -> int:
        return self.rule.minimum_amount

    @property
    def discount_amount(self) -> float:
        return self.rule.discount_amount


@dataclass(frozen=True)
class Coupon:
    """Скидка на всю корзину (после кампании)"""

    rule: Discount

    @staticmethod
    def of(
        discount_type: DiscountType, minimum_amount: int, discount_amount: float
    ) -> "Coupon":
        return Coupon(Discount(discount_type, minimum_amount, discount_amount))

    @property
    def discount_type(self) -> DiscountType:
        return self.rule.discount_type

    @property
    def minimum_amount(self) -> int:
        return self.rule.minimum_amount

    @property
    def discount_amount(self) -> float:
        return self.rule.discount_amount
