from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .cart import ShoppingCart


class DeliveryCostStrategy(Protocol):
    """Стратегия расчёта доставки, передаётся в корзину при создании"""

    def calculate_for(self, cart: "ShoppingCart") -> float: ...


@dataclass(frozen=True)
class DeliveryCostCalculator:
    """
    Линейная формула доставки:
    cost_per_delivery * deliveries + cost_per_product * products + fixed_cost
    """

    cost_per_delivery: float
    cost_per_product: float
    fixed_cost: float

    def calculate_for(self, cart: "ShoppingCart") -> float:
        if cart is None:
            raise InvalidArgumentError("ShoppingCart is None")
        return (
            self.cost_per_delivery * cart.get_number_of_deliveries()
            + self.cost_per_product * cart.get_number_of_products()
            + self.fixed_cost
        )


def delivery_calculator_from_config(config: dict) -> DeliveryCostCalculator:
    """Собирает калькулятор из секции "delivery" конфигурации"""
    section = config.get("delivery", {})
    return DeliveryCostCalculator(
        cost_per_delivery=float(section.get("cost_per_delivery", 0.0)),
        cost_per_product=float(section.get("cost_per_product", 0.0)),
        fixed_cost=float(section.get("fixed_cost", 0.0)),
    )
