class CartError(Exception):
    """Базовая ошибка корзины"""


class InvalidArgumentError(CartError, ValueError):
    """Обязательный аргумент отсутствует (None)"""


class InvalidStateError(CartError, RuntimeError):
    """Внутреннее состояние корзины нарушено"""
