import copy
import json
import logging
from functools import reduce
from typing import Optional

DEFAULT_CONFIG = {
    "delivery": {
        "cost_per_delivery": 5.0,
        "cost_per_product": 4.0,
        "fixed_cost": 2.99,
    },
    "logging": {
        "level": "INFO",
    },
}


def merge_config(base: dict, override: dict) -> dict:
    """
    Рекурсивное слияние без мутаций.
    Значение None в override удаляет ключ из результата.
    """

    def merge_key(acc: dict, key: str) -> dict:
        value = override[key]
        if value is None:
            return {k: v for k, v in acc.items() if k != key}
        if isinstance(value, dict) and isinstance(acc.get(key), dict):
            return {**acc, key: merge_config(acc[key], value)}
        return {**acc, key: value}

    return reduce(merge_key, override, dict(base))


def load_config(path: Optional[str] = None) -> dict:
    """Загружает JSON-конфиг поверх DEFAULT_CONFIG"""
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return merge_config(copy.deepcopy(DEFAULT_CONFIG), data)


def configure_logging(config: dict) -> None:
    level = config.get("logging", {}).get("level", "INFO")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
