"""
Fluent scalar wrappers

Chainable-обёртки над одним скаляром: строка, число, деньги, логическое значение.
Экземпляры создаются только фабрикой of(); chain-методы изменяют экземпляр
на месте и возвращают его, терминальные методы возвращают обычные значения.
"""

from src.core.fluent.base import FluentWrapper
from src.core.fluent.boolean_utils import BooleanUtils
from src.core.fluent.money_utils import MoneyUtils
from src.core.fluent.number_utils import NumberUtils
from src.core.fluent.string_utils import StringUtils

__all__ = [
    "FluentWrapper",
    "StringUtils",
    "NumberUtils",
    "MoneyUtils",
    "BooleanUtils",
]
