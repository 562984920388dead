"""
BooleanUtils — Chainable-обёртка над логическим значением

Логическая композиция цепочкой вызовов плюс строгие и truthy-проверки.

Коэрция — стандартная truthiness Python (bool(x)): "", 0, None, False и
пустые коллекции ложны. Остальное истинно.

is_true()/is_false() сравнивают по идентичности последний «сырой» операнд:
сразу после of(1) value == True, но is_true() == False, потому что 1 is not True.
Любой chain-метод сохраняет настоящий bool, после чего проверки совпадают.
"""

from typing import Any

from src.core.fluent.base import FluentWrapper


class BooleanUtils(FluentWrapper[bool]):
    """Fluent-обёртка над bool"""

    __slots__ = ("_raw",)

    @classmethod
    def of(cls, initial: Any) -> "BooleanUtils":
        instance = cls._create(bool(initial))
        instance._raw = initial
        return instance

    def _set(self, result: bool) -> "BooleanUtils":
        self._value = result
        self._raw = result
        return self

    # =========================================================================
    # CHAIN-МЕТОДЫ
    # =========================================================================

    def and_(self, *values: Any) -> "BooleanUtils":
        """
        Последовательное AND со всеми операндами.

        Все операнды приводятся к bool, короткого замыкания нет.
        """
        result = self._value
        for value in values:
            result = bool(value) and result
        return self._set(result)

    def or_(self, *values: Any) -> "BooleanUtils":
        """Последовательное OR со всеми операндами (без короткого замыкания)"""
        result = self._value
        for value in values:
            result = bool(value) or result
        return self._set(result)

    def not_(self) -> "BooleanUtils":
        return self._set(not self._value)

    def xor(self, value: Any) -> "BooleanUtils":
        """Истина, если ровно одно из (текущее, bool(value)) истинно"""
        return self._set(self._value != bool(value))

    # =========================================================================
    # ТЕРМИНАЛЬНЫЕ ПРОВЕРКИ
    # =========================================================================

    def is_true(self) -> bool:
        """Строгая проверка: последний операнд есть True"""
        return self._raw is True

    def is_false(self) -> bool:
        """Строгая проверка: последний операнд есть False"""
        return self._raw is False

    def is_truthy(self) -> bool:
        return bool(self._value)

    def is_falsy(self) -> bool:
        return not self._value

    def __bool__(self) -> bool:
        return self._value
