"""
FluentWrapper — Базовый класс chainable-обёрток над скаляром

Общий контракт всех обёрток:
- Прямой вызов конструктора запрещён (TypeError), экземпляр создаётся
  только фабрикой of() с коэрцией входного значения
- Chain-методы изменяют экземпляр на месте и возвращают его же
- Терминальные методы (value, is_*) возвращают обычные значения и
  не изменяют состояние

Экземпляр не потокобезопасен: методы меняют состояние без блокировок.
"""

from typing import Generic, TypeVar

T = TypeVar("T")
W = TypeVar("W", bound="FluentWrapper")


class FluentWrapper(Generic[T]):
    """
    Изменяемая ячейка с одним скаляром.

    Подклассы реализуют classmethod of() и вызывают _create() внутри него.
    """

    __slots__ = ("_value",)

    _value: T

    def __init__(self, *args: object, **kwargs: object) -> None:
        name = type(self).__name__
        raise TypeError(f"{name} cannot be instantiated directly; use {name}.of()")

    @classmethod
    def _create(cls: type[W], value: T) -> W:
        """Создание экземпляра в обход запрещённого __init__"""
        instance = cls.__new__(cls)
        instance._value = value
        return instance

    @property
    def value(self) -> T:
        """Текущее значение (терминальный метод)"""
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}.of({self._value!r})"
