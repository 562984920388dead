"""
NumberUtils — Chainable-обёртка над числом (IEEE double)

Арифметика, округление и ограничение диапазона цепочкой вызовов плюс
терминальные проверки классификации и сравнения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нечисловой ввод становится nan, исключений нет
2. Деление на ноль не ошибка: x/0 → ±inf, 0/0 → nan
3. nan и ±inf — валидные состояния, доступные через is_nan()/is_finite()
4. to_fixed/to_precision хранят округлённое число, а не строку:
   хвостовые нули не сохраняются (2.50 → 2.5)
"""

import math
from typing import Any

from src.core.fluent.base import FluentWrapper
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    clamp,
    ieee_divide,
    is_close,
    round_half_up,
    round_to_fixed,
    round_to_significant,
    to_number,
)


class NumberUtils(FluentWrapper[float]):
    """Fluent-обёртка над float"""

    __slots__ = ()

    @classmethod
    def of(cls, initial: Any) -> "NumberUtils":
        """
        Фабрика: коэрция через to_number ("abc" → nan, "" → 0.0).
        """
        return cls._create(to_number(initial))

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, *values: Any) -> "NumberUtils":
        for value in values:
            self._value += to_number(value)
        return self

    def subtract(self, *values: Any) -> "NumberUtils":
        for value in values:
            self._value -= to_number(value)
        return self

    def multiply(self, *values: Any) -> "NumberUtils":
        for value in values:
            self._value *= to_number(value)
        return self

    def divide(self, value: Any) -> "NumberUtils":
        """
        Деление по правилам IEEE: деление на ноль даёт ±inf или nan.
        """
        self._value = ieee_divide(self._value, to_number(value))
        return self

    # =========================================================================
    # ОКРУГЛЕНИЕ
    # =========================================================================

    def round(self) -> "NumberUtils":
        """До ближайшего целого, половина вверх (2.5 → 3, -2.5 → -2)"""
        self._value = round_half_up(self._value)
        return self

    def floor(self) -> "NumberUtils":
        if math.isfinite(self._value):
            self._value = float(math.floor(self._value))
        return self

    def ceil(self) -> "NumberUtils":
        if math.isfinite(self._value):
            self._value = float(math.ceil(self._value))
        return self

    def to_fixed(self, digits: int = 0) -> "NumberUtils":
        """
        Округление до digits знаков после запятой.

        Результат хранится как число: NumberUtils.of(2.5).to_fixed(2).value == 2.5,
        а не "2.50". Дальнейшая арифметика работает с округлённым значением.

        Raises:
            ValueError: Если digits вне 0..100
        """
        self._value = round_to_fixed(self._value, digits)
        return self

    def to_precision(self, precision: int | None = None) -> "NumberUtils":
        """
        Округление до precision значащих цифр (None — без изменений).

        Raises:
            ValueError: Если precision вне 1..100
        """
        self._value = round_to_significant(self._value, precision)
        return self

    def clamp(self, min_value: Any, max_value: Any) -> "NumberUtils":
        self._value = clamp(self._value, to_number(min_value), to_number(max_value))
        return self

    # =========================================================================
    # ТЕРМИНАЛЬНЫЕ ПРОВЕРКИ
    # =========================================================================

    def is_integer(self) -> bool:
        return self._value.is_integer()

    def is_positive(self) -> bool:
        return self._value > 0

    def is_negative(self) -> bool:
        return self._value < 0

    def is_zero(self) -> bool:
        return self._value == 0

    def is_nan(self) -> bool:
        return math.isnan(self._value)

    def is_finite(self) -> bool:
        return math.isfinite(self._value)

    def is_even(self) -> bool:
        return self.is_integer() and math.fmod(self._value, 2) == 0

    def is_odd(self) -> bool:
        # fmod сохраняет знак делимого: fmod(-7, 2) == -1.0
        return self.is_integer() and math.fmod(self._value, 2) != 0

    def is_divisible_by(self, divisor: Any) -> bool:
        """
        Делится ли значение на divisor без остатка.

        Для divisor == 0 и для nan/inf возвращает False, исключений нет.
        """
        divisor = to_number(divisor)
        if divisor == 0 or math.isnan(divisor) or not math.isfinite(self._value):
            return False
        return math.fmod(self._value, divisor) == 0

    def is_less_than(self, other: Any) -> bool:
        return self._value < to_number(other)

    def is_more_than(self, other: Any) -> bool:
        return self._value > to_number(other)

    def is_equal(self, other: Any) -> bool:
        return self._value == to_number(other)

    def is_between(self, min_value: Any, max_value: Any) -> bool:
        """Включительно с обеих сторон"""
        return to_number(min_value) <= self._value <= to_number(max_value)

    def is_close_to(
        self,
        other: Any,
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Сравнение с учётом толерантности (0.1 + 0.2 ≈ 0.3).
        """
        return is_close(self._value, to_number(other), rel_tol=rel_tol, abs_tol=abs_tol)

    def __float__(self) -> float:
        return self._value

    def __int__(self) -> int:
        return int(self._value)

    def __bool__(self) -> bool:
        return self._value != 0 and not math.isnan(self._value)
