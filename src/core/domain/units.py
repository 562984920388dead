"""
CurrencyUnits — Централизованный модуль конверсии денежных единиц

Единственный допустимый способ преобразований между:
- десятичной суммой (например, 123.45 USD)
- целым количеством минимальных единиц (subunits, например 12345 центов)
- subunits разных масштабов (scale=2 ↔ scale=3)

ЗАПРЕЩЕНО хранить денежные суммы во float или смешивать масштабы
без явного конвертера из этого модуля.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Final

from src.core.math.numerical_safeguards import is_valid_float, parse_leading_float, to_decimal


# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Валюта по умолчанию (ISO 4217)
DEFAULT_CURRENCY: Final[str] = "USD"

# Количество знаков после запятой по умолчанию (центы)
DEFAULT_SCALE: Final[int] = 2

# Локаль форматирования по умолчанию (Babel/CLDR идентификатор)
DEFAULT_LOCALE: Final[str] = "en_US"


# =============================================================================
# МАСШТАБ
# =============================================================================


def normalize_scale(scale: Any) -> int:
    """
    Нормализация масштаба: неотрицательное целое.

    Args:
        scale: Запрошенный масштаб (может быть float, строкой и т.п.)

    Returns:
        max(0, floor(scale)); DEFAULT_SCALE если scale не число

    Examples:
        >>> normalize_scale(2.7)
        2
        >>> normalize_scale(-1)
        0
    """
    parsed = parse_leading_float(scale)
    if not is_valid_float(parsed):
        return DEFAULT_SCALE
    return max(0, math.floor(parsed))


def scale_factor(scale: int) -> int:
    """
    Множитель для перевода суммы в subunits: 10 ** scale.
    """
    return 10**scale


# =============================================================================
# ТОЧНОСТЬ
# =============================================================================

# Запас значащих цифр сверх длины операндов (дробная часть частного)
PRECISION_MARGIN: Final[int] = 40


def working_precision(*operands: Decimal) -> int:
    """
    Точность Decimal, при которой произведение операндов вычисляется точно,
    а частное сохраняет целую часть и PRECISION_MARGIN дробных цифр.

    Контекст по умолчанию (28 цифр) для subunits не подходит: целое
    количество subunits неограниченно, а quantize() в узком контексте
    бросает InvalidOperation.
    """
    return PRECISION_MARGIN + sum(
        len(operand.as_tuple().digits) + abs(operand.adjusted()) for operand in operands
    )


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def quantize_subunits(value: Decimal) -> int:
    """
    Округление Decimal до целого числа subunits (half-up, от нуля).
    """
    with localcontext() as ctx:
        ctx.prec = working_precision(value)
        return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def to_subunits(amount: Any, scale: int) -> int:
    """
    Конверсия: десятичная сумма → subunits.

    subunits = round_half_up(amount * 10^scale)

    Числа переводятся в Decimal через кратчайшее представление,
    поэтому 1.005 даёт ровно 100.5 цента → 101.

    Args:
        amount: Сумма (число, Decimal или строка с числовым префиксом)
        scale: Масштаб (неотрицательное целое)

    Returns:
        Целое количество subunits; 0 только для нечислового или бесконечного ввода

    Examples:
        >>> to_subunits(123.45, 2)
        12345
        >>> to_subunits("75.89", 2)
        7589
        >>> to_subunits(1000, 26)
        100000000000000000000000000000
        >>> to_subunits("abc", 2)
        0
    """
    parsed = parse_leading_float(amount)
    if not is_valid_float(parsed):
        return 0

    exact = to_decimal(parsed)
    with localcontext() as ctx:
        ctx.prec = working_precision(exact) + scale
        return quantize_subunits(exact.scaleb(scale))


def from_subunits(subunits: int, scale: int) -> Decimal:
    """
    Конверсия: subunits → точная десятичная сумма.

    Examples:
        >>> from_subunits(12345, 2)
        Decimal('123.45')
    """
    exact = Decimal(subunits)
    with localcontext() as ctx:
        ctx.prec = working_precision(exact)
        return exact.scaleb(-scale)


def rescale_subunits(subunits: int, from_scale: int, to_scale: int) -> int:
    """
    Конверсия subunits между масштабами.

    Увеличение масштаба точное, уменьшение округляется half-up.

    Examples:
        >>> rescale_subunits(1234, 2, 3)
        12340
        >>> rescale_subunits(12345, 3, 2)
        1235
    """
    if from_scale == to_scale:
        return subunits
    if to_scale > from_scale:
        return subunits * scale_factor(to_scale - from_scale)
    return quantize_subunits(from_subunits(subunits, from_scale - to_scale))


def multiply_subunits(subunits: int, *factors: Decimal) -> int:
    """
    round_half_up(subunits * f1 * f2 ...) без промежуточного округления.

    Examples:
        >>> multiply_subunits(1001, Decimal("1.5"))
        1502
    """
    product = Decimal(subunits)
    with localcontext() as ctx:
        ctx.prec = working_precision(product, *factors)
        for factor in factors:
            product *= factor
    return quantize_subunits(product)


def divide_subunits(subunits: int, divisor: Decimal) -> int:
    """
    round_half_up(subunits / divisor). Нулевой divisor — ошибка вызывающего кода.

    Examples:
        >>> divide_subunits(1000, Decimal(3))
        333
    """
    numerator = Decimal(subunits)
    with localcontext() as ctx:
        ctx.prec = working_precision(numerator, divisor)
        quotient = numerator / divisor
    return quantize_subunits(quotient)


def percent_factor(percentage: Decimal, base: int = 0) -> Decimal:
    """
    Множитель base + percentage / 100 без потери точности.

    Examples:
        >>> percent_factor(Decimal(8))
        Decimal('0.08')
        >>> percent_factor(Decimal(25), base=1)
        Decimal('1.25')
    """
    with localcontext() as ctx:
        ctx.prec = working_precision(percentage) + 2
        return base + percentage.scaleb(-2)


def subunits_to_float(subunits: int, scale: int) -> float:
    """
    Конверсия: subunits → float для внешнего API.

    Деление int / int корректно округляется, поэтому 1234 / 100 == 12.34.
    Сумма вне диапазона double → ±inf.
    """
    try:
        return subunits / scale_factor(scale)
    except OverflowError:
        return math.inf if subunits > 0 else -math.inf
