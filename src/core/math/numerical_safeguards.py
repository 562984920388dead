"""
Numerical Safeguards — Coercion & Rounding Primitives

Модуль обеспечивает единые правила работы со скалярами для fluent-обёрток:
- Мягкая коэрция произвольного ввода в float (без исключений)
- Разбор числового префикса строки ("12.5abc" → 12.5)
- IEEE-деление (x/0 → ±inf, 0/0 → nan) без ZeroDivisionError
- Округление half-up и округление до разрядов / значащих цифр
- Epsilon-сравнения float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Коэрция никогда не бросает исключений (невалидный ввод → nan)
2. NaN/Inf проходят через округление без изменений
3. Округление до разрядов работает по точному двоичному значению float
4. Все операции детерминированы и воспроизводимы
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Final

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Максимальное число знаков после запятой для round_to_fixed
MAX_FRACTION_DIGITS: Final[int] = 100

# Максимальное число значащих цифр для round_to_significant
MAX_PRECISION: Final[int] = 100

# Начиная с этого порядка round_to_fixed не меняет значение
FIXED_NOTATION_LIMIT: Final[float] = 1e21

# Точность Decimal-контекста, достаточная для точного float + 100 разрядов
_DECIMAL_PREC: Final[int] = 400

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY_LITERAL = re.compile(r"[+-]?Infinity")
_RADIX_LITERAL = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


# =============================================================================
# КОЭРЦИЯ
# =============================================================================


def to_number(value: Any) -> float:
    """
    Строгая коэрция значения в float.

    Строка должна целиком быть числовым литералом (пробелы по краям
    допускаются), иначе результат nan. Пустая строка и None дают 0.0.

    Args:
        value: Произвольное значение

    Returns:
        float (возможно nan/inf), никогда не бросает исключений

    Examples:
        >>> to_number("  42 ")
        42.0
        >>> to_number("")
        0.0
        >>> to_number("0x10")
        16.0
        >>> to_number("12px")
        nan
    """
    if value is None:
        return 0.0

    if isinstance(value, bool):
        return 1.0 if value else 0.0

    if isinstance(value, (int, float, Decimal)):
        return _to_float(value)

    if isinstance(value, str):
        return _parse_numeric_literal(value.strip())

    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return math.nan


def _to_float(value: int | float | Decimal) -> float:
    try:
        return float(value)
    except OverflowError:
        # int за пределами диапазона double
        return math.inf if value > 0 else -math.inf


def _parse_numeric_literal(text: str) -> float:
    if text == "":
        return 0.0

    if _DECIMAL_LITERAL.fullmatch(text):
        return float(text)

    if _INFINITY_LITERAL.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf

    radix = _RADIX_LITERAL.fullmatch(text)
    if radix:
        return float(int(text, 0))

    return math.nan


def parse_leading_float(value: Any) -> float | Decimal:
    """
    Разбор числового префикса значения.

    Числа возвращаются как есть (Decimal сохраняется без потерь).
    Для прочих значений берётся str(value) и разбирается самый длинный
    числовой префикс после ведущих пробелов.

    Args:
        value: Произвольное значение

    Returns:
        float или Decimal; nan если префикса нет

    Examples:
        >>> parse_leading_float("12.5abc")
        12.5
        >>> parse_leading_float("abc")
        nan
        >>> parse_leading_float(None)
        nan
    """
    if isinstance(value, bool):
        # str(True) == "True" не является числом
        return math.nan

    if isinstance(value, Decimal):
        return value

    if isinstance(value, (int, float)):
        return _to_float(value)

    match = _LEADING_FLOAT.match(str(value))
    if match is None:
        return math.nan

    literal = match.group(1)
    if literal.lstrip("+-") == "Infinity":
        return -math.inf if literal.startswith("-") else math.inf

    return float(literal)


def is_valid_float(value: float | Decimal) -> bool:
    """
    Проверка, является ли значение конечным числом (не NaN, не Inf).

    Decimal проверяется без конвертации в float (sNaN не бросает ValueError).
    """
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE 754 без ZeroDivisionError.

    Python бросает ZeroDivisionError для x / 0.0; здесь результат
    вычисляется так же, как в аппаратном float:
    - 0/0, nan/0 → nan
    - x/0 → ±inf, знак = sign(x) * sign(denominator) (учитывая -0.0)

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0:
        return numerator / denominator

    if numerator == 0 or math.isnan(numerator) or math.isnan(denominator):
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float) -> float:
    """
    Округление до целого, половина — в сторону +inf.

    Отличается от встроенного round(), который использует
    банковское округление (round half to even).

    Examples:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(-2.5)
        -2.0
        >>> round_half_up(0.49999999999999994)
        0.0
    """
    if not is_valid_float(value):
        return value

    # value - floor(value) вычисляется точно, в отличие от floor(value + 0.5)
    lower = math.floor(value)
    if value - lower >= 0.5:
        return float(lower + 1)
    return float(lower)


def round_to_fixed(value: float, digits: int = 0) -> float:
    """
    Округление до digits знаков после запятой.

    Округляется точное двоичное значение float (half away from zero),
    результат возвращается как float, поэтому хвостовые нули теряются.

    Args:
        value: Исходное значение
        digits: Количество знаков после запятой (0..MAX_FRACTION_DIGITS)

    Returns:
        Округлённое значение; nan/inf и |value| >= 1e21 без изменений

    Raises:
        ValueError: Если digits вне диапазона

    Examples:
        >>> round_to_fixed(99.9987, 2)
        100.0
        >>> round_to_fixed(1.005, 2)
        1.0
        >>> round_to_fixed(2.5)
        3.0
    """
    digits = int(digits)
    if not 0 <= digits <= MAX_FRACTION_DIGITS:
        raise ValueError(
            f"digits must be between 0 and {MAX_FRACTION_DIGITS}, got {digits}"
        )

    if not is_valid_float(value) or abs(value) >= FIXED_NOTATION_LIMIT:
        return value

    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PREC
        quantum = Decimal(1).scaleb(-digits)
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)

    return float(rounded)


def round_to_significant(value: float, precision: int | None = None) -> float:
    """
    Округление до precision значащих цифр.

    Args:
        value: Исходное значение
        precision: Количество значащих цифр (1..MAX_PRECISION) или None

    Returns:
        Округлённое значение; при precision=None, нуле и nan/inf без изменений

    Raises:
        ValueError: Если precision вне диапазона

    Examples:
        >>> round_to_significant(12345.6789, 5)
        12346.0
        >>> round_to_significant(0.000123456, 2)
        0.00012
    """
    if precision is None:
        return value

    precision = int(precision)
    if not 1 <= precision <= MAX_PRECISION:
        raise ValueError(
            f"precision must be between 1 and {MAX_PRECISION}, got {precision}"
        )

    if not is_valid_float(value) or value == 0:
        return value

    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PREC
        exact = Decimal(value)
        quantum = Decimal(1).scaleb(exact.adjusted() - precision + 1)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)

    return float(rounded)


def to_decimal(value: float | int | Decimal) -> Decimal:
    """
    Конверсия числа в Decimal через кратчайшее десятичное представление.

    Decimal(0.1) даёт 0.1000000000000000055..., а Decimal(str(0.1)) — 0.1:
    для денежных сумм нужен именно второй вариант.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(repr(float(value)))


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def clamp(value: float, min_value: float, max_value: float) -> float:
    """
    Ограничение значения: max(min_value, min(max_value, value)).

    При min_value > max_value побеждает min_value.

    Examples:
        >>> clamp(5.0, 18.0, 65.0)
        18.0
        >>> clamp(105.0, 0.0, 100.0)
        100.0
    """
    if math.isnan(value) or math.isnan(min_value) or math.isnan(max_value):
        return math.nan
    return max(min_value, min(max_value, value))
