"""
Sanity-тест для модуля CurrencyUnits

Проверяет:
1. Корректность конверсий сумма ↔ subunits
2. Инварианты преобразований (обратимость, отсутствие float-дрейфа)
3. Пересчёт между масштабами
4. Мягкую обработку невалидного ввода
"""

from decimal import Decimal

import pytest

from src.core.domain.units import (
    DEFAULT_SCALE,
    PRECISION_MARGIN,
    divide_subunits,
    from_subunits,
    multiply_subunits,
    normalize_scale,
    percent_factor,
    quantize_subunits,
    rescale_subunits,
    scale_factor,
    subunits_to_float,
    to_subunits,
    working_precision,
)


class TestNormalizeScale:
    """Тесты для normalize_scale"""

    def test_integer_scale_unchanged(self) -> None:
        assert normalize_scale(2) == 2
        assert normalize_scale(0) == 0

    def test_fractional_scale_floored(self) -> None:
        """Дробный масштаб округляется вниз"""
        assert normalize_scale(2.7) == 2

    def test_negative_scale_clamped(self) -> None:
        """Отрицательный масштаб → 0"""
        assert normalize_scale(-1) == 0

    def test_string_scale(self) -> None:
        assert normalize_scale("3") == 3

    def test_invalid_scale_defaults(self) -> None:
        """Нечисловой масштаб → DEFAULT_SCALE"""
        assert normalize_scale("abc") == DEFAULT_SCALE
        assert normalize_scale(None) == DEFAULT_SCALE


class TestScaleFactor:
    """Тесты для scale_factor"""

    def test_powers_of_ten(self) -> None:
        assert scale_factor(0) == 1
        assert scale_factor(2) == 100
        assert scale_factor(3) == 1000


class TestToSubunits:
    """Тесты конверсии сумма → subunits"""

    def test_float_amount(self) -> None:
        assert to_subunits(123.45, 2) == 12345

    def test_string_amount(self) -> None:
        assert to_subunits("75.89", 2) == 7589
        assert to_subunits("12.5abc", 2) == 1250

    def test_zero_scale(self) -> None:
        assert to_subunits(500, 0) == 500

    def test_shortest_repr_used(self) -> None:
        """1.005 трактуется как 1.005 (100.5 цента), а не 1.00499999..."""
        assert to_subunits(1.005, 2) == 101

    def test_half_rounds_away_from_zero(self) -> None:
        assert to_subunits(Decimal("1.235"), 2) == 124
        assert to_subunits(Decimal("1.234"), 2) == 123
        assert to_subunits(-1.005, 2) == -101

    def test_invalid_amount_is_zero(self) -> None:
        """Мусор, bool, None и бесконечность → 0"""
        assert to_subunits("abc", 2) == 0
        assert to_subunits(None, 2) == 0
        assert to_subunits(True, 2) == 0
        assert to_subunits(float("inf"), 2) == 0
        assert to_subunits(Decimal("NaN"), 2) == 0


class TestFromSubunits:
    """Тесты конверсии subunits → сумма"""

    def test_exact_decimal(self) -> None:
        assert from_subunits(12345, 2) == Decimal("123.45")
        assert from_subunits(500, 0) == Decimal("500")

    def test_float_view(self) -> None:
        """int / int корректно округляется до ближайшего double"""
        assert subunits_to_float(1234, 2) == 12.34
        assert subunits_to_float(-5, 2) == -0.05

    def test_roundtrip_subunits(self) -> None:
        """Инвариант: subunits → сумма → subunits без потерь"""
        for subunits in (0, 1, 99, 12345, -7589, 10**12 + 7):
            assert to_subunits(from_subunits(subunits, 2), 2) == subunits


class TestRescaleSubunits:
    """Тесты пересчёта между масштабами"""

    def test_same_scale_identity(self) -> None:
        assert rescale_subunits(1234, 2, 2) == 1234

    def test_upscale_exact(self) -> None:
        assert rescale_subunits(1234, 2, 3) == 12340
        assert rescale_subunits(5, 0, 2) == 500

    def test_downscale_rounds(self) -> None:
        """12.345 (scale 3) → 1234.5 цента → 1235"""
        assert rescale_subunits(12345, 3, 2) == 1235
        assert rescale_subunits(-12345, 3, 2) == -1235
        assert rescale_subunits(12344, 3, 2) == 1234


class TestQuantizeSubunits:
    """Тесты для quantize_subunits"""

    def test_returns_int(self) -> None:
        result = quantize_subunits(Decimal("1501.5"))
        assert result == 1502
        assert isinstance(result, int)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("0.5"), 1),
            (Decimal("-0.5"), -1),
            (Decimal("0.49"), 0),
            (Decimal("2.5"), 3),
        ],
    )
    def test_half_up(self, value: Decimal, expected: int) -> None:
        assert quantize_subunits(value) == expected


class TestLargeSubunits:
    """Тесты subunits длиннее 28 значащих цифр"""

    def test_high_scale_to_subunits(self) -> None:
        """scale=26 не обнуляет сумму"""
        assert to_subunits(1000, 26) == 10**29
        assert to_subunits("0.5", 30) == 5 * 10**29

    def test_large_amount_to_subunits(self) -> None:
        assert to_subunits(1e25, 2) == 10**27
        assert to_subunits(Decimal("12345678901234567890123456789.015"), 2) == (
            1234567890123456789012345678902
        )

    def test_signaling_nan_is_zero(self) -> None:
        assert to_subunits(Decimal("sNaN"), 2) == 0

    def test_from_subunits_exact(self) -> None:
        assert from_subunits(10**40 + 1, 2) == Decimal("100000000000000000000000000000000000000.01")

    def test_rescale_large(self) -> None:
        assert rescale_subunits(10**29, 26, 2) == 10**5
        assert rescale_subunits(10**29 + 5 * 10**23, 26, 2) == 10**5 + 1
        assert rescale_subunits(10**30, 2, 30) == 10**58

    def test_quantize_large(self) -> None:
        assert quantize_subunits(Decimal("1E+30")) == 10**30

    def test_subunits_to_float_overflow(self) -> None:
        """Сумма вне диапазона double → ±inf, без OverflowError"""
        assert subunits_to_float(10**400, 2) == float("inf")
        assert subunits_to_float(-(10**400), 2) == float("-inf")


class TestSubunitArithmetic:
    """Тесты multiply_subunits / divide_subunits / percent_factor"""

    def test_multiply_rounds_half_up(self) -> None:
        assert multiply_subunits(1001, Decimal("1.5")) == 1502
        assert multiply_subunits(-1001, Decimal("1.5")) == -1502

    def test_multiply_several_factors_without_intermediate_rounding(self) -> None:
        """333 * 1.5 * 2 = 999 (а не round(499.5) * 2 = 1000)"""
        assert multiply_subunits(333, Decimal("1.5"), Decimal(2)) == 999

    def test_multiply_large(self) -> None:
        assert multiply_subunits(10**27, Decimal("1000.0")) == 10**30

    def test_divide(self) -> None:
        assert divide_subunits(1000, Decimal(3)) == 333
        assert divide_subunits(1000, Decimal("0.5")) == 2000
        assert divide_subunits(10**27, Decimal(3)) == 10**27 // 3

    def test_percent_factor(self) -> None:
        assert percent_factor(Decimal(8)) == Decimal("0.08")
        assert percent_factor(Decimal(25), base=1) == Decimal("1.25")
        assert percent_factor(Decimal(-25), base=1) == Decimal("0.75")

    def test_percent_factor_tiny_percentage_exact(self) -> None:
        """1 + 1e-40 / 100 не схлопывается в 1"""
        assert percent_factor(Decimal("1E-40"), base=1) != 1

    def test_working_precision_covers_operands(self) -> None:
        assert working_precision(Decimal(10**50)) >= 51 + PRECISION_MARGIN
