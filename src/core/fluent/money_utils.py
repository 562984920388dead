"""
MoneyUtils — Chainable-обёртка над денежной суммой с фиксированной точкой

Сумма хранится как целое количество минимальных единиц (subunits, например
центы) вместе с кодом валюты и масштабом. Вся арифметика выполняется над
целым числом через Decimal с округлением после каждого шага, поэтому цепочки
операций не накапливают ошибку двоичного float.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. subunits всегда int; value = subunits / 10^scale
2. Невалидный ввод не бросает исключений: сумма → 0, множитель → no-op
3. Деление на ноль обнуляет сумму (бесконечных денег не бывает)
4. Операнд-MoneyUtils приводится к масштабу получателя, а не отвергается
5. format() не бросает исключений: при ошибке — "<CODE> <сумма>"
"""

import copy
import logging
import re
from collections.abc import Mapping
from decimal import Decimal, localcontext
from typing import Any, Optional, Union

from babel import Locale, UnknownLocaleError
from babel.numbers import get_currency_name, get_currency_unit_pattern, parse_pattern
from pydantic import ValidationError

from src.core.domain.format_options import CurrencyDisplay, CurrencyFormatOptions
from src.core.domain.units import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    DEFAULT_SCALE,
    divide_subunits,
    from_subunits,
    multiply_subunits,
    normalize_scale,
    percent_factor,
    rescale_subunits,
    subunits_to_float,
    to_subunits,
    working_precision,
)
from src.core.fluent.base import FluentWrapper
from src.core.math.numerical_safeguards import is_valid_float, parse_leading_float, to_decimal

logger = logging.getLogger(__name__)

_CURRENCY_CODE = re.compile(r"[A-Z]{3}")

# ¤ вплотную к цифре: ISO-код отделяется неразрывным пробелом (CLDR currencySpacing)
_SIGN_BEFORE_DIGIT = re.compile(r"¤(?=[#0])")
_SIGN_AFTER_DIGIT = re.compile(r"(?<=[#0])¤")

MoneyOperand = Union[int, float, str, Decimal, "MoneyUtils"]
FormatOptionsInput = Union[CurrencyFormatOptions, Mapping[str, Any], None]


def _code_pattern(pattern: str) -> str:
    """CLDR-шаблон с символом валюты → шаблон с ISO-кодом (¤ → ¤¤)"""
    spaced = _SIGN_BEFORE_DIGIT.sub("¤\u00a0", pattern)
    spaced = _SIGN_AFTER_DIGIT.sub("\u00a0¤", spaced)
    return spaced.replace("¤", "¤¤")


def _finite_decimal(value: Any) -> Optional[Decimal]:
    """Разбор множителя/процента; None если значение не конечное число"""
    parsed = parse_leading_float(value)
    if not is_valid_float(parsed):
        return None
    return to_decimal(parsed)


class MoneyUtils(FluentWrapper[int]):
    """
    Fluent-обёртка над суммой в subunits.

    _value хранит subunits (int), публичное value — десятичная сумма (float).
    """

    __slots__ = ("_currency", "_scale")

    @classmethod
    def of(
        cls,
        initial: Any,
        currency: str = DEFAULT_CURRENCY,
        scale: int = DEFAULT_SCALE,
    ) -> "MoneyUtils":
        """
        Фабрика: десятичная сумма → subunits = round(initial * 10^scale).

        Args:
            initial: Число, Decimal или строка ("123.45"); мусор → 0
            currency: Код валюты ISO 4217 (default: USD)
            scale: Знаков после запятой (default: 2; JPY — 0)

        Examples:
            >>> MoneyUtils.of("75.89", "EUR").cents
            7589
            >>> MoneyUtils.of("abc").cents
            0
        """
        normalized_scale = normalize_scale(scale)
        instance = cls._create(to_subunits(initial, normalized_scale))
        instance._currency = str(currency)
        instance._scale = normalized_scale
        return instance

    def _to_subunits(self, amount: MoneyOperand) -> int:
        """Операнд в subunits масштаба этого экземпляра"""
        if isinstance(amount, MoneyUtils):
            return rescale_subunits(amount._value, amount._scale, self._scale)
        return to_subunits(amount, self._scale)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, *amounts: MoneyOperand) -> "MoneyUtils":
        for amount in amounts:
            self._value += self._to_subunits(amount)
        return self

    def subtract(self, *amounts: MoneyOperand) -> "MoneyUtils":
        for amount in amounts:
            self._value -= self._to_subunits(amount)
        return self

    def multiply(self, factor: Any) -> "MoneyUtils":
        """
        subunits = round(subunits * factor). Нечисловой factor — no-op.
        """
        multiplier = _finite_decimal(factor)
        if multiplier is not None:
            self._value = multiply_subunits(self._value, multiplier)
        return self

    def divide(self, divisor: Any) -> "MoneyUtils":
        """
        subunits = round(subunits / divisor).

        Нулевой или нечисловой divisor обнуляет сумму.
        """
        denominator = _finite_decimal(divisor)
        if denominator is None or denominator == 0:
            # inf тоже даёт 0: round(x / inf) == 0
            self._value = 0
        else:
            self._value = divide_subunits(self._value, denominator)
        return self

    def to_percentage(self, percentage: Any) -> "MoneyUtils":
        """
        Замена суммы её процентом: 150 → to_percentage(8) → 12.
        """
        pct = _finite_decimal(percentage)
        if pct is not None:
            self._value = multiply_subunits(self._value, percent_factor(pct))
        return self

    def add_percentage(self, percentage: Any) -> "MoneyUtils":
        """subunits * (1 + pct / 100): 150 + 8% → 162"""
        pct = _finite_decimal(percentage)
        if pct is not None:
            self._value = multiply_subunits(self._value, percent_factor(pct, base=1))
        return self

    def subtract_percentage(self, percentage: Any) -> "MoneyUtils":
        """subunits * (1 - pct / 100): 200 - 25% → 150"""
        pct = _finite_decimal(percentage)
        if pct is not None:
            self._value = multiply_subunits(self._value, percent_factor(pct.copy_negate(), base=1))
        return self

    # =========================================================================
    # ФОРМАТИРОВАНИЕ
    # =========================================================================

    def format(
        self, locale: Optional[str] = None, options: FormatOptionsInput = None
    ) -> str:
        """
        Форматирование суммы по правилам локали (Babel/CLDR).

        По умолчанию используются валюта и масштаб экземпляра; любое поле
        options их переопределяет. Локаль принимается в виде "en_US" или "en-US".
        currency_display выбирает символ ($), ISO-код (USD) или название
        валюты (US dollars).

        При любой ошибке (неизвестная локаль, некорректный код валюты,
        невалидные options) пишется WARNING и возвращается "<CODE> <сумма>".

        Examples:
            >>> MoneyUtils.of(12345.67, "USD").format("en-US")
            '$12,345.67'
            >>> MoneyUtils.of(12345.67, "USD").format("en-US", {"currency_display": "name"})
            '12,345.67 US dollars'
        """
        try:
            # Babel округляет в текущем контексте Decimal
            with localcontext() as ctx:
                ctx.prec = working_precision(self.amount)
                return self._format_with_locale(locale, options)
        except (
            UnknownLocaleError,
            ValidationError,
            ValueError,
            TypeError,
            KeyError,
            ArithmeticError,
        ) as exc:
            logger.warning(
                "Currency formatting failed for %s (locale=%r): %s",
                self._currency,
                locale,
                exc,
            )
            return f"{self._currency} {self.amount:.{self._scale}f}"

    def _format_with_locale(self, locale: Optional[str], options: FormatOptionsInput) -> str:
        if options is None:
            opts = CurrencyFormatOptions()
        elif isinstance(options, CurrencyFormatOptions):
            opts = options
        else:
            opts = CurrencyFormatOptions.model_validate(dict(options))

        currency = (opts.currency or self._currency).upper()
        if not _CURRENCY_CODE.fullmatch(currency):
            raise ValueError(f"Invalid currency code: {currency!r}")

        locale_obj = Locale.parse(str(locale or DEFAULT_LOCALE).replace("-", "_"))

        if opts.currency_display is CurrencyDisplay.NAME:
            return self._format_long_name(locale_obj, currency, opts)

        base = locale_obj.currency_formats[opts.format_type.value]
        if opts.currency_display is CurrencyDisplay.CODE:
            pattern = parse_pattern(_code_pattern(base.pattern))
        else:
            pattern = copy.copy(base)
        pattern.frac_prec = opts.fraction_bounds(self._scale)

        return pattern.apply(
            self.amount,
            locale_obj,
            currency=currency,
            currency_digits=False,
            group_separator=opts.use_grouping,
        )

    def _format_long_name(
        self, locale_obj: Locale, currency: str, opts: CurrencyFormatOptions
    ) -> str:
        """
        "12,345.67 US dollars": десятичный шаблон локали + CLDR unit pattern.

        Название валюты и unit pattern выбираются по плюральной форме суммы.
        """
        pattern = copy.copy(locale_obj.decimal_formats[None])
        pattern.frac_prec = opts.fraction_bounds(self._scale)
        number = pattern.apply(self.amount, locale_obj, group_separator=opts.use_grouping)

        unit_pattern = get_currency_unit_pattern(currency, count=self.amount, locale=locale_obj)
        name = get_currency_name(currency, count=self.amount, locale=locale_obj)
        return unit_pattern.format(number, name)

    # =========================================================================
    # ТЕРМИНАЛЬНЫЕ ПРОВЕРКИ
    # =========================================================================

    def is_zero(self) -> bool:
        return self._value == 0

    def is_positive(self) -> bool:
        return self._value > 0

    def is_negative(self) -> bool:
        return self._value < 0

    def is_equal(self, other: MoneyOperand) -> bool:
        return self._value == self._to_subunits(other)

    def is_less_than(self, other: MoneyOperand) -> bool:
        return self._value < self._to_subunits(other)

    def is_more_than(self, other: MoneyOperand) -> bool:
        return self._value > self._to_subunits(other)

    # =========================================================================
    # АКСЕССОРЫ
    # =========================================================================

    @property
    def value(self) -> float:
        """Десятичная сумма: subunits / 10^scale"""
        return subunits_to_float(self._value, self._scale)

    @property
    def cents(self) -> int:
        """Сумма в минимальных единицах"""
        return self._value

    @property
    def amount(self) -> Decimal:
        """Точная десятичная сумма"""
        return from_subunits(self._value, self._scale)

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def scale(self) -> int:
        return self._scale

    def __float__(self) -> float:
        return self.value

    def __bool__(self) -> bool:
        return self._value != 0

    def __str__(self) -> str:
        return f"{self.amount:.{self._scale}f} {self._currency}"

    def __repr__(self) -> str:
        return f"MoneyUtils.of({str(self.amount)!r}, {self._currency!r}, {self._scale})"
