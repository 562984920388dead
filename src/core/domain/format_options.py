"""
CurrencyFormatOptions — Параметры форматирования денежной суммы

Immutable Pydantic модель с переопределениями для MoneyUtils.format().
Незаданные поля (None) берутся из самой обёртки: код валюты и масштаб.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class CurrencyFormatType(str, Enum):
    """Тип CLDR-шаблона валюты"""

    STANDARD = "standard"
    ACCOUNTING = "accounting"


class CurrencyDisplay(str, Enum):
    """Отображение валюты: символ ($), ISO-код (USD) или название (US dollars)"""

    SYMBOL = "symbol"
    CODE = "code"
    NAME = "name"


# =============================================================================
# FORMAT OPTIONS MODEL
# =============================================================================


class CurrencyFormatOptions(BaseModel):
    """
    Переопределения форматирования валюты.

    Immutable модель (frozen=True); неизвестные поля запрещены, чтобы опечатка
    в имени опции не игнорировалась молча.
    """

    currency: Optional[str] = Field(
        None, pattern="^[A-Z]{3}$", description="Код валюты ISO 4217 (переопределение)"
    )
    minimum_fraction_digits: Optional[int] = Field(
        None, ge=0, le=20, description="Минимум знаков после запятой"
    )
    maximum_fraction_digits: Optional[int] = Field(
        None, ge=0, le=20, description="Максимум знаков после запятой"
    )
    format_type: CurrencyFormatType = Field(
        CurrencyFormatType.STANDARD, description="CLDR-шаблон (standard/accounting)"
    )
    currency_display: CurrencyDisplay = Field(
        CurrencyDisplay.SYMBOL, description="Символ, ISO-код или название валюты"
    )
    use_grouping: bool = Field(True, description="Разделитель групп разрядов")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def validate_fraction_range(self) -> "CurrencyFormatOptions":
        """
        Проверка согласованности границ дробной части.
        """
        low = self.minimum_fraction_digits
        high = self.maximum_fraction_digits
        if low is not None and high is not None and low > high:
            raise ValueError(
                f"minimum_fraction_digits {low} exceeds maximum_fraction_digits {high}"
            )
        return self

    def fraction_bounds(self, scale: int) -> tuple[int, int]:
        """
        Итоговые границы дробной части с учётом масштаба обёртки.

        Если задана только одна граница, вторая подтягивается к ней,
        чтобы диапазон оставался корректным.

        Args:
            scale: Масштаб денежной суммы (значение по умолчанию для обеих границ)

        Returns:
            (min_digits, max_digits)
        """
        low = self.minimum_fraction_digits
        high = self.maximum_fraction_digits

        if low is None and high is None:
            return scale, scale
        if low is None:
            return min(scale, high), high
        if high is None:
            return low, max(scale, low)
        return low, high
