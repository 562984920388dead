"""
Breakpoints — Классификация ширины viewport по брейкпоинтам

Чистая функция без привязки к окну браузера: получает ширину в пикселях
и возвращает текущий брейкпоинт с флагами типа устройства.

Правило выбора: берётся брейкпоинт с наибольшей минимальной шириной,
не превышающей width; если ни один не подходит — "xs".
"""

import math
from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Брейкпоинт для ширины меньше любого заданного
FALLBACK_BREAKPOINT: Final[str] = "xs"

# Минимальные ширины (px) по умолчанию
DEFAULT_BREAKPOINTS: Final[dict[str, int]] = {
    "sm": 640,
    "md": 768,
    "lg": 1024,
    "xl": 1280,
}

MOBILE_BREAKPOINTS: Final[frozenset[str]] = frozenset({"xs", "sm"})
TABLET_BREAKPOINTS: Final[frozenset[str]] = frozenset({"md", "lg"})
DESKTOP_BREAKPOINTS: Final[frozenset[str]] = frozenset({"xl"})


# =============================================================================
# MODELS
# =============================================================================


class Breakpoints(BaseModel):
    """
    Набор брейкпоинтов: имя → минимальная ширина в пикселях.
    """

    widths: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_BREAKPOINTS),
        description="Минимальная ширина viewport для каждого брейкпоинта",
    )

    model_config = {"frozen": True}

    @field_validator("widths")
    @classmethod
    def validate_widths(cls, v: dict[str, int]) -> dict[str, int]:
        """
        Имена непустые, ширины неотрицательные.
        """
        for name, width in v.items():
            if not name:
                raise ValueError("breakpoint name must be non-empty")
            if width < 0:
                raise ValueError(f"breakpoint {name!r} width must be >= 0, got {width}")
        return v

    def descending(self) -> list[tuple[str, int]]:
        """Брейкпоинты по убыванию ширины"""
        return sorted(self.widths.items(), key=lambda item: item[1], reverse=True)


class BreakpointState(BaseModel):
    """
    Результат классификации ширины.
    """

    current: str = Field(..., min_length=1, description="Текущий брейкпоинт")
    is_mobile: bool = Field(..., description="xs или sm")
    is_tablet: bool = Field(..., description="md или lg")
    is_desktop: bool = Field(..., description="xl")

    model_config = {"frozen": True}


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def resolve_breakpoint(
    width: float, breakpoints: Optional[Breakpoints] = None
) -> BreakpointState:
    """
    Определение брейкпоинта для ширины viewport.

    Args:
        width: Ширина viewport в пикселях
        breakpoints: Набор брейкпоинтов (default: sm/md/lg/xl)

    Returns:
        BreakpointState с текущим брейкпоинтом и флагами устройства

    Raises:
        ValueError: Если width отрицательная или не является конечным числом

    Examples:
        >>> resolve_breakpoint(800).current
        'md'
        >>> resolve_breakpoint(320).is_mobile
        True
    """
    if isinstance(width, bool) or not isinstance(width, (int, float)):
        raise ValueError(f"width must be a number, got {width!r}")
    if not math.isfinite(width) or width < 0:
        raise ValueError(f"width must be a finite non-negative number, got {width}")

    breakpoints = breakpoints or Breakpoints()

    current = FALLBACK_BREAKPOINT
    for name, min_width in breakpoints.descending():
        if width >= min_width:
            current = name
            break

    return BreakpointState(
        current=current,
        is_mobile=current in MOBILE_BREAKPOINTS,
        is_tablet=current in TABLET_BREAKPOINTS,
        is_desktop=current in DESKTOP_BREAKPOINTS,
    )
