"""
Domain models and value objects.

Contains currency unit conversions, currency format options and viewport breakpoints.
"""

from src.core.domain.breakpoints import (
    DEFAULT_BREAKPOINTS,
    FALLBACK_BREAKPOINT,
    Breakpoints,
    BreakpointState,
    resolve_breakpoint,
)
from src.core.domain.format_options import (
    CurrencyDisplay,
    CurrencyFormatOptions,
    CurrencyFormatType,
)
from src.core.domain.units import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
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

__all__ = [
    # Units module
    "DEFAULT_CURRENCY",
    "DEFAULT_LOCALE",
    "DEFAULT_SCALE",
    "PRECISION_MARGIN",
    "divide_subunits",
    "from_subunits",
    "multiply_subunits",
    "normalize_scale",
    "percent_factor",
    "quantize_subunits",
    "rescale_subunits",
    "scale_factor",
    "subunits_to_float",
    "to_subunits",
    "working_precision",
    # Format options
    "CurrencyDisplay",
    "CurrencyFormatOptions",
    "CurrencyFormatType",
    # Breakpoints
    "DEFAULT_BREAKPOINTS",
    "FALLBACK_BREAKPOINT",
    "Breakpoints",
    "BreakpointState",
    "resolve_breakpoint",
]
