"""Core color types and conversions.

Only the value types are imported here; conversions live in
``hslconv.core.conversions`` and depend on ``hslconv.utils``, which in turn
imports these models.
"""

from .models import (
    Rgb,
    Hsl,
    NormalizedHsl,
    ColorErrorKind,
    ColorFormatError,
    ColorResult,
    ColorConversionError,
    is_error,
    unwrap,
    round_half_up,
)

__all__ = [
    "Rgb",
    "Hsl",
    "NormalizedHsl",
    "ColorErrorKind",
    "ColorFormatError",
    "ColorResult",
    "ColorConversionError",
    "is_error",
    "unwrap",
    "round_half_up",
]
