"""Conversions between hex RGB colors and HSL."""

from hslconv.core.conversions import (
    hex_to_hsl,
    rgb_to_hsl,
    hsl_to_rgb,
    hsl_to_hex,
)
from hslconv.core.models import (
    Rgb,
    Hsl,
    NormalizedHsl,
    ColorErrorKind,
    ColorFormatError,
    ColorResult,
    ColorConversionError,
    is_error,
    unwrap,
)
from hslconv.utils.color_utils import hex_to_rgb, rgb_to_hex
from hslconv.utils.hue_utils import hue_to_rgb
from hslconv.utils.scaling import hsl_to_deg_perc_perc, deg_perc_perc_to_hsl

__version__ = "1.0.0"

__all__ = [
    "hex_to_hsl",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hsl_to_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hue_to_rgb",
    "hsl_to_deg_perc_perc",
    "deg_perc_perc_to_hsl",
    "Rgb",
    "Hsl",
    "NormalizedHsl",
    "ColorErrorKind",
    "ColorFormatError",
    "ColorResult",
    "ColorConversionError",
    "is_error",
    "unwrap",
]
