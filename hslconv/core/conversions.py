"""
Hex, RGB and HSL conversions.

Formulas follow http://www.niwa.nu/2013/05/math-behind-colorspace-conversions-rgb-hsl/
with the hue helper from EasyRGB (Hue_2_RGB). RGB channels use the 0-255
scale; HSL at this boundary is degrees, percent, percent.
"""

from typing import Optional

from hslconv.core.models import ColorFormatError, ColorResult, Hsl, Rgb
from hslconv.utils.color_utils import hex_to_rgb, rgb_to_hex
from hslconv.utils.hue_utils import ONE_THIRD, hue_to_rgb
from hslconv.utils.scaling import deg_perc_perc_to_hsl, hsl_to_deg_perc_perc


def hex_to_hsl(hex_color: str) -> ColorResult[Hsl]:
    """Convert a hex color string to HSL.

    Args:
        hex_color: 3 or 6 hex digits, case-insensitive, with or without leading '#'

    Returns:
        Hsl in degrees, percent, percent, or a ColorFormatError of kind
        INVALID_FORMAT

    Examples:
        >>> hex_to_hsl('#f00')
        Hsl(h=0.0, s=100.0, l=50.0)
        >>> hex_to_hsl('not-a-color').kind.value
        'INVALID_FORMAT'
    """
    rgb = hex_to_rgb(hex_color)
    if isinstance(rgb, ColorFormatError):
        return rgb
    return rgb_to_hsl(*rgb)


def rgb_to_hsl(r: float, g: float, b: float) -> Hsl:
    """Convert RGB channels (0-255) to HSL.

    When two channels share the maximum, the hue sector is picked in the
    order red, green, blue.

    Args:
        r: Red value (0-255)
        g: Green value (0-255)
        b: Blue value (0-255)

    Returns:
        Hsl with hue in [0, 360) and saturation/lightness in [0, 100]

    Examples:
        >>> rgb_to_hsl(255, 255, 255)
        Hsl(h=0, s=0, l=100.0)
        >>> rgb_to_hsl(0, 0, 255)
        Hsl(h=240.0, s=100.0, l=50.0)
    """
    r /= 255
    g /= 255
    b /= 255

    max_channel = max(r, g, b)
    min_channel = min(r, g, b)

    h = 0
    s = 0
    l = (max_channel + min_channel) / 2

    # Equal channels are a grey, leave hue and saturation at 0
    if max_channel != min_channel:
        delta = max_channel - min_channel

        if l < 0.5:
            s = delta / (max_channel + min_channel)
        else:
            s = delta / (2 - max_channel - min_channel)

        if max_channel == r:
            h = (g - b) / delta
        elif max_channel == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4

    return hsl_to_deg_perc_perc(h, s, l)


def hsl_to_rgb(h: float, s: float, l: float) -> Rgb:
    """Convert HSL (degrees, percent, percent) to RGB.

    Channels are returned unrounded on the 0-255 scale; use ``Rgb.rounded``
    or ``hsl_to_hex`` for integer output.

    Args:
        h: Hue in degrees (0-360)
        s: Saturation percent (0-100)
        l: Lightness percent (0-100)

    Returns:
        Rgb with float channels

    Examples:
        >>> hsl_to_rgb(0, 0, 100)
        Rgb(r=255.0, g=255.0, b=255.0)
        >>> hsl_to_rgb(120, 100, 50).rounded()
        Rgb(r=0, g=255, b=0)
    """
    h, s, l = deg_perc_perc_to_hsl(h, s, l)

    if s == 0:
        grey = l * 255
        return Rgb(grey, grey, grey)

    if l < 0.5:
        temp2 = l * (1 + s)
    else:
        temp2 = l + s - s * l
    temp1 = 2 * l - temp2

    return Rgb(
        255 * hue_to_rgb(temp1, temp2, h + ONE_THIRD),
        255 * hue_to_rgb(temp1, temp2, h),
        255 * hue_to_rgb(temp1, temp2, h - ONE_THIRD),
    )


def hsl_to_hex(h: float, s: float, l: float, prepend_pound: Optional[bool] = None) -> ColorResult[str]:
    """Convert HSL (degrees, percent, percent) to a hex color string.

    Args:
        h: Hue in degrees (0-360)
        s: Saturation percent (0-100)
        l: Lightness percent (0-100)
        prepend_pound: Whether to prefix '#'; None uses the configured default (True)

    Returns:
        Lowercase hex string such as '#00ff88', or a ColorFormatError of kind
        INVALID_CHANNEL_VALUE if a channel falls outside 0-255

    Examples:
        >>> hsl_to_hex(0, 100, 50)
        '#ff0000'
        >>> hsl_to_hex(120, 100, 50, False)
        '00ff00'
    """
    return rgb_to_hex(*hsl_to_rgb(h, s, l), prepend_pound=prepend_pound)
