"""Pure functions for moving HSL values between normalized and display units.

Normalized HSL keeps every component in [0, 1] and is what the conversion
math works with. Display HSL uses degrees for hue and percent for saturation
and lightness.
"""

from hslconv.core.models import Hsl, NormalizedHsl


def hsl_to_deg_perc_perc(h: float, s: float, l: float) -> Hsl:
    """Scale normalized HSL into degrees, percent, percent.

    The hue is expected in sixths of a circle (the sector value produced by
    the RGB to HSL math), so it is multiplied by 60. Negative hues wrap once
    into the [0, 360) range.

    Args:
        h: Hue in sixths of a circle, may be negative
        s: Saturation (0.0-1.0)
        l: Lightness (0.0-1.0)

    Returns:
        Hsl in display form

    Examples:
        >>> hsl_to_deg_perc_perc(0, 1, 0.5)
        Hsl(h=0, s=100, l=50.0)
        >>> hsl_to_deg_perc_perc(-1, 1, 0.5)
        Hsl(h=300, s=100, l=50.0)
    """
    h *= 60

    if h < 0:
        h += 360

    return Hsl(h, s * 100, l * 100)


def deg_perc_perc_to_hsl(h: float, s: float, l: float) -> NormalizedHsl:
    """Scale display HSL (degrees, percent, percent) back into fractions of 1.

    Args:
        h: Hue in degrees (0-360)
        s: Saturation percent (0-100)
        l: Lightness percent (0-100)

    Returns:
        NormalizedHsl with every component divided down to [0, 1]

    Examples:
        >>> deg_perc_perc_to_hsl(180, 50, 25)
        NormalizedHsl(h=0.5, s=0.5, l=0.25)
    """
    return NormalizedHsl(h / 360, s / 100, l / 100)
