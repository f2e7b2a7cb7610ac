"""Hue sector interpolation used by the HSL to RGB conversion."""

ONE_THIRD = 1 / 3
TWO_THIRDS = 2 / 3


def hue_to_rgb(temp1: float, temp2: float, hue: float) -> float:
    """Compute one normalized RGB channel from a shifted hue.

    ``temp1`` and ``temp2`` are the lower and upper bounds derived from the
    lightness and saturation. The caller shifts the hue by +1/3 for red, 0 for
    green and -1/3 for blue.

    Args:
        temp1: Lower interpolation bound
        temp2: Upper interpolation bound
        hue: Hue as a fraction of a circle, within [-1, 2)

    Returns:
        Channel value in [0, 1]

    Examples:
        >>> hue_to_rgb(0.0, 1.0, 0.0)
        0.0
        >>> hue_to_rgb(0.0, 1.0, 0.25)
        1.0
        >>> hue_to_rgb(0.0, 1.0, 0.9)
        0.0
        >>> hue_to_rgb(0.0, 1.0, 1.25)
        1.0
    """
    # Single-step wrap into [0, 1]
    if hue < 0:
        hue += 1
    if hue > 1:
        hue -= 1

    if 6 * hue < 1:
        return temp1 + (temp2 - temp1) * 6 * hue
    elif 2 * hue < 1:
        return temp2
    elif 3 * hue < 2:
        return temp1 + (temp2 - temp1) * (TWO_THIRDS - hue) * 6
    return temp1
