"""Pure functions for parsing and rendering hexadecimal colors.

Malformed input does not raise: the functions return a ``ColorFormatError``
value instead, which callers must check before use.
"""

import string
from typing import Optional

from hslconv.config.settings import get_settings
from hslconv.core.models import (
    ColorErrorKind,
    ColorFormatError,
    ColorResult,
    Rgb,
    round_half_up,
)
from hslconv.utils.logging import log

HEX_DIGITS = frozenset(string.hexdigits)


def _invalid_format(hex_color: str, reason: str) -> ColorFormatError:
    log.debug(f"Rejected hex color '{hex_color}': {reason}")
    return ColorFormatError(ColorErrorKind.INVALID_FORMAT, reason, hex_color)


def strip_pound(hex_color: str) -> str:
    """Remove a single leading '#' if present.

    Examples:
        >>> strip_pound('#ff0000')
        'ff0000'
        >>> strip_pound('f00')
        'f00'
    """
    return hex_color[1:] if hex_color.startswith('#') else hex_color


def hex_to_rgb(hex_color: str) -> ColorResult[Rgb]:
    """Parse a 3- or 6-digit hex color string into integer RGB channels.

    In the 3-digit form every digit is doubled, so 'f80' reads as 'ff8800'.

    Args:
        hex_color: Hex color string, case-insensitive, with or without leading '#'

    Returns:
        Rgb with integer channels (0-255), or a ColorFormatError of kind
        INVALID_FORMAT when the string is not 3 or 6 hex digits

    Examples:
        >>> hex_to_rgb('#f00')
        Rgb(r=255, g=0, b=0)
        >>> hex_to_rgb('FE797B')
        Rgb(r=254, g=121, b=123)
        >>> bool(hex_to_rgb('#ff00'))
        False
    """
    digits = strip_pound(hex_color)

    if len(digits) == 3:
        pairs = [digit * 2 for digit in digits]
    elif len(digits) == 6:
        pairs = [digits[0:2], digits[2:4], digits[4:6]]
    else:
        return _invalid_format(
            hex_color, f"Hex color must be 3 or 6 characters (got {len(digits)})"
        )

    if not all(digit in HEX_DIGITS for digit in digits):
        return _invalid_format(hex_color, "Hex color contains non-hexadecimal characters")

    r, g, b = (int(pair, 16) for pair in pairs)
    return Rgb(r, g, b)


def channel_to_hex(value: int) -> ColorResult[str]:
    """Render one channel as a lowercase two-digit hex string.

    Args:
        value: Channel value, expected in 0-255

    Returns:
        Two hex digits, left-padded with '0', or a ColorFormatError of kind
        INVALID_CHANNEL_VALUE when the value does not fit in one or two digits

    Examples:
        >>> channel_to_hex(15)
        '0f'
        >>> channel_to_hex(171)
        'ab'
        >>> bool(channel_to_hex(256))
        False
    """
    digits = format(value, 'x')

    if value < 0 or len(digits) not in (1, 2):
        reason = f"Channel value {value} does not render as one or two hex digits"
        log.debug(reason)
        return ColorFormatError(ColorErrorKind.INVALID_CHANNEL_VALUE, reason, value)

    return digits.rjust(2, '0')


def rgb_to_hex(r: float, g: float, b: float, prepend_pound: Optional[bool] = None) -> ColorResult[str]:
    """Render RGB channels as a hex color string.

    Channels are rounded to the nearest integer first, so the unrounded
    output of hsl_to_rgb can be passed straight in.

    Args:
        r: Red value (0-255)
        g: Green value (0-255)
        b: Blue value (0-255)
        prepend_pound: Whether to prefix '#'; None uses the configured default

    Returns:
        Hex color string, or a ColorFormatError of kind INVALID_CHANNEL_VALUE

    Examples:
        >>> rgb_to_hex(255, 0, 0)
        '#ff0000'
        >>> rgb_to_hex(0, 127.5, 0, prepend_pound=False)
        '008000'
    """
    if prepend_pound is None:
        prepend_pound = get_settings().prepend_pound

    hex_parts = []
    for channel in (r, g, b):
        rendered = channel_to_hex(round_half_up(channel))
        if isinstance(rendered, ColorFormatError):
            return rendered
        hex_parts.append(rendered)

    prefix = "#" if prepend_pound else ""
    return prefix + "".join(hex_parts)
