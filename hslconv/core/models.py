"""
Value types for color conversion results.

Colors travel as small immutable triples. Display-form HSL (degrees, percent,
percent) and normalized HSL (fractions of 1) are separate types so the two
scales are never mixed without going through the scaling helpers.

Conversions that can fail return either their value or a ``ColorFormatError``.
The error is falsy, so callers check the result before using it.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, TypeVar, Union

T = TypeVar('T')


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Rgb(NamedTuple):
    """Red, green and blue intensities on the 0-255 scale."""
    r: float
    g: float
    b: float

    def rounded(self) -> "Rgb":
        """Return a copy with each channel rounded to the nearest integer."""
        return Rgb(round_half_up(self.r), round_half_up(self.g), round_half_up(self.b))


class Hsl(NamedTuple):
    """HSL in display form: hue in degrees [0, 360), saturation and lightness in percent."""
    h: float
    s: float
    l: float


class NormalizedHsl(NamedTuple):
    """HSL with every component as a fraction in [0, 1]."""
    h: float
    s: float
    l: float


class ColorErrorKind(str, Enum):
    """Reason a conversion could not produce a value."""
    INVALID_FORMAT = "INVALID_FORMAT"                  # Hex string is not 3 or 6 hex digits
    INVALID_CHANNEL_VALUE = "INVALID_CHANNEL_VALUE"    # Channel does not fit in two hex digits


@dataclass(frozen=True)
class ColorFormatError:
    """Failed conversion result. Always falsy."""
    kind: ColorErrorKind
    message: str
    value: Any = None

    def __bool__(self) -> bool:
        return False


ColorResult = Union[T, ColorFormatError]


class ColorConversionError(ValueError):
    """Raised by ``unwrap`` when a conversion result is an error value."""

    def __init__(self, failure: ColorFormatError):
        super().__init__(failure.message)
        self.failure = failure

    @property
    def kind(self) -> ColorErrorKind:
        return self.failure.kind


def is_error(result: Any) -> bool:
    """Return True if ``result`` is a ``ColorFormatError``.

    Examples:
        >>> is_error(ColorFormatError(ColorErrorKind.INVALID_FORMAT, "bad"))
        True
        >>> is_error(Hsl(0, 0, 0))
        False
    """
    return isinstance(result, ColorFormatError)


def unwrap(result: ColorResult[T]) -> T:
    """Return the successful value of a conversion or raise.

    Args:
        result: Value returned by a conversion function

    Returns:
        The value itself when it is not an error

    Raises:
        ColorConversionError: If ``result`` is a ``ColorFormatError``
    """
    if isinstance(result, ColorFormatError):
        raise ColorConversionError(result)
    return result
