"""
hslconv utility modules - pure functions organized by domain.

Modules:
    scaling: Degree/percent scaling of HSL values
    hue_utils: Hue sector interpolation for HSL to RGB
    color_utils: Hex color parsing and channel formatting
    conversion: Typed parsing of configuration text
    logging: Colored console output
"""

__all__ = [
    "scaling",
    "hue_utils",
    "color_utils",
    "conversion",
    "logging",
]
