"""Pure functions for turning configuration text into typed values.

Used by the settings loader to read boolean switches from environment
variables, following functional programming principles with no side effects.
"""

from typing import Mapping

TRUE_STRINGS = ("yes", "true", "t", "y", "1", "on")
FALSE_STRINGS = ("no", "false", "f", "n", "0", "off")


def string_to_boolean(value: str | bool) -> bool:
    """Convert string to boolean value.

    If input is already boolean, returns it unchanged. Matching is
    case-insensitive and ignores surrounding whitespace.

    Supported true values: 'yes', 'true', 't', 'y', '1', 'on'
    Supported false values: 'no', 'false', 'f', 'n', '0', 'off'

    Args:
        value: String or boolean to convert

    Returns:
        Boolean value

    Raises:
        ValueError: If string cannot be converted to boolean

    Examples:
        >>> string_to_boolean('yes')
        True
        >>> string_to_boolean(' OFF ')
        False
        >>> string_to_boolean(True)
        True
        >>> string_to_boolean('maybe')
        Traceback (most recent call last):
        ...
        ValueError: Boolean value expected (True/False), got: maybe
    """
    if isinstance(value, bool):
        return value

    value_lower = value.strip().lower()

    if value_lower in TRUE_STRINGS:
        return True
    elif value_lower in FALSE_STRINGS:
        return False
    else:
        raise ValueError(f"Boolean value expected (True/False), got: {value}")


def boolean_from_environ(environ: Mapping[str, str], name: str, default: bool) -> bool:
    """Read a boolean switch from an environment mapping.

    Args:
        environ: Mapping of variable names to string values (e.g. os.environ)
        name: Variable name to look up
        default: Value used when the variable is unset or empty

    Returns:
        Parsed boolean value

    Raises:
        ValueError: If the variable is set to unrecognized text

    Examples:
        >>> boolean_from_environ({'HSLCONV_DEBUG': '1'}, 'HSLCONV_DEBUG', False)
        True
        >>> boolean_from_environ({}, 'HSLCONV_DEBUG', False)
        False
    """
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    return string_to_boolean(raw)
