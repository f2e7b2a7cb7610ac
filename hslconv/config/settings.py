import os
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from hslconv.utils.conversion.types import boolean_from_environ
from hslconv.utils.logging import log

ENV_PREPEND_POUND = "HSLCONV_PREPEND_POUND"
ENV_DEBUG = "HSLCONV_DEBUG"


class ConversionSettings(BaseModel):
    """Defaults applied by the conversion functions when the caller omits them."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    prepend_pound: bool = Field(
        default=True,
        description="Prefix hex output with '#' when hsl_to_hex/rgb_to_hex get no explicit choice"
    )
    debug: bool = Field(
        default=False,
        description="Print debug lines when a conversion returns an error value"
    )


def _read_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    try:
        return boolean_from_environ(environ, name, default)
    except ValueError as e:
        log.warning(f"Ignoring {name}: {e}. Using default ({default}).")
        return default


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ConversionSettings:
    """
    Build settings from environment variables.

    Unset variables, and variables holding text that is not a boolean, keep
    their defaults. Unrecognized text is reported with a warning, so loading
    never raises and conversions that consult the settings never fail on it.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        ConversionSettings
    """
    if environ is None:
        environ = os.environ
    defaults = ConversionSettings()
    return ConversionSettings(
        prepend_pound=_read_flag(environ, ENV_PREPEND_POUND, defaults.prepend_pound),
        debug=_read_flag(environ, ENV_DEBUG, defaults.debug),
    )


@lru_cache(maxsize=1)
def get_settings() -> ConversionSettings:
    """Return the process-wide settings, loaded from the environment on first use."""
    return load_settings()


def reset_settings():
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
