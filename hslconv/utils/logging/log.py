"""Colored console logging helpers.

Messages are printed to stdout wrapped in ANSI color codes. ``debug`` output
is only emitted when debug mode is enabled in the conversion settings.
"""

YELLOW = "\033[93m"
PURPLE = "\033[95m"

RESET_COLOR = "\033[0m"


def _print_colored(message: str, color: str) -> None:
    print(f"{color}{message}{RESET_COLOR}")


def is_debug_enabled() -> bool:
    # Settings log through this module while loading
    from hslconv.config.settings import get_settings
    return get_settings().debug


def debug(message: str, color: str = PURPLE) -> None:
    if is_debug_enabled():
        _print_colored(f"[hslconv] {message}", color)


def warning(message: str, color: str = YELLOW) -> None:
    _print_colored(f"[hslconv] {message}", color)
