"""Process-wide debug output switch."""

from .config import DEBUG

_debug_enabled: bool = DEBUG


def set_debug(enabled: bool) -> None:
    """Enable or disable debug output."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


def is_debug_enabled() -> bool:
    return _debug_enabled


def debug(message: str) -> None:
    """Print a single line if debug output is enabled."""
    if _debug_enabled:
        print(message)
