"""Debug utilities for controlling debug output"""

import logging
import os

from rich.logging import RichHandler

from ...ui.console import err_console

# Global debug state
_debug_enabled = False


def set_debug(enabled: bool) -> None:
    """Set global debug state"""
    global _debug_enabled
    _debug_enabled = enabled


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled"""
    return _debug_enabled or os.getenv('DEBUG', '').lower() in ('1', 'true', 'yes')


def debug_print(*args, **kwargs) -> None:
    """Print only if debug mode is enabled"""
    if not is_debug_enabled():
        return

    message = ' '.join(str(arg) for arg in args)
    level = kwargs.pop('level', 'DEBUG').upper()

    if level == 'ERROR':
        err_console.error(f"[DEBUG] {message}", **kwargs)
    elif level in ('WARNING', 'WARN'):
        err_console.warning(f"[DEBUG] {message}", **kwargs)
    elif level == 'INFO':
        err_console.info(f"[DEBUG] {message}", **kwargs)
    else:
        err_console.debug(message, **kwargs)


def configure_logging(level: str = "WARNING") -> None:
    """Route library logging through rich on stderr

    Debug mode always wins over the configured level.
    """
    if is_debug_enabled():
        level = "DEBUG"

    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console.console, show_path=False)],
        force=True
    )
