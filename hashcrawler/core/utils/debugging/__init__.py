"""Debug utilities"""

from .debug import (
    set_debug,
    is_debug_enabled,
    debug_print,
    configure_logging
)

__all__ = [
    'set_debug',
    'is_debug_enabled',
    'debug_print',
    'configure_logging'
]
