"""Report format implementations"""

from .formatters import (
    BaseFormatter,
    ObjectFormatter,
    JSONFormatter,
    TextFormatter,
    get_formatter,
    render_results
)

__all__ = [
    'BaseFormatter',
    'ObjectFormatter',
    'JSONFormatter',
    'TextFormatter',
    'get_formatter',
    'render_results'
]
