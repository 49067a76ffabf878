"""Error handling for HashCrawler"""

from .exceptions import (
    HashCrawlerError,
    ConfigurationError,
    InputError,
    PatternEvaluationError,
    ReportError
)

__all__ = [
    'HashCrawlerError',
    'ConfigurationError',
    'InputError',
    'PatternEvaluationError',
    'ReportError'
]
