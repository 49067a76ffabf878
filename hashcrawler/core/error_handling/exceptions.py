"""Base exception classes for HashCrawler

Data conditions (empty or malformed hashes) are never exceptional; only
caller usage errors surface from here.
"""

from typing import Any, Dict, Optional


class HashCrawlerError(Exception):
    """Base exception for all HashCrawler errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(HashCrawlerError):
    """Exception for configuration-related errors"""


class InputError(HashCrawlerError):
    """Exception for input sources that cannot be read"""

    def __init__(self, source: str, message: str):
        super().__init__(message, {'source': source})
        self.source = source


class PatternEvaluationError(HashCrawlerError):
    """A single registry pattern failed against a single input"""

    def __init__(self, type_name: str, value: str, cause: Optional[BaseException] = None):
        message = f"Pattern for {type_name} failed to evaluate"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, {'type_name': type_name, 'value': value})
        self.type_name = type_name
        self.value = value
        self.cause = cause


class ReportError(HashCrawlerError):
    """Exception for report generation errors"""
