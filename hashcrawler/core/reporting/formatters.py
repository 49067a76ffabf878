"""Result formatters for HashCrawler

Three projections of the same ordered results: native objects, a JSON
array mirroring them, and a human readable (rich markup) summary.
"""

import json
from typing import Any, Dict, List, Sequence, Type

from rich.markup import escape

from ..error_handling.exceptions import ReportError
from ..models.enums import OutputFormat
from ..models.hash_models import HashResult
from ..ui.themes.default import get_confidence_style


class BaseFormatter:
    """Base class for result formatters"""

    output_format: OutputFormat = None

    def format(self, results: Sequence[HashResult], **kwargs) -> Any:
        """Format results - to be implemented by subclasses"""
        raise NotImplementedError


class ObjectFormatter(BaseFormatter):
    """Hands the result models back for programmatic use"""

    output_format = OutputFormat.OBJECT

    def format(self, results: Sequence[HashResult], **kwargs) -> List[HashResult]:
        return list(results)


class JSONFormatter(BaseFormatter):
    """JSON formatter for results"""

    output_format = OutputFormat.JSON

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, results: Sequence[HashResult], **kwargs) -> str:
        """Format results as a JSON array"""
        try:
            return json.dumps(
                [result.to_dict() for result in results],
                indent=self.indent,
                ensure_ascii=False
            )
        except (TypeError, ValueError) as e:
            raise ReportError(f"Failed to serialize results: {e}") from e


class TextFormatter(BaseFormatter):
    """Human readable summary, one block per hash"""

    output_format = OutputFormat.TEXT

    def __init__(self, plain: bool = False):
        self.plain = plain

    def format(self, results: Sequence[HashResult], **kwargs) -> str:
        """Format results as text, with rich markup unless ``plain``"""
        blocks = [self._format_result(result) for result in results]
        return "\n\n".join(blocks)

    def _format_result(self, result: HashResult) -> str:
        if self.plain:
            lines = [f"Hash: {result.hash}"]
        else:
            lines = [f"[header]Hash:[/header] [hash]{escape(result.hash)}[/hash]"]

        for match in result.matches:
            line = f"[{match.label}] {match.name} - {match.description}"
            if self.plain:
                lines.append(f"  {line}")
            else:
                style = get_confidence_style(match.confidence.value)
                lines.append(f"  [{style}]{escape(line)}[/{style}]")

        return "\n".join(lines)


FORMATTERS: Dict[OutputFormat, Type[BaseFormatter]] = {
    OutputFormat.OBJECT: ObjectFormatter,
    OutputFormat.JSON: JSONFormatter,
    OutputFormat.TEXT: TextFormatter,
}


def get_formatter(output_format, **options) -> BaseFormatter:
    """Create the formatter for a selector (``Text``, ``Object`` or ``Json``)

    Raises ConfigurationError for an unrecognized selector.
    """
    fmt = OutputFormat.parse(output_format)
    formatter_cls = FORMATTERS[fmt]

    if fmt is OutputFormat.JSON:
        return formatter_cls(indent=options.get('indent', 2))
    if fmt is OutputFormat.TEXT:
        return formatter_cls(plain=options.get('plain', False))
    return formatter_cls()


def render_results(results: Sequence[HashResult], output_format, **options) -> Any:
    """Render results in the requested format"""
    return get_formatter(output_format, **options).format(results)
