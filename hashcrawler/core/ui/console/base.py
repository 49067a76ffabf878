"""
Base console interface for HashCrawler
"""

from typing import Optional

from rich.console import Console
from rich.table import Table

from ..themes.default import HASHCRAWLER_THEME, format_status


class HashCrawlerConsole:
    """Centralized console interface for consistent output across HashCrawler"""

    def __init__(self, stderr: bool = False):
        self.console = Console(stderr=stderr, theme=HASHCRAWLER_THEME)

    def print(self, *args, **kwargs):
        """Print to console with Rich formatting"""
        self.console.print(*args, **kwargs)

    def error(self, message: str, **kwargs):
        self.console.print(format_status('error', message), **kwargs)

    def warning(self, message: str, **kwargs):
        self.console.print(format_status('warning', message), **kwargs)

    def info(self, message: str, **kwargs):
        self.console.print(format_status('info', message), **kwargs)

    def debug(self, message: str, **kwargs):
        """Print debug message (only shown in debug mode)"""
        if self._is_debug_enabled():
            self.console.print(format_status('debug', message), **kwargs)

    def _is_debug_enabled(self) -> bool:
        from ...utils.debugging import is_debug_enabled
        return is_debug_enabled()

    def table(self, title: Optional[str] = None, **kwargs) -> Table:
        """Create a new table"""
        return Table(title=title, **kwargs)

    def print_table(self, table: Table):
        self.console.print(table)


# Global console instances
console = HashCrawlerConsole()
err_console = HashCrawlerConsole(stderr=True)
