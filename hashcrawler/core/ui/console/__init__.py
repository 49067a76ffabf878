"""Console output for HashCrawler"""

from .base import HashCrawlerConsole, console, err_console

__all__ = ['HashCrawlerConsole', 'console', 'err_console']
