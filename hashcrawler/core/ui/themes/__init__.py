"""Console themes"""

from .default import HASHCRAWLER_THEME, COLORS, CONFIDENCE_COLORS

__all__ = ['HASHCRAWLER_THEME', 'COLORS', 'CONFIDENCE_COLORS']
