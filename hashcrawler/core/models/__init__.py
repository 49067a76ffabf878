"""Data models for HashCrawler"""

from .enums import Rarity, Confidence, OutputFormat
from .hash_models import HashTypeDefinition, HashMatch, HashResult, UNKNOWN_MATCH

__all__ = [
    'Rarity',
    'Confidence',
    'OutputFormat',
    'HashTypeDefinition',
    'HashMatch',
    'HashResult',
    'UNKNOWN_MATCH'
]
