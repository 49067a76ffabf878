"""HashCrawler hash type identification"""

from .registry import HashTypeRegistry, DEFAULT_HASH_TYPES, registry
from .matcher import match_hash
from .confidence import resolve_confidence
from .aggregator import build_result
from .engine import identify_hash, identify_hashes, normalize_input

__all__ = [
    "HashTypeRegistry",
    "DEFAULT_HASH_TYPES",
    "registry",
    "match_hash",
    "resolve_confidence",
    "build_result",
    "identify_hash",
    "identify_hashes",
    "normalize_input"
]
