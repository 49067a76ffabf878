"""HashCrawler identification engine"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Optional

from ..models.hash_models import HashResult, UNKNOWN_MATCH
from .aggregator import build_result
from .matcher import match_hash
from .registry import HashTypeRegistry, registry as default_registry

logger = logging.getLogger(__name__)


def normalize_input(value: Any) -> str:
    """Trim an input value; ``None`` becomes the empty string"""
    if value is None:
        return ""
    return str(value).strip()


def identify_hash(value: Any, registry: Optional[HashTypeRegistry] = None) -> HashResult:
    """Classify a single hash string against the registry"""
    if registry is None:
        registry = default_registry
    text = normalize_input(value)
    return build_result(text, match_hash(text, registry), registry)


def identify_hashes(values: Iterable[Any], registry: Optional[HashTypeRegistry] = None,
                    workers: int = 1) -> List[HashResult]:
    """Classify a batch of hashes, preserving input order

    Every input is independent. With ``workers > 1`` the batch is spread
    over a thread pool; a failure on one input is reported as Unknown for
    that input and never stops the rest of the batch.
    """
    if registry is None:
        registry = default_registry
    items = list(values)

    def _classify(value: Any) -> HashResult:
        try:
            return identify_hash(value, registry)
        except Exception as e:
            logger.error(f"Failed to classify {type(value).__name__} input: {e}")
            return _unknown_result(value)

    if workers <= 1 or len(items) <= 1:
        return [_classify(value) for value in items]

    logger.debug(f"Classifying {len(items)} hashes with {workers} workers")
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(_classify, items))


def _unknown_result(value: Any) -> HashResult:
    """Unknown result for an input that could not be classified at all"""
    try:
        text = normalize_input(value)
    except Exception:
        text = ""
    return HashResult(hash=text, matches=(UNKNOWN_MATCH,))
