"""Structural matching of an input against every registry entry"""

import logging
from typing import List

from ..error_handling.exceptions import PatternEvaluationError
from ..models.hash_models import HashTypeDefinition

logger = logging.getLogger(__name__)


def match_hash(value: str, registry) -> List[HashTypeDefinition]:
    """Return every definition whose pattern fully matches ``value``

    Entries are tested independently and returned in registry order. An
    entry whose pattern cannot be evaluated is skipped for this input only.
    """
    matches = []

    for definition, pattern in registry.entries():
        try:
            matched = _evaluate(definition, pattern, value)
        except PatternEvaluationError as e:
            logger.warning(f"Skipping {e.type_name}: {e}")
            continue

        if matched:
            matches.append(definition)

    return matches


def _evaluate(definition: HashTypeDefinition, pattern, value: str) -> bool:
    try:
        return pattern.fullmatch(value) is not None
    except Exception as e:
        raise PatternEvaluationError(definition.name, value, e) from e
