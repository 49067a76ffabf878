"""Result aggregation for a single input hash"""

from typing import Sequence

from ..models.hash_models import HashMatch, HashResult, HashTypeDefinition, UNKNOWN_MATCH
from .confidence import resolve_confidence


def build_result(value: str, definitions: Sequence[HashTypeDefinition], registry) -> HashResult:
    """Build the ordered result for one input

    Matches are sorted by confidence rank; ``sorted`` is stable so ties keep
    registry order. No matches yields the synthetic Unknown candidate.
    """
    if not definitions:
        return HashResult(hash=value, matches=(UNKNOWN_MATCH,))

    matches = [
        HashMatch(
            name=definition.name,
            confidence=resolve_confidence(definition, registry),
            description=definition.description
        )
        for definition in definitions
    ]
    matches = sorted(matches, key=lambda m: m.confidence.rank)

    return HashResult(hash=value, matches=tuple(matches))
