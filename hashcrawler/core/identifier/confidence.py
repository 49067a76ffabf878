"""Confidence resolution for matched hash types"""

from ..models.enums import Confidence, Rarity
from ..models.hash_models import HashTypeDefinition


def resolve_confidence(definition: HashTypeDefinition, registry) -> Confidence:
    """Assign a confidence tier to a matched definition

    Common types are only ``high`` when no other registry entry uses the
    byte-identical pattern text; shared common patterns drop to ``medium``.
    Uncommon types are always ``medium`` and rare types always ``low``.
    """
    if definition.rarity is Rarity.COMMON:
        return Confidence.MEDIUM if registry.is_shared(definition) else Confidence.HIGH
    if definition.rarity is Rarity.UNCOMMON:
        return Confidence.MEDIUM
    if definition.rarity is Rarity.RARE:
        return Confidence.LOW
    raise ValueError(f"Unhandled rarity: {definition.rarity!r}")
