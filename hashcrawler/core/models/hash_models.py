"""
Hash identification models

Registry definitions, per-candidate matches and per-input results.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import Confidence, Rarity


@dataclass(frozen=True)
class HashTypeDefinition:
    """Named rule pairing a structural pattern with a hash algorithm"""
    name: str
    pattern: str
    rarity: Rarity
    description: str


class HashMatch(BaseModel):
    """A single candidate hash type for an input"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Hash type name")
    confidence: Confidence = Field(..., description="Confidence tier")
    description: str = Field("", description="Human readable description")

    @property
    def label(self) -> str:
        return self.confidence.label


UNKNOWN_MATCH = HashMatch(
    name="Unknown",
    confidence=Confidence.UNKNOWN,
    description="could not identify this hash type"
)


class HashResult(BaseModel):
    """Ordered candidates for one input hash"""

    model_config = ConfigDict(frozen=True)

    hash: str = Field(..., description="Trimmed input value")
    matches: Tuple[HashMatch, ...] = Field(..., description="Matches sorted by confidence")

    @field_validator('matches')
    @classmethod
    def validate_matches(cls, v):
        """A result always carries at least one match"""
        if not v:
            raise ValueError("A result must contain at least one match")
        return v

    @property
    def best(self) -> HashMatch:
        """Most confident candidate"""
        return self.matches[0]

    @property
    def is_unknown(self) -> bool:
        return self.best.confidence is Confidence.UNKNOWN

    @property
    def names(self) -> List[str]:
        return [match.name for match in self.matches]

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary with enum handling"""
        return self.model_dump(mode='json')

    def to_json(self, indent: int = 2) -> str:
        """Convert model to JSON string"""
        return self.model_dump_json(indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> "HashResult":
        """Create model from JSON string"""
        return cls.model_validate(json.loads(json_str))
