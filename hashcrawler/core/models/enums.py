"""Common enums shared across HashCrawler"""

from enum import Enum

from ..error_handling.exceptions import ConfigurationError


class Rarity(str, Enum):
    """How often a hash family turns up in the wild"""
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"

    def __str__(self) -> str:
        return self.value


class Confidence(str, Enum):
    """Confidence tier attached to a single candidate match"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"

    @property
    def rank(self) -> int:
        """Get numeric rank (lower = more certain)"""
        ranks = {
            "high": 1,
            "medium": 2,
            "low": 3,
            "unknown": 4
        }
        return ranks[self.value]

    @property
    def label(self) -> str:
        """Human readable label used by the text report"""
        labels = {
            "high": "Most Likely",
            "medium": "Possible",
            "low": "Least Likely",
            "unknown": "Unknown"
        }
        return labels[self.value]

    def __str__(self) -> str:
        return self.value


class OutputFormat(str, Enum):
    """Output projections understood by the reporting layer"""
    TEXT = "Text"
    OBJECT = "Object"
    JSON = "Json"

    @classmethod
    def parse(cls, value) -> "OutputFormat":
        """Resolve a selector case-insensitively, raising on anything unknown"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for item in cls:
                if item.value.lower() == value.strip().lower():
                    return item
        valid = ", ".join(item.value for item in cls)
        raise ConfigurationError(
            f"Unknown output format: {value!r} (expected one of {valid})",
            {"value": value}
        )

    def __str__(self) -> str:
        return self.value
