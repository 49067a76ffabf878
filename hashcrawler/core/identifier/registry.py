#!/usr/bin/env python3
"""
Hash Type Registry

Immutable, ordered catalog of the hash types HashCrawler knows about.
Registry order is only used as a stable tie-break between candidates of
equal confidence.

Several families are structurally indistinguishable (32 hex characters is
MD5, NTLM, MD4 and LM alike) and deliberately share byte-identical pattern
strings so that all of them are reported together.
"""

import logging
import re
from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Pattern, Sequence, Tuple

from ..error_handling.exceptions import ConfigurationError
from ..models.enums import Confidence, Rarity
from ..models.hash_models import HashTypeDefinition
from .confidence import resolve_confidence

logger = logging.getLogger(__name__)


# Shared shapes
HEX_8 = r"^[a-fA-F0-9]{8}$"
HEX_16 = r"^[a-fA-F0-9]{16}$"
HEX_32 = r"^[a-fA-F0-9]{32}$"
HEX_40 = r"^[a-fA-F0-9]{40}$"
HEX_56 = r"^[a-fA-F0-9]{56}$"
HEX_64 = r"^[a-fA-F0-9]{64}$"
HEX_96 = r"^[a-fA-F0-9]{96}$"
HEX_128 = r"^[a-fA-F0-9]{128}$"
HEX_32_SALTED = r"^[a-fA-F0-9]{32}:[^:\s]+$"


DEFAULT_HASH_TYPES: Tuple[HashTypeDefinition, ...] = (
    # Raw digests
    HashTypeDefinition("MD5", HEX_32, Rarity.COMMON,
                       "128-bit message digest (RFC 1321)"),
    HashTypeDefinition("NTLM", HEX_32, Rarity.COMMON,
                       "Windows NT LAN Manager password hash (MD4 of UTF-16LE)"),
    HashTypeDefinition("MD4", HEX_32, Rarity.UNCOMMON,
                       "128-bit message digest (RFC 1320)"),
    HashTypeDefinition("LM", HEX_32, Rarity.UNCOMMON,
                       "Legacy LAN Manager password hash"),
    HashTypeDefinition("SHA1", HEX_40, Rarity.COMMON,
                       "160-bit Secure Hash Algorithm 1"),
    HashTypeDefinition("SHA224", HEX_56, Rarity.COMMON,
                       "224-bit SHA-2 digest"),
    HashTypeDefinition("SHA3-224", HEX_56, Rarity.UNCOMMON,
                       "224-bit Keccak based SHA-3 digest"),
    HashTypeDefinition("SHA256", HEX_64, Rarity.COMMON,
                       "256-bit SHA-2 digest"),
    HashTypeDefinition("SHA384", HEX_96, Rarity.COMMON,
                       "384-bit SHA-2 digest"),
    HashTypeDefinition("SHA3-384", HEX_96, Rarity.UNCOMMON,
                       "384-bit Keccak based SHA-3 digest"),
    HashTypeDefinition("SHA512", HEX_128, Rarity.COMMON,
                       "512-bit SHA-2 digest"),

    # Database formats
    HashTypeDefinition("MySQL323", HEX_16, Rarity.UNCOMMON,
                       "MySQL password hash used before version 4.1"),
    HashTypeDefinition("MySQL4.1+", r"^\*[a-fA-F0-9]{40}$", Rarity.UNCOMMON,
                       "MySQL 4.1+ password hash (double SHA1, '*' prefixed)"),

    # Windows authentication
    HashTypeDefinition("NetNTLMv1",
                       r"^[^:\s]+::[^:\s]*:[a-fA-F0-9]{48}:[a-fA-F0-9]{48}:[a-fA-F0-9]{16}$",
                       Rarity.UNCOMMON,
                       "NTLMv1 challenge/response captured from network authentication"),
    HashTypeDefinition("NetNTLMv2",
                       r"^[^:\s]+::[^:\s]+:[a-fA-F0-9]{16}:[a-fA-F0-9]{32}:[a-fA-F0-9]+$",
                       Rarity.UNCOMMON,
                       "NTLMv2 challenge/response captured from network authentication"),
    HashTypeDefinition("DCC", HEX_32_SALTED, Rarity.UNCOMMON,
                       "Domain Cached Credentials (mscash), hash:username"),
    HashTypeDefinition("DCC2", HEX_32_SALTED, Rarity.RARE,
                       "Domain Cached Credentials 2 (mscash2), hash:username"),

    # Password hashing schemes
    HashTypeDefinition("BCrypt", r"^\$2[abxy]?\$\d{2}\$[./A-Za-z0-9]{53}$", Rarity.COMMON,
                       "Blowfish based adaptive password hash"),
    HashTypeDefinition("Argon2",
                       r"^\$argon2(?:id|i|d)\$v=\d+\$m=\d+,t=\d+,p=\d+\$[A-Za-z0-9+/]+\$[A-Za-z0-9+/]+$",
                       Rarity.COMMON,
                       "Memory-hard password hash, winner of the Password Hashing Competition"),
    HashTypeDefinition("PBKDF2",
                       r"^\$pbkdf2(?:-sha(?:1|256|512))?\$\d+\$[./A-Za-z0-9]+\$[./A-Za-z0-9]+$",
                       Rarity.UNCOMMON,
                       "Password-Based Key Derivation Function 2 (modular crypt format)"),
    HashTypeDefinition("Django PBKDF2",
                       r"^pbkdf2_sha(?:1|256)\$\d+\$[^$\s]+\$[A-Za-z0-9+/]+=*$",
                       Rarity.UNCOMMON,
                       "Django framework PBKDF2 password hash"),
    HashTypeDefinition("Scrypt",
                       r"^(?:\$scrypt\$ln=\d+,r=\d+,p=\d+\$[A-Za-z0-9+/.]+=*\$[A-Za-z0-9+/.]+=*"
                       r"|\$7\$[./A-Za-z0-9]+\$[./A-Za-z0-9]{43})$",
                       Rarity.RARE,
                       "Memory-hard key derivation function"),

    # UNIX crypt variants
    HashTypeDefinition("MD5 Crypt", r"^\$1\$[./A-Za-z0-9]{0,8}\$[./A-Za-z0-9]{22}$", Rarity.COMMON,
                       "UNIX md5crypt ($1$)"),
    HashTypeDefinition("SHA256 Crypt",
                       r"^\$5\$(?:rounds=\d+\$)?[./A-Za-z0-9]{0,16}\$[./A-Za-z0-9]{43}$",
                       Rarity.COMMON,
                       "UNIX sha256crypt ($5$)"),
    HashTypeDefinition("SHA512 Crypt",
                       r"^\$6\$(?:rounds=\d+\$)?[./A-Za-z0-9]{0,16}\$[./A-Za-z0-9]{86}$",
                       Rarity.COMMON,
                       "UNIX sha512crypt ($6$)"),
    HashTypeDefinition("Apache MD5", r"^\$apr1\$[./A-Za-z0-9]{0,8}\$[./A-Za-z0-9]{22}$", Rarity.UNCOMMON,
                       "Apache htpasswd MD5 variant ($apr1$)"),
    HashTypeDefinition("PHPass", r"^\$[PH]\$[./A-Za-z0-9]{31}$", Rarity.UNCOMMON,
                       "Portable PHP password hash used by WordPress and phpBB"),
    HashTypeDefinition("DES Crypt", r"^[./A-Za-z0-9]{13}$", Rarity.RARE,
                       "Traditional UNIX DES based crypt"),

    # Checksums
    HashTypeDefinition("CRC32", HEX_8, Rarity.UNCOMMON,
                       "32-bit cyclic redundancy check"),
    HashTypeDefinition("CRC32B", HEX_8, Rarity.UNCOMMON,
                       "32-bit cyclic redundancy check (bzip2 polynomial)"),
    HashTypeDefinition("ADLER32", HEX_8, Rarity.RARE,
                       "Adler-32 checksum"),
)


class HashTypeRegistry:
    """Read-only, ordered collection of hash type definitions

    Patterns are compiled and grouped by their exact text once, at
    construction, so confidence resolution never rescans the registry.
    """

    def __init__(self, definitions: Sequence[HashTypeDefinition]):
        self._definitions: Tuple[HashTypeDefinition, ...] = tuple(definitions)
        self._by_name: Dict[str, HashTypeDefinition] = {}
        self._compiled: Dict[str, Pattern] = {}
        self._pattern_groups: Dict[str, Tuple[str, ...]] = {}
        self._build()

    def _build(self):
        """Validate definitions, compile patterns and group shared ones"""
        groups = defaultdict(list)

        for definition in self._definitions:
            if definition.name in self._by_name:
                raise ConfigurationError(
                    f"Duplicate hash type name: {definition.name}",
                    {'name': definition.name}
                )
            if not isinstance(definition.rarity, Rarity):
                raise ConfigurationError(
                    f"Invalid rarity for {definition.name}: {definition.rarity!r}",
                    {'name': definition.name}
                )
            self._by_name[definition.name] = definition

            if definition.pattern not in self._compiled:
                try:
                    self._compiled[definition.pattern] = re.compile(definition.pattern)
                except re.error as e:
                    raise ConfigurationError(
                        f"Invalid pattern for {definition.name}: {e}",
                        {'name': definition.name, 'pattern': definition.pattern}
                    ) from e

            groups[definition.pattern].append(definition.name)

        self._pattern_groups = {pattern: tuple(names) for pattern, names in groups.items()}
        logger.debug(
            f"Loaded hash registry with {len(self._definitions)} types, "
            f"{len(self._pattern_groups)} distinct patterns"
        )

    def __iter__(self) -> Iterator[HashTypeDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[HashTypeDefinition]:
        """Look up a definition by name"""
        return self._by_name.get(name)

    def names(self) -> List[str]:
        """Names in registry order"""
        return [definition.name for definition in self._definitions]

    def entries(self) -> Iterator[Tuple[HashTypeDefinition, Pattern]]:
        """Yield each definition with its compiled pattern, in registry order"""
        for definition in self._definitions:
            yield definition, self._compiled[definition.pattern]

    def by_rarity(self, rarity: Rarity) -> List[HashTypeDefinition]:
        return [d for d in self._definitions if d.rarity is rarity]

    def is_shared(self, definition: HashTypeDefinition) -> bool:
        """True when more than one entry uses this exact pattern text"""
        return len(self._pattern_groups.get(definition.pattern, ())) > 1

    def shared_with(self, name: str) -> List[str]:
        """Other entries whose pattern text is identical to this one's"""
        definition = self._by_name.get(name)
        if definition is None:
            return []
        return [n for n in self._pattern_groups[definition.pattern] if n != name]

    def explain(self, name: str) -> Dict[str, object]:
        """Summarise how an entry is scored when it matches"""
        definition = self._by_name.get(name)
        if definition is None:
            raise KeyError(name)

        confidence: Confidence = resolve_confidence(definition, self)
        return {
            'name': definition.name,
            'rarity': definition.rarity.value,
            'confidence': confidence.value,
            'shared_with': self.shared_with(name),
            'description': definition.description
        }


# Global registry instance
registry = HashTypeRegistry(DEFAULT_HASH_TYPES)
