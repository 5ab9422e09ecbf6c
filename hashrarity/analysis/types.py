"""
Typed data structures for commit rarity analysis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from functools import total_ordering

from hashrarity.constants import COMMON_FREQUENCY, RARE_FREQUENCY, UNCOMMON_FREQUENCY


@total_ordering
class HashRarity(Enum):
    """Rarity tier of a commit hash, ordered from least to most rare."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"

    @property
    def label(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def estimated_frequency(self) -> float:
        return _FREQUENCIES[self]

    @classmethod
    def from_label(cls, text: str) -> HashRarity:
        """Return the tier whose label matches ``text`` case-insensitively."""
        wanted = text.strip().lower()
        for tier in cls:
            if tier.label.lower() == wanted:
                return tier
        raise ValueError(f"Unknown rarity tier: {text!r}")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HashRarity):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.label


_RANKS = {HashRarity.COMMON: 0, HashRarity.UNCOMMON: 1, HashRarity.RARE: 2}
_FREQUENCIES = {
    HashRarity.COMMON: COMMON_FREQUENCY,
    HashRarity.UNCOMMON: UNCOMMON_FREQUENCY,
    HashRarity.RARE: RARE_FREQUENCY,
}


@dataclass(frozen=True)
class RarityClassification:
    """Tier plus the reason it was assigned."""

    tier: HashRarity
    explanation: str = ""

    @property
    def estimated_frequency(self) -> float:
        return self.tier.estimated_frequency


@dataclass(frozen=True)
class CommitRecord:
    """A single commit parsed from the log; ``rarity`` is derived from ``hash``."""

    author: str
    timestamp: datetime
    hash: str
    rarity: RarityClassification = field(init=False, compare=False)

    def __post_init__(self) -> None:
        # Local import: rarity.py imports the types defined above
        from hashrarity.analysis.rarity import classify

        object.__setattr__(self, "rarity", classify(self.hash))

    @property
    def tier(self) -> HashRarity:
        return self.rarity.tier


@dataclass(frozen=True)
class CountSummary:
    total: int = 0
    common: int = 0
    uncommon: int = 0
    rare: int = 0

    def __post_init__(self) -> None:
        if self.total != self.common + self.uncommon + self.rare:
            raise ValueError(
                f"total={self.total} does not equal common+uncommon+rare="
                f"{self.common + self.uncommon + self.rare}"
            )

    def count_for(self, tier: HashRarity) -> int:
        if tier is HashRarity.COMMON:
            return self.common
        if tier is HashRarity.UNCOMMON:
            return self.uncommon
        return self.rare
