#!/usr/bin/env python3
"""
Hash rarity rules.

Rules are evaluated in order and the first match wins. Slices shorter than
nine characters count as "all digits" / "all letters" when every character
present qualifies, so an empty or very short hash always matches rule 1 or 4.
"""

from __future__ import annotations

import string
from collections.abc import Callable
from typing import NamedTuple

from hashrarity.analysis.types import HashRarity, RarityClassification
from hashrarity.constants import DIGIT_RUN, LETTER_RUN, PATTERN_LENGTH

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


class RarityRule(NamedTuple):
    predicate: Callable[[str], bool]
    tier: HashRarity
    explanation: str


def _all_in(chars: str, allowed: frozenset[str]) -> bool:
    return all(c in allowed for c in chars)


def _head(commit_hash: str) -> str:
    return commit_hash[:PATTERN_LENGTH]


def _tail(commit_hash: str) -> str:
    return commit_hash[-PATTERN_LENGTH:]


RULES: tuple[RarityRule, ...] = (
    RarityRule(
        lambda h: _all_in(_head(h), _DIGITS), HashRarity.UNCOMMON, "Starts with nine digits"
    ),
    RarityRule(lambda h: _all_in(_tail(h), _DIGITS), HashRarity.UNCOMMON, "Ends with nine digits"),
    RarityRule(lambda h: DIGIT_RUN in h, HashRarity.UNCOMMON, "Contains nine continuous digits"),
    RarityRule(
        lambda h: _all_in(_head(h), _LETTERS), HashRarity.RARE, "Starts with nine letters"
    ),
    RarityRule(lambda h: _all_in(_tail(h), _LETTERS), HashRarity.RARE, "Ends with nine letters"),
    RarityRule(lambda h: LETTER_RUN in h, HashRarity.RARE, "Contains nine continuous letters"),
)

COMMON = RarityClassification(HashRarity.COMMON, "")


def classify(commit_hash: str, rules: tuple[RarityRule, ...] = RULES) -> RarityClassification:
    """Return the classification of the first rule matching ``commit_hash``."""
    for rule in rules:
        if rule.predicate(commit_hash):
            return RarityClassification(rule.tier, rule.explanation)
    return COMMON
