#!/usr/bin/env python3
"""
Views and counts over classified commits.

Every view returns a new list in input order; records are never modified.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from hashrarity.analysis.types import CommitRecord, CountSummary, HashRarity


def filter_by_tier(records: Iterable[CommitRecord], tier: HashRarity) -> list[CommitRecord]:
    return [record for record in records if record.tier is tier]


def filter_not_common(records: Iterable[CommitRecord]) -> list[CommitRecord]:
    """Uncommon and Rare commits; the default view."""
    return [record for record in records if record.tier is not HashRarity.COMMON]


def summarize(records: Iterable[CommitRecord]) -> CountSummary:
    counts: Counter[HashRarity] = Counter(record.tier for record in records)
    return CountSummary(
        total=sum(counts.values()),
        common=counts[HashRarity.COMMON],
        uncommon=counts[HashRarity.UNCOMMON],
        rare=counts[HashRarity.RARE],
    )


def rarest_first(records: Iterable[CommitRecord], limit: int | None = None) -> list[CommitRecord]:
    """Order by descending tier, keeping log order within a tier.

    Used for the ``--top`` presentation only.
    """
    ordered = sorted(records, key=lambda record: record.tier.rank, reverse=True)
    if limit is not None:
        ordered = ordered[: max(limit, 0)]
    return ordered
