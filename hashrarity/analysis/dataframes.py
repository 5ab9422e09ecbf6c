from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from hashrarity.analysis.types import CommitRecord, CountSummary, HashRarity
from hashrarity.constants import TABLE_COLUMNS

logger = logging.getLogger(__name__)


def records_to_dataframe(records: Iterable[CommitRecord]) -> pd.DataFrame:
    rows = [
        {
            "author": record.author,
            "datetime": record.timestamp.isoformat(),
            "hash": record.hash,
            "rarity": record.tier.label,
            "explanation": record.rarity.explanation,
            "frequency": record.rarity.estimated_frequency,
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def summary_to_dataframe(summary: CountSummary) -> pd.DataFrame:
    rows = [{"rarity": tier.label, "count": summary.count_for(tier)} for tier in HashRarity]
    rows.append({"rarity": "Total", "count": summary.total})
    return pd.DataFrame(rows, columns=["rarity", "count"])


def export_to_csv(df: pd.DataFrame, output_path: str | Path) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    logger.info("Exported %d rows to %s", len(df), path)
    return path
