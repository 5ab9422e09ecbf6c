from __future__ import annotations

import pandas as pd

from hashrarity.analysis.types import HashRarity


def no_tier_message(tier: HashRarity) -> str:
    return f"No {tier.label.lower()} commits found"


def format_table(df: pd.DataFrame) -> str:
    return df.to_string(index=False, justify="left")


def print_table(df: pd.DataFrame) -> None:
    print(format_table(df))


def print_message(message: str) -> None:
    print(message)
