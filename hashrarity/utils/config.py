from __future__ import annotations

import logging
import os
from typing import NamedTuple

from dotenv import find_dotenv, load_dotenv

from hashrarity.constants import DEFAULT_WORKERS

logger = logging.getLogger(__name__)


class RarityConfig(NamedTuple):
    repo: str
    branch: str | None
    workers: int
    log_level: str


def _env(name: str) -> str | None:
    # Treat empty strings as absent so blank CI secrets fall back to defaults
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def load_environment() -> None:
    """Load ``.env`` without overriding variables already set in the environment."""
    env_path = find_dotenv(usecwd=True)
    load_dotenv(dotenv_path=env_path or None, override=False)


def get_rarity_config() -> RarityConfig:
    """Return CLI defaults from the environment (and ``.env`` when present)."""
    load_environment()

    workers = DEFAULT_WORKERS
    raw_workers = _env("HASH_RARITY_WORKERS")
    if raw_workers is not None:
        try:
            workers = max(1, int(raw_workers))
        except ValueError:
            logger.warning(
                "[config] HASH_RARITY_WORKERS=%r is not an integer; using %d",
                raw_workers,
                DEFAULT_WORKERS,
            )

    return RarityConfig(
        repo=_env("HASH_RARITY_REPO") or ".",
        branch=_env("HASH_RARITY_BRANCH"),
        workers=workers,
        log_level=(_env("HASH_RARITY_LOG_LEVEL") or "WARNING").upper(),
    )
