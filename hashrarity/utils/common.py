#!/usr/bin/env python3
"""
Common utilities shared by the hash-rarity entry points.
"""

import argparse
import logging
import sys
from pathlib import Path

from hashrarity.utils.config import RarityConfig, get_rarity_config


def setup_logging(log_level: str | int = "WARNING", log_file: str | None = None) -> None:
    """Setup logging configuration consistently across entry points.

    Console output goes to stderr so tables printed on stdout stay clean.

    Args:
        log_level: Logging level as string ("INFO", "DEBUG") or integer constant
        log_file: Optional path to log file for file output
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    # Handle both string levels ("INFO") and integer levels (logging.INFO)
    if isinstance(log_level, int):
        level = log_level
    else:
        level = getattr(logging, log_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def add_common_args(
    parser: argparse.ArgumentParser, config: RarityConfig | None = None
) -> RarityConfig:
    """Add repository and logging arguments to an ArgumentParser.

    Defaults come from the environment (see ``get_rarity_config``).

    Args:
        parser: ArgumentParser instance to add arguments to
        config: Pre-loaded configuration; loaded from the environment when omitted

    Returns:
        The configuration used for defaults
    """
    config = config or get_rarity_config()
    parser.add_argument(
        "repo",
        nargs="?",
        default=config.repo,
        help="Path to the git repository (default: HASH_RARITY_REPO or current directory)",
    )
    parser.add_argument("--branch", default=config.branch, help="Branch or revision to read")
    parser.add_argument("--log-level", default=config.log_level, help="Logging level")
    parser.add_argument("--log-file", help="Optional log file")
    return config
