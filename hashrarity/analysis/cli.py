#!/usr/bin/env python3
"""
Classify commit hashes in a repository's history by rarity and print a table.
"""

from __future__ import annotations

import argparse
import logging
import sys

from hashrarity.analysis.aggregation import (
    filter_by_tier,
    filter_not_common,
    rarest_first,
    summarize,
)
from hashrarity.analysis.dataframes import (
    export_to_csv,
    records_to_dataframe,
    summary_to_dataframe,
)
from hashrarity.analysis.git_reader import RepositoryError, read_commit_log
from hashrarity.analysis.records import parse_log, parse_medium_log
from hashrarity.analysis.report import no_tier_message, print_message, print_table
from hashrarity.analysis.types import CommitRecord, HashRarity
from hashrarity.constants import (
    LOG_LAYOUTS,
    MAX_WORKERS,
    NO_COMMITS_MESSAGE,
    NO_RARE_COMMITS_MESSAGE,
)
from hashrarity.utils.common import add_common_args, setup_logging

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def _tier(value: str) -> HashRarity:
    try:
        return HashRarity.from_label(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hash-rarity", description="Find commits with unusual hashes"
    )
    config = add_common_args(parser)

    view = parser.add_mutually_exclusive_group()
    view.add_argument("-a", "--all", action="store_true", help="Show every commit")
    view.add_argument(
        "--tier",
        type=_tier,
        metavar="{common,uncommon,rare}",
        help="Show only commits of one rarity tier",
    )
    view.add_argument("-c", "--count", action="store_true", help="Show counts per rarity tier")

    parser.add_argument(
        "-t", "--top", type=_positive_int, help="Show the N rarest commits of the selected view"
    )
    parser.add_argument("--max-commits", type=_positive_int, help="Limit number of commits read")
    parser.add_argument(
        "--layout",
        choices=LOG_LAYOUTS,
        default="oneline",
        help="git log layout to request and parse",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=config.workers,
        help=f"Threads used to parse the log (max {MAX_WORKERS})",
    )
    parser.add_argument("--csv-export", help="Also write the displayed rows to this CSV file")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def load_records(args: argparse.Namespace) -> list[CommitRecord]:
    raw = read_commit_log(args.repo, args.branch, args.max_commits, args.layout)
    if args.layout == "medium":
        return parse_medium_log(raw)
    return parse_log(raw, workers=args.workers)


def select_view(
    records: list[CommitRecord], args: argparse.Namespace
) -> tuple[list[CommitRecord], str]:
    """Return the records to display and the message to print when there are none."""
    if args.all:
        selected, empty_message = list(records), NO_COMMITS_MESSAGE
    elif args.tier is not None:
        selected, empty_message = filter_by_tier(records, args.tier), no_tier_message(args.tier)
    else:
        selected, empty_message = filter_not_common(records), NO_RARE_COMMITS_MESSAGE
    if args.top:
        selected = rarest_first(selected, args.top)
    return selected, empty_message


def run(args: argparse.Namespace) -> None:
    records = load_records(args)
    logger.info("Classified %d commits", len(records))

    if not records:
        print_message(NO_COMMITS_MESSAGE)
        return

    if args.count:
        df = summary_to_dataframe(summarize(records))
    else:
        selected, empty_message = select_view(records, args)
        if not selected:
            print_message(empty_message)
            return
        df = records_to_dataframe(selected)

    print_table(df)
    if args.csv_export:
        export_to_csv(df, args.csv_export)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        run(args)
    except RepositoryError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
