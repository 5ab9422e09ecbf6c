#!/usr/bin/env python3
"""
Build CommitRecords from git log text.

Two layouts are understood:

- ``oneline``: ``<hash> <RFC 3339 timestamp> <author name>`` per line
  (``git log --pretty=format:"%H %aI %an"``)
- ``medium``: git's default ``--pretty=medium`` blocks with
  ``--date=iso-strict``

Malformed lines and blocks are dropped, never reported as errors.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import datetime

from hashrarity.analysis.types import CommitRecord

logger = logging.getLogger(__name__)

_AUTHOR_EMAIL = re.compile(r"\s*<[^>]*>\s*$")

# RFC 3339 date-time: full-date "T" partial-time time-offset
_RFC3339 = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})[Tt]"
    r"(?P<time>\d{2}:\d{2}:\d{2})(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})"
)


def parse_timestamp(text: str) -> datetime | None:
    """Parse an RFC 3339 datetime; return None unless it carries a UTC offset."""
    match = _RFC3339.fullmatch(text.strip())
    if match is None:
        return None
    # Rebuild in the isoformat() shape so every supported Python parses it alike
    fraction = match["fraction"]
    micros = f".{fraction[:6].ljust(6, '0')}" if fraction else ""
    offset = "+00:00" if match["offset"] in ("Z", "z") else match["offset"]
    try:
        return datetime.fromisoformat(f"{match['date']}T{match['time']}{micros}{offset}")
    except ValueError:
        return None


def parse(line: str) -> CommitRecord | None:
    """Parse one ``<hash> <timestamp> <author...>`` line."""
    tokens = line.split()
    if len(tokens) < 2:
        return None
    commit_hash, raw_timestamp = tokens[0], tokens[1]
    timestamp = parse_timestamp(raw_timestamp)
    if timestamp is None:
        logger.debug("Skipping line with invalid timestamp %r", raw_timestamp)
        return None
    return CommitRecord(author=" ".join(tokens[2:]), timestamp=timestamp, hash=commit_hash)


def parse_lines(lines: Iterable[str]) -> list[CommitRecord]:
    records: list[CommitRecord] = []
    for line in lines:
        record = parse(line)
        if record is not None:
            records.append(record)
    return records


def parse_log(text: str, workers: int = 1) -> list[CommitRecord]:
    """Parse a oneline-layout log into records, preserving input order.

    With ``workers > 1`` the lines are parsed on a thread pool; the result is
    the same as the sequential path.
    """
    lines = text.splitlines()
    if workers > 1 and lines:
        from hashrarity.analysis.extractor import parse_lines_concurrently

        records = parse_lines_concurrently(lines, workers)
    else:
        records = parse_lines(lines)
    dropped = sum(1 for line in lines if line.strip()) - len(records)
    if dropped:
        logger.info("Dropped %d malformed log line(s)", dropped)
    return records


def group_medium_blocks(text: str) -> list[list[str]]:
    """Split ``--pretty=medium`` output into per-commit blocks of lines."""
    blocks: list[list[str]] = []
    current: list[str] = []
    for line in text.splitlines():
        if line.startswith("commit ") and current:
            blocks.append(current)
            current = []
        current.append(line)
    if current:
        blocks.append(current)
    return blocks


def parse_medium_block(block: list[str]) -> CommitRecord | None:
    commit_hash: str | None = None
    author = ""
    timestamp: datetime | None = None
    for line in block:
        if line.startswith("commit "):
            parts = line.split()
            commit_hash = parts[1] if len(parts) > 1 else None
        elif line.startswith("Author:"):
            author = _AUTHOR_EMAIL.sub("", line[len("Author:") :]).strip()
            author = " ".join(author.split())
        elif line.startswith("Date:"):
            timestamp = parse_timestamp(line[len("Date:") :])
        elif line.startswith("    ") or not line.strip():
            # message body follows the headers
            if commit_hash is not None and timestamp is not None:
                break
    if commit_hash is None or timestamp is None:
        return None
    return CommitRecord(author=author, timestamp=timestamp, hash=commit_hash)


def parse_medium_log(text: str) -> list[CommitRecord]:
    """Parse ``git log --pretty=medium --date=iso-strict`` output."""
    records: list[CommitRecord] = []
    for block in group_medium_blocks(text):
        record = parse_medium_block(block)
        if record is None:
            logger.debug("Skipping malformed commit block starting %r", block[0])
            continue
        records.append(record)
    return records
