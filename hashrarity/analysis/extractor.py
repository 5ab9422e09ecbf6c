#!/usr/bin/env python3

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from hashrarity.analysis.records import parse_lines
from hashrarity.analysis.types import CommitRecord
from hashrarity.constants import DEFAULT_CHUNK_SIZE, MAX_WORKERS
from hashrarity.utils.progress import progress_iter


def chunk_lines(lines: Sequence[str], chunk_size: int) -> list[Sequence[str]]:
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    return [lines[i : i + chunk_size] for i in range(0, len(lines), chunk_size)]


def parse_lines_concurrently(
    lines: Sequence[str],
    max_workers: int,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> list[CommitRecord]:
    records: list[CommitRecord] = []
    chunks = chunk_lines(lines, chunk_size)
    if not chunks:
        return records

    workers = max(1, min(max_workers, MAX_WORKERS, len(chunks)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        # Futures are consumed in submission order so output order matches input
        futures = [executor.submit(parse_lines, chunk) for chunk in chunks]
        for future in progress_iter(futures, total=len(futures), desc="Parsing commits"):
            records.extend(future.result())

    return records
