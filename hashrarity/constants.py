#!/usr/bin/env python3
"""
Centralized constants for the hash-rarity tool.

Rule patterns, git log formats and tunable defaults live here so the
classifier, the log reader and the CLI agree on them.
"""

import os

# Classification rules
PATTERN_LENGTH = 9
DIGIT_RUN = "9" * PATTERN_LENGTH
LETTER_RUN = "abcdefghi"

# Illustrative weights per tier (not measured statistics)
COMMON_FREQUENCY = 0.99
UNCOMMON_FREQUENCY = 0.01
RARE_FREQUENCY = 0.001

# Git log layouts
# One record per line: <hash> <strict ISO-8601 author date> <author name>
ONELINE_LOG_FORMAT = "format:%H %aI %an"
MEDIUM_LOG_FORMAT = "medium"
MEDIUM_DATE_FORMAT = "iso-strict"
LOG_LAYOUTS = ("oneline", "medium")

# Parsing throughput
#
# Environment overrides:
#
#   export HASH_RARITY_CHUNK_SIZE=5000
#   export HASH_RARITY_WORKERS=4
DEFAULT_CHUNK_SIZE = int(os.getenv("HASH_RARITY_CHUNK_SIZE", "2000"))
DEFAULT_WORKERS = 1
MAX_WORKERS = 32

# Presentation
TABLE_COLUMNS = ["author", "datetime", "hash", "rarity", "explanation", "frequency"]
NO_COMMITS_MESSAGE = "No commits found"
NO_RARE_COMMITS_MESSAGE = "No uncommon or rare commits found"
