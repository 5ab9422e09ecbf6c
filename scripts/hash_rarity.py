#!/usr/bin/env python
"""
Thin CLI wrapper for commit hash rarity analysis.
Use the console script entry point (see pyproject.toml) where possible.
"""

from hashrarity.analysis.cli import main

if __name__ == "__main__":
    main()
