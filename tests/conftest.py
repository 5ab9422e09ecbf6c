"""Shared fixtures for the hash-rarity test suite.

- Disables tqdm progress bars so test output stays quiet.
- Provides canned log text with one commit per rarity rule of interest.
- Builds throwaway git repositories with GitPython.
"""

from __future__ import annotations

from pathlib import Path

import pytest

COMMON_HASH = "3f2a9c1e7b4d8a6f0c5e2b9d7a1f4c8e6b3d0a9c"
UNCOMMON_HASH = "123456789abcdef0a1b2c3d4e5f60718293a4b5c"
RARE_HASH = "abcdefabc1234567890fedcba0987654321f0e1d2"


@pytest.fixture(autouse=True)
def _quiet_progress(monkeypatch):
    monkeypatch.setenv("HASH_RARITY_PROGRESS", "off")


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    for name in (
        "HASH_RARITY_REPO",
        "HASH_RARITY_BRANCH",
        "HASH_RARITY_WORKERS",
        "HASH_RARITY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_log() -> str:
    return "\n".join(
        [
            f"{COMMON_HASH} 2024-09-28T17:45:47+00:00 John Doe",
            f"{UNCOMMON_HASH} 2024-09-27T08:00:00+02:00 Jane Q. Public",
            f"{RARE_HASH} 2024-09-26T12:30:00-05:00 Solo",
            "deadbeef",
        ]
    )


@pytest.fixture
def make_repo(tmp_path: Path):
    """Return a factory creating a git repository with ``n`` commits."""
    from git import Repo

    def _make(commits: int = 3, name: str = "repo") -> Path:
        repo_dir = tmp_path / name
        repo_dir.mkdir()
        repo = Repo.init(repo_dir)
        with repo.config_writer() as cw:
            cw.set_value("user", "name", "Tester Person")
            cw.set_value("user", "email", "tester@example.com")
        for i in range(commits):
            path = repo_dir / f"file{i}.txt"
            path.write_text(f"content {i}\n", encoding="utf-8")
            repo.index.add([str(path)])
            repo.index.commit(f"commit {i}")
        repo.close()
        return repo_dir

    return _make
