from __future__ import annotations

import logging
import time
from pathlib import Path

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from hashrarity.constants import MEDIUM_DATE_FORMAT, MEDIUM_LOG_FORMAT, ONELINE_LOG_FORMAT

logger = logging.getLogger(__name__)


class RepositoryError(RuntimeError):
    """Raised when commit history cannot be read from a repository."""


def open_repository(repo_path: str | Path) -> Repo:
    try:
        return Repo(str(repo_path), search_parent_directories=True)
    except NoSuchPathError as e:
        raise RepositoryError(f"Repository path does not exist: {repo_path}") from e
    except InvalidGitRepositoryError as e:
        raise RepositoryError(f"Not a git repository: {repo_path}") from e


def build_log_args(
    branch: str | None = None, max_commits: int | None = None, layout: str = "oneline"
) -> list[str]:
    if layout == "medium":
        args = [f"--pretty={MEDIUM_LOG_FORMAT}", f"--date={MEDIUM_DATE_FORMAT}"]
    elif layout == "oneline":
        args = [f"--pretty={ONELINE_LOG_FORMAT}"]
    else:
        raise ValueError(f"Unknown log layout: {layout!r}")
    args.append("--no-color")
    if max_commits:
        args.append(f"-{max_commits}")
    if branch:
        args.append(branch)
    return args


def read_commit_log(
    repo_path: str | Path,
    branch: str | None = None,
    max_commits: int | None = None,
    layout: str = "oneline",
) -> str:
    """Return raw ``git log`` text for the repository, or "" when it has no commits."""
    repo = open_repository(repo_path)
    try:
        if not branch and not repo.head.is_valid():
            logger.info("Repository %s has no commits yet", repo.working_dir)
            return ""

        args = build_log_args(branch, max_commits, layout)
        logger.info("Reading git history from %s (%s)", repo.working_dir, " ".join(args))
        start_time = time.time()
        try:
            output = repo.git.log(*args)
        except GitCommandError as e:
            stderr = (e.stderr or "").strip()
            raise RepositoryError(f"git log failed: {stderr or e}") from e

        line_count = output.count("\n") + 1 if output else 0
        logger.info("Read %d log lines in %.2fs", line_count, time.time() - start_time)
        return output
    finally:
        repo.close()
