"""Per-file commit counts via the git CLI."""

import subprocess
from collections.abc import Iterable
from pathlib import Path

from ..logging_config import get_logger

logger = get_logger(__name__)


class GitExtractor:
    """Count the commits on the current history tip that touch each path."""

    # Seconds allowed for any single git invocation
    TIMEOUT = 10

    def __init__(self, repo_path: str):
        self.repo_path = str(Path(repo_path).resolve())

    def is_git_repo(self) -> bool:
        try:
            result = subprocess.run(
                ["git", "-C", self.repo_path, "rev-parse", "--is-inside-work-tree"],
                capture_output=True,
                text=True,
                timeout=5,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired):
            return False
        return result.returncode == 0 and result.stdout.strip() == "true"

    def commit_counts(self, paths: Iterable[str]) -> dict[str, int]:
        """Return ``{path: commits}``; empty when this is not a git work tree."""
        if not self.is_git_repo():
            logger.info("Not a git repository, skipping commit history")
            return {}
        return {path: self.commit_count(path) for path in paths}

    def commit_count(self, path: str) -> int:
        try:
            result = subprocess.run(
                ["git", "-C", self.repo_path, "rev-list", "--count", "HEAD", "--", path],
                capture_output=True,
                text=True,
                timeout=self.TIMEOUT,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            logger.warning("git rev-list error for %s: %s", path, e)
            return 0

        if result.returncode != 0:
            # An unborn HEAD lands here too
            logger.debug("git rev-list failed for %s: %s", path, result.stderr.strip())
            return 0
        try:
            return int(result.stdout.strip())
        except ValueError:
            return 0


def get_commit_counts(base_path: str, paths: Iterable[str]) -> dict[str, int]:
    return GitExtractor(base_path).commit_counts(paths)
