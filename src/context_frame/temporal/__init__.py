"""Version-control history for detected context files."""

from .git_extractor import GitExtractor, get_commit_counts

__all__ = ["GitExtractor", "get_commit_counts"]
