"""Shared test fixtures for Context Frame."""

import shutil
from pathlib import Path

import pytest


def pytest_configure(config):
    """Register the git marker."""
    config.addinivalue_line("markers", "git: test needs a git executable")


def pytest_collection_modifyitems(config, items):
    """Skip git tests when git is not installed."""
    if shutil.which("git") is not None:
        return
    skip_git = pytest.mark.skip(reason="git executable not found")
    for item in items:
        if "git" in item.keywords:
            item.add_marker(skip_git)


def write_files(root: Path, files: dict) -> Path:
    """Create ``{relative_path: content}`` under ``root``.

    A path ending in "/" creates an empty directory.
    """
    for rel, content in files.items():
        target = root / rel
        if rel.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_repo(tmp_path):
    """Factory building a repository tree in a fresh directory."""

    def _make(files: dict) -> Path:
        root = tmp_path / "repo"
        root.mkdir(exist_ok=True)
        return write_files(root, files)

    return _make


@pytest.fixture
def no_git(monkeypatch):
    """Make every directory look like it is outside a git work tree."""
    from context_frame.temporal.git_extractor import GitExtractor

    monkeypatch.setattr(GitExtractor, "is_git_repo", lambda self: False)
