"""
Safe file operations for Context Frame.

Reads never raise raw OSErrors; skip-glob matching and tree walking share
one notion of "excluded path".
"""

import os
from collections.abc import Iterable, Iterator
from fnmatch import fnmatchcase
from pathlib import Path, PurePosixPath

from .exceptions import FileAccessError


def safe_read_file(filepath: Path, encoding: str = "utf-8", errors: str = "replace") -> str:
    """
    Read a text file, converting OS-level failures into FileAccessError.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        File contents as string

    Raises:
        FileAccessError: If file cannot be read
    """
    try:
        with open(filepath, encoding=encoding, errors=errors) as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def to_posix(relative_path: str) -> str:
    return str(PurePosixPath(*Path(relative_path).parts)) if relative_path else ""


def should_skip_path(relative_path: str, skip_patterns: Iterable[str]) -> bool:
    """
    Check if a repository-relative path is excluded by any skip-glob.

    ``**`` spans any number of segments, including none, so
    ``**/node_modules/**`` excludes ``node_modules`` at the root as well as
    nested copies. Dot-prefixed names get no special treatment.

    Args:
        relative_path: Path relative to the scan root
        skip_patterns: Glob patterns to exclude

    Returns:
        True if the path should be skipped
    """
    rel = to_posix(relative_path).strip("/")
    if not rel or rel == ".":
        return False

    candidates = (rel, f"{rel}/", f"/{rel}", f"/{rel}/")
    for pattern in skip_patterns:
        if any(fnmatchcase(candidate, pattern) for candidate in candidates):
            return True
    return False


def walk_files(
    root_dir: Path, skip_patterns: Iterable[str], suffix: str = ""
) -> Iterator[Path]:
    """
    Yield files under ``root_dir`` in sorted order, pruning skipped directories.

    Symbolic links to directories are not followed.

    Args:
        root_dir: Directory to walk
        skip_patterns: Glob patterns to exclude
        suffix: Only yield files whose name ends with this suffix

    Yields:
        Absolute file paths
    """
    patterns = tuple(skip_patterns)
    root = Path(root_dir)

    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = os.path.relpath(dirpath, root)
        if rel_dir == ".":
            rel_dir = ""

        dirnames[:] = sorted(
            d for d in dirnames if not should_skip_path(os.path.join(rel_dir, d), patterns)
        )

        for name in sorted(filenames):
            if suffix and not name.endswith(suffix):
                continue
            if should_skip_path(os.path.join(rel_dir, name), patterns):
                continue
            yield Path(dirpath) / name
