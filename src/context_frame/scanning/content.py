"""Structural metrics for context documents.

Line/token heuristics, not a markdown parser: the counts are evidence of
how much concrete guidance a document carries.
"""

import re
from pathlib import Path
from typing import Optional

from ..exceptions import FileAccessError
from ..file_ops import safe_read_file
from ..models import ContentMetrics

# ATX headings of any level
_SECTION_RE = re.compile(r"^#+\s+", re.MULTILINE)

# Tokens such as ./setup.sh, /etc/hosts, src/app.py, lib/util
_FILE_PATH_RE = re.compile(r"(?:\./|/|src/|lib/)[a-zA-Z0-9_\-/.]+")

# Inline code spans, shortest pair of backticks
_COMMAND_RE = re.compile(r"`[^`]+`")

_CONSTRAINT_RE = re.compile(
    r"\b(must|should|never|always|don't|do not|required|forbidden)\b", re.IGNORECASE
)


def analyze_text_content(content: Optional[str]) -> ContentMetrics:
    """Compute structural metrics for raw document text.

    Never fails; empty or missing content yields all-zero metrics.
    """
    if not content:
        return ContentMetrics()

    return ContentMetrics(
        sections=len(_SECTION_RE.findall(content)),
        file_paths=len(_FILE_PATH_RE.findall(content)),
        commands=len(_COMMAND_RE.findall(content)),
        constraints=len(_CONSTRAINT_RE.findall(content)),
        word_count=count_words(content),
    )


def analyze_file_content(filepath: Path) -> ContentMetrics:
    """Read ``filepath`` and analyze it; unreadable or missing files score zero."""
    try:
        content = safe_read_file(filepath)
    except FileAccessError:
        return ContentMetrics()
    return analyze_text_content(content)


def count_words(content: str) -> int:
    return len(content.split())
