"""Cross-reference validation for markdown documentation.

A reference is either a markdown link target or an inline-code span that
looks like a path. Each one is resolved against the document's directory
(or the repository root for ``/``-prefixed references) and checked on disk.
"""

import os
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from ..exceptions import FileAccessError
from ..file_ops import safe_read_file, to_posix, walk_files
from ..logging_config import get_logger
from ..models import ReferenceIssue, ReferenceValidationResult

logger = get_logger(__name__)

SKIPPABLE_PREFIXES = ("http://", "https://", "mailto:", "tel:", "#")

# "](...)" allowing one level of nested parentheses inside the target
_LINK_TARGET_RE = re.compile(r"\]\(((?:[^()]|\([^()]*\))*)\)")

_INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")

# Up to three spaces of indentation, then ``` or ~~~ (or longer)
_FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")


def strip_fenced_blocks(content: str) -> str:
    """Blank out fenced code blocks, fences included.

    Line count is preserved. An unclosed fence runs to the end of the text.
    """
    lines: list[str] = []
    fence: Optional[str] = None

    for line in content.splitlines():
        match = _FENCE_RE.match(line)
        if fence is None:
            if match:
                fence = match.group(1)
                lines.append("")
            else:
                lines.append(line)
            continue

        if match and match.group(1)[0] == fence[0] and len(match.group(1)) >= len(fence):
            fence = None
        lines.append("")

    return "\n".join(lines)


def link_destination(target: str) -> str:
    """Drop a link title and <...> brackets from the text inside "](...)"."""
    target = target.strip()
    if target.startswith("<"):
        end = target.find(">")
        if end != -1:
            return target[1:end].strip()
    parts = target.split(None, 1)
    return parts[0] if parts else ""


def is_skippable(reference: str) -> bool:
    return reference.startswith(SKIPPABLE_PREFIXES)


def looks_like_path(code: str) -> bool:
    return code.startswith(("./", "../")) or "/" in code or "\\" in code


def extract_references(content: str) -> list[str]:
    """Return the checkable references in a markdown document.

    Link targets come from the full text; path-like inline code is taken
    only from outside fenced code blocks. External URLs and same-document
    anchors are dropped, ``#fragment`` suffixes are stripped, and each
    reference appears once, in order of first occurrence.
    """
    raw: list[str] = [link_destination(m.group(1)) for m in _LINK_TARGET_RE.finditer(content)]
    raw.extend(
        m.group(1)
        for m in _INLINE_CODE_RE.finditer(strip_fenced_blocks(content))
        if looks_like_path(m.group(1).strip())
    )

    references: dict[str, None] = {}
    for candidate in raw:
        candidate = candidate.strip()
        if is_skippable(candidate):
            continue
        references.setdefault(candidate.split("#", 1)[0], None)
    return list(references)


def resolve_reference(reference: str, source_file: Path, base_path: Path) -> Optional[Path]:
    """Resolve ``reference`` to an absolute path, or None if it is empty."""
    if not reference:
        return None

    normalized = reference.replace("\\", "/")
    if normalized.startswith("/"):
        candidate = Path(base_path) / normalized.lstrip("/")
    else:
        candidate = Path(source_file).parent / normalized
    return Path(os.path.normpath(candidate))


def validate_references(
    base_path: Path, skip_patterns: Iterable[str]
) -> ReferenceValidationResult:
    """Check every reference in every ``*.md`` file under ``base_path``."""
    base = Path(base_path)
    total = 0
    resolved = 0
    broken: list[ReferenceIssue] = []

    for md_file in walk_files(base, skip_patterns, suffix=".md"):
        try:
            content = safe_read_file(md_file)
        except FileAccessError as e:
            logger.debug(f"Skipping unreadable document {md_file}: {e.reason}")
            continue

        source = to_posix(os.path.relpath(md_file, base))
        for reference in extract_references(content):
            total += 1
            target = resolve_reference(reference, md_file, base)
            if target is not None and os.path.exists(target):
                resolved += 1
                continue

            resolved_path = to_posix(os.path.relpath(target, base)) if target is not None else ""
            broken.append(ReferenceIssue(source, reference, resolved_path))

    logger.info(f"Reference validation: {resolved}/{total} resolved, {len(broken)} broken")
    return ReferenceValidationResult(
        total_references=total,
        resolved_references=resolved,
        broken_references=broken,
    )
