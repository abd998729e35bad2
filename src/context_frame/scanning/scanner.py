"""Pattern-driven repository scanner.

Rather than classifying every file in the tree, the scanner probes the
locations named by the pattern catalog. Only glob specifiers and reference
validation touch more of the tree than the catalog names.
"""

import os
import stat
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Optional

from ..config import ContextFrameConfig, load_config
from ..exceptions import FileAccessError, PathNotFoundError
from ..file_ops import safe_read_file, should_skip_path, to_posix
from ..logging_config import get_logger
from ..models import DetectedFile, ScanResult
from ..patterns import FILE_PATTERNS, FilePattern, is_directory_marker, is_glob
from ..temporal import get_commit_counts
from .content import analyze_text_content
from .references import validate_references

logger = get_logger(__name__)

CommitCounter = Callable[[str, list[str]], dict[str, int]]


class RepositoryScanner:
    """Scans one repository root against a pattern catalog."""

    def __init__(
        self,
        root_dir: str,
        patterns: Optional[Iterable[FilePattern]] = None,
        config: Optional[ContextFrameConfig] = None,
        commit_counter: Optional[CommitCounter] = get_commit_counts,
    ):
        """
        Initialize scanner.

        Args:
            root_dir: Repository root to scan
            patterns: Pattern catalog (defaults to FILE_PATTERNS)
            config: Settings; loaded from the repository when omitted
            commit_counter: Supplies per-path commit counts; None skips history
        """
        self.root_dir = Path(os.path.abspath(root_dir))
        self.patterns = tuple(patterns) if patterns is not None else FILE_PATTERNS
        self.config = config
        self.commit_counter = commit_counter

    def scan(self) -> ScanResult:
        """
        Probe every catalog pattern, validate references and collect history.

        Returns:
            ScanResult with detected files in catalog order

        Raises:
            PathNotFoundError: If the root does not exist
            ConfigurationError: If the repository config is malformed or invalid
        """
        if not os.path.exists(self.root_dir):
            raise PathNotFoundError(self.root_dir)

        config = self.config or load_config(self.root_dir, strict_thresholds=False)
        skip_patterns = config.skip_patterns

        detected: list[DetectedFile] = []
        tools: dict[str, None] = {}

        for pattern in self.patterns:
            if not config.allows_tool(pattern.tool):
                continue
            for specifier in pattern.patterns:
                matches = self._probe(pattern, specifier, skip_patterns)
                if matches:
                    detected.extend(matches)
                    tools.setdefault(pattern.tool, None)

        reference_validation = validate_references(self.root_dir, skip_patterns)

        commit_counts: dict[str, int] = {}
        if self.commit_counter is not None and detected:
            commit_counts = self.commit_counter(
                str(self.root_dir), [d.path for d in detected]
            )

        logger.info(
            f"Scan complete: {len(detected)} context files, "
            f"{len(tools)} tools, {reference_validation.total_references} references"
        )
        return ScanResult(
            base_path=str(self.root_dir),
            detected_files=detected,
            tools_detected=list(tools),
            total_files_scanned=len(detected),
            reference_validation=reference_validation,
            commit_counts=commit_counts,
        )

    # ── Specifier probes ───────────────────────────────────────

    def _probe(
        self, pattern: FilePattern, specifier: str, skip_patterns: tuple[str, ...]
    ) -> list[DetectedFile]:
        # Unreadable entities and globs pathlib rejects are non-matches, never fatal
        try:
            if is_directory_marker(specifier):
                return self._probe_directory(pattern, specifier, skip_patterns)
            if is_glob(specifier):
                return self._probe_glob(pattern, specifier, skip_patterns)
            return self._probe_exact(pattern, specifier, skip_patterns)
        except (OSError, ValueError, FileAccessError) as e:
            logger.debug(f"Skipping {specifier!r} ({pattern.name}): {e}")
            return []

    def _probe_directory(
        self, pattern: FilePattern, specifier: str, skip_patterns: tuple[str, ...]
    ) -> list[DetectedFile]:
        rel = to_posix(specifier.rstrip("/"))
        if should_skip_path(rel, skip_patterns):
            return []
        if not (self.root_dir / rel).is_dir():
            return []
        return [DetectedFile(path=rel, pattern=pattern)]

    def _probe_glob(
        self, pattern: FilePattern, specifier: str, skip_patterns: tuple[str, ...]
    ) -> list[DetectedFile]:
        found: list[DetectedFile] = []
        for match in sorted(self.root_dir.glob(specifier)):
            rel = to_posix(os.path.relpath(match, self.root_dir))
            if should_skip_path(rel, skip_patterns):
                continue
            try:
                if not match.is_file():
                    continue
                found.append(self._read_detected(match, rel, pattern))
            except (OSError, FileAccessError) as e:
                logger.debug(f"Skipping unreadable match {rel}: {e}")
        return found

    def _probe_exact(
        self, pattern: FilePattern, specifier: str, skip_patterns: tuple[str, ...]
    ) -> list[DetectedFile]:
        rel = to_posix(specifier)
        if should_skip_path(rel, skip_patterns):
            return []
        path = self.root_dir / rel
        if not os.path.exists(path):
            return []

        st = path.stat()
        if stat.S_ISREG(st.st_mode):
            return [self._read_detected(path, rel, pattern)]
        return [DetectedFile(path=rel, pattern=pattern, size=st.st_size)]

    @staticmethod
    def _read_detected(path: Path, rel: str, pattern: FilePattern) -> DetectedFile:
        size = path.stat().st_size
        metrics = analyze_text_content(safe_read_file(path))
        return DetectedFile(
            path=rel,
            pattern=pattern,
            size=size,
            word_count=metrics.word_count,
            metrics=metrics,
        )


def scan_repository(
    base_path: str,
    patterns: Optional[Iterable[FilePattern]] = None,
    config: Optional[ContextFrameConfig] = None,
) -> ScanResult:
    """Scan ``base_path`` for AI context files.

    Raises:
        PathNotFoundError: If ``base_path`` does not exist
    """
    return RepositoryScanner(base_path, patterns=patterns, config=config).scan()
