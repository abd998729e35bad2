"""Data models for Context Frame.

Scan and score results are built once per invocation and never mutated
afterwards. ``to_dict`` renders the camelCase field names that report
consumers rely on.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .patterns import FilePattern


@dataclass
class ContentMetrics:
    """Structural metrics for one document (or the sum over several)."""

    sections: int = 0
    file_paths: int = 0
    commands: int = 0
    constraints: int = 0
    word_count: int = 0

    def __add__(self, other: "ContentMetrics") -> "ContentMetrics":
        return ContentMetrics(
            sections=self.sections + other.sections,
            file_paths=self.file_paths + other.file_paths,
            commands=self.commands + other.commands,
            constraints=self.constraints + other.constraints,
            word_count=self.word_count + other.word_count,
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "sections": self.sections,
            "filePaths": self.file_paths,
            "commands": self.commands,
            "constraints": self.constraints,
            "wordCount": self.word_count,
        }


@dataclass
class DetectedFile:
    """A filesystem entity matched by a catalog pattern.

    ``size``, ``word_count`` and ``metrics`` stay None for entities that were
    not read (directory markers, non-file exact matches).
    """

    path: str
    pattern: FilePattern
    exists: bool = True
    size: Optional[int] = None
    word_count: Optional[int] = None
    metrics: Optional[ContentMetrics] = None

    def to_dict(self) -> dict:
        data: dict = {
            "path": self.path,
            "pattern": self.pattern.to_dict(),
            "exists": self.exists,
        }
        if self.size is not None:
            data["size"] = self.size
        if self.word_count is not None:
            data["wordCount"] = self.word_count
        if self.metrics is not None:
            data["metrics"] = self.metrics.to_dict()
        return data


@dataclass
class ReferenceIssue:
    """A documentation reference that does not resolve on disk."""

    source_file: str
    reference: str
    resolved_path: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "sourceFile": self.source_file,
            "reference": self.reference,
            "resolvedPath": self.resolved_path,
        }


@dataclass
class ReferenceValidationResult:
    """Aggregate outcome of checking markdown cross-references."""

    total_references: int = 0
    resolved_references: int = 0
    broken_references: List[ReferenceIssue] = field(default_factory=list)

    @property
    def resolution_rate(self) -> float:
        # No references at all counts as fully resolved
        if self.total_references == 0:
            return 1.0
        return self.resolved_references / self.total_references

    def to_dict(self) -> dict:
        return {
            "totalReferences": self.total_references,
            "resolvedReferences": self.resolved_references,
            "resolutionRate": self.resolution_rate,
            "brokenReferences": [issue.to_dict() for issue in self.broken_references],
        }


@dataclass
class ScanResult:
    """Everything one scan of a repository observed.

    ``detected_files`` is in catalog order, then filesystem match order.
    ``tools_detected`` holds each tool once, in order of first detection.
    """

    base_path: str
    detected_files: List[DetectedFile]
    tools_detected: List[str]
    total_files_scanned: int
    reference_validation: ReferenceValidationResult = field(
        default_factory=ReferenceValidationResult
    )
    commit_counts: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "basePath": self.base_path,
            "detectedFiles": [d.to_dict() for d in self.detected_files],
            "toolsDetected": list(self.tools_detected),
            "totalFilesScanned": self.total_files_scanned,
            "referenceValidation": self.reference_validation.to_dict(),
            "commitCounts": dict(self.commit_counts),
        }


@dataclass
class ToolBreakdown:
    """Files matched for one tool and their summed pattern weight."""

    files: List[str] = field(default_factory=list)
    weight: int = 0

    def to_dict(self) -> dict:
        return {"files": list(self.files), "weight": self.weight}


@dataclass
class ScoreResult:
    """Maturity level, quality score and recommendations for one scan."""

    maturity_level: int
    maturity_name: str
    maturity_description: str
    quality_score: float
    total_weight: int
    tool_breakdown: Dict[str, ToolBreakdown]
    quality_metrics: ContentMetrics
    recommendations: List[str]
    commit_bonus: float = 0.0

    def to_dict(self) -> dict:
        return {
            "maturityLevel": self.maturity_level,
            "maturityName": self.maturity_name,
            "maturityDescription": self.maturity_description,
            "qualityScore": self.quality_score,
            "totalWeight": self.total_weight,
            "toolBreakdown": {tool: b.to_dict() for tool, b in self.tool_breakdown.items()},
            "qualityMetrics": self.quality_metrics.to_dict(),
            "recommendations": list(self.recommendations),
            "commitBonus": self.commit_bonus,
        }
