"""
Context Frame - AI Context Maturity Scanner

Scans a repository for the instruction, architecture and agent files that
AI coding assistants read, places the repository on an eight-level maturity
ladder, and scores how much concrete guidance those files carry.
"""

__version__ = "0.3.0"

from .levels import MATURITY_LEVELS, MaturityLevel, get_level_by_number
from .models import (
    ContentMetrics,
    DetectedFile,
    ReferenceIssue,
    ReferenceValidationResult,
    ScanResult,
    ScoreResult,
    ToolBreakdown,
)
from .patterns import FILE_PATTERNS, FilePattern, get_patterns_by_level, get_patterns_by_tool
from .scanning import analyze_file_content, analyze_text_content, scan_repository
from .scorer import calculate_score

__all__ = [
    "scan_repository",  # Main entry point
    "calculate_score",
    "analyze_file_content",
    "analyze_text_content",
    "FILE_PATTERNS",
    "FilePattern",
    "get_patterns_by_tool",
    "get_patterns_by_level",
    "MATURITY_LEVELS",
    "MaturityLevel",
    "get_level_by_number",
    "ContentMetrics",
    "DetectedFile",
    "ReferenceIssue",
    "ReferenceValidationResult",
    "ScanResult",
    "ScoreResult",
    "ToolBreakdown",
]
