"""Maturity level, quality score and recommendations for a scan.

Scoring is a pure function of the ScanResult. The maturity level is the
highest level with any evidence, so a repository can show level 5 without
having level 2-4 files. Quality is measured independently from the
content of the detected documents.
"""

import math
from pathlib import Path

from .levels import MATURITY_LEVELS, get_level_by_number
from .models import ContentMetrics, DetectedFile, ScanResult, ScoreResult, ToolBreakdown
from .scanning.content import analyze_file_content

MAX_RECOMMENDATIONS = 5

# (metric divisor, cap) per quality component; five components of 2.0 make 10
SECTION_DIVISOR = 5
FILE_PATH_DIVISOR = 10
COMMAND_DIVISOR = 10
CONSTRAINT_DIVISOR = 10
WORD_DIVISOR = 500
COMPONENT_CAP = 2.0

# Display-only bonus for context files with a real edit history
COMMIT_BONUS_MIN_COMMITS = 5
COMMIT_BONUS_PER_FILE = 0.5
COMMIT_BONUS_CAP = 2.0

# Tools whose absence earns a coverage recommendation, with the file to add
_TOOL_COVERAGE = (
    ("Claude Code", "Add CLAUDE.md for Claude Code support"),
    ("GitHub Copilot", "Add .github/copilot-instructions.md for Copilot support"),
    ("Cursor", "Add .cursorrules or .cursor/rules/ for Cursor support"),
)


def calculate_score(scan_result: ScanResult) -> ScoreResult:
    """Score a scan. Never fails for a well-formed ScanResult."""
    tool_breakdown: dict[str, ToolBreakdown] = {}
    total_weight = 0
    levels_satisfied = {1}
    quality_metrics = ContentMetrics()

    for detected in scan_result.detected_files:
        pattern = detected.pattern
        breakdown = tool_breakdown.setdefault(pattern.tool, ToolBreakdown())
        breakdown.files.append(detected.path)
        breakdown.weight += pattern.weight
        total_weight += pattern.weight
        levels_satisfied.add(pattern.level)

        if detected.path.endswith(".md"):
            quality_metrics = quality_metrics + _document_metrics(scan_result, detected)
        elif detected.word_count:
            quality_metrics = quality_metrics + ContentMetrics(word_count=detected.word_count)

    maturity_level = max(
        level for level in levels_satisfied if 1 <= level <= len(MATURITY_LEVELS)
    )
    level = get_level_by_number(maturity_level) or MATURITY_LEVELS[0]

    return ScoreResult(
        maturity_level=level.level,
        maturity_name=level.name,
        maturity_description=level.description,
        quality_score=calculate_quality_score(quality_metrics),
        total_weight=total_weight,
        tool_breakdown=tool_breakdown,
        quality_metrics=quality_metrics,
        recommendations=generate_recommendations(scan_result, level.level, quality_metrics),
        commit_bonus=calculate_commit_bonus(scan_result.commit_counts),
    )


def _document_metrics(scan_result: ScanResult, detected: DetectedFile) -> ContentMetrics:
    # Metrics computed during the scan are identical to a fresh read
    if detected.metrics is not None:
        return detected.metrics
    return analyze_file_content(Path(scan_result.base_path) / detected.path)


def calculate_quality_score(metrics: ContentMetrics) -> float:
    """Sum five capped components into a 0-10 score, rounded half-up to 0.1."""
    raw = (
        min(metrics.sections / SECTION_DIVISOR, COMPONENT_CAP)
        + min(metrics.file_paths / FILE_PATH_DIVISOR, COMPONENT_CAP)
        + min(metrics.commands / COMMAND_DIVISOR, COMPONENT_CAP)
        + min(metrics.constraints / CONSTRAINT_DIVISOR, COMPONENT_CAP)
        + min(metrics.word_count / WORD_DIVISOR, COMPONENT_CAP)
    )
    return round_half_up(raw)


def round_half_up(value: float, digits: int = 1) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def calculate_commit_bonus(commit_counts: dict[str, int]) -> float:
    """Bonus for context files with at least five commits. Not part of quality."""
    mature_files = sum(1 for count in commit_counts.values() if count >= COMMIT_BONUS_MIN_COMMITS)
    return round_half_up(min(mature_files * COMMIT_BONUS_PER_FILE, COMMIT_BONUS_CAP))


def generate_recommendations(
    scan_result: ScanResult, maturity_level: int, metrics: ContentMetrics
) -> list[str]:
    """Up to five suggestions, highest priority first."""
    recommendations: list[str] = []

    if maturity_level < 2:
        recommendations.append(
            "Add a CLAUDE.md or .cursorrules file to provide basic AI instructions"
        )
    if maturity_level < 3:
        recommendations.append("Create ARCHITECTURE.md to document your system design")
        recommendations.append("Add CONVENTIONS.md to establish coding standards")
    if maturity_level < 4:
        recommendations.append("Set up .claude/commands/ for custom automation")
        recommendations.append("Configure hooks for pre/post processing")
    if maturity_level < 5:
        recommendations.append("Create AGENTS.md to define multi-agent workflows")
        recommendations.append("Add MCP configuration for external tool integration")

    if metrics.sections < 5:
        recommendations.append("Add more sections to your documentation for better organization")
    if metrics.constraints < 5:
        recommendations.append(
            "Include more explicit constraints (must/should/never) for clearer guidance"
        )
    if metrics.word_count < 200:
        recommendations.append("Expand your documentation with more detailed instructions")

    for tool, suggestion in _TOOL_COVERAGE:
        if tool not in scan_result.tools_detected:
            recommendations.append(suggestion)

    return recommendations[:MAX_RECOMMENDATIONS]
