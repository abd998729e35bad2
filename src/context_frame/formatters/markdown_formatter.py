"""Markdown formatter: a report suitable for a PR comment or wiki page."""

from ..levels import MATURITY_LEVELS
from ..models import ScanResult, ScoreResult
from .base import BaseFormatter, build_report_data

MAX_BROKEN_LISTED = 10


def score_bar(score: float, filled_char: str = "█", empty_char: str = "░") -> str:
    filled = min(10, max(0, int(score + 0.5)))
    return filled_char * filled + empty_char * (10 - filled)


class MarkdownFormatter(BaseFormatter):
    """Render the report as GitHub-flavored markdown."""

    def format(self, scan_result: ScanResult, score: ScoreResult) -> str:
        report = build_report_data(scan_result, score)
        lines: list[str] = []

        lines.append("# Context Frame Report\n")
        lines.append(f"**Repository:** `{report['repository']}`\n")
        lines.append(f"**Generated:** {report['timestamp']}\n")

        # -- maturity ladder --
        lines.append("## Maturity Level\n")
        lines.append("| Level | Status |")
        lines.append("|-------|--------|")
        for level in MATURITY_LEVELS:
            status = "✅" if level.level <= score.maturity_level else "⬜"
            current = " ← Current" if level.level == score.maturity_level else ""
            lines.append(f"| {level.level}. {level.name} | {status}{current} |")
        lines.append("")
        lines.append(f"**Current Level:** {score.maturity_level} - {score.maturity_name}\n")
        lines.append(f"> {score.maturity_description}\n")

        # -- quality --
        lines.append("## Quality Score\n")
        lines.append(f"**Score:** {score.quality_score}/10 (bonus: +{score.commit_bonus})\n")
        lines.append(f"**Total Weight:** {score.total_weight}\n")
        lines.append(f"`{score_bar(score.quality_score)}`\n")

        metrics = score.quality_metrics
        lines.append("## Quality Metrics\n")
        lines.append("| Metric | Value |")
        lines.append("|--------|-------|")
        lines.append(f"| Sections | {metrics.sections} |")
        lines.append(f"| File Paths | {metrics.file_paths} |")
        lines.append(f"| Commands | {metrics.commands} |")
        lines.append(f"| Constraints | {metrics.constraints} |")
        lines.append(f"| Word Count | {metrics.word_count} |")
        lines.append("")

        # -- tools --
        lines.append("## Tool Coverage\n")
        if not score.tool_breakdown:
            lines.append("*No AI context files detected*\n")
        for tool, breakdown in score.tool_breakdown.items():
            lines.append(f"### {tool}\n")
            lines.append(f"**Weight:** {breakdown.weight}\n")
            lines.append("**Files:**")
            for path in breakdown.files:
                lines.append(f"- `{path}`")
            lines.append("")

        if score.recommendations:
            lines.append("## Recommendations\n")
            for rec in score.recommendations:
                lines.append(f"- {rec}")
            lines.append("")

        # -- references --
        refs = report["references"]
        lines.append("## Reference Validation\n")
        lines.append(
            f"Resolved: {refs['resolved']}/{refs['total']} ({round(refs['rate'] * 100)}%)\n"
        )
        if refs["broken"]:
            lines.append("Broken references:")
            for broken in refs["broken"][:MAX_BROKEN_LISTED]:
                lines.append(f"- {broken['sourceFile']} -> {broken['reference']}")
            lines.append("")

        commits = report["commits"]
        lines.append("## Commit History\n")
        lines.append(f"Files tracked: {commits['files']}\n")
        lines.append(f"Files with 5+ commits: {commits['filesWithFivePlus']}\n")

        lines.append("---")
        lines.append("*Generated by Context Frame*")
        return "\n".join(lines)
