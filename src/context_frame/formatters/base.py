"""Base formatter interface and the shared report projection."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from ..levels import MATURITY_LEVELS
from ..models import ScanResult, ScoreResult
from ..scorer import COMMIT_BONUS_MIN_COMMITS


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format(self, scan_result: ScanResult, score: ScoreResult) -> str:
        """Return formatted string representation of the report."""

    def render(self, scan_result: ScanResult, score: ScoreResult) -> None:
        """Print the report to stdout."""
        print(self.format(scan_result, score))


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def build_report_data(
    scan_result: ScanResult, score: ScoreResult, generated_at: Optional[str] = None
) -> dict:
    """Project a scan and its score onto the report structure every format shares."""
    ref = scan_result.reference_validation
    counts = scan_result.commit_counts
    return {
        "repository": scan_result.base_path,
        "timestamp": generated_at or utc_timestamp(),
        "maturity": {
            "level": score.maturity_level,
            "name": score.maturity_name,
            "description": score.maturity_description,
        },
        "quality": {
            "score": score.quality_score,
            "maxScore": 10,
            "weight": score.total_weight,
            "commitBonus": score.commit_bonus,
        },
        "metrics": score.quality_metrics.to_dict(),
        "tools": {tool: b.to_dict() for tool, b in score.tool_breakdown.items()},
        "recommendations": list(score.recommendations),
        "levels": [
            {
                "level": lvl.level,
                "name": lvl.name,
                "achieved": lvl.level <= score.maturity_level,
            }
            for lvl in MATURITY_LEVELS
        ],
        "references": {
            "total": ref.total_references,
            "resolved": ref.resolved_references,
            "rate": ref.resolution_rate,
            "broken": [issue.to_dict() for issue in ref.broken_references],
        },
        "commits": {
            "files": len(counts),
            "filesWithFivePlus": sum(
                1 for c in counts.values() if c >= COMMIT_BONUS_MIN_COMMITS
            ),
            "counts": dict(counts),
        },
    }
