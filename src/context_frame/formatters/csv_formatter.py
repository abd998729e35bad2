"""CSV formatter for Context Frame."""

import csv
import io

from ..models import ScanResult, ScoreResult
from .base import BaseFormatter, build_report_data

HEADERS = [
    "repository",
    "timestamp",
    "level",
    "quality_score",
    "commit_bonus",
    "refs_total",
    "refs_resolved",
    "refs_rate",
    "context_files",
    "context_files_5plus",
]


class CsvFormatter(BaseFormatter):
    """Render a one-row CSV summary, every value quoted."""

    def render(self, scan_result: ScanResult, score: ScoreResult) -> None:
        print(self.format(scan_result, score), end="")

    def format(self, scan_result: ScanResult, score: ScoreResult) -> str:
        report = build_report_data(scan_result, score)
        output = io.StringIO()
        writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(HEADERS)
        writer.writerow([
            report["repository"],
            report["timestamp"],
            report["maturity"]["level"],
            report["quality"]["score"],
            report["quality"]["commitBonus"],
            report["references"]["total"],
            report["references"]["resolved"],
            f"{report['references']['rate']:.2f}",
            report["commits"]["files"],
            report["commits"]["filesWithFivePlus"],
        ])
        return output.getvalue()
