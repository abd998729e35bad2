"""JSON formatter: the camelCase report document consumed by CI tooling."""

import json

from ..models import ScanResult, ScoreResult
from .base import BaseFormatter, build_report_data


class JsonFormatter(BaseFormatter):
    """Serialize the report; ``indent=None`` gives a single line for piping."""

    def __init__(self, indent=2):
        self.indent = indent

    def format(self, scan_result: ScanResult, score: ScoreResult) -> str:
        report = build_report_data(scan_result, score)
        return json.dumps(report, indent=self.indent, ensure_ascii=False)
