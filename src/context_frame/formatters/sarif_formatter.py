"""SARIF 2.1.0 formatter for code-scanning dashboards."""

import json

from ..models import ScanResult, ScoreResult
from .base import BaseFormatter, utc_timestamp

SARIF_SCHEMA = "https://json.schemastore.org/sarif-2.1.0.json"

RULES = [
    {
        "id": "CF001",
        "name": "context-maturity",
        "shortDescription": {"text": "Context maturity summary"},
        "fullDescription": {"text": "Summary of context maturity level and quality score."},
        "defaultConfiguration": {"level": "note"},
    },
    {
        "id": "CF002",
        "name": "broken-reference",
        "shortDescription": {"text": "Broken documentation reference"},
        "fullDescription": {"text": "A documentation reference could not be resolved."},
        "defaultConfiguration": {"level": "warning"},
    },
]


class SarifFormatter(BaseFormatter):
    """One note with the maturity summary, then one warning per broken reference."""

    def format(self, scan_result: ScanResult, score: ScoreResult) -> str:
        return json.dumps(self.build(scan_result, score), indent=2)

    def build(self, scan_result: ScanResult, score: ScoreResult) -> dict:
        results: list[dict] = [
            {
                "ruleId": "CF001",
                "level": "note",
                "message": {
                    "text": (
                        f"Maturity level {score.maturity_level}: {score.maturity_name}. "
                        f"Quality {score.quality_score}/10 (weight {score.total_weight})."
                    )
                },
                "properties": {
                    "maturityLevel": score.maturity_level,
                    "qualityScore": score.quality_score,
                    "totalWeight": score.total_weight,
                    "basePath": scan_result.base_path,
                },
            }
        ]

        for issue in scan_result.reference_validation.broken_references:
            results.append({
                "ruleId": "CF002",
                "level": "warning",
                "message": {"text": f"Broken reference: {issue.reference}"},
                "locations": [
                    {
                        "physicalLocation": {
                            "artifactLocation": {"uri": issue.source_file},
                            "region": {"startLine": 1},
                        }
                    }
                ],
                "properties": {"resolvedPath": issue.resolved_path or None},
            })

        return {
            "$schema": SARIF_SCHEMA,
            "version": "2.1.0",
            "runs": [
                {
                    "tool": {"driver": {"name": "Context Frame", "rules": RULES}},
                    "invocations": [
                        {"executionSuccessful": True, "endTimeUtc": utc_timestamp()}
                    ],
                    "results": results,
                }
            ],
        }
