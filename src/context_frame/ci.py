"""CI gate: fail the build when a repository falls below its thresholds."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .config import load_config
from .logging_config import get_logger
from .scanning import RepositoryScanner
from .scorer import calculate_score

logger = get_logger(__name__)

WORKFLOW_PATH = Path(".github") / "workflows" / "context-frame.yml"

WORKFLOW_TEMPLATE = """name: Context Frame

on:
  pull_request:
  push:
    branches: [ main, master ]

jobs:
  context-frame:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4
      - uses: actions/setup-python@v5
        with:
          python-version: "3.12"
      - run: pip install context-frame
      - run: context-frame ci .
"""


@dataclass
class CiResult:
    """Outcome of a CI run: process exit code and the JSON-ready report."""

    exit_code: int
    report: dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.exit_code == 0


def run_ci(
    path: str,
    min_level: Optional[int] = None,
    min_quality_score: Optional[float] = None,
    min_resolved_refs_rate: Optional[float] = None,
) -> CiResult:
    """
    Scan and score ``path`` and compare the result against its thresholds.

    Thresholds come from the repository config, then environment variables,
    then the explicit arguments here (None means "not overridden").

    Raises:
        PathNotFoundError: If ``path`` does not exist
        ConfigurationError: If the config or an override is invalid
    """
    base = os.path.abspath(path)
    config = load_config(
        Path(base),
        min_level=min_level,
        min_quality_score=min_quality_score,
        min_resolved_refs_rate=min_resolved_refs_rate,
    )
    scan_result = RepositoryScanner(base, config=config).scan()
    score = calculate_score(scan_result)
    thresholds = config.thresholds
    rate = scan_result.reference_validation.resolution_rate

    fail_reasons: list[str] = []
    if score.maturity_level < thresholds.min_level:
        fail_reasons.append(f"Level {score.maturity_level} < {thresholds.min_level}")
    if score.quality_score < thresholds.min_quality_score:
        fail_reasons.append(f"Quality {score.quality_score} < {thresholds.min_quality_score}")
    if rate < thresholds.min_resolved_refs_rate:
        fail_reasons.append(
            f"Reference resolution {round(rate * 100)}% < "
            f"{round(thresholds.min_resolved_refs_rate * 100)}%"
        )

    for reason in fail_reasons:
        logger.info(f"CI threshold not met: {reason}")

    report = {
        "repository": scan_result.base_path,
        "maturityLevel": score.maturity_level,
        "qualityScore": score.quality_score,
        "referenceResolutionRate": rate,
        "thresholds": {
            "minLevel": thresholds.min_level,
            "minQualityScore": thresholds.min_quality_score,
            "minResolvedRefsRate": thresholds.min_resolved_refs_rate,
        },
        "failReasons": fail_reasons,
    }
    return CiResult(exit_code=1 if fail_reasons else 0, report=report)


def init_ci_workflow(path: str) -> Path:
    """Write the GitHub Actions workflow under ``path`` and return its location."""
    workflow = Path(path) / WORKFLOW_PATH
    workflow.parent.mkdir(parents=True, exist_ok=True)
    workflow.write_text(WORKFLOW_TEMPLATE, encoding="utf-8")
    logger.info(f"Wrote CI workflow to {workflow}")
    return workflow
