"""Compare the current score against a previously saved JSON report."""

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .exceptions import InvalidPathError
from .logging_config import get_logger
from .models import ScoreResult

logger = get_logger(__name__)


@dataclass(frozen=True)
class BaselineMetrics:
    """Headline numbers of a report; None where the report does not carry one."""

    level: Optional[float] = None
    quality: Optional[float] = None
    weight: Optional[float] = None

    @classmethod
    def from_score(cls, score: ScoreResult) -> "BaselineMetrics":
        return cls(level=score.maturity_level, quality=score.quality_score, weight=score.total_weight)


@dataclass(frozen=True)
class MetricDelta:
    """One metric before and after, with the signed change."""

    label: str
    baseline: Optional[float]
    current: Optional[float]
    decimals: int = 0

    @property
    def delta(self) -> Optional[float]:
        if self.baseline is None or self.current is None:
            return None
        return self.current - self.baseline

    def format_value(self, value: Optional[float]) -> str:
        return "n/a" if value is None else f"{value:.{self.decimals}f}"

    def format_delta(self) -> str:
        delta = self.delta
        if delta is None:
            return "(n/a)"
        if delta == 0:
            return "(no change)"
        return f"({delta:+.{self.decimals}f})"


def load_baseline(path: str) -> Any:
    """Read a saved report.

    Raises:
        InvalidPathError: If the file does not exist or is not valid JSON
    """
    p = Path(path)
    if not p.is_file():
        raise InvalidPathError(p, "Baseline file not found")

    try:
        with open(p, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidPathError(p, f"Baseline is not readable JSON: {e}")

    logger.info(f"Loaded baseline from {path}")
    return data


def extract_baseline_metrics(data: Any) -> BaselineMetrics:
    """Pull level, quality and weight out of any report shape Context Frame writes.

    Accepts the ``scan -f json`` report, a serialized ScoreResult, a CI
    report, or a ``{"score": ..., "scanResult": ...}`` bundle.
    """
    if not isinstance(data, dict):
        return BaselineMetrics()

    score = data.get("score")
    if isinstance(score, dict) and _is_score_result(score):
        return BaselineMetrics(
            level=_number(score.get("maturityLevel")),
            quality=_number(score.get("qualityScore")),
            weight=_number(score.get("totalWeight")),
        )

    level = _first(
        _lookup(data, "maturity", "level"),
        data.get("maturityLevel"),
        data.get("level"),
        _lookup(data, "score", "maturityLevel"),
        _lookup(data, "score", "maturity", "level"),
    )
    quality = _first(
        _lookup(data, "quality", "score"),
        data.get("qualityScore"),
        _lookup(data, "score", "qualityScore"),
        _lookup(data, "score", "quality", "score"),
    )
    weight = _first(
        _lookup(data, "quality", "weight"),
        _lookup(data, "quality", "totalWeight"),
        data.get("totalWeight"),
        _lookup(data, "score", "totalWeight"),
        _lookup(data, "score", "quality", "weight"),
    )
    return BaselineMetrics(level=_number(level), quality=_number(quality), weight=_number(weight))


def diff_metrics(baseline: BaselineMetrics, current: BaselineMetrics) -> list[MetricDelta]:
    return [
        MetricDelta("Level", baseline.level, current.level, decimals=0),
        MetricDelta("Quality", baseline.quality, current.quality, decimals=1),
        MetricDelta("Weight", baseline.weight, current.weight, decimals=0),
    ]


def _is_score_result(value: dict) -> bool:
    return _number(value.get("maturityLevel")) is not None and _number(
        value.get("qualityScore")
    ) is not None


def _lookup(data: dict, *keys: str) -> Any:
    node: Any = data
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _first(*values: Any) -> Any:
    # First value that is present, mirroring a null-coalescing chain
    for value in values:
        if value is not None:
            return value
    return None


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value
