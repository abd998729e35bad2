"""Configuration loading for Context Frame.

A repository can carry an optional ``.context-frame.yaml`` (or ``.yml``) at
its root. Sources are merged in priority order:
    1. Defaults (defined in ContextFrameConfig / ThresholdConfig)
    2. Repository config file
    3. Environment variables (CONTEXT_FRAME_* prefix, thresholds only)
    4. Explicit overrides (typically CLI flags)

Example:
    >>> config = load_config(Path("."))
    >>> config.skip_patterns
    ('**/node_modules/**', '**/.git/**', '**/dist/**')
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .exceptions import InvalidConfigError, MalformedConfigError
from .logging_config import get_logger

logger = get_logger(__name__)

CONFIG_FILENAMES = (".context-frame.yaml", ".context-frame.yml")

DEFAULT_SKIP_PATTERNS = ("**/node_modules/**", "**/.git/**", "**/dist/**")

ENV_PREFIX = "CONTEXT_FRAME_"

# YAML keys are camelCase; dataclass fields are snake_case
_THRESHOLD_KEYS = {
    "minLevel": "min_level",
    "minQualityScore": "min_quality_score",
    "minResolvedRefsRate": "min_resolved_refs_rate",
}
_TOP_LEVEL_KEYS = {"tools", "thresholds", "skipPatterns"}


@dataclass(frozen=True)
class ThresholdConfig:
    """CI gate thresholds. A zero threshold never fails.

    Attributes:
        min_level: Minimum maturity level (0-8)
        min_quality_score: Minimum quality score (0.0-10.0)
        min_resolved_refs_rate: Minimum share of documentation references
            that must resolve (0.0-1.0)
    """

    min_level: int = 0
    min_quality_score: float = 0.0
    min_resolved_refs_rate: float = 0.0

    def __post_init__(self) -> None:
        if isinstance(self.min_level, bool) or not isinstance(self.min_level, int):
            raise InvalidConfigError("minLevel", self.min_level, "must be an integer")
        if not 0 <= self.min_level <= 8:
            raise InvalidConfigError("minLevel", self.min_level, "must be between 0 and 8")
        _check_number("minQualityScore", self.min_quality_score, 0.0, 10.0)
        _check_number("minResolvedRefsRate", self.min_resolved_refs_rate, 0.0, 1.0)


@dataclass(frozen=True)
class ContextFrameConfig:
    """Repository-level settings.

    Attributes:
        tools: Optional allow-list of tool names; None scans every tool
        thresholds: CI gate thresholds
        skip_patterns: Globs excluded from scanning and reference validation
        source: Config file the values came from, if any
    """

    tools: Optional[tuple[str, ...]] = None
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    skip_patterns: tuple[str, ...] = DEFAULT_SKIP_PATTERNS
    source: Optional[Path] = None

    def allows_tool(self, tool: str) -> bool:
        return self.tools is None or tool in self.tools


def find_config_file(base_path: Path) -> Optional[Path]:
    """Return the first config file present in ``base_path``, if any."""
    for name in CONFIG_FILENAMES:
        candidate = Path(base_path) / name
        if candidate.is_file():
            return candidate
    return None


def load_config(
    base_path: Path, strict_thresholds: bool = True, **threshold_overrides: Any
) -> ContextFrameConfig:
    """Load configuration for the repository rooted at ``base_path``.

    Args:
        base_path: Repository root
        strict_thresholds: Raise on a bad threshold value. Plain scans never
            read thresholds, so they pass False and fall back to defaults.
        **threshold_overrides: ``min_level``, ``min_quality_score`` or
            ``min_resolved_refs_rate``; None values are ignored

    Returns:
        Validated ContextFrameConfig instance

    Raises:
        MalformedConfigError: If the config file is not valid YAML or not a mapping
        InvalidConfigError: If a value has the wrong type
    """
    config_file = find_config_file(Path(base_path))
    raw: dict[str, Any] = {}
    if config_file is not None:
        raw = _load_yaml_file(config_file)
        logger.debug(f"Loaded config from {config_file}")

    for key in sorted(set(raw) - _TOP_LEVEL_KEYS):
        logger.warning(f"Ignoring unknown config key {key!r} in {config_file}")

    try:
        threshold_config = _build_thresholds(raw.get("thresholds"), threshold_overrides)
    except InvalidConfigError as e:
        if strict_thresholds:
            raise
        logger.warning(f"Using default thresholds: {e}")
        threshold_config = ThresholdConfig()

    tools = raw.get("tools")
    if tools is not None:
        tools = tuple(_string_list("tools", tools))

    skip_patterns = _string_list("skipPatterns", raw.get("skipPatterns") or [])

    return ContextFrameConfig(
        tools=tools,
        thresholds=threshold_config,
        skip_patterns=tuple(skip_patterns) if skip_patterns else DEFAULT_SKIP_PATTERNS,
        source=config_file,
    )


def _build_thresholds(file_value: Any, overrides: dict[str, Any]) -> ThresholdConfig:
    thresholds = _parse_thresholds(file_value)
    thresholds.update(_load_env_vars())
    thresholds.update({k: v for k, v in overrides.items() if v is not None})
    return ThresholdConfig(**thresholds)


def _parse_thresholds(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidConfigError("thresholds", value, "must be a mapping")

    parsed: dict[str, Any] = {}
    for key, item in value.items():
        field_name = _THRESHOLD_KEYS.get(key)
        if field_name is None:
            logger.warning(f"Ignoring unknown threshold {key!r}")
            continue
        if item is not None:
            parsed[field_name] = item
    return parsed


def _load_env_vars() -> dict[str, Any]:
    """Load threshold overrides from CONTEXT_FRAME_* environment variables.

    Supported environment variables:
        CONTEXT_FRAME_MIN_LEVEL: int
        CONTEXT_FRAME_MIN_QUALITY_SCORE: float
        CONTEXT_FRAME_MIN_RESOLVED_REFS_RATE: float
    """
    result: dict[str, Any] = {}
    for f in fields(ThresholdConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        try:
            result[f.name] = int(env_value) if f.name == "min_level" else float(env_value)
        except ValueError:
            raise InvalidConfigError(env_key, env_value, "expected a number")
    return result


def _string_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidConfigError(key, value, "must be a list of strings")
    return value


def _check_number(key: str, value: Any, low: float, high: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfigError(key, value, "must be a number")
    if not low <= value <= high:
        raise InvalidConfigError(key, value, f"must be between {low} and {high}")


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML config file and return its top-level mapping.

    An empty file yields an empty mapping.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise MalformedConfigError(path, str(e))
    except OSError as e:
        raise MalformedConfigError(path, f"cannot read file: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedConfigError(path, "top-level value must be a mapping")
    return data


DEFAULT_CONFIG = ContextFrameConfig()
