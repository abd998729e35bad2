"""Errors about what the user pointed us at: scan roots, baselines, settings."""

from pathlib import Path
from typing import Any

from .base import ContextFrameError


class ConfigurationError(ContextFrameError):
    """Bad input from the command line, environment or .context-frame.yaml."""


class InvalidPathError(ConfigurationError):
    """A scan root or baseline path cannot be used."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot use path {path}: {reason}", details={"path": str(path)})


class PathNotFoundError(InvalidPathError):
    """The scan root does not exist."""

    def __init__(self, path: Path):
        super().__init__(path, "path does not exist")


class InvalidConfigError(ConfigurationError):
    """A setting is unknown, mistyped or out of range."""

    def __init__(self, key: str, value: Any, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Bad setting {key}={value!r}: {reason}", details={"key": key})


class MalformedConfigError(ConfigurationError):
    """.context-frame.yaml exists but is not a YAML mapping."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse config file {path}: {reason}", details={"path": str(path)})
