"""Exception hierarchy for Context Frame."""

from .analysis import AnalysisError, FileAccessError
from .base import ContextFrameError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    MalformedConfigError,
    PathNotFoundError,
)

__all__ = [
    "ContextFrameError",
    "AnalysisError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidPathError",
    "PathNotFoundError",
    "InvalidConfigError",
    "MalformedConfigError",
]
