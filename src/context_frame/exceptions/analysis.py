"""Errors raised while reading context files during a scan."""

from pathlib import Path
from typing import Union

from .base import ContextFrameError


class AnalysisError(ContextFrameError):
    """A context file or reference could not be analyzed."""


class FileAccessError(AnalysisError):
    """A context file exists but its contents could not be read.

    The scanner treats this as "skip this file", never as a fatal error.
    """

    def __init__(self, filepath: Union[str, Path], reason: str):
        self.filepath = Path(filepath)
        self.reason = reason
        super().__init__(
            f"Cannot read context file: {self.filepath}",
            details={"filepath": str(self.filepath), "reason": reason},
        )
