"""Root of the Context Frame exception hierarchy."""

from typing import Any, Dict, Optional


class ContextFrameError(Exception):
    """Base exception for all Context Frame errors.

    ``details`` carries the structured context (paths, keys, reasons) that
    ``__str__`` appends as ``(k=v, ...)``.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.__class__.__name__, "message": self.message, **self.details}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({details_str})"
