"""Repository scanning: pattern probing, content metrics, reference checks."""

from .content import analyze_file_content, analyze_text_content
from .references import extract_references, strip_fenced_blocks, validate_references
from .scanner import RepositoryScanner, scan_repository

__all__ = [
    "RepositoryScanner",
    "scan_repository",
    "analyze_text_content",
    "analyze_file_content",
    "extract_references",
    "strip_fenced_blocks",
    "validate_references",
]
