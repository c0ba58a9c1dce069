"""Custom exceptions for conversion context with the file and operation involved."""

from pathlib import Path
from typing import Optional


class DocumentIOError(Exception):
    """
    Exception raised when a document or output file cannot be read, written or stat'ed.

    Attributes:
        operation: What was being done ('read', 'write', 'stat')
        path: File involved
        original_error: The underlying OSError
    """

    def __init__(self, operation: str, path: Path, original_error: Optional[OSError] = None):
        self.operation = operation
        self.path = path
        self.original_error = original_error

        reason = "unknown error"
        if original_error is not None:
            reason = original_error.strerror or str(original_error)

        super().__init__(f"couldn't {operation} {path}: {reason}")
