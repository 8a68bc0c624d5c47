"""
Authorization storage exceptions.
"""

from pathlib import Path
from typing import Optional

from .base import APIWireError, ExceptionContext
from .templates import ErrorCodes, RecoverySuggestions


class StorageError(APIWireError):
    """Raised when the authorization store cannot read or write its record."""

    def __init__(self, operation: str, path: Optional[Path] = None, details: Optional[str] = None):
        self.operation = operation
        self.path = path
        message = f"Authorization storage {operation} failed"
        if path is not None:
            message += f" on {path}"
        if details:
            message += f": {details}"
        help_text = None
        if path is not None:
            help_text = RecoverySuggestions.for_storage_error(str(path))[0]
        context = ExceptionContext(
            help_text=help_text,
            error_code=ErrorCodes.STORAGE_IO_ERROR,
            context={"operation": operation, "path": str(path) if path else None},
        )
        super().__init__(message, context)
