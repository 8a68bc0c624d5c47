"""
Root of the apiwire exception hierarchy.

Every apiwire error carries an ``ErrorCodes`` value, optional help text and a
context dict. Errors raised while handling a request also carry that request's
``client_request_id`` in their context, so an error can be matched to the log
records of the same request.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ExceptionContext:
    """Structured detail handed to ``APIWireError`` by its subclasses."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    details: Optional[str] = None
    correlation_id: Optional[str] = None


class APIWireError(Exception):
    """Base exception for all apiwire errors.

    ``message`` is the one-line summary; ``str()`` appends help text, context
    and the error ID. Context entries whose value is None are dropped.
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        super().__init__(message)
        context = context or ExceptionContext()
        self.message = message
        self.help_text = context.help_text
        self.error_code = context.error_code
        self.details = context.details
        self.context: Dict[str, Any] = {}
        self.add_context(**context.context)
        self.correlation_id = context.correlation_id or uuid.uuid4().hex[:8]

    def __str__(self) -> str:
        lines = [self.message]
        if self.help_text:
            lines.append(f"💡 Help: {self.help_text}")
        if self.context:
            lines.append("📋 Context: " + ", ".join(f"{k}={v}" for k, v in self.context.items()))
        lines.append(f"🔍 Error ID: {self.correlation_id}")
        return "\n".join(lines)

    def add_context(self, **kwargs: Any) -> "APIWireError":
        """Merge non-None ``kwargs`` into the context and return self."""
        self.context.update((k, v) for k, v in kwargs.items() if v is not None)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Flat representation for structured logs."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "correlation_id": self.correlation_id,
            "context": dict(self.context),
        }
