"""
API client exceptions.

Covers request construction, transport, HTTP status and response decoding
failures raised by the authenticated API client.
"""

from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from .base import APIWireError, ExceptionContext
from .templates import ErrorCodes, RecoverySuggestions


class APIError(APIWireError):
    """Base class for API client errors."""


class CredentialsRequiredError(APIError):
    """Raised when a request requires authorization and none is held."""

    def __init__(self, endpoint: Optional[str] = None):
        self.endpoint = endpoint
        target = endpoint or "the endpoint"
        suggestions = RecoverySuggestions.for_credentials_required(target)
        context = ExceptionContext(
            help_text=suggestions[0],
            error_code=ErrorCodes.API_CREDENTIALS_REQUIRED,
            context={"endpoint": endpoint},
        )
        super().__init__("Credentials required", context)


class TransportError(APIError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, url: str, details: Optional[str] = None):
        self.url = url
        message = f"Request to {url} failed"
        if details:
            message += f": {details}"
        suggestions = RecoverySuggestions.for_connection_error(url)
        context = ExceptionContext(
            help_text=suggestions[0],
            error_code=ErrorCodes.API_TRANSPORT,
            context={"url": url},
        )
        super().__init__(message, context)


class DecodeError(APIError):
    """Raised when a response body cannot be decoded into the requested type."""

    def __init__(self, target: Any, details: Optional[str] = None, content: bytes = b""):
        self.target = target
        self.content = content
        name = getattr(target, "__name__", repr(target))
        message = f"Could not decode response body as {name}"
        if details:
            message += f": {details}"
        context = ExceptionContext(
            error_code=ErrorCodes.API_DECODE,
            context={"target": name, "body_size": len(content)},
            details=details,
        )
        super().__init__(message, context)


def decode_json(content: bytes, target: Any) -> Any:
    """Decode a JSON body into ``target``, raising DecodeError on failure."""
    try:
        return TypeAdapter(target).validate_json(content)
    except ValidationError as e:
        raise DecodeError(target, str(e), content) from e


class HTTPStatusError(APIError):
    """Raised when the response status is not one of the success codes.

    ``expected`` is true when the status was listed among the expected
    failure codes for the request.
    """

    def __init__(self, status_code: int, url: str, content: bytes = b"", expected: bool = False):
        self.status_code = status_code
        self.url = url
        self.content = content
        self.expected = expected
        context = ExceptionContext(
            error_code=ErrorCodes.API_HTTP_STATUS,
            context={"status_code": status_code, "url": url},
        )
        super().__init__(f"HTTP {status_code} from {url}", context)

    def json(self, target: Any = Any) -> Any:
        """Decode the error body, raising DecodeError when it is not valid JSON."""
        return decode_json(self.content, target)


class UnauthorizedError(HTTPStatusError):
    """Raised for a 401 response."""

    def __init__(self, url: str, content: bytes = b"", expected: bool = False):
        super().__init__(401, url, content, expected)
        self.error_code = ErrorCodes.API_UNAUTHORIZED
        self.details = "authorization rejected by the server"
