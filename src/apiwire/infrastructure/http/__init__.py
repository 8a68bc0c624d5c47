"""HTTP transport."""

from .client import HttpResponse, HttpTransport, MockResponse
from .debug import format_request

__all__ = ["HttpTransport", "HttpResponse", "MockResponse", "format_request"]
