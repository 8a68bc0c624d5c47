"""Domain models for apiwire."""

from .authorization import Authorization
from .endpoint import Endpoint
from .http import JSON_CONTENT_TYPE, HeaderField, HTTPMethod, HTTPScheme, StatusCode

__all__ = [
    "Authorization",
    "Endpoint",
    "HTTPMethod",
    "HTTPScheme",
    "HeaderField",
    "StatusCode",
    "JSON_CONTENT_TYPE",
]
