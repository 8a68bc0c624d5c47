"""
apiwire: authenticated JSON API client.

Architecture Overview:
- models: Endpoint, Authorization and HTTP vocabulary
- api: APIClient (request building, sending, forced logout) and events
- infrastructure: HTTP transport on requests
- storage: authorization persistence (memory, encrypted file)
- reachability: connectivity bulletins and monitor
- core: configuration and credential encryption
- logging, exceptions: cross-cutting concerns
"""

__version__ = "0.1.0"

from .api import APIClient, EventBroadcaster, LoggedOutEvent
from .exceptions import (
    APIWireError,
    CredentialsRequiredError,
    DecodeError,
    HTTPStatusError,
    TransportError,
    UnauthorizedError,
)
from .infrastructure.http import MockResponse
from .models import Authorization, Endpoint, HTTPMethod, HTTPScheme, StatusCode
from .reachability import ReachabilityBulletin, ReachabilityFlags, ReachabilityMonitor

__all__ = [
    "APIClient",
    "EventBroadcaster",
    "LoggedOutEvent",
    "Authorization",
    "Endpoint",
    "HTTPMethod",
    "HTTPScheme",
    "StatusCode",
    "MockResponse",
    "ReachabilityBulletin",
    "ReachabilityFlags",
    "ReachabilityMonitor",
    "APIWireError",
    "CredentialsRequiredError",
    "DecodeError",
    "HTTPStatusError",
    "TransportError",
    "UnauthorizedError",
]
