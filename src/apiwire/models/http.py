"""
HTTP vocabulary shared by the client and transport.
"""

from enum import Enum


class HTTPMethod(str, Enum):
    """Request methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class HTTPScheme(str, Enum):
    """URL schemes."""

    HTTP = "http"
    HTTPS = "https"


class StatusCode:
    """Status codes the client refers to by name."""

    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    INTERNAL_SERVER_ERROR = 500


class HeaderField:
    """Header names set by the client."""

    AUTHORIZATION = "Authorization"
    CACHE_CONTROL = "Cache-Control"
    CLIENT_REQUEST_ID = "Client-Request-ID"
    CONNECTION = "Connection"
    CONTENT_LENGTH = "Content-Length"
    CONTENT_TYPE = "Content-Type"
    PRAGMA = "Pragma"


JSON_CONTENT_TYPE = "application/json; charset=utf-8"
