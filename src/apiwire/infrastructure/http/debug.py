"""Human-readable rendering of outgoing requests for debug logging."""

from typing import Iterable, Set

import requests

from apiwire.constants import MASKED_VALUE, MAX_DEBUG_BODY_CHARS

# Headers redacted even when the client does not name them
SENSITIVE_HEADER_KEYS: Set[str] = {
    "authorization",
    "proxy-authorization",
    "cookie",
    "x-api-key",
    "x-auth-token",
    "x-session-token",
}


def format_request(request: requests.PreparedRequest, masked_headers: Iterable[str] = ()) -> str:
    """Render method, URL, headers and body.

    Values of ``masked_headers`` and of well-known credential headers are
    redacted.
    """
    masked = SENSITIVE_HEADER_KEYS | {h.lower() for h in masked_headers}
    lines = [f"{request.method} {request.url}"]
    for name, value in request.headers.items():
        shown = MASKED_VALUE if name.lower() in masked else value
        lines.append(f"    {name}: {shown}")

    body = request.body
    if body:
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        if len(body) > MAX_DEBUG_BODY_CHARS:
            body = body[:MAX_DEBUG_BODY_CHARS] + "..."
        lines.append(f"    body: {body}")
    return "\n".join(lines)
