"""
HTTP transport for the API client.

Sends prepared requests through a ``requests.Session`` and classifies the
outcome: a success status yields an ``HttpResponse``; anything else raises a
typed error. No retries are configured.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Collection, Dict, Optional

import requests

from apiwire.constants import DEFAULT_TIMEOUT_SECONDS
from apiwire.exceptions import HTTPStatusError, TransportError, UnauthorizedError
from apiwire.models import HeaderField, StatusCode


@dataclass
class HttpResponse:
    """Status code, body bytes and headers of a completed request."""

    status_code: int
    content: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class MockResponse:
    """Canned outcome that replaces the network for one send."""

    status_code: int = StatusCode.OK
    data: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)
    delay: float = 0.0

    def to_response(self) -> HttpResponse:
        return HttpResponse(self.status_code, self.data, dict(self.headers))


class HttpTransport:
    """Sends prepared requests and maps status codes to outcomes."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """Initialize the transport.

        Args:
            session: Optional existing session to use
            timeout: Request timeout in seconds
        """
        self.timeout = timeout
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.session = session or requests.Session()

    def retrieve(
        self,
        request: requests.PreparedRequest,
        success_codes: Collection[int] = (StatusCode.OK,),
        expected_failure_codes: Collection[int] = (),
        mock: Optional[MockResponse] = None,
    ) -> HttpResponse:
        """Send ``request`` and return the response if its status is a success code.

        Raises:
            TransportError: the request produced no HTTP response
            UnauthorizedError: the status was 401
            HTTPStatusError: any other status outside ``success_codes``
        """
        log_extra = {"client_request_id": request.headers.get(HeaderField.CLIENT_REQUEST_ID)}

        if mock is not None:
            self.logger.debug(f"Mocked {request.method} {request.url}", extra=log_extra)
            if mock.delay > 0:
                time.sleep(mock.delay)
            response = mock.to_response()
        else:
            response = self._send(request, log_extra)

        self.logger.debug(
            f"Response: {response.status_code} - {len(response.content)} bytes "
            f"({request.method} {request.url})",
            extra={**log_extra, "status_code": response.status_code},
        )

        status = response.status_code
        expected = status in expected_failure_codes

        # 401 is never a success, whatever the caller listed
        if status == StatusCode.UNAUTHORIZED:
            raise UnauthorizedError(request.url, response.content, expected).add_context(**log_extra)
        if status in success_codes:
            return response

        if not expected:
            self.logger.warning(
                f"Unexpected HTTP {status} for {request.method} {request.url}",
                extra={**log_extra, "status_code": status},
            )
        raise HTTPStatusError(status, request.url, response.content, expected).add_context(
            **log_extra
        )

    def _send(self, request: requests.PreparedRequest, log_extra: dict) -> HttpResponse:
        try:
            raw = self.session.send(request, timeout=self.timeout, allow_redirects=True)
        except requests.exceptions.Timeout as e:
            self.logger.error(
                f"Request timeout: {request.url} (timeout: {self.timeout})", extra=log_extra
            )
            raise TransportError(
                request.url, f"timed out after {self.timeout}s"
            ).add_context(**log_extra) from e
        except requests.exceptions.ConnectionError as e:
            self.logger.error(f"Connection failed: {request.url}", extra=log_extra)
            raise TransportError(request.url, "connection failed").add_context(**log_extra) from e
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Request error: {request.url}, error: {e}", extra=log_extra)
            raise TransportError(request.url, str(e)).add_context(**log_extra) from e

        return HttpResponse(raw.status_code, raw.content, dict(raw.headers))

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()
