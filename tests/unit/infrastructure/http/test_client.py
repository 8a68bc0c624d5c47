"""
Unit tests for the HTTP transport.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from apiwire.exceptions import HTTPStatusError, TransportError, UnauthorizedError
from apiwire.infrastructure.http import HttpTransport, MockResponse, format_request


def prepared(method="GET", url="https://api.example.com/v1/items", **kwargs):
    return requests.Request(method, url, **kwargs).prepare()


@pytest.mark.unit
class TestHttpTransport:
    @pytest.fixture
    def session(self):
        return Mock(spec=requests.Session)

    @pytest.fixture
    def transport(self, session):
        return HttpTransport(session=session, timeout=12)

    def test_default_session(self):
        transport = HttpTransport()
        assert isinstance(transport.session, requests.Session)
        transport.close()

    def test_success(self, transport, session):
        session.send.return_value = Mock(status_code=200, content=b"{}", headers={"X-A": "1"})
        request = prepared()

        response = transport.retrieve(request)

        session.send.assert_called_once_with(request, timeout=12, allow_redirects=True)
        assert response.status_code == 200
        assert response.content == b"{}"
        assert response.headers == {"X-A": "1"}

    def test_custom_success_codes(self, transport, session):
        session.send.return_value = Mock(status_code=201, content=b"", headers={})
        assert transport.retrieve(prepared(), success_codes=[200, 201]).status_code == 201

    def test_unlisted_status_raises(self, transport, session):
        session.send.return_value = Mock(status_code=500, content=b"oops", headers={})

        with pytest.raises(HTTPStatusError) as exc_info:
            transport.retrieve(prepared())

        error = exc_info.value
        assert error.status_code == 500
        assert error.content == b"oops"
        assert error.expected is False

    def test_expected_failure_flagged(self, transport, session, caplog):
        session.send.return_value = Mock(status_code=409, content=b"", headers={})

        with pytest.raises(HTTPStatusError) as exc_info:
            transport.retrieve(prepared(), expected_failure_codes=[409])

        assert exc_info.value.expected is True
        assert "Unexpected HTTP" not in caplog.text

    def test_401_raises_unauthorized_even_if_listed_as_success(self, transport, session):
        session.send.return_value = Mock(status_code=401, content=b"", headers={})

        with pytest.raises(UnauthorizedError):
            transport.retrieve(prepared(), success_codes=[200, 401])

    @pytest.mark.parametrize(
        "raised",
        [
            requests.exceptions.Timeout("slow"),
            requests.exceptions.ConnectionError("refused"),
            requests.exceptions.InvalidURL("bad"),
        ],
    )
    def test_request_exceptions_become_transport_errors(self, transport, session, raised):
        session.send.side_effect = raised

        with pytest.raises(TransportError) as exc_info:
            transport.retrieve(prepared())
        assert exc_info.value.__cause__ is raised

    def test_mock_bypasses_session(self, transport, session):
        response = transport.retrieve(prepared(), mock=MockResponse(data=b"[]"))

        session.send.assert_not_called()
        assert response.content == b"[]"

    @patch("apiwire.infrastructure.http.client.time.sleep")
    def test_mock_delay(self, mock_sleep, transport):
        transport.retrieve(prepared(), mock=MockResponse(delay=0.5))
        mock_sleep.assert_called_once_with(0.5)

    def test_mock_failure_status(self, transport):
        with pytest.raises(HTTPStatusError):
            transport.retrieve(prepared(), mock=MockResponse(status_code=404))

    def test_errors_carry_client_request_id(self, transport, caplog):
        request = prepared(headers={"Client-Request-ID": "req-7"})

        with pytest.raises(HTTPStatusError) as exc_info:
            transport.retrieve(request, mock=MockResponse(status_code=500))

        assert exc_info.value.context["client_request_id"] == "req-7"
        warning = caplog.records[-1]
        assert warning.client_request_id == "req-7"
        assert warning.status_code == 500

    def test_close(self, transport, session):
        transport.close()
        session.close.assert_called_once_with()


@pytest.mark.unit
class TestFormatRequest:
    def test_masks_headers(self):
        request = prepared(headers={"Authorization": "secret", "Accept": "application/json"})
        text = format_request(request, masked_headers=["authorization"])

        assert text.startswith("GET https://api.example.com/v1/items")
        assert "secret" not in text
        assert "Accept: application/json" in text

    def test_masks_known_credential_headers_by_default(self):
        request = prepared(headers={"Cookie": "session=abc", "X-Custom-Token": "custom-secret"})
        text = format_request(request, masked_headers=["x-custom-token"])

        assert "session=abc" not in text
        assert "custom-secret" not in text
        assert "Cookie: [REDACTED]" in text

    def test_includes_body(self):
        request = prepared("POST", data=b'{"a": 1}')
        assert 'body: {"a": 1}' in format_request(request)

    def test_truncates_long_body(self):
        request = prepared("POST", data=b"x" * 5000)
        text = format_request(request)
        assert text.endswith("...")
        assert len(text) < 3000
