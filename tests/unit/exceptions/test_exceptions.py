"""
Unit tests for the apiwire exception system.
"""

from typing import Dict

import pytest

from apiwire.exceptions import (
    APIError,
    APIWireError,
    ConfigurationError,
    ConfigurationValidationError,
    CredentialsRequiredError,
    DecodeError,
    ExceptionContext,
    HTTPStatusError,
    InvalidConfigurationError,
    MissingConfigurationError,
    StorageError,
    TransportError,
    UnauthorizedError,
)


@pytest.mark.unit
class TestAPIWireError:
    def test_basic_error(self):
        error = APIWireError("Test error")

        error_str = str(error)
        assert "Test error" in error_str
        assert f"🔍 Error ID: {error.correlation_id}" in error_str
        assert "💡 Help:" not in error_str
        assert error.help_text is None

    def test_with_context(self):
        context = ExceptionContext(help_text="Help text", error_code="TEST_CODE", context={"k": "v"})
        error = APIWireError("Test message", context)

        error_str = str(error)
        assert "💡 Help: Help text" in error_str
        assert "📋 Context: k=v" in error_str
        assert error.error_code == "TEST_CODE"

    def test_to_dict_and_add_context(self):
        error = APIWireError("Test").add_context(request_id="abc")
        data = error.to_dict()

        assert data["error_type"] == "APIWireError"
        assert data["context"] == {"request_id": "abc"}
        assert data["correlation_id"] == error.correlation_id

    def test_none_context_values_are_dropped(self):
        error = APIWireError("Test", ExceptionContext(context={"a": 1, "b": None}))
        error.add_context(c=None)
        assert error.context == {"a": 1}


@pytest.mark.unit
class TestAPIErrors:
    def test_credentials_required(self):
        error = CredentialsRequiredError("Example")
        assert isinstance(error, APIError)
        assert error.message == "Credentials required"
        assert error.context["endpoint"] == "Example"

    def test_unauthorized_is_status_error(self):
        error = UnauthorizedError("https://api.example.com/me")
        assert isinstance(error, HTTPStatusError)
        assert error.status_code == 401
        assert error.error_code == "API_002"

    def test_status_error_json(self):
        error = HTTPStatusError(422, "https://x", b'{"field": "name"}')
        assert error.json(Dict[str, str]) == {"field": "name"}

    def test_status_error_malformed_json(self):
        error = HTTPStatusError(500, "https://x", b"<html>")
        with pytest.raises(DecodeError) as exc_info:
            error.json()
        assert exc_info.value.content == b"<html>"

    def test_transport_error(self):
        error = TransportError("https://x", "connection failed")
        assert error.message == "Request to https://x failed: connection failed"


@pytest.mark.unit
class TestConfigurationErrors:
    def test_hierarchy(self):
        assert isinstance(ConfigurationError("x"), APIWireError)
        assert isinstance(MissingConfigurationError("endpoint.host"), ConfigurationError)

    def test_invalid_configuration(self):
        error = InvalidConfigurationError("timeout", -1, "positive number")
        assert "timeout" in error.message
        assert error.error_code == "CONFIG_002"

    def test_validation_lists_errors(self):
        error = ConfigurationValidationError(["a: bad", "b: worse"])
        assert "  - a: bad" in error.message
        assert error.errors == ["a: bad", "b: worse"]


@pytest.mark.unit
class TestStorageError:
    def test_message(self, temp_dir):
        error = StorageError("save", temp_dir / "auth.enc", "disk full")
        assert "save failed" in error.message
        assert "disk full" in error.message
        assert error.help_text
