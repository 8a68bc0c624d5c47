"""
Standardized error codes and recovery suggestions.

Keeps error categorisation consistent across apiwire exceptions.
"""

from typing import List


class RecoverySuggestions:
    """Standard recovery suggestions for common error scenarios."""

    @staticmethod
    def for_credentials_required(endpoint: str) -> List[str]:
        return [
            f"Log in to {endpoint} before calling endpoints that require authorization",
            "Check that the stored authorization was not discarded after an upgrade",
        ]

    @staticmethod
    def for_connection_error(endpoint: str) -> List[str]:
        return [
            "Check your internet connection",
            f"Verify {endpoint} is accessible",
            "Check firewall and proxy settings",
        ]

    @staticmethod
    def for_storage_error(path: str) -> List[str]:
        return [
            f"Check file permissions for: {path}",
            "Remove the file to start over with no stored authorization",
        ]


class ErrorCodes:
    """Standardized error codes for consistent error categorization."""

    # Configuration errors (CONFIG_xxx)
    CONFIG_MISSING = "CONFIG_001"
    CONFIG_INVALID = "CONFIG_002"
    CONFIG_FILE_ERROR = "CONFIG_003"
    CONFIG_VALIDATION_ERROR = "CONFIG_004"

    # API errors (API_xxx)
    API_CREDENTIALS_REQUIRED = "API_001"
    API_UNAUTHORIZED = "API_002"
    API_HTTP_STATUS = "API_003"
    API_TRANSPORT = "API_004"
    API_DECODE = "API_005"

    # Storage errors (STORAGE_xxx)
    STORAGE_IO_ERROR = "STORAGE_001"
    STORAGE_CORRUPTED = "STORAGE_002"
