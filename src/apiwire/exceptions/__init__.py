"""
apiwire Exception Hierarchy

Exception Hierarchy:
    APIWireError (base)
    ├── ConfigurationError
    │   ├── InvalidConfigurationError
    │   ├── MissingConfigurationError
    │   └── ConfigurationValidationError
    ├── APIError
    │   ├── CredentialsRequiredError
    │   ├── TransportError
    │   ├── DecodeError
    │   └── HTTPStatusError
    │       └── UnauthorizedError
    └── StorageError
"""

from .api import (
    APIError,
    CredentialsRequiredError,
    DecodeError,
    HTTPStatusError,
    TransportError,
    UnauthorizedError,
)
from .base import APIWireError, ExceptionContext
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from .storage import StorageError

__all__ = [
    # Base
    "APIWireError",
    "ExceptionContext",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "ConfigurationValidationError",
    # API
    "APIError",
    "CredentialsRequiredError",
    "TransportError",
    "DecodeError",
    "HTTPStatusError",
    "UnauthorizedError",
    # Storage
    "StorageError",
]
