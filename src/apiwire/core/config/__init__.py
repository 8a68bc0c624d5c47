"""
Configuration management for apiwire.

Usage:
    from apiwire.core.config import ConfigManager

    config = ConfigManager().load_config()
    endpoint = config.endpoint.to_endpoint()
"""

from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from .manager import ConfigManager
from .models import (
    APIWireConfig,
    APIWireSettings,
    ClientConfig,
    EndpointConfig,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "APIWireConfig",
    "APIWireSettings",
    "ClientConfig",
    "EndpointConfig",
    "LoggingConfig",
    "LogLevel",
    "ConfigManager",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "ConfigurationValidationError",
]
