"""
apiwire logging package.

- formatters: JSON, console and Rich output with request IDs
- loggers: APIWireLogger adapter with correlation IDs
- manager: configure_logging from the [logging] configuration section
- context: LoggingContext entry/success/failure messages
"""

from .context import LoggingContext
from .formatters import RequestIdFilter, StructuredFormatter
from .loggers import APIWireLogger, get_logger
from .manager import LoggingManager, configure_logging, logging_manager

__all__ = [
    "APIWireLogger",
    "LoggingContext",
    "LoggingManager",
    "RequestIdFilter",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
    "logging_manager",
]
