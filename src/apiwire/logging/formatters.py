"""
Formatters for apiwire log records.

Records emitted by the transport and client carry request fields
(``client_request_id``, ``endpoint``, ``status_code`` ...) as record
attributes. The JSON formatter writes every such attribute; the console
format shows the request ID inline so one request can be followed across the
send and the response lines.
"""

import json
import logging
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

# Attributes every LogRecord has; anything else was passed through ``extra``
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}

NO_REQUEST_ID = "-"

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(client_request_id)s] %(message)s"


def record_context(record: logging.LogRecord) -> dict:
    """Fields attached to ``record`` through ``extra``."""
    return {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRIBUTES}


class RequestIdFilter(logging.Filter):
    """Gives records logged outside a request a placeholder request ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "client_request_id") or record.client_request_id is None:
            record.client_request_id = NO_REQUEST_ID
        return True


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self, version: str):
        super().__init__()
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "apiwire_version": self.version,
        }
        context = record_context(record)
        if context.get("client_request_id") == NO_REQUEST_ID:
            del context["client_request_id"]
        entry.update(context)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def create_console_formatter() -> logging.Formatter:
    return logging.Formatter(CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def create_rich_handler() -> logging.Handler:
    """Rich terminal handler; tracebacks rendered by rich."""
    handler = RichHandler(console=Console(stderr=True), markup=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("[%(client_request_id)s] %(message)s"))
    return handler
