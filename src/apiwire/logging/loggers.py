"""
Logger adapter carrying a correlation ID and bound request context.
"""

import logging
from typing import Any, Optional, Union
from uuid import uuid4


class APIWireLogger(logging.LoggerAdapter):
    """Stamps every record with ``correlation_id`` and the bound context.

    Per-call ``extra`` fields are merged over the bound ones rather than
    replacing them.
    """

    def __init__(
        self,
        logger: Union[str, logging.Logger],
        correlation_id: Optional[str] = None,
        **context: Any,
    ):
        if isinstance(logger, str):
            logger = logging.getLogger(logger)
        super().__init__(logger, {"correlation_id": correlation_id or uuid4().hex[:8], **context})

    @property
    def correlation_id(self) -> str:
        return self.extra["correlation_id"]

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs

    def bind(self, **context: Any) -> "APIWireLogger":
        """Copy sharing the correlation ID, with more context bound."""
        bound = {k: v for k, v in self.extra.items() if k != "correlation_id"}
        bound.update(context)
        return APIWireLogger(self.logger, self.correlation_id, **bound)


def get_logger(name: str, **context: Any) -> APIWireLogger:
    return APIWireLogger(name, **context)
