"""
Entry/success/failure logging around a block.
"""

import logging
from typing import Optional, Union

from .loggers import APIWireLogger


class LoggingContext:
    """Logs ``entry_msg`` on entry, then ``success_msg`` or ``failure_msg``.

    Exceptions propagate; the failure record carries the error text in its
    ``error`` field.
    """

    def __init__(
        self,
        entry_msg: Optional[str] = None,
        success_msg: Optional[str] = None,
        failure_msg: Optional[str] = None,
        logger: Union[APIWireLogger, logging.Logger, None] = None,
        entry_level: int = logging.DEBUG,
        success_level: int = logging.INFO,
        failure_level: int = logging.ERROR,
    ):
        self.entry_msg = entry_msg
        self.success_msg = success_msg
        self.failure_msg = failure_msg
        self.logger = logger or logging.getLogger(__name__)
        self.entry_level = entry_level
        self.success_level = success_level
        self.failure_level = failure_level

    def __enter__(self):
        if self.entry_msg:
            self.logger.log(self.entry_level, self.entry_msg)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            if self.success_msg:
                self.logger.log(self.success_level, self.success_msg)
        elif self.failure_msg:
            self.logger.log(self.failure_level, self.failure_msg, extra={"error": str(exc_value)})
