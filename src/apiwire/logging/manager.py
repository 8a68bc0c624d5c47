"""
Installation of apiwire's log handlers.

``configure_logging`` takes the ``[logging]`` section of the configuration and
attaches one handler per configured output to the root logger. Handlers
installed by an earlier call are removed first; handlers installed by the
host application are left alone.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List

from apiwire import __version__
from apiwire.core.config.models import LoggingConfig

from .formatters import (
    RequestIdFilter,
    StructuredFormatter,
    create_console_formatter,
    create_rich_handler,
)

DEFAULT_LOG_FILE = Path("logs/apiwire.log")


class LoggingManager:
    """Tracks the handlers apiwire owns on the root logger."""

    def __init__(self):
        self.handlers: List[logging.Handler] = []

    def configure(self, config: LoggingConfig, version: str = __version__) -> None:
        self.reset()
        level = logging.getLevelName(config.level.value)
        logging.getLogger().setLevel(level)
        logging.getLogger("apiwire").setLevel(level)

        for output in config.output:
            if output == "file":
                handler = self._file_handler(config, version)
            else:
                handler = self._console_handler(config, version)
            handler.setLevel(level)
            handler.addFilter(RequestIdFilter())
            logging.getLogger().addHandler(handler)
            self.handlers.append(handler)

    def reset(self) -> None:
        """Remove and close the handlers installed by ``configure``."""
        root = logging.getLogger()
        for handler in self.handlers:
            root.removeHandler(handler)
            handler.close()
        self.handlers.clear()

    @staticmethod
    def _console_handler(config: LoggingConfig, version: str) -> logging.Handler:
        if config.format == "rich":
            return create_rich_handler()
        handler = logging.StreamHandler(sys.stderr)
        if config.format == "json":
            handler.setFormatter(StructuredFormatter(version))
        else:
            handler.setFormatter(create_console_formatter())
        return handler

    @staticmethod
    def _file_handler(config: LoggingConfig, version: str) -> logging.Handler:
        path = config.file_path or DEFAULT_LOG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            path, maxBytes=config.max_file_size, backupCount=config.backup_count
        )
        # rich output is console-only
        if config.format == "json":
            handler.setFormatter(StructuredFormatter(version))
        else:
            handler.setFormatter(create_console_formatter())
        return handler


logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig) -> None:
    """Install handlers for ``config`` on the root logger."""
    logging_manager.configure(config)
