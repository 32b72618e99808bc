"""Logging helpers for the finance tracker.

Loggers write to ``logs/<subdir>/<YYYYMMDD>_<prefix>.log`` under the project
root and, optionally, to the console. Two singletons are exposed:

* the application logger, used by use cases, stores and adapters;
* the usage logger, recording user actions performed in the interface.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from src.utils.utils import get_project_root


DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

FormatterFactory = Callable[[], logging.Formatter]
FileHandlerFactory = Callable[[Path, logging.Formatter], logging.Handler]
ConsoleHandlerFactory = Callable[[logging.Formatter], logging.Handler]


class LoggerBuilder:
    """Fluent builder for file and console loggers."""

    def __init__(self) -> None:
        self._name = "finance_tracker"
        self._subdir = "app"
        self._prefix = "app_logs"
        self._console = True
        self._level = logging.INFO
        self._formatter_factory: FormatterFactory = self._default_formatter
        self._file_handler_factory: FileHandlerFactory = (
            self._default_file_handler
        )
        self._console_handler_factory: ConsoleHandlerFactory = (
            self._default_console_handler
        )

    def name(self, value: str) -> "LoggerBuilder":
        self._name = value
        return self

    def subdir(self, value: str) -> "LoggerBuilder":
        self._subdir = value
        return self

    def prefix(self, value: str) -> "LoggerBuilder":
        self._prefix = value
        return self

    def console(self, enabled: bool) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, value: int) -> "LoggerBuilder":
        self._level = value
        return self

    def formatter(self, factory: FormatterFactory) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(self, factory: FileHandlerFactory) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(
        self,
        factory: ConsoleHandlerFactory,
    ) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Create or reuse the configured logger.

        Returns:
            logging.Logger: Logger with file (and console) handlers attached.
        """
        logger = logging.getLogger(self._name)
        logger.setLevel(self._level)
        if logger.handlers:
            return logger

        log_dir = get_project_root() / "logs" / self._subdir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{self._today_stamp()}_{self._prefix}.log"

        fmt = self._formatter_factory()
        logger.addHandler(self._file_handler_factory(log_path, fmt))
        if self._console:
            logger.addHandler(self._console_handler_factory(fmt))
        logger.propagate = False
        return logger

    @staticmethod
    def _today_stamp() -> str:
        return datetime.now().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(DEFAULT_FORMAT)

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.Handler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(fmt: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper around a built ``logging.Logger``."""

    _instance = None
    _subdir = "app"
    _prefix = "app_logs"

    def __new__(cls, name: str = "finance_tracker"):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = (
                LoggerBuilder()
                .name(name)
                .subdir(cls._subdir)
                .prefix(cls._prefix)
                .build()
            )
            cls._instance = instance
        return cls._instance

    def info(self, msg: str, *args, **kwargs) -> None:
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self.logger.error(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self.logger.debug(msg, *args, **kwargs)

    def critical(self, msg: str, *args, **kwargs) -> None:
        self.logger.critical(msg, *args, **kwargs)


class AppLogger(Logger):
    """Application logger singleton."""

    _instance = None
    _subdir = "app"
    _prefix = "app_logs"


class UsageLogger(Logger):
    """Logger recording user actions in the interface."""

    _instance = None
    _subdir = "usage"
    _prefix = "usage_logs"


def get_app_logger() -> AppLogger:
    """Return the application logger singleton."""
    return AppLogger("finance_tracker.app")


def get_usage_logger() -> UsageLogger:
    """Return the usage logger singleton."""
    return UsageLogger("finance_tracker.usage")


__all__ = [
    "LoggerBuilder",
    "Logger",
    "AppLogger",
    "UsageLogger",
    "get_app_logger",
    "get_usage_logger",
]
