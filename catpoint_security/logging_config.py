"""Centralized logging configuration for the catpoint security system."""

import logging
import logging.handlers
import os
import sys
from typing import Optional, Dict, Any
from pathlib import Path

from .config.defaults import DEFAULT_PATHS, SYSTEM_CONSTANTS

LOGGER_PREFIX = "catpoint"


class StructuredFormatter(logging.Formatter):
    """Custom formatter that adds structured information to log records."""

    def __init__(self, include_context: bool = True):
        self.include_context = include_context
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured information."""
        base_format = "%(asctime)s | %(levelname)-8s | %(name)-25s | %(message)s"

        if self.include_context and hasattr(record, 'context'):
            context_str = " | ".join([f"{k}={v}" for k, v in record.context.items()])
            base_format += f" | Context: {context_str}"

        if record.levelno >= logging.ERROR and record.exc_info:
            base_format += " | %(pathname)s:%(lineno)d"

        formatter = logging.Formatter(base_format)
        return formatter.format(record)


class ContextFilter(logging.Filter):
    """Filter that adds process and component information to log records."""

    def __init__(self, component_name: Optional[str] = None):
        super().__init__()
        self.component_name = component_name
        self.process_id = os.getpid()

    def filter(self, record: logging.LogRecord) -> bool:
        record.process_id = self.process_id
        if self.component_name:
            record.component = self.component_name
        return True


class LoggingManager:
    """Centralized logging management for the catpoint security system."""

    def __init__(self, log_dir: Optional[str] = DEFAULT_PATHS["logs_dir"],
                 log_level: int = logging.INFO, console: bool = True):
        self.log_dir = Path(log_dir) if log_dir else None
        self.console = console

        self.log_level = log_level
        self.max_log_size = SYSTEM_CONSTANTS["LOG_ROTATION_SIZE_MB"] * 1024 * 1024
        self.backup_count = SYSTEM_CONSTANTS["LOG_BACKUP_COUNT"]

        self.component_loggers: Dict[str, logging.Logger] = {}

        self._setup_package_logger()

    @property
    def main_log_file(self) -> Optional[Path]:
        return self.log_dir / "catpoint.log" if self.log_dir else None

    @property
    def error_log_file(self) -> Optional[Path]:
        return self.log_dir / "errors.log" if self.log_dir else None

    def _setup_package_logger(self) -> None:
        """Attach console and rotating file handlers to the package logger."""
        package_logger = logging.getLogger(LOGGER_PREFIX)
        package_logger.setLevel(self.log_level)

        # Clear handlers from a previous setup
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()

        if self.console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(self.log_level)
            console_handler.setFormatter(StructuredFormatter(include_context=False))
            package_logger.addHandler(console_handler)

        if self.log_dir is None:
            return

        self.log_dir.mkdir(parents=True, exist_ok=True)

        # Main log file (rotating)
        main_file_handler = logging.handlers.RotatingFileHandler(
            self.main_log_file,
            maxBytes=self.max_log_size,
            backupCount=self.backup_count
        )
        main_file_handler.setLevel(logging.DEBUG)
        main_file_handler.setFormatter(StructuredFormatter(include_context=True))
        package_logger.addHandler(main_file_handler)

        # Errors and critical only
        error_file_handler = logging.handlers.RotatingFileHandler(
            self.error_log_file,
            maxBytes=self.max_log_size,
            backupCount=self.backup_count
        )
        error_file_handler.setLevel(logging.ERROR)
        error_file_handler.setFormatter(StructuredFormatter(include_context=True))
        package_logger.addHandler(error_file_handler)

        package_logger.debug(f"Logging initialized in {self.log_dir}")

    def get_component_logger(self, component_name: str) -> logging.Logger:
        """Get or create a logger for a specific component."""
        if component_name in self.component_loggers:
            return self.component_loggers[component_name]

        logger = logging.getLogger(f"{LOGGER_PREFIX}.{component_name}")
        logger.addFilter(ContextFilter(component_name))

        self.component_loggers[component_name] = logger
        return logger

    def log_with_context(self, logger: logging.Logger, level: int,
                         message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log message with additional context information."""
        if context:
            if not logger.isEnabledFor(level):
                return
            record = logger.makeRecord(
                logger.name, level, "", 0, message, (), None
            )
            record.context = context
            logger.handle(record)
        else:
            logger.log(level, message)


# Created on first use without handlers; output is configured by setup_logging
logging_manager: Optional[LoggingManager] = None


def _get_manager() -> LoggingManager:
    global logging_manager
    if logging_manager is None:
        logging_manager = LoggingManager(log_dir=None, console=False)
    return logging_manager


def get_logger(component_name: str) -> logging.Logger:
    """Convenience function to get a component logger."""
    return _get_manager().get_component_logger(component_name)


def log_with_context(logger: logging.Logger, level: int, message: str,
                     context: Optional[Dict[str, Any]] = None) -> None:
    """Convenience function to log with structured context."""
    _get_manager().log_with_context(logger, level, message, context)


def setup_logging(log_level: str = "INFO",
                  log_dir: Optional[str] = DEFAULT_PATHS["logs_dir"]) -> LoggingManager:
    """Setup centralized logging system."""
    global logging_manager

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging_manager = LoggingManager(log_dir, numeric_level)
    return logging_manager
