"""
Centralized logging configuration for the plagiarism checker.

Front ends call setup_logging() once at start-up; the comparison core only
ever asks for named loggers and never installs handlers itself.
"""

import logging
import logging.handlers
import sys
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


# Extra attributes copied from a record into the JSON payload when present
_CONTEXT_FIELDS = ('operation', 'source', 'label', 'threshold', 'similarity', 'duration')


class StructuredFormatter(logging.Formatter):
    """Formatter emitting one JSON object per log record."""

    def format(self, record):
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        for field in _CONTEXT_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        # File names may carry non-ASCII characters
        return json.dumps(log_entry, ensure_ascii=False, separators=(',', ':'), default=str)


class ProductionLogger:
    """Root logger configuration with console and rotating file output."""

    def __init__(self,
                 log_level: str = "INFO",
                 log_dir: str = "logs",
                 max_file_size: int = 5 * 1024 * 1024,  # 5MB
                 backup_count: int = 3,
                 enable_console: bool = True,
                 enable_file: bool = True,
                 structured_logging: bool = True):
        """
        Initialize production logger.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files
            max_file_size: Maximum size of each log file in bytes
            backup_count: Number of rotated files to keep
            enable_console: Whether to log to the console
            enable_file: Whether to log to files
            structured_logging: Whether to use structured JSON logging
        """
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level}")

        self.log_level = level
        self.log_dir = Path(log_dir)
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.enable_console = enable_console
        self.enable_file = enable_file
        self.structured_logging = structured_logging

        if self.enable_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self._setup_logging()

    def _build_formatter(self) -> logging.Formatter:
        if self.structured_logging:
            return StructuredFormatter()
        return logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
        )

    def _setup_logging(self):
        """Replace the root handlers with the configured ones."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()

        root_logger.setLevel(self.log_level)
        formatter = self._build_formatter()

        if self.enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(self.log_level)
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if self.enable_file:
            # Every comparison run
            comparisons_handler = logging.handlers.RotatingFileHandler(
                self.log_dir / "comparisons.log",
                maxBytes=self.max_file_size,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            comparisons_handler.setLevel(self.log_level)
            comparisons_handler.setFormatter(formatter)
            root_logger.addHandler(comparisons_handler)

            # Unreadable inputs and other failures
            error_handler = logging.handlers.RotatingFileHandler(
                self.log_dir / "errors.log",
                maxBytes=self.max_file_size,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.WARNING)
            error_handler.setFormatter(formatter)
            root_logger.addHandler(error_handler)


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger instance for this class."""
        if not hasattr(self, '_logger'):
            self._logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")
        return self._logger

    def log_operation(self, operation: str, **kwargs):
        """Log an operation with additional context."""
        extra = {'operation': operation}
        extra.update(kwargs)
        return OperationLogger(self.logger, extra)


class OperationLogger:
    """Context manager for logging operations with timing."""

    def __init__(self, logger: logging.Logger, extra: dict):
        self.logger = logger
        self.extra = extra
        self.start_time = None

    def __enter__(self):
        self.start_time = datetime.now(timezone.utc)
        self.logger.debug(f"Starting operation: {self.extra['operation']}", extra=self.extra)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = (datetime.now(timezone.utc) - self.start_time).total_seconds()
        self.extra['duration'] = duration

        if exc_type is None:
            self.logger.info(f"Completed operation: {self.extra['operation']}", extra=self.extra)
        else:
            self.logger.error(f"Failed operation: {self.extra['operation']}: {exc_val}",
                              extra=self.extra, exc_info=(exc_type, exc_val, exc_tb))
        # Never suppress the exception
        return False


_production_logger: Optional[ProductionLogger] = None


def setup_logging(log_level: str = "INFO",
                  log_dir: str = "logs",
                  structured_logging: bool = True,
                  **kwargs) -> ProductionLogger:
    """
    Setup global logging configuration.

    Args:
        log_level: Logging level
        log_dir: Directory for log files
        structured_logging: Whether to use structured JSON logging
        **kwargs: Additional arguments for ProductionLogger

    Returns:
        ProductionLogger instance
    """
    global _production_logger
    _production_logger = ProductionLogger(
        log_level=log_level,
        log_dir=log_dir,
        structured_logging=structured_logging,
        **kwargs
    )
    return _production_logger


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; handlers come from setup_logging()."""
    return logging.getLogger(name)
