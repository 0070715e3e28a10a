"""
Comprehensive Logging System with File and Console Output

Features:
- Configurable log folder (via config.properties / TASK_STORE_* env vars)
- Console and file logging
- Structured logging with context
- Log rotation
- Performance metrics tracking
"""

import logging
import logging.handlers
import sys
import os
from pathlib import Path
from typing import Optional, Dict, Any
import json
import traceback


class ComprehensiveLogger:
    """
    Centralized logging system with file and console support.

    Usage:
        ComprehensiveLogger.initialize(log_level="DEBUG")
        logger = ComprehensiveLogger.get_logger("my_module")
        logger.info("Message", extra={"task_id": "server_1"})
    """

    _loggers: Dict[str, "TaskLogger"] = {}
    _log_folder: Optional[str] = None
    _config: Dict[str, Any] = {}

    @classmethod
    def initialize(
        cls,
        log_folder: Optional[str] = None,
        log_level: str = "INFO",
        enable_console: bool = True,
        enable_file: bool = False,
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ) -> None:
        """
        Initialize the comprehensive logging system.

        Loggers created before this call are rebuilt with the new settings.

        Args:
            log_folder: Folder for log files (default: ./logs)
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            enable_console: Enable console logging
            enable_file: Enable file logging
            max_bytes: Max file size before rotation (default: 10MB)
            backup_count: Number of backup files to keep
        """
        cls._log_folder = log_folder or "./logs"
        cls._config = {
            "log_level": log_level,
            "enable_console": enable_console,
            "enable_file": enable_file,
            "max_bytes": max_bytes,
            "backup_count": backup_count,
        }

        if enable_file:
            Path(cls._log_folder).mkdir(parents=True, exist_ok=True)

        for name in list(cls._loggers):
            cls._loggers[name] = TaskLogger(name, cls._log_folder, cls._config)

    @classmethod
    def get_logger(cls, name: str) -> "TaskLogger":
        """
        Get or create a logger instance.

        Args:
            name: Logger name (typically __name__)

        Returns:
            TaskLogger instance
        """
        if name not in cls._loggers:
            cls._loggers[name] = TaskLogger(name, cls._log_folder, cls._config)

        return cls._loggers[name]


class TaskLogger:
    """
    Individual logger instance with file and console support.
    """

    def __init__(
        self,
        name: str,
        log_folder: Optional[str],
        config: Dict[str, Any],
    ):
        self.name = name
        self.log_folder = log_folder or "./logs"
        self.config = config
        self.logger = logging.getLogger(name)
        self.logger.setLevel(config.get("log_level", "INFO"))

        # Clear existing handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if config.get("enable_console"):
            self._add_console_handler()

        if config.get("enable_file"):
            self._add_file_handler()

    def _add_console_handler(self) -> None:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(self.config.get("log_level", "INFO"))

        formatter = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)

    def _add_file_handler(self) -> None:
        """Add rotating file handler with UTF-8 encoding."""
        Path(self.log_folder).mkdir(parents=True, exist_ok=True)

        log_file = os.path.join(self.log_folder, f"{self.name}.log")

        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=self.config.get("max_bytes", 10 * 1024 * 1024),
            backupCount=self.config.get("backup_count", 5),
            encoding='utf-8'  # task titles are often non-ASCII
        )
        handler.setLevel(self.config.get("log_level", "INFO"))

        formatter = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)

    def debug(self, message: str, extra: Optional[Dict] = None):
        self._log("DEBUG", message, extra)

    def info(self, message: str, extra: Optional[Dict] = None):
        self._log("INFO", message, extra)

    def warning(self, message: str, extra: Optional[Dict] = None):
        self._log("WARNING", message, extra)

    def error(self, message: str, extra: Optional[Dict] = None):
        self._log("ERROR", message, extra)

    def critical(self, message: str, extra: Optional[Dict] = None):
        self._log("CRITICAL", message, extra)

    def _log(self, level: str, message: str, extra: Optional[Dict] = None) -> None:
        """
        Internal logging method.

        Args:
            level: Log level
            message: Log message
            extra: Extra context dict, appended to the message as JSON
        """
        log_func = getattr(self.logger, level.lower())

        if extra:
            message = f"{message} | {json.dumps(extra, ensure_ascii=False, default=str)}"

        # stacklevel points funcName/lineno at the caller of info()/debug()/...
        log_func(message, stacklevel=3)

    def log_exception(self, message: str, exc: Optional[Exception] = None) -> None:
        """
        Log exception with full traceback.

        Args:
            message: Error message
            exc: Exception object (uses current exception if None)
        """
        if exc:
            tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        else:
            tb = [traceback.format_exc()]

        self.logger.error(f"{message}\n{''.join(tb)}")

    def log_performance(
        self,
        operation: str,
        duration_seconds: float,
        success: bool = True,
        metadata: Optional[Dict] = None
    ) -> None:
        """
        Log performance metrics.

        Args:
            operation: Operation name
            duration_seconds: Duration in seconds
            success: Whether operation succeeded
            metadata: Additional metadata
        """
        status = "ok" if success else "failed"
        log_message = f"{operation} {status} in {duration_seconds * 1000:.1f}ms"

        extra = dict(metadata or {})
        extra.update({
            "operation": operation,
            "duration_seconds": duration_seconds,
            "success": success
        })

        log_func = self.debug if success else self.warning
        log_func(log_message, extra=extra)

    def flush(self) -> None:
        """Flush all handlers."""
        for handler in self.logger.handlers:
            handler.flush()
