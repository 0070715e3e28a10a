"""
Logger module - Logging configuration and utilities

This module provides logging configuration with support for:
- File and console logging
- Configuration from config.properties / TASK_STORE_* environment variables
- Structured logging with context
"""

import logging
from typing import Optional, Any

# Flag to track if ComprehensiveLogger has been initialized
_comprehensive_logger_initialized = False


def _ensure_comprehensive_logger_initialized():
    """
    Initialize ComprehensiveLogger from the resolved configuration on first use.
    This is called automatically by get_logger().
    """
    global _comprehensive_logger_initialized

    if _comprehensive_logger_initialized:
        return

    _comprehensive_logger_initialized = True

    from .comprehensive_logger import ComprehensiveLogger
    from task_store.config import ConfigProperties

    try:
        ComprehensiveLogger.initialize(**ConfigProperties.get_logging_config())
    except OSError as e:
        # Log folder not writable: keep console output only
        ComprehensiveLogger.initialize(enable_console=True, enable_file=False)
        logging.getLogger(__name__).warning(
            f"Failed to enable file logging: {e}. Using console logging."
        )


def get_logger(name: str, level: Optional[str] = None) -> Any:
    """
    Get or create a logger with standard formatting and configured handlers.

    Args:
        name: Logger name (typically __name__)
        level: Optional logging level override (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured TaskLogger instance
    """
    _ensure_comprehensive_logger_initialized()

    from .comprehensive_logger import ComprehensiveLogger

    logger = ComprehensiveLogger.get_logger(name)
    if level:
        logger.logger.setLevel(getattr(logging, level.upper()))
    return logger


__all__ = ["get_logger"]
