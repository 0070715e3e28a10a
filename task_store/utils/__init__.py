"""
Utilities module - Logging and exception helpers
"""

from .logger import get_logger
from .comprehensive_logger import ComprehensiveLogger, TaskLogger

# Exception hierarchy
from .exceptions import (
    TASK_NOT_FOUND_MESSAGE,
    TaskStoreError,
    ConfigurationError,
    TaskNotFoundError,
)

__all__ = [
    'get_logger',
    'ComprehensiveLogger',
    'TaskLogger',
    'TASK_NOT_FOUND_MESSAGE',
    'TaskStoreError',
    'ConfigurationError',
    'TaskNotFoundError',
]
