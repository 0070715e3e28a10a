"""
Exception Hierarchy for the Task Store

This module provides the exceptions raised by the store, the configuration
layer and the HTTP API, so every error can be serialized the same way.

Exception Categories:
- Configuration Errors: Invalid settings read from config.properties or env
- Lookup Errors: Operations addressing a task id that is not in the store

Usage:
    from task_store.utils.exceptions import TaskNotFoundError

    try:
        store.update(task_id, payload)
    except TaskNotFoundError as e:
        return JSONResponse(status_code=404, content={"error": e.message})
"""

from typing import Optional, Any, Dict


# Message returned to clients when a task id does not exist
TASK_NOT_FOUND_MESSAGE = "Task não encontrada"


# ============================================================================
# Base Exception
# ============================================================================

class TaskStoreError(Exception):
    """
    Base exception for all task store errors.

    All custom exceptions inherit from this class so the API layer can
    register a single handler for the whole family.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize base exception.

        Args:
            message: Human-readable error message
            error_code: Optional error code for categorization
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigurationError(TaskStoreError):
    """Raised when a configured value cannot be used."""

    def __init__(
        self,
        setting_name: str,
        message: str,
        expected_value: Optional[Any] = None,
        actual_value: Optional[Any] = None
    ):
        details = {"setting_name": setting_name}
        if expected_value is not None:
            details["expected_value"] = str(expected_value)
        if actual_value is not None:
            details["actual_value"] = str(actual_value)

        super().__init__(
            message=f"Configuration error for '{setting_name}': {message}",
            error_code="CONFIG_ERROR",
            details=details
        )
        self.setting_name = setting_name


# ============================================================================
# Lookup Errors
# ============================================================================

class TaskNotFoundError(TaskStoreError):
    """Raised when an update addresses a task id that is not in the store."""

    def __init__(self, task_id: str):
        super().__init__(
            message=TASK_NOT_FOUND_MESSAGE,
            error_code="TASK_NOT_FOUND",
            details={"task_id": task_id}
        )
        self.task_id = task_id


__all__ = [
    "TASK_NOT_FOUND_MESSAGE",
    "TaskStoreError",
    "ConfigurationError",
    "TaskNotFoundError",
]
