"""
Task Store - In-memory task list with a REST API

Keeps an ordered collection of task records in process memory and exposes
list, create, update and delete operations. The HTTP layer lives in the
``api`` package.

Configuration:
    Create a config.properties file in the project root (see
    config.properties.example) or set TASK_STORE_* environment variables:

    server.port=3000
    logging.level=INFO

Example:
    >>> from task_store import TaskStore
    >>>
    >>> store = TaskStore()
    >>> task = store.create({"title": "Write report"})
    >>> store.update(task["id"], {"completed": True})["completed"]
    True
"""

__version__ = "1.0.0"
__all__ = [
    'TaskStore',
    'TaskRecord',
    'ConfigProperties',
    'TaskStoreError',
    'TaskNotFoundError',
]

from task_store.config import ConfigProperties
from task_store.models import TaskRecord
from task_store.core import TaskStore
from task_store.utils.exceptions import TaskStoreError, TaskNotFoundError
