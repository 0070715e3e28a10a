"""
Models module - Data structures for the task store
"""

from .task import (
    TaskRecord,
    RESERVED_FIELDS,
    SEED_TASK_ID,
    client_fields,
    seed_task,
    utc_now_iso,
)

__all__ = [
    'TaskRecord',
    'RESERVED_FIELDS',
    'SEED_TASK_ID',
    'client_fields',
    'seed_task',
    'utc_now_iso',
]
