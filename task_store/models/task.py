"""
Task module - Task record structure and timestamp helpers

A task is an open record: the store owns ``id``, ``created_at`` and
``updated_at``, every other field is copied verbatim from the client.
"""

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping

# Fields owned by the store; never taken from a client payload
RESERVED_FIELDS = ("id", "created_at", "updated_at")

SEED_TASK_ID = "server_1"


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def client_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a deep copy of *payload* without the store-owned fields, preserving key order."""
    return copy.deepcopy({k: v for k, v in payload.items() if k not in RESERVED_FIELDS})


@dataclass
class TaskRecord:
    """A stored task: store-owned id and timestamps plus free-form client fields."""
    id: str
    fields: Dict[str, Any] = field(default_factory=dict)
    created_at: str = field(default_factory=utc_now_iso)
    updated_at: str = ""

    def __post_init__(self):
        if not self.updated_at:
            self.updated_at = self.created_at

    def merged(self, payload: Mapping[str, Any]) -> "TaskRecord":
        """
        Return a copy with *payload* overlaid on the client fields.

        Omitted fields keep their value. ``id`` and ``created_at`` are never
        replaced; ``updated_at`` is refreshed to the current time.
        """
        fields = copy.deepcopy(self.fields)
        fields.update(client_fields(payload))
        return TaskRecord(
            id=self.id,
            fields=fields,
            created_at=self.created_at,
            updated_at=utc_now_iso(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            **copy.deepcopy(self.fields),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_payload(cls, task_id: str, payload: Mapping[str, Any]) -> "TaskRecord":
        """Build a fresh record from a client payload; both timestamps are now."""
        now = utc_now_iso()
        return cls(id=task_id, fields=client_fields(payload), created_at=now, updated_at=now)


def seed_task() -> TaskRecord:
    """The task present in a freshly started server."""
    return TaskRecord.from_payload(SEED_TASK_ID, {
        "title": "Tarefa Inicial do Servidor",
        "description": "Criada automaticamente pelo servidor",
        "completed": False,
        "priority": "medium",
    })
