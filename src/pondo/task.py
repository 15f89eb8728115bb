"""Task data model for pondo."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .utils.datetime import now_iso


@dataclass
class Task:
    """A single tracked task.

    Timestamps are kept as the ISO strings they are stored as, so a
    load/save cycle never rewrites them.
    """

    id: str
    name: str
    done: bool = False
    created_at: str = field(default_factory=now_iso)
    completed_at: Optional[str] = None

    def complete(self) -> None:
        """Mark the task as completed."""
        self.done = True
        self.completed_at = now_iso()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON record layout (stable key order)."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "done": self.done,
            "createdAt": self.created_at,
        }
        if self.completed_at is not None:
            data["completedAt"] = self.completed_at
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Build a task from a JSON record.

        Raises:
            KeyError: a required key is missing
            TypeError: a field has the wrong type
        """
        task_id = data["id"]
        name = data["name"]
        done = data["done"]
        created_at = data["createdAt"]
        completed_at = data.get("completedAt")

        if not isinstance(task_id, str) or not isinstance(name, str):
            raise TypeError("'id' and 'name' must be strings")
        if not isinstance(done, bool):
            raise TypeError("'done' must be a boolean")
        if not isinstance(created_at, str):
            raise TypeError("'createdAt' must be a string")
        if "completedAt" in data and not isinstance(completed_at, str):
            raise TypeError("'completedAt' must be a string")
        if done != (completed_at is not None):
            raise TypeError("'completedAt' must be present exactly when 'done' is true")

        return cls(
            id=task_id,
            name=name,
            done=done,
            created_at=created_at,
            completed_at=completed_at,
        )
