"""Task operations: init, add, list and done on top of the store.

Every operation returns a :class:`Result` instead of raising. The command
line layer decides how a failure is printed and which exit code it maps to.
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

from .errors import NotFound, PondoError, ValidationError
from .ids import IdGenerator, UniqueIdGenerator
from .storage import InitStatus, TaskStore
from .task import Task

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Result(Generic[T]):
    """Success payload or one of the errors from :mod:`pondo.errors`."""

    value: Optional[T] = None
    error: Optional[PondoError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: PondoError) -> "Result":
        return cls(error=error)


class TaskService:
    """Business logic for the task list."""

    def __init__(self, store: TaskStore, id_generator: Optional[IdGenerator] = None):
        self.store = store
        self.id_generator = id_generator or UniqueIdGenerator()

    def init(self) -> Result[InitStatus]:
        """Create the store if it is not there yet."""
        try:
            status = self.store.initialize_if_absent()
        except PondoError as e:
            logger.debug("init failed: %s", e)
            return Result.failure(e)
        return Result.success(status)

    def add(self, raw_name: str) -> Result[Task]:
        """Append a new pending task named ``raw_name`` (trimmed)."""
        name = (raw_name or "").strip()
        if not name:
            return Result.failure(ValidationError("Task name is required"))

        try:
            tasks = self.store.load()
            task_id = self.id_generator.generate([t.id for t in tasks])
            task = Task(id=task_id, name=name)
            tasks.append(task)
            self.store.save(tasks)
        except PondoError as e:
            logger.debug("add failed: %s", e)
            return Result.failure(e)

        logger.debug("Added task %s", task.id)
        return Result.success(task)

    def list_tasks(self) -> Result[List[Task]]:
        """Return all tasks in creation order."""
        try:
            return Result.success(self.store.load())
        except PondoError as e:
            logger.debug("list failed: %s", e)
            return Result.failure(e)

    def done(self, task_id: str) -> Result[Task]:
        """Mark the first task whose id equals ``task_id`` as completed."""
        task_id = task_id or ""
        if not task_id.strip():
            return Result.failure(ValidationError("Task ID is required"))

        try:
            tasks = self.store.load()
            task = next((t for t in tasks if t.id == task_id), None)
            if task is None:
                return Result.failure(NotFound(task_id))

            task.complete()
            self.store.save(tasks)
        except PondoError as e:
            logger.debug("done failed: %s", e)
            return Result.failure(e)

        logger.debug("Completed task %s", task.id)
        return Result.success(task)
