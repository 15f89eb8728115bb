"""Error taxonomy for pondo operations."""

from pathlib import Path
from typing import Optional


class PondoError(Exception):
    """Base class for every error an operation can report to the user."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(PondoError):
    """Raised when user input (task name, task id) is empty or malformed."""


class NotInitialized(PondoError):
    """Raised when the tasks file does not exist yet."""

    def __init__(self, tasks_file: Path):
        self.tasks_file = tasks_file
        super().__init__('Tasks file not found. Run "pondo init" first.')


class NotFound(PondoError):
    """Raised when no task matches the requested id."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f'Task with ID "{task_id}" not found')


class CorruptData(PondoError):
    """Raised when the tasks file does not hold a valid task list."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Corrupt tasks file {path}: {detail}")


class StorageIOError(PondoError):
    """Raised when reading or writing the store fails at the OS level."""

    def __init__(self, message: str, cause: Optional[OSError] = None):
        self.cause = cause
        super().__init__(message)


class IdGenerationError(PondoError):
    """Raised when no unused task id could be drawn."""
