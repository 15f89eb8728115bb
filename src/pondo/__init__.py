"""pondo - personal task tracking from the command line."""

__version__ = "0.0.2"

from .task import Task
from .storage import TaskStore, InitStatus
from .operations import TaskService, Result

__all__ = ["Task", "TaskStore", "InitStatus", "TaskService", "Result", "__version__"]
