"""Storage layer for pondo: a single JSON file holding the task list."""

import json
import logging
from enum import Enum
from typing import List

from .config import ConfigModel
from .errors import CorruptData, NotInitialized, StorageIOError
from .task import Task

logger = logging.getLogger(__name__)

JSON_INDENT = 2


class InitStatus(Enum):
    """Outcome of :meth:`TaskStore.initialize_if_absent`."""
    CREATED = "created"
    ALREADY_INITIALIZED = "already_initialized"


def dumps_tasks(tasks: List[Task]) -> str:
    """Serialize a task list the way it is written to disk."""
    return json.dumps([task.to_dict() for task in tasks], indent=JSON_INDENT, ensure_ascii=False)


class TaskStore:
    """File-backed repository for the task list.

    Every mutation is a whole-file rewrite: callers load, mutate and save
    once per invocation.
    """

    def __init__(self, config: ConfigModel):
        self.config = config

    @property
    def config_dir(self):
        return self.config.config_dir

    @property
    def tasks_file(self):
        return self.config.tasks_file

    def is_initialized(self) -> bool:
        """Check whether both the config directory and tasks file exist."""
        return self.config_dir.is_dir() and self.tasks_file.exists()

    def initialize_if_absent(self) -> InitStatus:
        """Create the config directory and an empty tasks file if missing.

        The directory and the file are checked independently, so a
        directory left without a tasks file is completed rather than
        rejected.

        Raises:
            StorageIOError: if either cannot be created
        """
        if self.is_initialized():
            logger.debug("Store already present at %s", self.config_dir)
            return InitStatus.ALREADY_INITIALIZED

        dir_exists = self.config_dir.exists()
        file_exists = self.tasks_file.exists()

        try:
            if not dir_exists:
                self.config_dir.mkdir(parents=True, exist_ok=True)
                logger.debug("Created config directory %s", self.config_dir)

            if not file_exists:
                self.tasks_file.write_text(dumps_tasks([]), encoding="utf-8")
                logger.debug("Created tasks file %s", self.tasks_file)
        except OSError as e:
            raise StorageIOError(e.strerror or str(e), cause=e) from e

        return InitStatus.CREATED

    def load(self) -> List[Task]:
        """Read and parse the full task list.

        Raises:
            NotInitialized: if the tasks file does not exist
            CorruptData: if the content is not a JSON array of task records
            StorageIOError: if the file cannot be read
        """
        if not self.tasks_file.exists():
            raise NotInitialized(self.tasks_file)

        try:
            content = self.tasks_file.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CorruptData(self.tasks_file, f"not valid UTF-8 (byte {e.start})") from e
        except OSError as e:
            raise StorageIOError(f"Could not read {self.tasks_file}: {e.strerror or e}", cause=e) from e

        try:
            raw = json.loads(content)
        except json.JSONDecodeError as e:
            raise CorruptData(self.tasks_file, f"invalid JSON ({e.msg} at line {e.lineno})") from e

        if not isinstance(raw, list):
            raise CorruptData(self.tasks_file, "expected a JSON array of tasks")

        tasks = []
        for index, record in enumerate(raw):
            if not isinstance(record, dict):
                raise CorruptData(self.tasks_file, f"record {index} is not an object")
            try:
                tasks.append(Task.from_dict(record))
            except KeyError as e:
                raise CorruptData(self.tasks_file, f"record {index} is missing {e}") from e
            except TypeError as e:
                raise CorruptData(self.tasks_file, f"record {index}: {e}") from e

        logger.debug("Loaded %d tasks from %s", len(tasks), self.tasks_file)
        return tasks

    def save(self, tasks: List[Task]) -> None:
        """Overwrite the tasks file with the full list.

        Raises:
            StorageIOError: if the file cannot be written
        """
        content = dumps_tasks(tasks)
        try:
            self.tasks_file.write_text(content, encoding="utf-8")
        except OSError as e:
            raise StorageIOError(f"Could not write {self.tasks_file}: {e.strerror or e}", cause=e) from e

        logger.debug("Saved %d tasks to %s", len(tasks), self.tasks_file)
