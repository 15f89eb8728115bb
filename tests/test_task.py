"""Tests for the Task model."""

import re

import pytest

from pondo.task import Task

ISO_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestTask:
    """Test Task model functionality."""

    def test_task_creation(self):
        """New tasks are pending with a creation timestamp."""
        task = Task(id="TABC", name="Write report")

        assert task.done is False
        assert task.completed_at is None
        assert ISO_RE.match(task.created_at)

    def test_complete_sets_timestamp(self):
        task = Task(id="TABC", name="Write report")
        task.complete()

        assert task.done is True
        assert ISO_RE.match(task.completed_at)

    def test_to_dict_key_order(self):
        """Records always serialize as id, name, done, createdAt[, completedAt]."""
        task = Task(id="TABC", name="Write report", created_at="2025-01-01T00:00:00.000Z")
        assert list(task.to_dict()) == ["id", "name", "done", "createdAt"]

        task.complete()
        assert list(task.to_dict()) == ["id", "name", "done", "createdAt", "completedAt"]

    def test_from_dict(self):
        data = {
            "id": "T1X2",
            "name": "Ship it",
            "done": True,
            "createdAt": "2025-01-01T00:00:00.000Z",
            "completedAt": "2025-01-02T00:00:00.000Z",
        }
        task = Task.from_dict(data)

        assert task.id == "T1X2"
        assert task.done is True
        assert task.completed_at == "2025-01-02T00:00:00.000Z"
        assert task.to_dict() == data

    def test_from_dict_missing_key(self):
        with pytest.raises(KeyError):
            Task.from_dict({"id": "T1X2", "name": "Ship it", "done": False})

    def test_from_dict_wrong_type(self):
        with pytest.raises(TypeError):
            Task.from_dict({"id": "T1X2", "name": "Ship it", "done": "no", "createdAt": "x"})

    @pytest.mark.parametrize("done, extra", [
        (True, {}),
        (False, {"completedAt": "2025-01-02T00:00:00.000Z"}),
        (False, {"completedAt": None}),
    ])
    def test_from_dict_completed_at_must_match_done(self, done, extra):
        """completedAt is present exactly when the task is done."""
        data = {"id": "T1X2", "name": "Ship it", "done": done, "createdAt": "2025-01-01T00:00:00.000Z"}
        data.update(extra)
        with pytest.raises(TypeError):
            Task.from_dict(data)
