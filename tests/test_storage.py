"""Tests for the JSON-file task store."""

import json
import os

import pytest

from pondo.config import ConfigModel, resolve_paths
from pondo.errors import CorruptData, NotInitialized, StorageIOError
from pondo.storage import InitStatus, TaskStore
from pondo.task import Task


class TestResolvePaths:

    def test_paths_under_home(self, home):
        config_dir, tasks_file = resolve_paths(home)

        assert config_dir == home / ".pondo"
        assert tasks_file == home / ".pondo" / "tasks.json"

    def test_no_side_effects(self, home):
        resolve_paths(home)
        assert not (home / ".pondo").exists()

    def test_defaults_to_home_env(self, home, monkeypatch):
        monkeypatch.setenv("HOME", str(home))
        assert resolve_paths()[0] == home / ".pondo"


class TestInitialize:

    def test_fresh_home(self, store, config):
        assert store.initialize_if_absent() is InitStatus.CREATED

        assert config.config_dir.is_dir()
        assert config.tasks_file.read_text(encoding="utf-8") == "[]"
        assert store.is_initialized()

    def test_second_call_is_noop(self, store, config):
        store.initialize_if_absent()
        config.tasks_file.write_text('[\n  {"keep": "me"}\n]', encoding="utf-8")
        mtime = os.stat(config.tasks_file).st_mtime_ns

        assert store.initialize_if_absent() is InitStatus.ALREADY_INITIALIZED
        assert config.tasks_file.read_text(encoding="utf-8") == '[\n  {"keep": "me"}\n]'
        assert os.stat(config.tasks_file).st_mtime_ns == mtime

    def test_completes_directory_only_state(self, store, config):
        """A config directory without a tasks file is completed, not rejected."""
        config.config_dir.mkdir()
        assert not store.is_initialized()

        assert store.initialize_if_absent() is InitStatus.CREATED
        assert store.is_initialized()
        assert config.tasks_file.read_text(encoding="utf-8") == "[]"

    def test_io_failure(self, tmp_path):
        """A file where the config directory should be makes init fail."""
        blocker = tmp_path / "home"
        blocker.mkdir()
        (blocker / ".pondo").write_text("not a directory", encoding="utf-8")

        store = TaskStore(ConfigModel.from_home(blocker))
        with pytest.raises(StorageIOError):
            store.initialize_if_absent()


class TestLoadSave:

    def test_load_not_initialized(self, store):
        with pytest.raises(NotInitialized) as excinfo:
            store.load()
        assert "pondo init" in str(excinfo.value)

    def test_load_empty(self, initialized_store):
        assert initialized_store.load() == []

    def test_save_format(self, initialized_store, config):
        task = Task(id="TAB1", name="Write report", created_at="2025-01-01T10:00:00.000Z")
        initialized_store.save([task])

        expected = (
            "[\n"
            "  {\n"
            '    "id": "TAB1",\n'
            '    "name": "Write report",\n'
            '    "done": false,\n'
            '    "createdAt": "2025-01-01T10:00:00.000Z"\n'
            "  }\n"
            "]"
        )
        assert config.tasks_file.read_text(encoding="utf-8") == expected

    def test_save_keeps_unicode(self, initialized_store, config):
        initialized_store.save([Task(id="TAB1", name="Café ☕")])
        assert "Café ☕" in config.tasks_file.read_text(encoding="utf-8")

    def test_round_trip_is_stable(self, initialized_store, config):
        tasks = [Task(id="TAB1", name="One"), Task(id="TAB2", name="Two")]
        tasks[1].complete()
        initialized_store.save(tasks)
        before = config.tasks_file.read_text(encoding="utf-8")

        initialized_store.save(initialized_store.load())

        assert config.tasks_file.read_text(encoding="utf-8") == before

    def test_load_preserves_order(self, initialized_store):
        names = ["first", "second", "third"]
        initialized_store.save([Task(id=f"T00{i}", name=n) for i, n in enumerate(names)])
        assert [t.name for t in initialized_store.load()] == names

    @pytest.mark.parametrize("content", [
        "{not json",
        '{"id": "TAB1"}',
        '["just a string"]',
        '[{"id": "TAB1", "name": "x"}]',
        '[{"id": "TAB1", "name": "x", "done": "yes", "createdAt": "t"}]',
        '[{"id": "TAB1", "name": "x", "done": true, "createdAt": "t"}]',
        '[{"id": "TAB1", "name": "x", "done": false, "createdAt": "t", "completedAt": null}]',
        '[{"id": "TAB1", "name": "x", "done": false, "createdAt": "t", "completedAt": "t"}]',
        b"\xff\xfe[]",
    ])
    def test_load_corrupt(self, initialized_store, config, content):
        if isinstance(content, bytes):
            config.tasks_file.write_bytes(content)
        else:
            config.tasks_file.write_text(content, encoding="utf-8")
        with pytest.raises(CorruptData):
            initialized_store.load()
