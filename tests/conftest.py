"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pondo.config import ConfigModel
from pondo.ids import UniqueIdGenerator, RandomIdGenerator
from pondo.operations import TaskService
from pondo.storage import TaskStore


@pytest.fixture
def home(tmp_path):
    """A fresh, empty home directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def config(home):
    return ConfigModel.from_home(home)


@pytest.fixture
def store(config):
    return TaskStore(config)


@pytest.fixture
def initialized_store(store):
    store.initialize_if_absent()
    return store


@pytest.fixture
def service(initialized_store):
    """Service over an initialized store with a seeded id generator."""
    generator = UniqueIdGenerator(RandomIdGenerator(random.Random(1234)))
    return TaskService(initialized_store, generator)
