"""Shared fixtures for the task store test suite."""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from task_store.config import ConfigProperties, SETTINGS
from task_store.core import TaskStore


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Keep TASK_STORE_* variables from the outer environment out of the tests."""
    for env_key, _ in SETTINGS.values():
        monkeypatch.delenv(env_key, raising=False)
    yield
    ConfigProperties.reload()


@pytest.fixture
def store():
    return TaskStore()


@pytest.fixture
def client(store):
    from fastapi.testclient import TestClient
    from api.server import create_app

    with TestClient(create_app(store=store)) as test_client:
        yield test_client
