"""Root conftest - shared test configuration."""

import logging
import os

import pytest

from strkit.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """No STRKIT_* env leaks into tests, no stray .env, fresh settings cache."""
    for key in list(os.environ):
        if key.upper().startswith("STRKIT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging mutates the root logger; put it back after each test."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
