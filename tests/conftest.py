# tests/conftest.py
import logging

import pytest


@pytest.fixture
def restore_logging():
    """Undo root handler and per-module level changes made by a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    touched: list[str] = []
    yield touched
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in touched:
        logging.getLogger(name).setLevel(logging.NOTSET)
